# -*- coding: utf-8 -*-
"""
CIP-136 Rationale Wizard Utility Module
"""

from .logger import get_logger, setup_logger

__all__ = [
    "get_logger",
    "setup_logger",
]

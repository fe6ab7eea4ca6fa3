# -*- coding: utf-8 -*-
"""
CIP-136 Rationale Wizard Application Core Module
"""

from .config import Config

__all__ = ["Config"]

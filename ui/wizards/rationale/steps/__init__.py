# -*- coding: utf-8 -*-
"""Rationale wizard step pages."""

from .form_step import FormStep
from .review_step import ReviewStep

__all__ = ['FormStep', 'ReviewStep']

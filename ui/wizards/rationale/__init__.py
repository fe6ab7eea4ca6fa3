# -*- coding: utf-8 -*-
"""
Rationale Wizard Package.

This package contains:
- RationaleContext: Wizard context carrying the schema profile
- RationaleWizard: Main wizard window
- Steps: generic form page and the review page
"""

from .rationale_context import RationaleContext
from .rationale_wizard import RationaleWizard

__all__ = [
    'RationaleContext',
    'RationaleWizard'
]

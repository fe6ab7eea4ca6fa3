# -*- coding: utf-8 -*-
"""
Wizard Framework - multi-step wizard with validated navigation.

Provides the session context, the step state machine and the base
widgets for wizard windows and their step pages.
"""

from .wizard_context import WizardContext
from .step_navigator import StepNavigator
from .base_step import BaseStep
from .base_wizard import BaseWizard, StepPageInputSource

__all__ = [
    'WizardContext',
    'StepNavigator',
    'BaseStep',
    'BaseWizard',
    'StepPageInputSource',
]

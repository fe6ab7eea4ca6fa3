# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard step pages.

A step page only displays inputs; validation and collection are done by
the navigator from the values the page reports through read_values().
"""

from typing import Dict, Any, Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import QWidget, QVBoxLayout

from services.wizard.step_definitions import StepDefinition


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizard step pages.

    Subclasses implement setup_ui() and read_values().
    """

    def __init__(self, definition: StepDefinition, parent: Optional[QWidget] = None):
        """
        Initialize the step.

        Args:
            definition: Static definition of the step
            parent: Parent widget
        """
        super().__init__(parent)
        self.definition = definition
        self._is_initialized = False

        # Main layout
        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(12)

    def initialize(self):
        """Build the UI (once)."""
        if not self._is_initialized:
            self.setup_ui()
            self._is_initialized = True

    def on_show(self):
        """Called when the step becomes the visible page."""
        self.initialize()

    @abstractmethod
    def setup_ui(self):
        """Create all widgets and layouts."""
        pass

    @abstractmethod
    def read_values(self) -> Dict[str, Any]:
        """
        Return the raw input values of the step, keyed by field id.
        """
        pass

    def get_step_title(self) -> str:
        return self.definition.title

    def get_step_number(self) -> int:
        return self.definition.number

# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for wizard windows.

Provides unified wizard UI with:
- Header with title and progress
- Step container (one page per step definition)
- Navigation buttons (Cancel, Previous, Next / Submit)
- Validation feedback
"""

from abc import abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QFrame, QStackedWidget, QProgressBar
)
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QFont

from app.config import Config
from services.wizard.field_collector import InputSource
from services.wizard.step_definitions import StepDefinition
from services.wizard.step_validator import StepValidationResult
from .base_step import ABCQWidgetMeta, BaseStep
from .wizard_context import WizardContext
from .step_navigator import StepNavigator
from ui.error_handler import ErrorHandler


class StepPageInputSource(InputSource):
    """Reads in-progress values from the wizard's step pages."""

    def __init__(self, pages: Sequence[BaseStep]):
        self._pages = {page.get_step_number(): page for page in pages}

    def read_step(self, step: StepDefinition) -> Dict[str, Any]:
        page = self._pages.get(step.number)
        values = page.read_values() if page else {}
        return {field_id: values.get(field_id, "") for field_id in step.field_ids}


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    Subclasses must implement:
    - create_context(): Create and return wizard context
    - create_step_definitions(): Static step definitions, ordered 1..N
    - create_steps(): One page widget per definition
    - on_submit(): Handle the action of the last step
    """

    # Signals
    wizard_completed = pyqtSignal(str)  # Emitted with the output path
    wizard_cancelled = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None):
        """Initialize the wizard."""
        super().__init__(parent)

        self.context = self.create_context()
        self.step_definitions = tuple(self.create_step_definitions())
        self.steps = self.create_steps(self.step_definitions)

        self.navigator = StepNavigator(
            self.context, self.step_definitions, StepPageInputSource(self.steps), parent=self
        )
        self.navigator.step_changed.connect(self._on_step_changed)
        self.navigator.validation_failed.connect(self._on_validation_failed)

        self._setup_ui()
        self._on_step_changed(self.navigator.current_step, self.navigator.current_step)

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_context(self) -> WizardContext:
        pass

    @abstractmethod
    def create_step_definitions(self) -> Sequence[StepDefinition]:
        pass

    @abstractmethod
    def create_steps(self, definitions: Sequence[StepDefinition]) -> List[BaseStep]:
        pass

    @abstractmethod
    def on_submit(self):
        """Called when Next is pressed on the last step."""
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_wizard_title(self) -> str:
        return Config.APP_TITLE

    def get_submit_button_text(self) -> str:
        return "Finish"

    def get_page(self, step_number: int) -> Optional[BaseStep]:
        for page in self.steps:
            if page.get_step_number() == step_number:
                return page
        return None

    def current_page(self) -> Optional[BaseStep]:
        return self.get_page(self.navigator.current_step)

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        """Setup the wizard UI."""
        self.setWindowTitle(f"{Config.APP_NAME} {Config.VERSION}")
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self._create_header())

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setStyleSheet(f"background-color: {Config.BORDER_COLOR};")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        self.step_container = QStackedWidget()
        for step in self.steps:
            self.step_container.addWidget(step)
        main_layout.addWidget(self.step_container, 1)

        main_layout.addWidget(self._create_footer())

    def _create_header(self) -> QWidget:
        """Create wizard header with title and progress."""
        header = QWidget()
        header.setStyleSheet(f"QWidget {{ background-color: {Config.BACKGROUND_COLOR}; }}")

        layout = QVBoxLayout(header)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.title_label = QLabel(self.get_wizard_title())
        title_font = QFont()
        title_font.setPointSize(14)
        title_font.setBold(True)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        progress_layout = QHBoxLayout()
        progress_layout.setSpacing(8)

        self.progress_label = QLabel()
        progress_layout.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(100)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet(f"""
            QProgressBar {{
                border: none;
                background-color: {Config.BORDER_COLOR};
                border-radius: 3px;
            }}
            QProgressBar::chunk {{
                background-color: {Config.PRIMARY_COLOR};
                border-radius: 3px;
            }}
        """)
        progress_layout.addWidget(self.progress_bar, 1)

        layout.addLayout(progress_layout)
        return header

    def _create_footer(self) -> QWidget:
        """Create wizard footer with navigation buttons."""
        footer = QWidget()
        layout = QHBoxLayout(footer)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.btn_cancel = QPushButton("Cancel")
        self.btn_cancel.clicked.connect(self._handle_cancel)
        layout.addWidget(self.btn_cancel)

        layout.addStretch()

        self.btn_previous = QPushButton("Previous")
        self.btn_previous.clicked.connect(self._handle_previous)
        layout.addWidget(self.btn_previous)

        self.btn_next = QPushButton("Next")
        self.btn_next.setDefault(True)
        self.btn_next.clicked.connect(self._handle_next)
        layout.addWidget(self.btn_next)

        return footer

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def _handle_previous(self):
        self.navigator.retreat()

    def _handle_next(self):
        if self.navigator.is_review_step():
            self.on_submit()
        else:
            self.navigator.advance()

    def _handle_cancel(self):
        self.wizard_cancelled.emit()
        self.close()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _on_step_changed(self, old_step: int, new_step: int):
        page = self.get_page(new_step)
        if page:
            page.on_show()
            self.step_container.setCurrentWidget(page)
        self._update_progress()
        self._update_navigation_buttons()

    def _update_progress(self):
        current = self.navigator.current_step
        total = self.navigator.total_steps
        self.progress_label.setText(f"Step {current} of {total}")
        self.progress_bar.setValue(int(self.navigator.get_progress_percentage()))

    def _update_navigation_buttons(self):
        self.btn_previous.setEnabled(self.navigator.can_go_previous())
        if self.navigator.is_review_step():
            self.btn_next.setText(self.get_submit_button_text())
        else:
            self.btn_next.setText("Next")

    def _on_validation_failed(self, result: StepValidationResult):
        """Show the failure and focus the offending input."""
        page = self.current_page()
        if page is not None and result.field and hasattr(page, "focus_field"):
            page.focus_field(result.field)

        ErrorHandler.show_warning(self, "\n".join(result.errors) or "Please check the entered data.")

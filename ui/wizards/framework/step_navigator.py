# -*- coding: utf-8 -*-
"""
Step Navigator - State machine driving the wizard steps.

Handles:
- advance: validate, collect, move forward
- retreat: collect (never validate), move back
- enter: jump to a step; entering the review step rebuilds the review
- generate: explicit generation from the review step
"""

from pathlib import Path
from typing import Optional, Sequence, Union

from PyQt5.QtCore import QObject, pyqtSignal

from services.document.metadata_generator import MetadataGenerator, GenerationResult
from services.error_mapper import map_exception
from services.exceptions import GenerationException, ValidationException
from services.wizard.field_collector import FieldCollector, InputSource
from services.wizard.review_projection import build_review_projection
from services.wizard.step_definitions import StepDefinition, step_owning_field
from services.wizard.step_validator import StepValidator, StepValidationResult
from .wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Manages navigation between wizard steps.

    Steps are numbered 1..N; step N is the review state. Data of the
    current step is read from ``input_source`` and only reaches the
    working record through the collector.
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_step, new_step
    validation_failed = pyqtSignal(object)  # StepValidationResult
    review_ready = pyqtSignal(object)  # ReviewProjection
    generation_failed = pyqtSignal(str)  # user-facing message
    document_generated = pyqtSignal(str)  # output path

    def __init__(self, context: WizardContext, steps: Sequence[StepDefinition],
                 input_source: InputSource, collector: Optional[FieldCollector] = None,
                 parent: Optional[QObject] = None):
        """
        Initialize the navigator.

        Args:
            context: Wizard context owning the working record
            steps: Step definitions ordered 1..N
            input_source: Provides the in-progress values of a step
            collector: Field collector (default FieldCollector())
            parent: Qt parent
        """
        super().__init__(parent)
        self.context = context
        self.steps = tuple(steps)
        self.input_source = input_source
        self.collector = collector or FieldCollector()
        self.validator = StepValidator(on_failure=self.validation_failed.emit)

    @property
    def current_step(self) -> int:
        return self.context.current_step

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    def get_step_definition(self, step_number: Optional[int] = None) -> Optional[StepDefinition]:
        number = self.current_step if step_number is None else step_number
        if 1 <= number <= len(self.steps):
            return self.steps[number - 1]
        return None

    def is_review_step(self) -> bool:
        return self.current_step == self.total_steps

    def can_go_next(self) -> bool:
        return self.current_step < self.total_steps

    def can_go_previous(self) -> bool:
        return self.current_step > 1

    # =========================================================================
    # Transitions
    # =========================================================================

    def validate_current(self, silent: bool = False) -> StepValidationResult:
        step = self.get_step_definition()
        values = self.input_source.read_step(step)
        return self.validator.validate(step, values, silent=silent)

    def collect_current(self):
        """Collect the current step's inputs into the working record."""
        step = self.get_step_definition()
        if not step.fields:
            return
        values = self.input_source.read_step(step)
        self.context.merge(self.collector.collect(step, values))
        logger.debug(f"Collected step {step.number}: {', '.join(step.field_ids)}")

    def advance(self) -> bool:
        """
        Validate the current step and move forward.

        On validation failure nothing is collected and the step does not
        change; the failure is emitted through ``validation_failed``.

        Returns:
            True if the navigator moved to the next step
        """
        result = self.validate_current()
        if not result.is_valid:
            return False

        self.collect_current()
        self.context.mark_step_completed(self.current_step)

        if not self.can_go_next():
            logger.debug(f"Cannot go next: already at last step ({self.current_step})")
            return False

        logger.info(f"Navigating: Step {self.current_step} → {self.current_step + 1}")
        return self._navigate_to(self.current_step + 1)

    def retreat(self) -> bool:
        """
        Collect the current step and move back. Never validates.

        Returns:
            True if the navigator moved to the previous step
        """
        self.collect_current()

        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self.current_step})")
            return False

        logger.info(f"Navigating back: Step {self.current_step} → {self.current_step - 1}")
        return self._navigate_to(self.current_step - 1)

    def enter(self, step_number: int) -> bool:
        """Jump straight to ``step_number`` without validating or collecting."""
        return self._navigate_to(step_number)

    def reset(self):
        """Discard the working record and return to step 1."""
        old_step = self.current_step
        self.context.reset()
        self.step_changed.emit(old_step, 1)

    def _navigate_to(self, new_step: int) -> bool:
        if new_step < 1 or new_step > self.total_steps:
            logger.error(f"Invalid step number: {new_step} (valid range: 1-{self.total_steps})")
            return False

        old_step = self.current_step
        self.context.current_step = new_step

        if new_step == self.total_steps:
            self.refresh_review()

        self.step_changed.emit(old_step, new_step)
        return True

    def refresh_review(self):
        """Rebuild the review projection from the working record."""
        projection = build_review_projection(self.context.record)
        self.context.review = projection
        self.review_ready.emit(projection)
        return projection

    # =========================================================================
    # Generation
    # =========================================================================

    def generate(self, generator: MetadataGenerator,
                 output_path: Optional[Union[str, Path]] = None) -> Optional[GenerationResult]:
        """
        Generate the document from the working record.

        Missing or invalid data sends the wizard back to the step owning
        the offending field; write/serialization errors leave the step
        unchanged. Failures are emitted through ``generation_failed``.

        Returns:
            GenerationResult, or None if generation was refused or failed
        """
        try:
            result = generator.generate(self.context.record, output_path)
        except ValidationException as e:
            logger.warning(f"Generation refused: {e.kind} ({e.field})")
            self.generation_failed.emit(map_exception(e))
            redirect = e.step or step_owning_field(self.steps, e.field)
            if redirect:
                self.enter(redirect)
            return None
        except GenerationException as e:
            logger.error(f"Generation failed: {e.message}", exc_info=True)
            self.generation_failed.emit(map_exception(e))
            return None

        self.document_generated.emit(str(result.path))
        return result

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if self.total_steps <= 1:
            return 0.0
        return ((self.current_step - 1) / (self.total_steps - 1)) * 100.0

    def get_completed_steps_count(self) -> int:
        return len(self.context.completed_steps)

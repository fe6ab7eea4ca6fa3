# -*- coding: utf-8 -*-
"""
Rationale Wizard - six-step wizard producing CIP-136 rationale metadata.
"""

from pathlib import Path
from typing import List, Optional, Sequence

from PyQt5.QtWidgets import QFileDialog, QWidget

from services.document.metadata_generator import MetadataGenerator
from services.document.schema_profiles import SchemaProfile, get_schema_profile
from services.wizard.step_definitions import StepDefinition, build_step_definitions
from ui.error_handler import ErrorHandler
from ui.wizards.framework import BaseStep, BaseWizard
from ui.wizards.framework.error_boundary import with_error_boundary
from .rationale_context import RationaleContext
from .steps.form_step import FormStep
from .steps.review_step import ReviewStep
from utils.logger import get_logger

logger = get_logger(__name__)


class RationaleWizard(BaseWizard):
    """Collects the rationale and writes the metadata JSON file."""

    def __init__(self, profile: Optional[SchemaProfile] = None,
                 generator: Optional[MetadataGenerator] = None,
                 parent: Optional[QWidget] = None):
        self.profile = profile or get_schema_profile()
        self.generator = generator or MetadataGenerator(self.profile)
        super().__init__(parent)

        self.review_step: ReviewStep = self.get_page(self.navigator.total_steps)
        self.navigator.review_ready.connect(self.review_step.show_projection)
        self.navigator.generation_failed.connect(self._on_generation_failed)
        self.navigator.document_generated.connect(self._on_document_generated)

        logger.info(f"Rationale wizard started ({self.profile.name}, {self.context.reference_number})")

    def create_context(self) -> RationaleContext:
        return RationaleContext(self.profile)

    def create_step_definitions(self) -> Sequence[StepDefinition]:
        return build_step_definitions(self.profile.identifier_field)

    def create_steps(self, definitions: Sequence[StepDefinition]) -> List[BaseStep]:
        return [
            ReviewStep(definition) if definition.is_review else FormStep(definition)
            for definition in definitions
        ]

    def get_submit_button_text(self) -> str:
        return "Generate JSON"

    def choose_output_path(self) -> Optional[Path]:
        """Ask where to save the document; None if the user cancels."""
        default_path = self.generator.default_output_path()
        path, _ = QFileDialog.getSaveFileName(
            self, "Save rationale metadata", str(default_path), "JSON files (*.json)"
        )
        return Path(path) if path else None

    @with_error_boundary("generating the rationale document")
    def on_submit(self):
        self.review_step.set_error_message("")
        output_path = self.choose_output_path()
        if output_path is None:
            logger.debug("Generation cancelled: no output path chosen")
            return None
        return self.navigator.generate(self.generator, output_path)

    def _on_generation_failed(self, message: str):
        self.review_step.set_error_message(message)
        ErrorHandler.show_error(self, message)

    def _on_document_generated(self, path: str):
        self.context.last_output_path = path
        ErrorHandler.show_success(self, f"Metadata saved to:\n{path}")
        self.wizard_completed.emit(path)

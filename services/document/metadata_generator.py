# -*- coding: utf-8 -*-
"""
Metadata Generator - the wizard's "generate" action.

Guards the minimal required set, re-validates every collecting step
silently against the working record, then builds, serializes and writes
the JSON file.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from app.config import Config
from models.working_record import WorkingRecord
from services.document.document_builder import DocumentBuilder
from services.document.schema_profiles import SchemaProfile, get_schema_profile
from services.exceptions import GenerationException, IncompleteAtGenerationTime
from services.wizard import step_definitions as fields
from services.wizard.field_parsers import parse_authors
from services.wizard.step_definitions import StepDefinition, build_step_definitions
from services.wizard.step_validator import StepValidator
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class GenerationResult:
    path: Path
    content: str


class MetadataGenerator:
    """Produces the rationale JSON file from a working record."""

    def __init__(self, profile: Optional[SchemaProfile] = None,
                 builder: Optional[DocumentBuilder] = None,
                 steps: Optional[Sequence[StepDefinition]] = None):
        self.profile = profile or (builder.profile if builder else get_schema_profile())
        self.builder = builder or DocumentBuilder(self.profile)
        self.steps = tuple(steps or build_step_definitions(self.profile.identifier_field))
        self.validator = StepValidator()

    def default_output_path(self) -> Path:
        return Path(Config.OUTPUT_DIR) / Config.OUTPUT_FILENAME

    def check_required(self, record: WorkingRecord):
        """
        Refuse generation while any mandatory piece is missing.

        Raises:
            IncompleteAtGenerationTime: naming the missing fields and the
                earliest step that owns one of them
        """
        identifier_field = self.profile.identifier_field
        missing: List[str] = []
        if not record.has_text(identifier_field):
            missing.append(identifier_field)
        if not parse_authors(record.text(fields.AUTHORS)):
            missing.append(fields.AUTHORS)
        if not record.has_text(fields.SUMMARY):
            missing.append(fields.SUMMARY)
        if not record.has_text(fields.RATIONALE_STATEMENT):
            missing.append(fields.RATIONALE_STATEMENT)

        if not missing:
            return

        labels = [fields.FIELD_LABELS[field_id] for field_id in missing]
        redirect = (
            fields.STEP_BASIC_INFO
            if identifier_field in missing or fields.AUTHORS in missing
            else fields.STEP_CORE_RATIONALE
        )
        raise IncompleteAtGenerationTime(
            f"Please ensure {', '.join(labels)} "
            f"{'is' if len(labels) == 1 else 'are'} filled in before generating.",
            missing_fields=missing,
            redirect_step=redirect
        )

    def verify(self, record: WorkingRecord):
        """
        Silently re-validate every collecting step against the record.

        Raises:
            ValidationException: the first failure, with its step set
        """
        values = record.snapshot()
        for step in self.steps:
            if step.is_review:
                continue
            result = self.validator.validate(step, values, silent=True)
            if not result.is_valid:
                raise result.first_failure

    def render(self, record: WorkingRecord) -> str:
        """Check, build and serialize without writing a file."""
        self.check_required(record)
        self.verify(record)

        document = self.builder.build(record)
        try:
            return self.builder.serialize(document)
        except (TypeError, ValueError) as e:
            raise GenerationException(f"could not serialize document ({e})", original_error=e) from e

    def generate(self, record: WorkingRecord,
                 output_path: Optional[Union[str, Path]] = None) -> GenerationResult:
        """
        Write the rationale document to ``output_path``.

        Raises:
            IncompleteAtGenerationTime: required fields missing
            ValidationException: a step no longer validates
            GenerationException: serialization or write failure
        """
        content = self.render(record)
        path = Path(output_path) if output_path else self.default_output_path()

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise GenerationException(f"could not write {path} ({e})", original_error=e) from e

        logger.info(f"Generated {self.profile.name} metadata: {path}")
        return GenerationResult(path=path, content=content)

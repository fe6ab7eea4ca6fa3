# -*- coding: utf-8 -*-
"""
Step validation service for the rationale wizard.

Validates one step's values without UI coupling. Failures are reported
through an optional callback unless the validator runs in silent mode.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional

from services.exceptions import ValidationException
from services.validation import RequiredFieldsValidator
from services.wizard.step_definitions import StepDefinition, FIELD_LABELS
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    first_failure: Optional[ValidationException] = None

    @property
    def errors(self) -> List[str]:
        if self.first_failure is None:
            return []
        return [self.first_failure.message]

    @property
    def field(self) -> Optional[str]:
        return self.first_failure.field if self.first_failure else None


class StepValidator:
    """Validates wizard step values against their step definition."""

    def __init__(self, on_failure: Optional[Callable[[StepValidationResult], None]] = None):
        """
        Args:
            on_failure: Reporting channel for non-silent failures
        """
        self.on_failure = on_failure

    def validate(self, step: StepDefinition, values: Mapping[str, Any],
                 silent: bool = False) -> StepValidationResult:
        """
        Validate the values of one step.

        Required fields are checked first, in declared order; step
        constraints only run once every required field is filled. Only
        the first failure is reported.

        Args:
            step: Step definition
            values: Field id -> raw (or collected) value
            silent: Skip the reporting callback

        Returns:
            StepValidationResult
        """
        required = RequiredFieldsValidator(step.required_fields, FIELD_LABELS)
        failure = required.first_failure(values)

        if failure is None:
            for constraint in step.constraints:
                failure = constraint.first_failure(values)
                if failure is not None:
                    break

        if failure is None:
            return StepValidationResult(is_valid=True)

        failure.step = step.number
        result = StepValidationResult(is_valid=False, first_failure=failure)

        if silent:
            logger.debug(f"Step {step.number} invalid ({failure.kind}: {failure.field})")
        else:
            logger.warning(f"Step {step.number} validation failed: {failure.kind} on {failure.field}")
            if self.on_failure:
                self.on_failure(result)

        return result

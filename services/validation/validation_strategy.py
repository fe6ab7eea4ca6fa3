# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - Pluggable constraint rules for wizard steps.

Each strategy inspects the values of one step and reports the first
violation it finds as a ValidationException instance (not raised).
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Sequence

from services.exceptions import (
    ValidationException, MissingRequiredField, LengthExceeded, NegativeValue
)
from services.wizard.field_parsers import parse_tally


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


class ValidationStrategy(ABC):
    """
    Abstract base class for validation strategies.
    """

    @abstractmethod
    def first_failure(self, values: Mapping[str, Any]) -> Optional[ValidationException]:
        """
        Check values and return the first violation.

        Args:
            values: Field id -> raw value for one step

        Returns:
            ValidationException describing the violation, or None if valid
        """
        pass


class RequiredFieldsValidator(ValidationStrategy):
    """
    Checks that required fields are present and non-empty after trimming.

    Fields are checked in the declared order.
    """

    def __init__(self, required_fields: Sequence[str],
                 field_labels: Optional[Dict[str, str]] = None):
        self.required_fields: List[str] = list(required_fields)
        self.field_labels = field_labels or {}

    def first_failure(self, values: Mapping[str, Any]) -> Optional[ValidationException]:
        for field_id in self.required_fields:
            if not _text(values.get(field_id)):
                label = self.field_labels.get(field_id, field_id)
                return MissingRequiredField(
                    f"Please fill in the required field: {label}",
                    field=field_id
                )
        return None


class MaxLengthValidator(ValidationStrategy):
    """Fails when a field is longer than ``limit`` characters."""

    def __init__(self, field_id: str, limit: int, label: Optional[str] = None):
        self.field_id = field_id
        self.limit = limit
        self.label = label or field_id

    def first_failure(self, values: Mapping[str, Any]) -> Optional[ValidationException]:
        value = values.get(self.field_id)
        length = len(value) if isinstance(value, str) else len(_text(value))
        if length > self.limit:
            return LengthExceeded(
                f"{self.label} must not exceed {self.limit} characters.",
                field=self.field_id,
                limit=self.limit,
                length=length
            )
        return None


class NonNegativeIntegerValidator(ValidationStrategy):
    """
    Fails for the first field that parses to an integer below zero.

    Empty and non-numeric values pass; those fields are optional.
    """

    def __init__(self, field_ids: Sequence[str],
                 field_labels: Optional[Dict[str, str]] = None):
        self.field_ids: List[str] = list(field_ids)
        self.field_labels = field_labels or {}

    def first_failure(self, values: Mapping[str, Any]) -> Optional[ValidationException]:
        for field_id in self.field_ids:
            parsed = parse_tally(values.get(field_id))
            if parsed is not None and parsed < 0:
                label = self.field_labels.get(field_id, field_id)
                return NegativeValue(
                    f"Internal vote count for {label} cannot be negative.",
                    field=field_id
                )
        return None

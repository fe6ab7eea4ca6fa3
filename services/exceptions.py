# -*- coding: utf-8 -*-
"""Custom exceptions for the rationale wizard."""

from typing import List, Optional


class ValidationException(Exception):
    """Base class for user-input errors raised or reported by the wizard."""

    kind = "ValidationError"

    def __init__(self, message: str, field: str = None, step: int = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.step = step

    def __str__(self):
        return self.message


class MissingRequiredField(ValidationException):
    """A required field was left empty."""

    kind = "MissingRequiredField"


class LengthExceeded(ValidationException):
    """A field is longer than its maximum length."""

    kind = "LengthExceeded"

    def __init__(self, message: str, field: str = None, step: int = None,
                 limit: int = None, length: int = None):
        super().__init__(message, field=field, step=step)
        self.limit = limit
        self.length = length


class NegativeValue(ValidationException):
    """A numeric tally parsed to a value below zero."""

    kind = "NegativeValue"


class IncompleteAtGenerationTime(ValidationException):
    """Generation was requested while required fields are still missing."""

    kind = "IncompleteAtGenerationTime"

    def __init__(self, message: str, missing_fields: List[str],
                 redirect_step: Optional[int] = None):
        field = missing_fields[0] if missing_fields else None
        super().__init__(message, field=field, step=redirect_step)
        self.missing_fields = list(missing_fields)

    @property
    def redirect_step(self) -> Optional[int]:
        return self.step


class GenerationException(Exception):
    """Exception raised when the document cannot be serialized or written."""

    def __init__(self, message: str, original_error: Exception = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error

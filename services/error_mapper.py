# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from services.exceptions import (
    ValidationException, IncompleteAtGenerationTime, GenerationException
)
from utils.logger import get_logger

logger = get_logger(__name__)

GENERIC_GENERATION_ERROR = "Error generating JSON. Please review your input and try again."


def map_generation_error(error: GenerationException) -> str:
    """Map a serialization/write failure to a user message."""
    if error.original_error is not None:
        logger.warning(f"Generation failed: {error.original_error!r}")
    return f"Error generating JSON: {error.message}"


def map_exception(error: Exception) -> str:
    """Map any exception to a user-friendly message.

    Validation errors already carry a message written for the user;
    anything unexpected collapses to a generic generation error.
    """
    if isinstance(error, IncompleteAtGenerationTime):
        return f"Error: {error.message}"

    if isinstance(error, ValidationException):
        return error.message

    if isinstance(error, GenerationException):
        return map_generation_error(error)

    logger.warning(f"Unexpected error: {error!r}")
    return GENERIC_GENERATION_ERROR

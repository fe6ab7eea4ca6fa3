# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import (
    ValidationStrategy,
    RequiredFieldsValidator,
    MaxLengthValidator,
    NonNegativeIntegerValidator,
)

__all__ = [
    'ValidationStrategy',
    'RequiredFieldsValidator',
    'MaxLengthValidator',
    'NonNegativeIntegerValidator',
]

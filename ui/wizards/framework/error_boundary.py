# -*- coding: utf-8 -*-
"""
Error Boundary for Wizard actions.

Keeps an unexpected exception in a button handler from taking the whole
session down: the error is logged with its traceback and shown to the
user, and the handler returns None.
"""

from typing import Callable
from functools import wraps

from ui.error_handler import ErrorHandler


def with_error_boundary(operation_name: str = "operation"):
    """
    Decorator to add an error boundary to a wizard method.

    Usage:
        @with_error_boundary("generating the document")
        def _handle_submit(self):
            ...

    Args:
        operation_name: Name of the operation, used in log and dialog

    Returns:
        Decorator function
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)

            except (MemoryError, KeyboardInterrupt):
                raise

            except Exception as e:
                ErrorHandler.handle(e, parent=self, context=operation_name)
                return None

        return wrapper
    return decorator

"""
Support utilities for Chronicler: errors, logging, validation, settings
and stack persistence.
"""

from .error_handling import (
    ChroniclerError,
    InvalidArgumentError,
    PropertyAccessError,
    ManagerDestroyedError,
    handle_errors,
    safe_operation,
)

__all__ = [
    "ChroniclerError",
    "InvalidArgumentError",
    "PropertyAccessError",
    "ManagerDestroyedError",
    "handle_errors",
    "safe_operation",
]

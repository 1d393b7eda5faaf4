"""
Error handling utilities for Chronicler.

Provides:
- Exception taxonomy shared by the history core and its adapters
- Context manager for operation error handling
- Decorator for function error handling
"""

from contextlib import contextmanager
from functools import wraps
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class ChroniclerError(Exception):
    """Base class for every error raised by Chronicler."""


class InvalidArgumentError(ChroniclerError, ValueError):
    """Invalid construction argument or malformed waypoint data."""


class PropertyAccessError(ChroniclerError, LookupError):
    """Reading or writing a property on the target object failed."""

    def __init__(self, identifier: Any, message: Optional[str] = None):
        self.identifier = identifier
        super().__init__(message or f"Cannot access property {identifier!r}")


class ManagerDestroyedError(ChroniclerError, RuntimeError):
    """Operation attempted on a history manager after destroy()."""


@contextmanager
def handle_errors(
    operation_name: str,
    critical: bool = False,
    reraise: bool = False
):
    """
    Context manager for consistent error handling.

    Usage:
        with handle_errors("Undo handler"):
            handler(name)

    Args:
        operation_name: Human-readable operation description
        critical: Log at CRITICAL instead of ERROR
        reraise: Re-raise the exception after logging
    """
    try:
        yield
    except Exception as e:
        log_method = logger.critical if critical else logger.error
        log_method(
            f"Error in {operation_name}: {e}",
            exc_info=True,
            extra={'extra_data': {
                'operation': operation_name,
                'critical': critical
            }}
        )
        if reraise:
            raise


def safe_operation(
    operation_name: str,
    default_return: Any = None,
    reraise: bool = False
):
    """
    Decorator for safe operation execution.

    Usage:
        @safe_operation("Saving history", default_return=False)
        def save(path, data):
            path.write_text(json.dumps(data))
            return True

    Args:
        operation_name: Human-readable operation description
        default_return: Value to return on error
        reraise: Re-raise exception after logging
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Error in {operation_name} ({func.__name__}): {e}",
                    exc_info=True
                )
                if reraise:
                    raise
                return default_return

        return wrapper
    return decorator

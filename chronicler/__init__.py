"""
Chronicler - waypoint-based undo/redo history for mutable objects.
"""

import logging

from .history import (
    HistoryManager,
    HistoryConfig,
    Waypoint,
    DEFAULT_WAYPOINT_NAME,
    PropertyStore,
    wrap_target,
)
from .events import NotificationChannel, Subscription, HistorySignals
from .utils.error_handling import (
    ChroniclerError,
    InvalidArgumentError,
    PropertyAccessError,
    ManagerDestroyedError,
)
from .utils.stack_store import StackStore
from .utils.logger import StructuredFormatter, attach_log_handler, detach_log_handler

# silent unless the host application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "HistoryManager",
    "HistoryConfig",
    "Waypoint",
    "DEFAULT_WAYPOINT_NAME",
    "PropertyStore",
    "wrap_target",
    "NotificationChannel",
    "Subscription",
    "HistorySignals",
    "ChroniclerError",
    "InvalidArgumentError",
    "PropertyAccessError",
    "ManagerDestroyedError",
    "StackStore",
    "StructuredFormatter",
    "attach_log_handler",
    "detach_log_handler",
]

"""
Waypoint-based undo/redo history.

This package provides:
- Waypoint: immutable named property snapshot
- HistoryManager: bounded undo/redo stacks over one target object
- HistoryConfig: capacities and capture options
- Property-store adapters for attribute, item and Qt property access
"""

from .targets import (
    PropertyKey,
    PropertyStore,
    AttributeTarget,
    ItemTarget,
    QObjectTarget,
    wrap_target,
)
from .waypoint import Waypoint, DEFAULT_WAYPOINT_NAME
from .config import HistoryConfig
from .manager import HistoryManager

__all__ = [
    "PropertyKey",
    "PropertyStore",
    "AttributeTarget",
    "ItemTarget",
    "QObjectTarget",
    "wrap_target",
    "Waypoint",
    "DEFAULT_WAYPOINT_NAME",
    "HistoryConfig",
    "HistoryManager",
]

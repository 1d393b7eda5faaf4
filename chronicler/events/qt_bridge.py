"""
Qt bridge for history notifications.

Re-emits a HistoryManager's undo/redo notifications as Qt signals so
menu actions, status bars and other widgets can connect to them the
usual way.
"""
from __future__ import annotations
from typing import List, Optional

from PySide6.QtCore import QObject, Signal

from .channel import Subscription


class HistorySignals(QObject):
    """Qt signals mirroring a HistoryManager's notification channels."""

    undo_performed = Signal(str)
    redo_performed = Signal(str)
    # emitted after either of the above
    history_changed = Signal()

    def __init__(self, manager=None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._subscriptions: List[Subscription] = []
        self._manager = None
        if manager is not None:
            self.attach(manager)

    @property
    def manager(self):
        return self._manager

    def attach(self, manager):
        """Forward manager's notifications; replaces any previous attachment."""
        self.detach()
        self._manager = manager
        self._subscriptions = [
            manager.undo_performed.subscribe(self._on_undo),
            manager.redo_performed.subscribe(self._on_redo),
        ]

    def detach(self):
        for sub in self._subscriptions:
            sub.disconnect()
        self._subscriptions = []
        self._manager = None

    def _on_undo(self, name):
        self.undo_performed.emit(name)
        self.history_changed.emit()

    def _on_redo(self, name):
        self.redo_performed.emit(name)
        self.history_changed.emit()

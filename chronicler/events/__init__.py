"""
Notification delivery for history events.

- NotificationChannel: synchronous observer channel with blocking wait
- HistorySignals: Qt signal bridge for widgets
"""

from .channel import NotificationChannel, Subscription
from .qt_bridge import HistorySignals

__all__ = [
    "NotificationChannel",
    "Subscription",
    "HistorySignals",
]

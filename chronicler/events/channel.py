from __future__ import annotations
from typing import Any, Callable, List, Optional
import logging
import threading

from ..utils.error_handling import handle_errors

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]


class Subscription:
    """Handle returned by NotificationChannel.subscribe()."""

    def __init__(self, channel: "NotificationChannel", handler: Handler):
        self._channel = channel
        self.handler = handler

    @property
    def connected(self) -> bool:
        return self._channel is not None and self._channel._has(self)

    def disconnect(self) -> None:
        if self._channel is not None:
            self._channel._remove(self)
            self._channel = None


class NotificationChannel:
    """
    Synchronous observer channel.

    emit() calls every handler on the emitting thread, in subscription
    order, before returning. A failing handler is logged and skipped.
    wait_for_next() lets another thread block until the next emission.
    """

    def __init__(self, name: str = "channel"):
        self.name = name
        self._subs: List[Subscription] = []
        self._cond = threading.Condition()
        self._emissions = 0
        self._last_payload: Any = None

    def subscribe(self, handler: Handler) -> Subscription:
        if not callable(handler):
            raise TypeError(f"Handler for {self.name} must be callable")
        sub = Subscription(self, handler)
        with self._cond:
            self._subs.append(sub)
        return sub

    def emit(self, payload: Any = None) -> None:
        with self._cond:
            subs = list(self._subs)
            self._emissions += 1
            self._last_payload = payload
            self._cond.notify_all()
        for sub in subs:
            with handle_errors(f"{self.name} handler"):
                sub.handler(payload)

    def wait_for_next(self, timeout: Optional[float] = None) -> Any:
        """Block until the next emit(); returns its payload, None on timeout."""
        with self._cond:
            seen = self._emissions
            if not self._cond.wait_for(lambda: self._emissions != seen, timeout):
                return None
            return self._last_payload

    @property
    def subscriber_count(self) -> int:
        with self._cond:
            return len(self._subs)

    def clear(self) -> None:
        with self._cond:
            subs, self._subs = self._subs, []
        for sub in subs:
            sub._channel = None

    def _has(self, sub: Subscription) -> bool:
        with self._cond:
            return sub in self._subs

    def _remove(self, sub: Subscription) -> None:
        with self._cond:
            if sub in self._subs:
                self._subs.remove(sub)

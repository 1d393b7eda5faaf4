"""
Undo/Redo history built from property snapshots (waypoints).

A HistoryManager watches one target object. Each set_waypoint() call
records the current value of every property in the capture
specification; the newest waypoint on the undo stack therefore mirrors
the current state of the target, and undo() restores the one recorded
before it. The first waypoint is the baseline and is never undone past.

Typical use:
    history = HistoryManager(shape, ["x", "y", "color"])
    history.set_waypoint("Initial")
    shape.x = 40
    history.set_waypoint("Move")
    history.undo()    # shape.x back to its initial value
    history.redo()    # shape.x == 40 again

The manager is synchronous and not thread-safe; callers sharing it
between threads must serialize access themselves.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple, Union

from ..events.channel import NotificationChannel
from ..utils.error_handling import InvalidArgumentError, ManagerDestroyedError
from ..utils.validation import Validator
from .config import DEFAULT_REDO_CAPACITY, DEFAULT_UNDO_CAPACITY, HistoryConfig
from .targets import PropertyKey, wrap_target
from .waypoint import Waypoint

_logger = logging.getLogger(__name__)


class HistoryManager:
    """Bounded linear undo/redo history for one target object."""

    def __init__(
        self,
        obj: Any,
        capture_properties: Sequence[PropertyKey],
        undo_capacity: int = DEFAULT_UNDO_CAPACITY,
        redo_capacity: int = DEFAULT_REDO_CAPACITY,
        *,
        exclude_falsy: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            obj: Object whose properties are recorded (not owned)
            capture_properties: Property identifiers (str or int) read into every waypoint
            undo_capacity: Maximum number of waypoints kept on the undo stack
            redo_capacity: Maximum number of waypoints kept on the redo stack
            exclude_falsy: Skip every falsy value on capture, not only None
            logger: Logger to report history activity to (module logger by default)

        Raises:
            InvalidArgumentError: obj is None, a capacity is not a positive
                integer or an identifier is neither str nor int
        """
        if obj is None:
            raise InvalidArgumentError("History target must not be None")
        result = Validator.validate_capture_properties(capture_properties)
        result.merge(Validator.validate_capacity(undo_capacity, "undo_capacity"))
        result.merge(Validator.validate_capacity(redo_capacity, "redo_capacity"))
        result.raise_if_invalid()

        self._object = obj
        self._target = wrap_target(obj)
        self._capture_properties: Optional[Tuple[PropertyKey, ...]] = tuple(capture_properties)
        self.undo_capacity = undo_capacity
        self.redo_capacity = redo_capacity
        self.exclude_falsy = exclude_falsy
        self.logger = logger or _logger

        self._undo_stack: Optional[List[Waypoint]] = []
        self._redo_stack: Optional[List[Waypoint]] = []
        self._enabled: Optional[bool] = True

        self.undo_performed = NotificationChannel("undo_performed")
        self.redo_performed = NotificationChannel("redo_performed")

    @classmethod
    def from_config(
        cls,
        obj: Any,
        capture_properties: Sequence[PropertyKey],
        config: HistoryConfig,
        logger: Optional[logging.Logger] = None,
    ) -> "HistoryManager":
        return cls(
            obj,
            capture_properties,
            config.undo_capacity,
            config.redo_capacity,
            exclude_falsy=config.exclude_falsy,
            logger=logger,
        )

    # --- state ---

    @property
    def object(self) -> Any:
        self._check_alive()
        return self._object

    @property
    def target(self):
        self._check_alive()
        return self._target

    @property
    def capture_properties(self) -> Tuple[PropertyKey, ...]:
        self._check_alive()
        return self._capture_properties

    @property
    def undo_stack(self) -> Tuple[Waypoint, ...]:
        self._check_alive()
        return tuple(self._undo_stack)

    @property
    def redo_stack(self) -> Tuple[Waypoint, ...]:
        self._check_alive()
        return tuple(self._redo_stack)

    @property
    def enabled(self) -> bool:
        self._check_alive()
        return self._enabled

    @property
    def is_destroyed(self) -> bool:
        return self._undo_stack is None

    @property
    def can_undo(self) -> bool:
        return self.get_can_undo() is not False

    @property
    def can_redo(self) -> bool:
        return self.get_can_redo() is not False

    def _check_alive(self):
        if self.is_destroyed:
            raise ManagerDestroyedError("History manager has been destroyed")

    # --- recording ---

    def set_waypoint(self, name: Optional[str] = None):
        """
        Record the current state of the target as a waypoint.

        Does nothing while the manager is disabled. Recording discards
        the redo stack and evicts the oldest waypoints beyond capacity.
        """
        self._check_alive()
        if not self._enabled:
            self.logger.debug(f"History disabled, waypoint {name!r} ignored")
            return

        waypoint = Waypoint.capture(
            self._target,
            self._capture_properties,
            name,
            exclude_falsy=self.exclude_falsy,
        )
        self._undo_stack.append(waypoint)

        if self._redo_stack:
            self.logger.debug(f"Discarding {len(self._redo_stack)} redo waypoint(s)")
            self._redo_stack.clear()

        self._evict(self._undo_stack, self.undo_capacity, "undo")
        self.logger.debug(
            f"Waypoint {waypoint.name!r} recorded ({len(waypoint.properties)} properties, "
            f"undo={len(self._undo_stack)})"
        )

    def _evict(self, stack: List[Waypoint], capacity: int, label: str):
        overflow = len(stack) - capacity
        if overflow > 0:
            del stack[:overflow]
            self.logger.debug(f"Evicted {overflow} oldest {label} waypoint(s)")

    # --- undo / redo ---

    def undo(self):
        """
        Revert the target to the waypoint recorded before the newest one.

        The newest waypoint moves to the redo stack and undo_performed
        is emitted with its name. Needs at least two waypoints.
        """
        self._check_alive()
        if len(self._undo_stack) < 2:
            self.logger.debug("Nothing to undo")
            return

        self._undo_stack[-2].apply(self._target)
        waypoint = self._undo_stack.pop()
        self._redo_stack.append(waypoint)
        self._evict(self._redo_stack, self.redo_capacity, "redo")

        self.logger.debug(f"Undo {waypoint.name!r}")
        self.undo_performed.emit(waypoint.name)

    def redo(self):
        """Reapply the most recently undone waypoint and emit redo_performed."""
        self._check_alive()
        if not self._redo_stack:
            self.logger.debug("Nothing to redo")
            return

        waypoint = self._redo_stack[-1]
        waypoint.apply(self._target)
        self._redo_stack.pop()
        self._undo_stack.append(waypoint)
        self._evict(self._undo_stack, self.undo_capacity, "undo")

        self.logger.debug(f"Redo {waypoint.name!r}")
        self.redo_performed.emit(waypoint.name)

    def reset_waypoints(self):
        """Clear all history."""
        self._check_alive()
        self._undo_stack.clear()
        self._redo_stack.clear()
        self.logger.debug("History reset")

    # --- queries ---

    def get_can_undo(self) -> Union[Waypoint, bool]:
        """Waypoint the next undo() would revert, or False."""
        self._check_alive()
        if len(self._undo_stack) < 2:
            return False
        return self._undo_stack[-1]

    def get_can_redo(self) -> Union[Waypoint, bool]:
        """Waypoint the next redo() would reapply, or False."""
        self._check_alive()
        if not self._redo_stack:
            return False
        return self._redo_stack[-1]

    # --- control ---

    def set_enabled(self, state: Optional[bool] = None):
        """
        Enable or disable recording; None toggles.

        Disabling discards the whole history.
        """
        self._check_alive()
        self._enabled = (not self._enabled) if state is None else bool(state)
        if not self._enabled:
            self.reset_waypoints()
        self.logger.debug(f"History {'enabled' if self._enabled else 'disabled'}")

    def override_stacks(
        self,
        undo_stack: Optional[Sequence[Waypoint]] = None,
        redo_stack: Optional[Sequence[Waypoint]] = None,
    ):
        """
        Replace either stack wholesale, e.g. with one restored from disk.

        Neither capacity nor entry shape is checked.
        """
        self._check_alive()
        if undo_stack is not None:
            self._undo_stack = list(undo_stack)
        if redo_stack is not None:
            self._redo_stack = list(redo_stack)
        self.logger.debug(
            f"Stacks overridden (undo={len(self._undo_stack)}, redo={len(self._redo_stack)})"
        )

    def destroy(self):
        """
        Release history state, subscriptions and the target reference.

        The target object itself is left untouched. Calling destroy() again is
        harmless; any other operation raises ManagerDestroyedError.
        """
        if self.is_destroyed:
            return
        self.undo_performed.clear()
        self.redo_performed.clear()
        self._object = None
        self._target = None
        self._capture_properties = None
        self._undo_stack = None
        self._redo_stack = None
        self._enabled = None
        self.logger.debug("History manager destroyed")

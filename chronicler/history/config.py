"""
History configuration.

Defaults match the historical change-history behaviour: 30 undo
waypoints, 10 redo waypoints, every non-None value captured.
User overrides live in ~/.chronicler/settings.json (see utils.settings).
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import logging

from ..utils import settings
from ..utils.validation import Validator

logger = logging.getLogger(__name__)

DEFAULT_UNDO_CAPACITY = 30
DEFAULT_REDO_CAPACITY = 10


@dataclass
class HistoryConfig:
    """Constructor parameters of a HistoryManager."""
    undo_capacity: int = DEFAULT_UNDO_CAPACITY
    redo_capacity: int = DEFAULT_REDO_CAPACITY
    exclude_falsy: bool = False

    def __post_init__(self):
        result = Validator.validate_capacity(self.undo_capacity, "undo_capacity")
        result.merge(Validator.validate_capacity(self.redo_capacity, "redo_capacity"))
        result.raise_if_invalid()

    @classmethod
    def from_settings(cls, path: Optional[Path] = None) -> "HistoryConfig":
        """Build a config from the user settings file (defaults when missing)."""
        config = cls(
            undo_capacity=settings.get_int("undo_capacity", DEFAULT_UNDO_CAPACITY, path),
            redo_capacity=settings.get_int("redo_capacity", DEFAULT_REDO_CAPACITY, path),
            exclude_falsy=settings.get_bool("exclude_falsy", False, path),
        )
        logger.debug(f"Loaded {config}")
        return config

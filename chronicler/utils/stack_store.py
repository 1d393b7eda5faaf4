"""
Stack Store - persist undo/redo stacks between sessions
File: chronicler/utils/stack_store.py
"""

from typing import Any, Dict, List, Tuple
import json
import logging
import os
from pathlib import Path
from datetime import datetime

from ..history.waypoint import Waypoint
from .error_handling import InvalidArgumentError, safe_operation

logger = logging.getLogger(__name__)

EXTENSION = '.chron'


class StackStore:
    """Save and load history stacks as JSON files."""

    def __init__(self, store_dir: str = None):
        """
        Initialize stack store.

        Args:
            store_dir: Directory holding saved histories.
                       Defaults to ~/.chronicler/history/
        """
        if store_dir is None:
            store_dir = str(Path.home() / ".chronicler" / "history")

        self.store_dir = str(store_dir)
        os.makedirs(self.store_dir, exist_ok=True)

    def _path(self, filename: str) -> str:
        if not filename.endswith(EXTENSION):
            filename += EXTENSION
        return os.path.join(self.store_dir, filename)

    @safe_operation("Saving history stacks", default_return=False)
    def save_stacks(self, manager, filename: str) -> bool:
        """
        Save both stacks of a history manager.

        Args:
            manager: HistoryManager whose stacks are saved
            filename: Filename (without .chron extension)

        Returns:
            True if successful, False if a value is not JSON-serializable
            or the file cannot be written
        """
        filepath = self._path(filename)
        created_at = datetime.now().isoformat()
        if os.path.exists(filepath):
            try:
                with open(filepath, 'r', encoding='utf-8') as f:
                    created_at = json.load(f).get('created_at', created_at)
            except (OSError, ValueError, AttributeError):
                logger.warning(f"Overwriting unreadable history file {filepath}")

        data = {
            'undo': [w.to_dict() for w in manager.undo_stack],
            'redo': [w.to_dict() for w in manager.redo_stack],
            'created_at': created_at,
            'modified_at': datetime.now().isoformat(),
        }
        # serialize first so a bad value never truncates an existing file
        text = json.dumps(data, indent=2, ensure_ascii=False)
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(text)

        logger.debug(f"Saved {len(data['undo'])} undo / {len(data['redo'])} redo waypoints to {filepath}")
        return True

    def load_stacks(self, filename: str) -> Tuple[List[Waypoint], List[Waypoint]]:
        """
        Load saved stacks.

        Args:
            filename: Filename (with or without .chron extension)

        Returns:
            (undo_stack, redo_stack) as lists of Waypoint

        Raises:
            FileNotFoundError: no such saved history
            InvalidArgumentError: file is not a valid saved history
        """
        filepath = self._path(filename)
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"History file not found: {filename}")

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except ValueError as e:
            raise InvalidArgumentError(f"Corrupt history file {filename}: {e}") from e

        if not isinstance(data, dict):
            raise InvalidArgumentError(f"Corrupt history file {filename}: not an object")

        stacks = []
        for key in ('undo', 'redo'):
            entries = data.get(key, [])
            if not isinstance(entries, list):
                raise InvalidArgumentError(f"Corrupt history file {filename}: '{key}' is not a list")
            stacks.append([Waypoint.from_dict(entry) for entry in entries])

        return stacks[0], stacks[1]

    def restore_into(self, manager, filename: str):
        """Load saved stacks and install them on manager."""
        undo_stack, redo_stack = self.load_stacks(filename)
        manager.override_stacks(undo_stack, redo_stack)

    def list_saved(self, limit: int = 10) -> List[Dict[str, Any]]:
        """
        Get saved histories sorted by modification date (newest first).

        Args:
            limit: Maximum number of entries to return
        """
        entries = []

        for filename in os.listdir(self.store_dir):
            if not filename.endswith(EXTENSION):
                continue

            filepath = os.path.join(self.store_dir, filename)
            try:
                modified_time = datetime.fromtimestamp(os.stat(filepath).st_mtime)
                with open(filepath, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                entries.append({
                    'filename': filename,
                    'name': filename[:-len(EXTENSION)],
                    'created_at': data.get('created_at', ''),
                    'modified_at': data.get('modified_at', modified_time.isoformat()),
                    'undo_count': len(data.get('undo', [])),
                    'redo_count': len(data.get('redo', [])),
                })
            except (OSError, ValueError, AttributeError, TypeError) as e:
                logger.warning(f"Skipping unreadable history file {filepath}: {e}")
                continue

        entries.sort(key=lambda e: e['modified_at'], reverse=True)
        return entries[:limit]

    def delete(self, filename: str) -> bool:
        """
        Delete a saved history.

        Returns:
            True if a file was removed, False otherwise
        """
        filepath = self._path(filename)
        if os.path.exists(filepath):
            os.remove(filepath)
            return True
        return False

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

SETTINGS_PATH = Path.home() / ".chronicler" / "settings.json"

_DEFAULTS: Dict[str, Any] = {
    "undo_capacity": 30,
    "redo_capacity": 10,
    "exclude_falsy": False,  # legacy truthiness filter on capture
}

def _read(path: Optional[Path] = None) -> Dict[str, Any]:
    path = path or SETTINGS_PATH
    if not path.exists():
        return dict(_DEFAULTS)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning(f"Unreadable settings file {path}, using defaults: {e}")
        return dict(_DEFAULTS)
    if not isinstance(data, dict):
        logger.warning(f"Settings file {path} is not a JSON object, using defaults")
        return dict(_DEFAULTS)
    return data

def _write(data: Dict[str, Any], path: Optional[Path] = None):
    path = path or SETTINGS_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")

def get(key: str, default: Any = None, path: Optional[Path] = None) -> Any:
    data = _read(path)
    return data.get(key, _DEFAULTS.get(key, default))

def set_value(key: str, value: Any, path: Optional[Path] = None):
    data = _read(path)
    data[key] = value
    _write(data, path)

def get_int(key: str, default: int = 0, path: Optional[Path] = None) -> int:
    v = get(key, default, path)
    try:
        return int(v)
    except (TypeError, ValueError):
        logger.warning(f"Setting {key}={v!r} is not an integer, using {default}")
        return int(_DEFAULTS.get(key, default))

def get_bool(key: str, default: bool = False, path: Optional[Path] = None) -> bool:
    v = get(key, default, path)
    return bool(v)

def set_bool(key: str, value: bool, path: Optional[Path] = None):
    set_value(key, bool(value), path)

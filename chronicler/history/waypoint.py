"""
Waypoint: a named, immutable snapshot of selected target properties.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional

from ..utils.validation import Validator
from .targets import PropertyKey, PropertyStore

DEFAULT_WAYPOINT_NAME = "Unnamed Waypoint"


@dataclass(frozen=True, eq=False)
class Waypoint:
    """Snapshot of a subset of an object's properties at one point in time."""

    name: str = DEFAULT_WAYPOINT_NAME
    properties: Mapping[PropertyKey, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.name:
            object.__setattr__(self, "name", DEFAULT_WAYPOINT_NAME)
        # values are deep-copied in and out so the target never shares
        # a mutable object with a stored snapshot
        object.__setattr__(self, "properties", MappingProxyType(copy.deepcopy(dict(self.properties))))

    @classmethod
    def capture(
        cls,
        target: PropertyStore,
        capture_properties: Iterable[PropertyKey],
        name: Optional[str] = None,
        exclude_falsy: bool = False,
    ) -> "Waypoint":
        """
        Read every identifier of the capture specification from target.

        None is treated as absent and never captured. With exclude_falsy,
        every falsy value (0, False, "", empty containers) is skipped too.
        """
        values: Dict[PropertyKey, Any] = {}
        for identifier in capture_properties:
            value = target.get(identifier)
            if value is None or (exclude_falsy and not value):
                continue
            values[identifier] = value
        return cls(name or DEFAULT_WAYPOINT_NAME, values)

    def apply(self, target: PropertyStore):
        """Write a copy of every captured value back onto target."""
        for identifier, value in self.properties.items():
            target.set(identifier, copy.deepcopy(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Waypoint):
            return NotImplemented
        return self.name == other.name and dict(self.properties) == dict(other.properties)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Waypoint({self.name!r}, {dict(self.properties)!r})"

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe form; pairs keep integer identifiers intact."""
        return {
            "name": self.name,
            "properties": [[key, value] for key, value in self.properties.items()],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Waypoint":
        Validator.validate_waypoint_data(data).raise_if_invalid()
        properties = data.get("properties", [])
        if not isinstance(properties, dict):
            properties = {key: value for key, value in properties}
        return cls(data.get("name") or DEFAULT_WAYPOINT_NAME, properties)

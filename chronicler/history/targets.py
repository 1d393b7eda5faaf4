"""
Property-store adapters for history targets.

The history manager only ever reads and writes declared properties on the
object it observes. Everything it needs is the get/set pair described by
PropertyStore; the adapters below provide it for plain Python objects,
mappings/sequences and Qt objects.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, Union, runtime_checkable

from PySide6.QtCore import QObject

from ..utils.error_handling import InvalidArgumentError, PropertyAccessError

PropertyKey = Union[str, int]


@runtime_checkable
class PropertyStore(Protocol):
    """Minimal capability required of a history target."""

    def get(self, identifier: PropertyKey) -> Any: ...

    def set(self, identifier: PropertyKey, value: Any) -> None: ...


class AttributeTarget:
    """Exposes the attributes of an arbitrary Python object."""

    def __init__(self, obj: Any):
        self.obj = obj

    def get(self, identifier: PropertyKey) -> Any:
        if not isinstance(identifier, str):
            raise PropertyAccessError(identifier, f"Attribute name must be a string, got {identifier!r}")
        try:
            return getattr(self.obj, identifier)
        except AttributeError as e:
            raise PropertyAccessError(identifier, str(e)) from e

    def set(self, identifier: PropertyKey, value: Any) -> None:
        if not isinstance(identifier, str):
            raise PropertyAccessError(identifier, f"Attribute name must be a string, got {identifier!r}")
        try:
            setattr(self.obj, identifier, value)
        except (AttributeError, TypeError) as e:
            raise PropertyAccessError(identifier, str(e)) from e


class ItemTarget:
    """
    Exposes the items of a mapping or sequence.

    A key missing from a mapping reads as absent (None), the same as an
    unset property. Out-of-range indices and unusable keys are errors.
    """

    def __init__(self, obj: Any):
        self.obj = obj

    def get(self, identifier: PropertyKey) -> Any:
        if isinstance(self.obj, Mapping):
            try:
                return self.obj.get(identifier)
            except TypeError as e:
                raise PropertyAccessError(identifier, str(e)) from e
        try:
            return self.obj[identifier]
        except (IndexError, KeyError, TypeError) as e:
            raise PropertyAccessError(identifier, str(e)) from e

    def set(self, identifier: PropertyKey, value: Any) -> None:
        try:
            self.obj[identifier] = value
        except (IndexError, KeyError, TypeError) as e:
            raise PropertyAccessError(identifier, str(e)) from e


class QObjectTarget:
    """Exposes Qt properties (declared or dynamic) of a QObject."""

    def __init__(self, obj: QObject):
        self.obj = obj

    def get(self, identifier: PropertyKey) -> Any:
        if not isinstance(identifier, str):
            raise PropertyAccessError(identifier, f"Qt property name must be a string, got {identifier!r}")
        return self.obj.property(identifier)

    def set(self, identifier: PropertyKey, value: Any) -> None:
        if not isinstance(identifier, str):
            raise PropertyAccessError(identifier, f"Qt property name must be a string, got {identifier!r}")
        # setProperty() returns False for dynamic properties, so the
        # result cannot be used to detect failure
        self.obj.setProperty(identifier, value)


def wrap_target(obj: Any) -> PropertyStore:
    """
    Return a PropertyStore for obj.

    Objects that already provide get()/set() are used as they are,
    then QObject, mapping/sequence and attribute access are tried in
    that order.
    """
    if obj is None:
        raise InvalidArgumentError("History target must not be None")
    if isinstance(obj, PropertyStore):
        return obj
    if isinstance(obj, QObject):
        return QObjectTarget(obj)
    if isinstance(obj, Mapping) or (
        isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, tuple))
    ):
        return ItemTarget(obj)
    return AttributeTarget(obj)

"""Cloning the items of collections, and turning fixed-size values into lists."""

from __future__ import annotations

import copy
import dataclasses
from typing import Any

__all__ = ["Cloned", "IntoArray", "clone_this", "cloned", "into_array"]


def _field_items(obj: Any) -> list[tuple[str, Any]]:
    """The named fields of ``obj``, in definition order."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return [(f.name, getattr(obj, f.name)) for f in dataclasses.fields(obj)]
    try:
        return list(vars(obj).items())
    except TypeError:
        raise TypeError(f"{type(obj).__name__} has no fields to work with") from None


class Cloned:
    """Mixin for values whose contents can be cloned item by item.

    The default ``cloned_`` makes a copy of the object in which every field
    has itself been cloned with :func:`cloned`.  Subclasses may override it.
    """

    def cloned_(self) -> Any:
        """A copy of this value with every field cloned."""
        duplicate = copy.copy(self)
        for name, value in _field_items(self):
            object.__setattr__(duplicate, name, cloned(value))
        return duplicate


class IntoArray:
    """Mixin for fixed-size values that can be turned into a list.

    The default ``into_array`` lists the object's fields in order.
    Subclasses may override it.
    """

    def into_array(self) -> list[Any]:
        """The fields of this value, as a list."""
        return [value for _, value in _field_items(self)]


def clone_this(value: Any) -> Any:
    """A shallow copy of ``value``; immutable values come back unchanged."""
    return copy.copy(value)


def cloned(value: Any) -> Any:
    """Clone a collection, cloning each of its items.

    Lists and tuples are rebuilt with every item cloned recursively,
    ``None`` stays ``None``, ``Cloned`` instances use their ``cloned_``
    method, and anything else is copied with :func:`clone_this`.
    If cloning any item raises, the exception propagates and no partial
    result is returned.
    """
    if value is None:
        return None
    if isinstance(value, Cloned):
        return value.cloned_()
    if type(value) is list:
        return [cloned(item) for item in value]
    if type(value) is tuple:
        return tuple(cloned(item) for item in value)
    if isinstance(value, tuple) and hasattr(type(value), "_make"):
        return type(value)._make(cloned(item) for item in value)
    return clone_this(value)


def into_array(value: Any) -> list[Any]:
    """Turn a list, tuple or ``IntoArray`` instance into a new list."""
    if isinstance(value, IntoArray):
        return value.into_array()
    if isinstance(value, (list, tuple)):
        return list(value)
    raise TypeError(f"cannot turn a {type(value).__name__} into an array")
"""Cloning the items of tuples and turning tuples into lists."""

from __future__ import annotations

from typing import Any

from .cloning import cloned

__all__ = ["cloned_tuple", "tuple_into_array"]

_MAX_ARITY = 12


def _check_tuple(value: Any, min_len: int) -> tuple:
    if not isinstance(value, tuple):
        raise TypeError(f"expected a tuple, got {type(value).__name__}")
    if not min_len <= len(value) <= _MAX_ARITY:
        raise TypeError(
            f"tuples of {min_len} to {_MAX_ARITY} items are supported, got {len(value)}"
        )
    return value


def cloned_tuple(value: tuple) -> tuple:
    """A tuple of at most 12 items with every item cloned."""
    return tuple(cloned(item) for item in _check_tuple(value, 0))


def tuple_into_array(value: tuple) -> list[Any]:
    """The items of a tuple of 1 to 12 items, as a list."""
    return list(_check_tuple(value, 1))
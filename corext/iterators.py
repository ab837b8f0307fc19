"""Iterator adaptors and constructors."""

from __future__ import annotations

import itertools
import operator
from functools import reduce
from typing import Any, Callable, Iterable, Iterator

__all__ = [
    "LazyOnce",
    "ReplaceNth",
    "IterConstructor",
    "IterCloner",
    "replace_nth",
    "extending",
    "collect_into",
    "sum_same",
    "product_same",
]

_MISSING = object()


class LazyOnce:
    """An iterator that yields the result of calling ``func`` exactly once.

    The function is not called until the first item is requested.
    """

    def __init__(self, func: Callable[[], Any]) -> None:
        self._func: Callable[[], Any] | None = func

    def __iter__(self) -> LazyOnce:
        return self

    def __next__(self) -> Any:
        func, self._func = self._func, None
        if func is None:
            raise StopIteration
        return func()

    def __length_hint__(self) -> int:
        return 1


class ReplaceNth:
    """An iterator that replaces its ``nth`` item (counting from 0) with ``with_``."""

    def __init__(self, iterable: Iterable[Any], nth: int, with_: Any) -> None:
        if nth < 0:
            raise ValueError("nth must not be negative")
        self._iter = iter(iterable)
        self._nth = nth
        self._current = 0
        self._with = with_
        self._replaced = False

    def __iter__(self) -> ReplaceNth:
        return self

    def _take_replacement(self) -> Any:
        self._replaced = True
        value, self._with = self._with, None
        return value

    def __next__(self) -> Any:
        item = next(self._iter)
        if self._replaced:
            return item
        if self._current == self._nth:
            return self._take_replacement()
        self._current += 1
        return item

    def nth(self, n: int) -> Any:
        """Skip ``n`` items and return the next one, or ``None`` when exhausted."""
        if n < 0:
            raise ValueError("n must not be negative")
        item = next(itertools.islice(self._iter, n, n + 1), _MISSING)
        if item is _MISSING:
            return None
        if self._replaced:
            return item
        self._current += n
        if self._current < self._nth:
            self._current += 1
            return item
        if self._current == self._nth:
            return self._take_replacement()
        self._replaced = True
        self._with = None
        return item

    def count(self) -> int:
        """Consume the iterator, returning how many items were left."""
        return sum(1 for _ in self._iter)


class IterConstructor:
    """An iterable that builds a fresh iterator from ``func`` each time it is iterated."""

    def __init__(self, func: Callable[[], Iterable[Any]]) -> None:
        self.func = func

    def __iter__(self) -> Iterator[Any]:
        return iter(self.func())


class IterCloner:
    """An iterable that hands out independent copies of an iterator.

    The wrapped iterator is never advanced by iterating over this object,
    so each iteration starts from the same position.
    """

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._source = iter(iterable)

    def __iter__(self) -> Iterator[Any]:
        self._source, copy = itertools.tee(self._source)
        return copy


def replace_nth(iterable: Iterable[Any], nth: int, with_: Any) -> ReplaceNth:
    """Iterate over ``iterable`` with its ``nth`` item replaced by ``with_``."""
    return ReplaceNth(iterable, nth, with_)


def extending(iterable: Iterable[Any], target: Any) -> None:
    """Add every item of ``iterable`` to the collection ``target``."""
    if hasattr(target, "extend"):
        target.extend(iterable)
    elif hasattr(target, "update"):
        target.update(iterable)
    else:
        raise TypeError(f"cannot extend a {type(target).__name__}")


def collect_into(iterable: Iterable[Any], target: Any) -> Any:
    """Add every item of ``iterable`` to ``target`` and return ``target``."""
    extending(iterable, target)
    return target


def sum_same(iterable: Iterable[Any]) -> Any:
    """Add the items together with ``+``; an empty iterable sums to 0."""
    it = iter(iterable)
    first = next(it, _MISSING)
    if first is _MISSING:
        return 0
    return reduce(operator.add, it, first)


def product_same(iterable: Iterable[Any]) -> Any:
    """Multiply the items together with ``*``; an empty iterable gives 1."""
    it = iter(iterable)
    first = next(it, _MISSING)
    if first is _MISSING:
        return 1
    return reduce(operator.mul, it, first)
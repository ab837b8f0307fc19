"""Default values that can be produced from a type description alone."""

from __future__ import annotations

import collections
import collections.abc
import datetime
import types
from typing import Annotated, Any, Callable, Union, get_args, get_origin

from .integers import Duration, IntType

__all__ = ["ConstDefault", "register_const_default", "const_default"]


class _DefaultDescriptor:
    """Class attribute that builds the default value on each access."""

    def __get__(self, obj: Any, owner: type) -> Any:
        return owner._make_default()


class ConstDefault:
    """Base for classes that have a default value.

    The default is given with the ``default`` class keyword, a callable
    returning the value.  For generic subclasses, a parameterised form such
    as ``Point[int]`` calls the factory with the type arguments::

        class Point(ConstDefault, Generic[T],
                    default=lambda t: Point(const_default(t), const_default(t))):
            ...

    ``Cls.DEFAULT`` gives the default of a non-generic subclass.  A subclass
    may also assign ``DEFAULT`` a plain value after its definition.
    """

    DEFAULT = _DefaultDescriptor()
    _default_factory: Callable[..., Any] | None = None

    def __init_subclass__(cls, *, default: Callable[..., Any] | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if default is not None:
            if not callable(default):
                raise TypeError("default must be callable")
            cls._default_factory = staticmethod(default)

    @classmethod
    def _make_default(cls, *type_args: Any) -> Any:
        factory = cls._default_factory
        if factory is None:
            raise TypeError(f"{cls.__name__} has no default value")
        return factory(*type_args)


_registry: dict[type, Callable[[], Any]] = {
    int: int,
    float: float,
    complex: complex,
    bool: bool,
    str: str,
    bytes: bytes,
    bytearray: bytearray,
    type(None): lambda: None,
    list: list,
    dict: dict,
    set: set,
    frozenset: frozenset,
    collections.deque: collections.deque,
    collections.abc.Iterator: lambda: iter(()),
    Duration: Duration,
    datetime.timedelta: datetime.timedelta,
}


def register_const_default(tp: type, factory: Callable[[], Any]) -> None:
    """Make ``const_default(tp)`` return ``factory()``."""
    if not isinstance(tp, type):
        raise TypeError(f"expected a type, got {tp!r}")
    if not callable(factory):
        raise TypeError("factory must be callable")
    _registry[tp] = factory


def _tuple_default(args: tuple) -> tuple:
    if args in ((), ((),)):
        return ()
    if len(args) == 2 and args[1] is Ellipsis:
        return ()
    return tuple(const_default(arg) for arg in args)


def _plain_default(tp: Any) -> Any:
    if not isinstance(tp, type):
        raise TypeError(f"no default value for {tp!r}")
    if issubclass(tp, ConstDefault):
        return tp.DEFAULT
    if tp is tuple:
        return ()
    try:
        factory = _registry[tp]
    except KeyError:
        raise TypeError(f"no default value for {tp.__name__}") from None
    return factory()


def const_default(tp: Any) -> Any:
    """The default value of the type described by ``tp``.

    ``tp`` may be a class, an ``IntType``, ``None``, an optional type
    (``X | None``), a tuple type (``tuple[int, str]``; ``tuple[int, ...]``
    is empty), a parameterised container or a parameterised
    ``ConstDefault`` subclass.
    """
    if tp is None:
        return None
    if isinstance(tp, IntType):
        return tp.zero
    origin = get_origin(tp)
    if origin is None:
        return _plain_default(tp)
    args = get_args(tp)
    if origin is Annotated:
        return const_default(args[0])
    if origin is Union or origin is types.UnionType:
        if type(None) in args:
            return None
        raise TypeError(f"no default value for the union {tp!r}")
    if origin is tuple:
        return _tuple_default(args)
    if isinstance(origin, type) and issubclass(origin, ConstDefault):
        return origin._make_default(*args)
    return _plain_default(origin)
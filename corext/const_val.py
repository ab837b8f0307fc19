"""Types that stand for constants, including constants with parameters."""

from __future__ import annotations

import types
from typing import Any

__all__ = ["ConstVal", "getconst"]

_MISSING = object()
_specialisations: dict[tuple[type, tuple], type] = {}


class ConstVal:
    """Base for classes that represent a constant.

    A subclass either sets the class attribute ``VAL`` or defines the
    classmethod ``compute``; positional parameters of ``compute`` are
    supplied by subscripting the class (``Cls[a, b]``), and defaults of
    ``compute`` serve as defaults of those parameters.
    """

    _args: tuple | None = None

    @classmethod
    def compute(cls) -> Any:
        raise TypeError(f"{cls.__name__} defines neither VAL nor compute")

    def __class_getitem__(cls, params: Any) -> type:
        if cls._args is not None:
            raise TypeError(f"{cls.__name__} already has its parameters")
        if not isinstance(params, tuple):
            params = (params,)
        arity = _arity(cls)
        if len(params) > arity:
            raise TypeError(
                f"{cls.__name__} takes at most {arity} parameters, got {len(params)}"
            )
        try:
            return _specialisations[(cls, params)]
        except KeyError:
            pass
        except TypeError:
            return cls._specialise(params)
        special = cls._specialise(params)
        _specialisations[(cls, params)] = special
        return special

    @classmethod
    def _specialise(cls, params: tuple) -> type:
        name = f"{cls.__name__}[{', '.join(_param_name(p) for p in params)}]"
        return type(name, (cls,), {"_args": params, "__module__": cls.__module__})

    def const_val(self) -> Any:
        """The constant this object's class represents."""
        return getconst(type(self))


def _arity(cls: type) -> int:
    """Number of positional parameters that ``cls.compute`` accepts."""
    compute = cls.compute
    if isinstance(compute, types.MethodType):
        return compute.__func__.__code__.co_argcount - 1
    return compute.__code__.co_argcount


def _param_name(param: Any) -> str:
    return param.__name__ if isinstance(param, type) else repr(param)


def getconst(cls: Any) -> Any:
    """Get the constant that a ``ConstVal`` class (or instance) represents."""
    if not isinstance(cls, type):
        cls = type(cls)
    if not issubclass(cls, ConstVal):
        raise TypeError(f"{cls.__name__} is not a ConstVal")
    value = getattr(cls, "VAL", _MISSING)
    if value is not _MISSING:
        return value
    return cls.compute(*(cls._args or ()))
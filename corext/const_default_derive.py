"""Deriving default values for dataclasses, class hierarchies and enums."""

from __future__ import annotations

import copy
import dataclasses
import enum
import types
from typing import Any, Callable, TypeVar, Union, get_args, get_origin

from .const_default import ConstDefault, const_default, register_const_default

__all__ = ["cdef", "derive_const_default"]

_CDEF_DEFAULT = "corext.cdef_default"

# Subclasses of classes whose default variant is named, keyed by name.
_variants: dict[type, dict[str, type]] = {}


def cdef(default: Any) -> Any:
    """A dataclass field whose derived default is ``default``.

    The value is copied each time a default is built, so mutable values
    are never shared between defaults.  The field stays a required
    constructor argument.
    """
    return dataclasses.field(metadata={_CDEF_DEFAULT: default})


class _DefaultAttribute:
    """Class attribute that builds the derived default on each access."""

    def __init__(self, factory: Callable[..., Any]) -> None:
        self._factory = factory

    def __get__(self, obj: Any, owner: type) -> Any:
        return self._factory()


def _substitute(hint: Any, mapping: dict[Any, Any]) -> Any:
    """Replace the type variables in ``hint`` with the types in ``mapping``."""
    if isinstance(hint, TypeVar):
        return mapping.get(hint, hint)
    params = getattr(hint, "__parameters__", ())
    if not params or not mapping:
        return hint
    origin = get_origin(hint)
    if origin is Union or origin is types.UnionType:
        return Union[tuple(_substitute(arg, mapping) for arg in get_args(hint))]
    return hint[tuple(mapping.get(param, param) for param in params)]


def _field_type(target: type, f: dataclasses.Field) -> Any:
    if isinstance(f.type, str):
        raise TypeError(
            f"field {f.name!r} of {target.__name__} has an unresolved annotation {f.type!r}"
        )
    return f.type


def _type_mapping(base: type, type_args: tuple) -> dict[Any, Any]:
    if not type_args:
        return {}
    params = tuple(getattr(base, "__parameters__", ()))
    if len(params) != len(type_args):
        raise TypeError(
            f"{base.__name__} takes {len(params)} type arguments, got {len(type_args)}"
        )
    return dict(zip(params, type_args))


def _build(target: type, base: type, type_args: tuple) -> Any:
    mapping = _type_mapping(base, type_args)
    kwargs = {}
    for f in dataclasses.fields(target):
        if not f.init:
            continue
        if _CDEF_DEFAULT in f.metadata:
            kwargs[f.name] = copy.deepcopy(f.metadata[_CDEF_DEFAULT])
        else:
            kwargs[f.name] = const_default(_substitute(_field_type(target, f), mapping))
    return target(**kwargs)


def _track_subclasses(base: type) -> None:
    """Record the subclasses of ``base`` by name as they are defined."""
    if base in _variants:
        return
    _variants[base] = {}
    original = vars(base).get("__init_subclass__")

    def hook(sub: type, **kwargs: Any) -> None:
        _variants[base].setdefault(sub.__name__, sub)
        if original is not None:
            original.__get__(None, sub)(**kwargs)
        else:
            super(base, sub).__init_subclass__(**kwargs)

    base.__init_subclass__ = classmethod(hook)


def _check_variant(base: type, target: type) -> type:
    if not issubclass(target, base):
        raise TypeError(f"{target.__name__} is not a variant of {base.__name__}")
    if not dataclasses.is_dataclass(target):
        raise TypeError(f"{target.__name__} must be a dataclass")
    return target


def _resolve_variant(base: type, variant: Any) -> type:
    if isinstance(variant, type):
        return _check_variant(base, variant)
    attribute = getattr(base, variant, None)
    if isinstance(attribute, type):
        return _check_variant(base, attribute)
    found = _variants.get(base, {}).get(variant)
    if found is None:
        raise ValueError(f"{base.__name__} has no variant named {variant!r}")
    return _check_variant(base, found)


def _enum_member(cls: type[enum.Enum], variant: Any) -> enum.Enum:
    if isinstance(variant, cls):
        return variant
    try:
        return cls.__members__[variant]
    except (KeyError, TypeError):
        raise ValueError(f"{cls.__name__} has no member {variant!r}") from None


def _install(cls: type, factory: Callable[..., Any]) -> None:
    if issubclass(cls, ConstDefault):
        cls._default_factory = staticmethod(factory)
    else:
        register_const_default(cls, factory)
        cls.DEFAULT = _DefaultAttribute(factory)


def derive_const_default(cls: type | None = None, *, variant: Any = None) -> Any:
    """Give ``cls`` a default value built from its fields.

    For a dataclass each field gets ``const_default`` of its annotated type,
    or the value given with :func:`cdef`.  For an ``Enum`` ``variant`` names
    the default member.  For any other class ``variant`` names (or is) the
    dataclass subclass whose default is used; a named variant must be
    defined after this decorator runs.  Generic ``ConstDefault`` subclasses
    take their type arguments from ``const_default(Cls[...])``.

    Place this decorator above ``@dataclass``.  Without ``cls`` it returns a
    decorator.
    """
    if cls is None:
        return lambda target: derive_const_default(target, variant=variant)
    if not isinstance(cls, type):
        raise TypeError(f"expected a class, got {cls!r}")

    if issubclass(cls, enum.Enum):
        if variant is None:
            raise TypeError(f"enum {cls.__name__} needs a default variant")
        member = _enum_member(cls, variant)

        def factory(*type_args: Any) -> Any:
            return member

    elif variant is None:
        if not dataclasses.is_dataclass(cls):
            raise TypeError(f"{cls.__name__} must be a dataclass")

        def factory(*type_args: Any) -> Any:
            return _build(cls, cls, type_args)

    else:
        if isinstance(variant, type):
            _check_variant(cls, variant)
        else:
            _track_subclasses(cls)

        def factory(*type_args: Any) -> Any:
            return _build(_resolve_variant(cls, variant), cls, type_args)

    _install(cls, factory)
    return cls
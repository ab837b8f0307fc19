"""Helpers for fixed-width integers, iterators, constants, default values and cloning."""

__version__ = "1.5.4"

__all__ = [
    "integers",
    "const_val",
    "iterators",
    "const_default",
    "const_default_derive",
    "cloning",
    "tuples",
]
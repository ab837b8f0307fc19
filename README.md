# corext

Small extension helpers for everyday Python values: fixed-width integer
arithmetic, iterator adaptors, classes that stand for constants, default
values derived from type descriptions, and cloning of nested collections.

The package has no dependencies outside the standard library. It is a
library only: it has no command-line interface.

## Modules

### `corext.integers`

- `IntType`: a fixed-width integer type with `min`, `max`, `zero`, `one`,
  `unsigned`, and the methods `check`, `from_u8`, `from_i8`,
  `abs_unsigned` and `power`. `check` and `power` raise `OverflowError`
  when a value does not fit. Ready-made types: `I8`, `U8`, `I16`, `U16`,
  `I32`, `U32`, `I64`, `U64`, `I128`, `U128`, `ISIZE`, `USIZE` (all in
  `INT_TYPES`).
- `Sign`: `POSITIVE` or `NEGATIVE`, with `sign_len()` and `sign_string()`.
- `get_sign(n)`, `safe_div(a, b)` (truncating division that returns `a`
  when `b` is 0) and `number_of_digits(n)` (a `-` sign counts as a digit).
- `Duration`: whole seconds plus nanoseconds, with `from_secs`,
  `from_millis` and `as_secs`.
- `hours`, `minutes`, `seconds`, `milliseconds`, `microseconds`,
  `nanoseconds`: a `Duration` of `|n|` units.

```python
from corext.integers import I8, hours, number_of_digits, safe_div

number_of_digits(-100)    # 4
safe_div(60, 0)           # 60
safe_div(-7, 2)           # -3
I8.from_u8(255)           # 127
I8.abs_unsigned(-128)     # 128
hours(2).as_secs()        # 7200
```

### `corext.const_val`

`ConstVal` is a base class for classes that stand for a constant. A
subclass sets `VAL`, or defines a classmethod `compute` whose positional
parameters are supplied by subscripting the class. `getconst` reads the
constant from a class or an instance; `const_val()` does the same from an
instance.

```python
from corext.const_val import ConstVal, getconst

class Foo(ConstVal):
    VAL = 3

class Scaled(ConstVal):
    @classmethod
    def compute(cls, base=Foo, factor=2):
        return getconst(base) * factor

getconst(Foo)               # 3
getconst(Scaled)            # 6
getconst(Scaled[Foo, 5])    # 15
```

### `corext.iterators`

- `LazyOnce(func)`: yields `func()` once, calling it only when asked.
- `ReplaceNth(iterable, nth, with_)` / `replace_nth(...)`: replaces the
  item at index `nth`; also has `nth(n)` and `count()`.
- `IterConstructor(func)`: builds a new iterator from `func` on each
  iteration.
- `IterCloner(iterable)`: each iteration starts from the same position.
- `extending(iterable, target)` and `collect_into(iterable, target)`: add
  items to a collection with `extend` or `update`.
- `sum_same(iterable)` and `product_same(iterable)`.

```python
from corext.iterators import replace_nth, sum_same, product_same

list(replace_nth(range(10), 5, 1337))
# [0, 1, 2, 3, 4, 1337, 6, 7, 8, 9]
sum_same([1, 2, 3, 4])       # 10
product_same([3, 4, 6])      # 72
```

### `corext.const_default`

`const_default(tp)` gives the default value of a type description: built-in
types, `IntType` values, `None`, optional types, tuple types, parameterised
containers, `Duration`, `datetime.timedelta`, and subclasses of
`ConstDefault`. `register_const_default(tp, factory)` adds more types.

```python
from corext.const_default import const_default
from corext.integers import U8

const_default(tuple[int, str])   # (0, '')
const_default(int | None)        # None
const_default(U8)                # 0
```

### `corext.const_default_derive`

`derive_const_default` gives a dataclass a `DEFAULT` built from its fields'
annotated types; `cdef(value)` sets a field's default explicitly. For an
`Enum` or a class hierarchy, `variant=` names the default member or
subclass. Field annotations must be real types, not strings, so do not use
`from __future__ import annotations` in the module that defines them.

```python
from dataclasses import dataclass
from corext.const_default_derive import cdef, derive_const_default

@derive_const_default
@dataclass
class Struc:
    bar: int = cdef(15)
    baz: int

Struc.DEFAULT    # Struc(bar=15, baz=0)
```

### `corext.cloning` and `corext.tuples`

`cloned(value)` rebuilds lists and tuples with every item cloned, and uses
`cloned_()` on `Cloned` instances. `clone_this` makes a shallow copy.
`into_array` turns a list, tuple or `IntoArray` instance into a list.
`cloned_tuple` and `tuple_into_array` do the same for tuples of up to 12
items.

```python
from corext.cloning import cloned, into_array
from corext.tuples import tuple_into_array

cloned([[1, 2], (3, [4])])    # [[1, 2], (3, [4])], with new inner lists
into_array((2, 3, 5))         # [2, 3, 5]
tuple_into_array((5, 8))      # [5, 8]
```

## Tests

The test suite uses pytest, available through the `test` extra.
"""Integer helpers: fixed-width integer types, signs, digit counts and durations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Sign",
    "IntType",
    "Duration",
    "I8",
    "U8",
    "I16",
    "U16",
    "I32",
    "U32",
    "I64",
    "U64",
    "I128",
    "U128",
    "ISIZE",
    "USIZE",
    "INT_TYPES",
    "get_sign",
    "safe_div",
    "number_of_digits",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
    "microseconds",
    "nanoseconds",
]

_U32_MAX = (1 << 32) - 1
_U64_MAX = (1 << 64) - 1
_NANOS_PER_SEC = 1_000_000_000


class Sign(Enum):
    """The signedness of an integer."""

    POSITIVE = 0
    NEGATIVE = 1

    def sign_len(self) -> int:
        """Length of the textual representation of this sign."""
        return self.value

    def sign_string(self) -> str:
        """Textual representation of this sign: empty or ``-``."""
        return "-" if self is Sign.NEGATIVE else ""

    def __str__(self) -> str:
        return self.sign_string()


def _require_int(value: object) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class IntType:
    """A fixed-width integer type, described by its width and signedness."""

    name: str
    bits: int
    signed: bool

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    @property
    def unsigned(self) -> IntType:
        """The unsigned type of the same width."""
        if not self.signed:
            return self
        return IntType("u" + self.name[1:], self.bits, False)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.min <= value <= self.max

    def check(self, value: int) -> int:
        """Return ``value`` if it is representable by this type, else raise."""
        _require_int(value)
        if not self.min <= value <= self.max:
            raise OverflowError(f"{value} is out of range for {self.name}")
        return value

    def from_u8(self, n: int) -> int:
        """Convert a ``u8`` to this type, saturating at 127 for ``i8``."""
        U8.check(n)
        return min(n, 127) if self.signed and self.bits == 8 else n

    def from_i8(self, n: int) -> int:
        """Convert an ``i8`` to this type, clamping negatives to 0 if unsigned."""
        I8.check(n)
        return n if self.signed else max(n, 0)

    def abs_unsigned(self, value: int) -> int:
        """Absolute value as the unsigned type; works for the minimum value too."""
        self.check(value)
        return abs(value)

    def power(self, value: int, n: int) -> int:
        """Raise ``value`` to the ``n``th power, raising on overflow."""
        self.check(value)
        _require_int(n)
        if not 0 <= n <= _U32_MAX:
            raise OverflowError(f"exponent {n} is out of range for u32")
        if abs(value) > 1 and n > self.bits:
            raise OverflowError(f"{value}**{n} overflows {self.name}")
        result = value**n
        if not self.min <= result <= self.max:
            raise OverflowError(f"{value}**{n} overflows {self.name}")
        return result


I8 = IntType("i8", 8, True)
U8 = IntType("u8", 8, False)
I16 = IntType("i16", 16, True)
U16 = IntType("u16", 16, False)
I32 = IntType("i32", 32, True)
U32 = IntType("u32", 32, False)
I64 = IntType("i64", 64, True)
U64 = IntType("u64", 64, False)
I128 = IntType("i128", 128, True)
U128 = IntType("u128", 128, False)
ISIZE = IntType("isize", 64, True)
USIZE = IntType("usize", 64, False)

INT_TYPES = (I8, U8, I16, U16, I32, U32, I64, U64, I128, U128, ISIZE, USIZE)


@dataclass(frozen=True, order=True)
class Duration:
    """A span of time: whole seconds plus nanoseconds below one second."""

    secs: int = 0
    nanos: int = 0

    def __post_init__(self) -> None:
        secs = _require_int(self.secs)
        nanos = _require_int(self.nanos)
        if secs < 0 or nanos < 0:
            raise ValueError("a duration cannot be negative")
        carry, nanos = divmod(nanos, _NANOS_PER_SEC)
        secs += carry
        if secs > _U64_MAX:
            raise OverflowError("overflow in Duration")
        object.__setattr__(self, "secs", secs)
        object.__setattr__(self, "nanos", nanos)

    @classmethod
    def from_secs(cls, secs: int) -> Duration:
        return cls(secs, 0)

    @classmethod
    def from_millis(cls, millis: int) -> Duration:
        _require_int(millis)
        whole, rest = divmod(millis, 1000)
        return cls(whole, rest * 1_000_000)

    def as_secs(self) -> int:
        return self.secs


def get_sign(n: int) -> Sign:
    """The sign of ``n``; zero counts as positive."""
    return Sign.NEGATIVE if _require_int(n) < 0 else Sign.POSITIVE


def safe_div(a: int, b: int) -> int:
    """Truncating division that returns ``a`` when ``b`` is zero."""
    _require_int(a)
    if _require_int(b) == 0:
        return a
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def number_of_digits(n: int) -> int:
    """Number of decimal digits of ``n``, counting a ``-`` sign as a digit."""
    return len(str(abs(_require_int(n)))) + get_sign(n).sign_len()


def _abs_u64(n: int) -> int:
    magnitude = abs(_require_int(n))
    if magnitude > _U64_MAX:
        raise OverflowError(f"{n} does not fit in u64")
    return magnitude


def hours(n: int) -> Duration:
    """A duration of ``|n|`` hours."""
    return Duration.from_secs(_abs_u64(n) * 3600)


def minutes(n: int) -> Duration:
    """A duration of ``|n|`` minutes."""
    return Duration.from_secs(_abs_u64(n) * 60)


def seconds(n: int) -> Duration:
    """A duration of ``|n|`` seconds."""
    return Duration.from_secs(_abs_u64(n))


def milliseconds(n: int) -> Duration:
    """A duration of ``|n|`` milliseconds."""
    return Duration.from_millis(_abs_u64(n))


def microseconds(n: int) -> Duration:
    """A duration of ``|n|`` microseconds."""
    number = _abs_u64(n)
    return Duration(number // 1_000_000, number % 1_000_000 * 1000)


def nanoseconds(n: int) -> Duration:
    """A duration of ``|n|`` nanoseconds."""
    number = _abs_u64(n)
    return Duration(number // _NANOS_PER_SEC, number % _NANOS_PER_SEC)
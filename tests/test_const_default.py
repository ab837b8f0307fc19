import collections
import datetime
from typing import Generic, Iterator, Optional, TypeVar

import pytest

from corext.const_default import ConstDefault, const_default, register_const_default
from corext.integers import I8, I128, INT_TYPES, U8, U16, U32, U128, Duration

T = TypeVar("T")


class NonCopy(ConstDefault, default=lambda: NonCopy()):
    def __eq__(self, other):
        return isinstance(other, NonCopy)

    def __hash__(self):
        return 0


class Point(ConstDefault, Generic[T], default=lambda t: Point(const_default(t), const_default(t))):
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __eq__(self, other):
        return isinstance(other, Point) and (self.x, self.y) == (other.x, other.y)


class NoDefault:
    pass


def test_arrays_of_integers():
    assert const_default(tuple[(U8,) * 6]) == (0,) * 6
    assert const_default(tuple[(U8,) * 16]) == (0,) * 16
    assert const_default(tuple[(U8,) * 32]) == (0,) * 32


def test_tuples():
    assert const_default(tuple[()]) == ()
    assert const_default(tuple[U8]) == (0,)
    assert const_default(tuple[U8, U16]) == (0, 0)
    assert const_default(tuple[U8, U16, U32]) == (0, 0, 0)


def test_scalars():
    assert const_default(U8) == 0
    assert const_default(float) == 0.0
    assert const_default(str) == ""
    assert const_default(bool) is False
    assert const_default(I128) == 0
    assert const_default(U128) == 0


@pytest.mark.parametrize("int_type", INT_TYPES)
def test_every_int_type_defaults_to_zero(int_type):
    assert const_default(int_type) == 0
    assert const_default(int_type) in int_type


def test_slices_are_empty():
    assert const_default(tuple[U8, ...]) == ()


def test_optional_is_none():
    assert const_default(Optional[NoDefault]) is None
    assert const_default(NoDefault | None) is None
    assert const_default(None) is None


def test_union_without_none_has_no_default():
    with pytest.raises(TypeError):
        const_default(int | str)


def test_empty_iterator():
    assert next(const_default(Iterator[U8]), "end") == "end"


def test_duration():
    assert const_default(Duration).as_secs() == 0
    assert const_default(datetime.timedelta) == datetime.timedelta(0)


def test_collections():
    assert const_default(list[U8]) == []
    assert const_default(list[NoDefault]) == []
    assert const_default(collections.deque) == collections.deque()
    assert const_default(dict[str, int]) == {}


def test_mutable_defaults_are_fresh():
    first = const_default(list)
    first.append(1)
    assert const_default(list) == []


def test_non_copy_values():
    assert const_default(tuple[NonCopy, NonCopy]) == (NonCopy(), NonCopy())
    assert const_default(tuple[NonCopy]) == (NonCopy(),)
    assert NonCopy.DEFAULT == NonCopy()


def test_generic_point():
    assert const_default(Point[U8]) == Point(0, 0)
    assert const_default(Point[float]) == Point(0.0, 0.0)
    assert const_default(Point[Optional[tuple]]) == Point(None, None)


def test_annotated_uses_inner_type():
    from typing import Annotated

    assert const_default(Annotated[str, "meta"]) == ""


def test_class_without_default_raises():
    class Bare(ConstDefault):
        pass

    with pytest.raises(TypeError):
        const_default(Bare)


def test_unknown_type_raises():
    with pytest.raises(TypeError):
        const_default(NoDefault)


def test_register_const_default():
    class Custom:
        def __init__(self, value):
            self.value = value

    register_const_default(Custom, lambda: Custom(I8.min))
    assert const_default(Custom).value == I8.min
    assert const_default(list[Custom]) == []


def test_register_rejects_non_callable():
    with pytest.raises(TypeError):
        register_const_default(NoDefault, 3)


def test_register_rejects_non_type():
    with pytest.raises(TypeError):
        register_const_default("int", int)


def test_non_callable_class_default_rejected():
    with pytest.raises(TypeError):
        class Broken(ConstDefault, default=5):
            pass

    class Fine(ConstDefault, default=lambda: 5):
        pass

    assert const_default(Fine) == 5


def test_assigned_default_value():
    class Fixed(ConstDefault):
        pass

    Fixed.DEFAULT = "fixed"
    assert const_default(Fixed) == "fixed"
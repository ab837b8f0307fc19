import pytest

from corext.const_val import ConstVal, getconst

SIZES = {"u8": 1, "u16": 2, "u32": 4, "u64": 8}


class Foo(ConstVal):
    VAL = 3


class Bar(ConstVal):
    @classmethod
    def compute(cls, t):
        return getconst(t) * 3 // 2


class One(ConstVal):
    VAL = 1


class Four(ConstVal):
    VAL = 4


class Seven(ConstVal):
    VAL = 7


class FibNums(ConstVal):
    @classmethod
    def compute(cls, t):
        ret = [getconst(t)] * 8
        for i in range(2, 8):
            ret[i] = ret[i - 1] + ret[i - 2]
        return tuple(ret)


class Func:
    @staticmethod
    def size(name):
        return SIZES[name]


class FirstBound(ConstVal):
    @classmethod
    def compute(cls, t):
        return t.size("u8")


class LastBound(ConstVal):
    @classmethod
    def compute(cls, t):
        return t.size("u16")


class ParenBound(ConstVal):
    @classmethod
    def compute(cls, t):
        return t.size("u32")


class NoBoundDef(ConstVal):
    @classmethod
    def compute(cls, t="u8"):
        return (t, SIZES[t])


class BoundDef(ConstVal):
    @classmethod
    def compute(cls, t="u8"):
        return (t, SIZES[t] * 2)


class BoundDefComma(ConstVal):
    @classmethod
    def compute(cls, t="u8"):
        return getconst(BoundDef[t])


class WithWhere(ConstVal):
    @classmethod
    def compute(cls, t):
        return t.size("u32")


class WithTrivialWhere(ConstVal):
    VAL = 100


class Lt(ConstVal):
    VAL = 1337


class LtComma(ConstVal):
    VAL = 8337


class WithDef(ConstVal):
    @classmethod
    def compute(cls, f=10):
        return f


class GensOrder(ConstVal):
    @classmethod
    def compute(cls, f, t):
        return (f, t)


def test_manual_impl():
    assert getconst(Foo) == 3
    assert getconst(Bar[Foo]) == 4
    assert getconst(Bar[Bar[Foo]]) == 6
    assert getconst(Bar[Bar[Bar[Foo]]]) == 9


def test_fibnums():
    assert getconst(FibNums[One]) == (1, 1, 2, 3, 5, 8, 13, 21)
    assert getconst(FibNums[Four]) == (4, 4, 8, 12, 20, 32, 52, 84)
    assert getconst(FibNums[Seven]) == (7, 7, 14, 21, 35, 56, 91, 147)


def test_plain_constants():
    assert [getconst(Lt), getconst(LtComma)] == [1337, 8337]
    assert getconst(WithTrivialWhere) == 100


def test_bounds():
    assert getconst(FirstBound[Func]) == 1
    assert getconst(LastBound[Func]) == 2
    assert getconst(ParenBound[Func]) == 4


def test_defaulted():
    assert getconst(NoBoundDef) == ("u8", 1)
    assert getconst(NoBoundDef["u16"]) == ("u16", 2)
    assert getconst(BoundDef) == ("u8", 2)
    assert getconst(BoundDef["u16"]) == ("u16", 4)
    assert getconst(BoundDefComma) == ("u8", 2)
    assert getconst(BoundDefComma["u16"]) == ("u16", 4)


def test_with_where_clause():
    assert getconst(WithWhere[Func]) == 4


def test_defaulted_const():
    assert getconst(WithDef) == 10
    assert getconst(WithDef[20]) == 20


def test_const_before_type_param():
    assert getconst(GensOrder[15, list]) == (15, list)


def test_const_val_method():
    assert Foo().const_val() == 3
    assert Bar[Bar[Foo]]().const_val() == 6
    assert getconst(Foo()) == 3


def test_specialisations_are_cached():
    assert Bar[Foo] is Bar[Foo]
    assert issubclass(Bar[Foo], Bar)
    assert getconst(Bar[Foo]) == 4


def test_too_many_parameters():
    with pytest.raises(TypeError):
        getconst(Bar[Foo, Foo])


def test_missing_parameter():
    with pytest.raises(TypeError):
        getconst(Bar)


def test_respecialising_fails():
    with pytest.raises(TypeError):
        getconst(Bar[Foo][Foo])


def test_not_a_const_val():
    with pytest.raises(TypeError):
        getconst(int)


def test_no_value_defined():
    class Empty(ConstVal):
        pass

    with pytest.raises(TypeError):
        getconst(Empty)
import math

from xf.num.range import Range
from xf.num.vec import i2


def test_can_check_if_contains():
    r = Range(2.5, 10.0)
    assert r.contains(1.0) is False
    assert r.contains(2.5)
    assert r.contains(5.0)
    assert r.contains(10.0)
    assert r.contains(10.01) is False
    assert r.contains(math.nan) is False
    assert r.contains(math.inf) is False
    assert r.contains(-math.inf) is False


def test_can_get_delta():
    start, end = 1, 24
    assert Range(start, end).delta() == end - start

    start, end = 1.34, 24.56
    assert Range(start, end).delta() == end - start


def test_can_get_abs():
    fwd = Range(5, 100)
    back = Range(100, 5)
    assert fwd == back.abs()
    assert fwd.abs() == back.abs()


def test_can_lerp():
    r = Range(5.0, 10.0)
    assert r.lerp(0.0) == 5.0
    assert r.lerp(0.5) == 7.5
    assert r.lerp(1.0) == 10.0
    assert r.lerp(1.5) == 12.5


def test_can_lerp_vectors():
    r = Range(i2(2, 4), i2(8, 10))
    assert r.lerp(-0.5) == i2(-1, 1)
    assert r.lerp(0.5) == i2(5, 7)
    assert r.lerp(1.5) == i2(11, 13)


def test_division_truncates_integers():
    assert Range(7, -7) / 2 == Range(3, -3)


def test_division_of_floats():
    assert Range(3.0, 5.0) / 2.0 == Range(1.5, 2.5)


def test_str():
    assert str(Range(1, 4)) == "[1, 4]"
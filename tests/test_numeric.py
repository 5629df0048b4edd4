import math

import pytest

from xf.num.numeric import (
    FLOAT_MIN,
    lerp,
    lerp_c,
    lerp_p,
    max_float,
    mod_,
    mod_p,
)
from xf.num.vec import i2


@pytest.mark.parametrize("a, b", [(3, 9), (9, 3), (-4, 6), (5, 5)])
def test_lerp_hits_endpoints(a, b):
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b


@pytest.mark.parametrize("f", [0.0, 0.1, 0.25, 0.5, 0.75, 0.9, 1.0])
def test_lerp_stays_between_endpoints(f):
    value = lerp(2, 20, f)
    assert 2 <= value <= 20
    value = lerp(20, 2, f)
    assert 2 <= value <= 20


def test_lerp_is_symmetric_at_midpoint():
    assert lerp(2, 11, 0.5) == lerp(11, 2, 0.5)


def test_lerp_truncates():
    assert lerp(0, 3, 0.5) == 1


def test_lerp_c_clamps_factor():
    assert lerp_c(3, 9, 2.0) == 9
    assert lerp_c(3, 9, -1.0) == 3
    assert lerp_c(3, 9, 0.5) == lerp(3, 9, 0.5)


def test_lerp_p_is_componentwise():
    a = i2(0, 40)
    b = i2(80, 0)
    result = lerp_p(a, b, 0.25)
    assert result == i2(lerp(0, 80, 0.25), lerp(40, 0, 0.25))


@pytest.mark.parametrize("x", range(0, 20))
@pytest.mark.parametrize("d", [1, 2, 3, 4, 7])
def test_mod_non_negative_in_range(x, d):
    result = mod_(x, d)
    assert 0 <= result < d
    assert (x - result) % d == 0


@pytest.mark.parametrize("k", [1, 2, 3])
def test_mod_wraps_small_negatives(k):
    assert mod_(-k, 4) == 4 - k


def test_mod_of_direction_indices():
    assert mod_(-3, 4) == 1
    assert mod_(8, 4) == 0


def test_mod_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        mod_(1, 0)


def test_mod_p_is_componentwise():
    p = i2(-1, 9)
    d = i2(4, 5)
    assert mod_p(p, d) == i2(mod_(-1, 4), mod_(9, 5))


def test_max_float_picks_largest():
    assert max_float([1.0, 3.5, 2.0]) == 3.5
    assert max_float([-7.0]) == -7.0


def test_max_float_empty_is_float_min():
    assert max_float([]) == FLOAT_MIN
    assert FLOAT_MIN == -3.4028234663852886e38


def test_max_float_ignores_nan():
    assert max_float([math.nan, 2.0, math.nan]) == 2.0
    assert max_float([math.nan]) == FLOAT_MIN
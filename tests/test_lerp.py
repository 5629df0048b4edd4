import pytest

from xf.num.lerp import lerp
from xf.num.vec import i2


def test_float_lerp_matches_range_cases():
    assert lerp(5.0, 10.0, 0.0) == 5.0
    assert lerp(5.0, 10.0, 0.5) == 7.5
    assert lerp(5.0, 10.0, 1.0) == 10.0
    assert lerp(5.0, 10.0, 1.5) == 12.5


def test_int_lerp_extrapolates_and_truncates():
    assert lerp(2, 8, -0.5) == -1
    assert lerp(4, 10, 1.5) == 13
    assert isinstance(lerp(2, 8, 0.3), int)


@pytest.mark.parametrize("a,b", [(0, 10), (-7, 3), (100, -100), (5, 5)])
def test_int_endpoints(a, b):
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b


@pytest.mark.parametrize("a,b", [(0.0, 1.0), (-2.5, 3.25), (10.0, -4.0)])
def test_float_endpoints(a, b):
    assert lerp(a, b, 0.0) == pytest.approx(a)
    assert lerp(a, b, 1.0) == pytest.approx(b)


def test_int_result_lies_between_endpoints():
    for step in range(11):
        value = lerp(3, 17, step / 10)
        assert 3 <= value <= 17


def test_delegates_to_vectors():
    assert lerp(i2(2, 4), i2(8, 10), 0.5) == i2(5, 7)


def test_unsupported_type_raises():
    with pytest.raises(TypeError):
        lerp("a", "b", 0.5)


def test_mismatched_types_raise():
    with pytest.raises(TypeError):
        lerp(i2(0, 0), 1.5, 0.5)
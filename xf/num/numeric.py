"""Integer interpolation, wrapping modulo and float helpers."""

from __future__ import annotations

from collections.abc import Iterable

from xf.num.vec import Vec2, i2

# Lowest finite single-precision float, the starting point of ``max_float``.
FLOAT_MIN = -3.4028234663852886e38


def _rem(a: int, b: int) -> int:
    """Integer remainder carrying the sign of the dividend."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return a - b * quotient


def lerp(a: int, b: int, f: float) -> int:
    """Interpolate between two integers, truncating the result toward zero.

    The interpolation always runs from the smaller to the larger value, so
    ``lerp(a, b, f)`` and ``lerp(b, a, 1 - f)`` agree.
    """
    if a <= b:
        x0, x1, frac = float(a), float(b), f
    else:
        x0, x1, frac = float(b), float(a), 1.0 - f
    return int(x0 + (x1 - x0) * frac)


def lerp_c(a: int, b: int, f: float) -> int:
    """Like ``lerp`` but with ``f`` clamped to ``[0, 1]``."""
    return lerp(a, b, min(max(f, 0.0), 1.0))


def lerp_p(a: Vec2, b: Vec2, f: float) -> Vec2:
    """Component-wise ``lerp`` of two integer vectors."""
    return i2(lerp(a.x, b.x, f), lerp(a.y, b.y, f))


def mod_(x: int, d: int) -> int:
    """Wrap ``x`` into ``[0, d)`` for values no further than ``d`` below zero."""
    if x >= 0:
        return _rem(x, d)
    return _rem(d + x, d)


def mod_p(p: Vec2, d: Vec2) -> Vec2:
    """Component-wise ``mod_``."""
    return i2(mod_(p.x, d.x), mod_(p.y, d.y))


def max_float(nums: Iterable[float]) -> float:
    """The largest of ``nums``; NaNs are ignored and an empty input gives ``FLOAT_MIN``."""
    best = FLOAT_MIN
    for num in nums:
        if num > best:
            best = num
    return best
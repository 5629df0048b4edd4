"""Inclusive ranges between two values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from xf.num.lerp import lerp as _lerp


def _div(a: Any, b: Any) -> Any:
    """Divide, truncating toward zero when both operands are integers."""
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    return a / b


@dataclass(frozen=True)
class Range:
    """A range spanning ``a`` to ``b``, both inclusive."""

    a: Any
    b: Any

    def contains(self, value: Any) -> bool:
        """Is ``a <= value <= b``?"""
        return self.a <= value and value <= self.b

    def abs(self) -> "Range":
        """The same range with its endpoints in ascending order."""
        if self.b < self.a:
            return Range(self.b, self.a)
        return self

    def delta(self) -> Any:
        """``b - a``."""
        return self.b - self.a

    def lerp(self, x: float) -> Any:
        """Interpolate from ``a`` (at 0) to ``b`` (at 1)."""
        return _lerp(self.a, self.b, x)

    def __truediv__(self, rhs: Any) -> "Range":
        return Range(_div(self.a, rhs), _div(self.b, rhs))

    def __str__(self) -> str:
        return f"[{self.a}, {self.b}]"
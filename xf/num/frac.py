"""Fixed-point fractions with a fixed denominator."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@total_ordering
@dataclass(frozen=True)
class Frac:
    """The fraction ``num / den``."""

    num: int
    den: int

    @classmethod
    def whole(cls, value: int, den: int) -> "Frac":
        """The whole number ``value``."""
        return cls(value * den, den)

    @classmethod
    def from_int(cls, i: int, den: int) -> "Frac":
        return cls(i * den, den)

    @classmethod
    def from_float(cls, f: float, den: int) -> "Frac":
        """The nearest fraction toward zero from ``f``."""
        return cls(int(f * den), den)

    def _check_den(self, other: "Frac") -> None:
        if self.den != other.den:
            raise ValueError(
                f"denominators differ: {self.den} and {other.den}"
            )

    def __float__(self) -> float:
        return self.num / self.den

    def __add__(self, rhs: "Frac") -> "Frac":
        if not isinstance(rhs, Frac):
            return NotImplemented
        self._check_den(rhs)
        return Frac(self.num + rhs.num, self.den)

    def __sub__(self, rhs: "Frac") -> "Frac":
        if not isinstance(rhs, Frac):
            return NotImplemented
        self._check_den(rhs)
        return Frac(self.num - rhs.num, self.den)

    def __mul__(self, rhs: "Frac") -> "Frac":
        """Multiply, keeping this fraction's denominator."""
        if not isinstance(rhs, Frac):
            return NotImplemented
        return Frac(_div(self.num * rhs.num, rhs.den), self.den)

    def __lt__(self, other: "Frac") -> bool:
        if not isinstance(other, Frac):
            return NotImplemented
        self._check_den(other)
        return self.num < other.num

    def __str__(self) -> str:
        return f"{self.num}/{self.den}"
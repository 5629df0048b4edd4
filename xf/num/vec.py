"""Two- and three-component vectors of ints or floats."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Union

from xf.num.lerp import lerp as _lerp

Number = Union[int, float]


def _div(a: Number, b: Number) -> Number:
    """Divide, truncating toward zero when both operands are integers."""
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    return a / b


def _rem(a: Number, b: Number) -> Number:
    """Remainder carrying the sign of the dividend."""
    if isinstance(a, int) and isinstance(b, int):
        return a - b * _div(a, b)
    return math.fmod(a, b)


@dataclass(frozen=True)
class Vec2:
    """A 2D vector."""

    x: Number
    y: Number

    ZERO: ClassVar["Vec2"]

    @classmethod
    def splat(cls, m: Number) -> "Vec2":
        """A vector with both components set to ``m``."""
        return cls(m, m)

    def extend(self, z: Number) -> "Vec3":
        return Vec3(self.x, self.y, z)

    def flip(self) -> "Vec2":
        return Vec2(self.y, self.x)

    def sum(self) -> Number:
        return self.x + self.y

    def product(self) -> Number:
        return self.x * self.y

    def as_ivec2(self) -> "Vec2":
        return Vec2(int(self.x), int(self.y))

    def as_fvec2(self) -> "Vec2":
        return Vec2(float(self.x), float(self.y))

    def as_ivec3(self) -> "Vec3":
        return Vec3(int(self.x), int(self.y), 0)

    def as_fvec3(self) -> "Vec3":
        return Vec3(float(self.x), float(self.y), 0.0)

    def abs(self) -> "Vec2":
        return Vec2(abs(self.x), abs(self.y))

    def min(self, other: "Vec2") -> "Vec2":
        """Component-wise minimum."""
        return Vec2(min(self.x, other.x), min(self.y, other.y))

    def max(self, other: "Vec2") -> "Vec2":
        """Component-wise maximum."""
        return Vec2(max(self.x, other.x), max(self.y, other.y))

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> "Vec2":
        mag = self.magnitude()
        return Vec2(self.x / mag, self.y / mag)

    @staticmethod
    def lerp(y0: "Vec2", y1: "Vec2", x: float) -> "Vec2":
        """Component-wise linear interpolation."""
        return Vec2(_lerp(y0.x, y1.x, x), _lerp(y0.y, y1.y, x))

    @staticmethod
    def wrap(idx: int, width: int) -> "Vec2":
        """Turn a row-major index into a position in rows of ``width``."""
        if idx < 0:
            raise ValueError("index must not be negative")
        if width < 0:
            raise ValueError("width must not be negative")
        return Vec2(idx % width, idx // width)

    @staticmethod
    def unwrap(pos: "Vec2", width: int) -> int:
        """Turn a position in rows of ``width`` into a row-major index."""
        if pos.x < 0 or pos.y < 0:
            raise ValueError("position must not be negative")
        if width < 0:
            raise ValueError("width must not be negative")
        return pos.y * width + pos.x

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __add__(self, rhs: "Vec2") -> "Vec2":
        if not isinstance(rhs, Vec2):
            return NotImplemented
        return Vec2(self.x + rhs.x, self.y + rhs.y)

    def __sub__(self, rhs: "Vec2") -> "Vec2":
        if not isinstance(rhs, Vec2):
            return NotImplemented
        return Vec2(self.x - rhs.x, self.y - rhs.y)

    def __mul__(self, rhs: Union["Vec2", Number]) -> "Vec2":
        if isinstance(rhs, Vec2):
            return Vec2(self.x * rhs.x, self.y * rhs.y)
        if isinstance(rhs, (int, float)):
            return Vec2(self.x * rhs, self.y * rhs)
        return NotImplemented

    def __rmul__(self, lhs: Number) -> "Vec2":
        if isinstance(lhs, (int, float)):
            return Vec2(lhs * self.x, lhs * self.y)
        return NotImplemented

    def __truediv__(self, rhs: Union["Vec2", Number]) -> "Vec2":
        if isinstance(rhs, Vec2):
            return Vec2(_div(self.x, rhs.x), _div(self.y, rhs.y))
        if isinstance(rhs, (int, float)):
            return Vec2(_div(self.x, rhs), _div(self.y, rhs))
        return NotImplemented

    def __mod__(self, rhs: Union["Vec2", Number]) -> "Vec2":
        if isinstance(rhs, Vec2):
            return Vec2(_rem(self.x, rhs.x), _rem(self.y, rhs.y))
        if isinstance(rhs, (int, float)):
            return Vec2(_rem(self.x, rhs), _rem(self.y, rhs))
        return NotImplemented


@dataclass(frozen=True)
class Vec3:
    """A 3D vector."""

    x: Number
    y: Number
    z: Number

    ZERO: ClassVar["Vec3"]

    @classmethod
    def splat(cls, m: Number) -> "Vec3":
        """A vector with all components set to ``m``."""
        return cls(m, m, m)

    def truncate(self) -> Vec2:
        return Vec2(self.x, self.y)

    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def sum(self) -> Number:
        return self.x + self.y + self.z

    def product(self) -> Number:
        return self.x * self.y * self.z

    def as_ivec3(self) -> "Vec3":
        return Vec3(int(self.x), int(self.y), int(self.z))

    def as_fvec3(self) -> "Vec3":
        return Vec3(float(self.x), float(self.y), float(self.z))

    def abs(self) -> "Vec3":
        return Vec3(abs(self.x), abs(self.y), abs(self.z))

    def max(self) -> Number:
        """The largest component."""
        return max(self.x, self.y, self.z)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> "Vec3":
        mag = self.magnitude()
        return Vec3(self.x / mag, self.y / mag, self.z / mag)

    @staticmethod
    def lerp(y0: "Vec3", y1: "Vec3", x: float) -> "Vec3":
        """Component-wise linear interpolation."""
        return Vec3(
            _lerp(y0.x, y1.x, x),
            _lerp(y0.y, y1.y, x),
            _lerp(y0.z, y1.z, x),
        )

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __add__(self, rhs: "Vec3") -> "Vec3":
        if not isinstance(rhs, Vec3):
            return NotImplemented
        return Vec3(self.x + rhs.x, self.y + rhs.y, self.z + rhs.z)

    def __sub__(self, rhs: "Vec3") -> "Vec3":
        if not isinstance(rhs, Vec3):
            return NotImplemented
        return Vec3(self.x - rhs.x, self.y - rhs.y, self.z - rhs.z)

    def __mul__(self, rhs: Union["Vec3", Number]) -> "Vec3":
        if isinstance(rhs, Vec3):
            return Vec3(self.x * rhs.x, self.y * rhs.y, self.z * rhs.z)
        if isinstance(rhs, (int, float)):
            return Vec3(self.x * rhs, self.y * rhs, self.z * rhs)
        return NotImplemented

    def __rmul__(self, lhs: Number) -> "Vec3":
        if isinstance(lhs, (int, float)):
            return Vec3(lhs * self.x, lhs * self.y, lhs * self.z)
        return NotImplemented

    def __truediv__(self, rhs: Union["Vec3", Number]) -> "Vec3":
        if isinstance(rhs, Vec3):
            return Vec3(_div(self.x, rhs.x), _div(self.y, rhs.y), _div(self.z, rhs.z))
        if isinstance(rhs, (int, float)):
            return Vec3(_div(self.x, rhs), _div(self.y, rhs), _div(self.z, rhs))
        return NotImplemented


Vec2.ZERO = Vec2(0, 0)
Vec3.ZERO = Vec3(0, 0, 0)


def i2(x: int, y: int) -> Vec2:
    """An integer 2D vector."""
    return Vec2(int(x), int(y))


def f2(x: float, y: float) -> Vec2:
    """A float 2D vector."""
    return Vec2(float(x), float(y))


def i3(x: int, y: int, z: int) -> Vec3:
    """An integer 3D vector."""
    return Vec3(int(x), int(y), int(z))


def f3(x: float, y: float, z: float) -> Vec3:
    """A float 3D vector."""
    return Vec3(float(x), float(y), float(z))
"""Cardinal directions, horizontal directions and rotation senses."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from xf.num.numeric import mod_
from xf.num.vec import Vec2, i2


class Spin(Enum):
    """A sense of rotation."""

    CCW = 0
    CW = 1

    def is_ccw(self) -> bool:
        return self is Spin.CCW

    def opposite(self) -> "Spin":
        return Spin.CW if self is Spin.CCW else Spin.CCW

    def as_dir4(self) -> "Dir4":
        """West for counter-clockwise, east for clockwise."""
        return Dir4.W if self is Spin.CCW else Dir4.E


class Dir4(Enum):
    """One of the four cardinal directions, numbered clockwise from north."""

    N = 0
    E = 1
    S = 2
    W = 3

    def unit(self) -> Vec2:
        """The unit step in this direction; y grows downwards."""
        return _UNITS[self]

    def opposite(self) -> "Dir4":
        return Dir4.from_int(self.value + 2)

    def rotate(self, spin: Spin) -> "Dir4":
        """The neighbouring direction in the given sense of rotation."""
        offset = -1 if spin is Spin.CCW else 1
        return Dir4.from_int(mod_(self.value + offset, 4))

    def is_vertical(self) -> bool:
        return self in (Dir4.N, Dir4.S)

    def is_horizontal(self) -> bool:
        return self in (Dir4.W, Dir4.E)

    def cw(self, turns: int) -> "Dir4":
        """The direction after ``turns`` quarter turns clockwise."""
        return Dir4.from_int(self.value + turns)

    @classmethod
    def from_int(cls, i: int) -> "Dir4":
        """The direction numbered ``i``, wrapped to four; unknown values give north."""
        wrapped = mod_(i, 4)
        for member in cls:
            if member.value == wrapped:
                return member
        return cls.N

    @classmethod
    def from_ivec2(cls, v: Vec2) -> Optional["Dir4"]:
        """The dominant direction of ``v``, or ``None`` for the zero vector."""
        return cls._dominant(v)

    @classmethod
    def from_fvec2(cls, v: Vec2) -> Optional["Dir4"]:
        """The dominant direction of ``v``, or ``None`` for the zero vector."""
        return cls._dominant(v)

    @classmethod
    def _dominant(cls, v: Vec2) -> Optional["Dir4"]:
        if v.x == 0 and v.y == 0:
            return None
        if abs(v.y) >= abs(v.x):
            return cls.N if v.y < 0 else cls.S
        return cls.W if v.x < 0 else cls.E

    @classmethod
    def parse(cls, s: str) -> "Dir4":
        """Parse one of ``n``, ``e``, ``s`` or ``w`` in either case."""
        try:
            return cls[s.upper()] if s.lower() in ("n", "e", "s", "w") else cls[""]
        except KeyError:
            raise ValueError(f"not a direction: {s!r}") from None

    def __add__(self, other: "Dir4") -> "Dir4":
        if not isinstance(other, Dir4):
            return NotImplemented
        return Dir4.from_int(self.value + other.value)

    def __str__(self) -> str:
        return self.name


_UNITS = {
    Dir4.N: i2(0, -1),
    Dir4.E: i2(1, 0),
    Dir4.S: i2(0, 1),
    Dir4.W: i2(-1, 0),
}


class DirH(Enum):
    """Left or right."""

    L = 0
    R = 1

    def to_dir4(self) -> Dir4:
        return Dir4.W if self is DirH.L else Dir4.E

    @classmethod
    def from_x(cls, x: int) -> "DirH":
        """Left for negative ``x``, right otherwise."""
        return cls.L if x < 0 else cls.R

    def unit(self) -> Vec2:
        return self.to_dir4().unit()

    def opposite(self) -> "DirH":
        return DirH.R if self is DirH.L else DirH.L

    def __str__(self) -> str:
        return self.name
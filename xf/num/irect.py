"""Integer rectangles with a top-left origin."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import ClassVar, Optional

import pygame

from xf.num.range import Range
from xf.num.vec import Vec2, i2


@dataclass(frozen=True)
class IRect:
    """A rectangle of integer position and size."""

    pos: Vec2
    size: Vec2

    ZERO: ClassVar["IRect"]

    @classmethod
    def of_size(cls, size: Vec2) -> "IRect":
        """A rectangle at ``(0, 0)`` with the given size."""
        return cls(Vec2.ZERO, size)

    @classmethod
    def centered_at(cls, center: Vec2, size: Vec2) -> "IRect":
        """A rectangle of the given size centred on ``center``."""
        half_size = size / i2(2, 2)
        return cls(center - half_size, size)

    @classmethod
    def around(cls, pt: Vec2, size: Vec2) -> "IRect":
        """A rectangle of the given size centred on ``pt``."""
        return cls(pt - size / 2, size)

    def x(self) -> int:
        return self.pos.x

    def y(self) -> int:
        return self.pos.y

    def w(self) -> int:
        return self.size.x

    def h(self) -> int:
        return self.size.y

    def top(self) -> int:
        """The top row's y position."""
        return self.y()

    def bottom(self) -> int:
        """The bottom row's y position."""
        return self.y() + self.h() - 1

    def left(self) -> int:
        """The left column's x position."""
        return self.x()

    def right(self) -> int:
        """The right column's x position."""
        return self.x() + self.w() - 1

    def center(self) -> Vec2:
        return self.pos + self.size / 2

    def x_range(self) -> Range:
        """The range from the left to the right column."""
        return Range(self.left(), self.right())

    def y_range(self) -> Range:
        """The range from the top to the bottom row."""
        return Range(self.top(), self.bottom())

    def as_rect(self) -> pygame.Rect:
        """The equivalent drawing rectangle."""
        return pygame.Rect(self.x(), self.y(), self.w(), self.h())

    def corrected(self) -> "IRect":
        """The same area described with a non-negative size."""
        return IRect(self.pos.min(self.pos + self.size), self.size.abs())

    def contains(self, pt: Vec2) -> bool:
        """Is ``pt`` inside the rectangle or on its edge?"""
        return (
            self.left() <= pt.x <= self.right()
            and self.top() <= pt.y <= self.bottom()
        )

    def overlaps(self, other: "IRect") -> bool:
        return (
            self.left() <= other.right()
            and self.right() >= other.left()
            and self.top() <= other.bottom()
            and self.bottom() >= other.top()
        )

    def intersection(self, other: "IRect") -> Optional["IRect"]:
        """The overlapping area, or ``None`` if the rectangles do not overlap."""
        left = max(self.left(), other.left())
        top = max(self.top(), other.top())
        right = min(self.right(), other.right())
        bottom = min(self.bottom(), other.bottom())
        if right < left or bottom < top:
            return None
        return rect(left, top, right + 1 - left, bottom + 1 - top)

    def contains_rect(self, other: "IRect") -> bool:
        """Does this rectangle completely contain ``other``?"""
        return (
            self.left() <= other.left()
            and self.right() >= other.right()
            and self.top() <= other.top()
            and self.bottom() >= other.bottom()
        )

    def union(self, other: "IRect") -> "IRect":
        """The smallest rectangle covering both."""
        left = min(self.left(), other.left())
        top = min(self.top(), other.top())
        right = max(self.right(), other.right())
        bottom = max(self.bottom(), other.bottom())
        return rect(left, top, right + 1 - left, bottom + 1 - top)

    def expand(self, x: int) -> "IRect":
        """Grow by ``x`` on every side; the size never drops below zero."""
        grown = self.size + i2(2 * x, 2 * x)
        return IRect(self.pos - i2(x, x), i2(max(grown.x, 0), max(grown.y, 0)))

    def corners(self) -> tuple[Vec2, Vec2, Vec2, Vec2]:
        """Top-left, top-right, bottom-left and bottom-right corners."""
        return (
            i2(self.left(), self.top()),
            i2(self.right(), self.top()),
            i2(self.left(), self.bottom()),
            i2(self.right(), self.bottom()),
        )

    def offset_by(self, offset: Vec2) -> "IRect":
        return IRect(self.pos + offset, self.size)

    def keep_inside(self, other: "IRect") -> "IRect":
        """Move this rectangle inside ``other``, or centre it there if it is too big."""
        if self.w() > other.w() or self.h() > other.h():
            return IRect.centered_at(other.center(), self.size)

        x = self.pos.x
        if self.left() < other.left():
            x = other.left()
        elif self.right() > other.right():
            x = other.right() - self.w() + 1

        y = self.pos.y
        if self.top() < other.top():
            y = other.top()
        elif self.bottom() > other.bottom():
            y = other.bottom() - self.h() + 1

        return replace(self, pos=i2(x, y))

    def __iter__(self) -> Iterator[Vec2]:
        """Every point inside the rectangle, row by row."""
        for y in range(self.top(), self.bottom() + 1):
            for x in range(self.left(), self.right() + 1):
                yield i2(x, y)

    def __truediv__(self, rhs: Vec2) -> "IRect":
        return IRect(self.pos / rhs, self.size / rhs)


def ir(pos: Vec2, size: Vec2) -> IRect:
    """A rectangle from position and size."""
    return IRect(pos, size)


def rect(x: int, y: int, w: int, h: int) -> IRect:
    """A rectangle from position and size components."""
    return IRect(i2(x, y), i2(w, h))


IRect.ZERO = rect(0, 0, 0, 0)
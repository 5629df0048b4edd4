"""A flat list viewed as a grid of fixed width."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, Optional, TypeVar

from xf.num.irect import IRect
from xf.num.vec import Vec2, i2

T = TypeVar("T")


class Arr2D(Generic[T]):
    """Grid cells stored row by row in ``data``; the last row may be partial."""

    def __init__(self, data: list[T], width: int) -> None:
        if width <= 0:
            raise ValueError("width must be positive")
        self.data = data
        self.width = width

    @classmethod
    def filled(cls, value: T, size: Vec2) -> "Arr2D[T]":
        """A grid of ``size`` with every cell set to ``value``."""
        return cls([value] * (size.x * size.y), size.x)

    @classmethod
    def optional(cls, size: Vec2) -> "Arr2D[Optional[Any]]":
        """A grid of ``size`` with every cell empty (``None``)."""
        return cls([None] * (size.x * size.y), size.x)

    def _has(self, pos: Vec2) -> bool:
        return self.bounds().contains(pos) and self.to_idx(pos) < len(self.data)

    def get(self, pos: Vec2) -> Optional[T]:
        """The value at ``pos``, or ``None`` if there is no such cell."""
        if not self._has(pos):
            return None
        return self.data[self.to_idx(pos)]

    def get_i(self, idx: int) -> Optional[T]:
        """The value at flat index ``idx``, or ``None`` if out of range."""
        if 0 <= idx < len(self.data):
            return self.data[idx]
        return None

    def set(self, pos: Vec2, value: T) -> bool:
        """Store ``value`` at ``pos``; returns whether the cell exists."""
        if not self._has(pos):
            return False
        self.data[self.to_idx(pos)] = value
        return True

    def set_i(self, idx: int, value: T) -> bool:
        """Store ``value`` at flat index ``idx``; returns whether it exists."""
        if 0 <= idx < len(self.data):
            self.data[idx] = value
            return True
        return False

    def size(self) -> Vec2:
        """Width and number of rows (at least one)."""
        last_idx = max(self.count(), 1) - 1
        return i2(self.width, self.to_pos(last_idx).y + 1)

    def count(self) -> int:
        return len(self.data)

    def bounds(self) -> IRect:
        return IRect.of_size(self.size())

    def swap(self, pos_1: Vec2, pos_2: Vec2) -> None:
        """Exchange the values of two cells."""
        idx_1 = self.to_idx(pos_1)
        idx_2 = self.to_idx(pos_2)
        for idx in (idx_1, idx_2):
            if not 0 <= idx < len(self.data):
                raise IndexError(f"index {idx} out of range")
        self.data[idx_1], self.data[idx_2] = self.data[idx_2], self.data[idx_1]

    def to_pos(self, idx: int) -> Vec2:
        return i2(idx % self.width, idx // self.width)

    def to_idx(self, pos: Vec2) -> int:
        return pos.y * self.width + pos.x

    def __iter__(self) -> Iterator[tuple[Vec2, T]]:
        """Every cell as ``(position, value)``, row by row."""
        for idx, value in enumerate(self.data):
            yield self.to_pos(idx), value

    def copy(self) -> "Arr2D[T]":
        return Arr2D(list(self.data), self.width)

    def copy_area(self, area: IRect) -> "Arr2D[T]":
        """A new grid holding the part of this one that ``area`` covers."""
        overlap = self.bounds().intersection(area)
        if overlap is None:
            raise ValueError("area does not overlap the grid")
        values = [self.get(overlap.pos + p) for p in IRect.of_size(overlap.size)]
        return Arr2D(values, overlap.size.x)

    def copy_from(self, other: "Arr2D[T]", src: IRect, dst_pos: Vec2) -> None:
        """Copy the cells of ``other`` inside ``src`` to start at ``dst_pos``."""
        for src_pos in src:
            if other._has(src_pos):
                self.set(dst_pos + (src_pos - src.pos), other.data[other.to_idx(src_pos)])

    def set_area(self, origin: Vec2, other: "Arr2D[T]") -> None:
        """Write all of ``other`` into this grid with its corner at ``origin``."""
        for pos, value in other:
            self.set(pos + origin, value)
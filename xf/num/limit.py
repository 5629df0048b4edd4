"""A value kept between a lower and an upper bound."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Limit:
    """A value with a minimum and a maximum."""

    min: Any
    max: Any
    value: Any

    @classmethod
    def new_min(cls, min: Any, max: Any) -> "Limit":
        """A limit starting at its minimum."""
        return cls(min, max, min)

    @classmethod
    def new_max(cls, min: Any, max: Any) -> "Limit":
        """A limit starting at its maximum."""
        return cls(min, max, max)

    def set_min(self) -> None:
        self.value = self.min

    def set_max(self) -> None:
        self.value = self.max

    def is_at_min(self) -> bool:
        return self.value == self.min

    def is_at_max(self) -> bool:
        return self.value == self.max

    def set(self, value: Any) -> None:
        """Set the value, clamped to the bounds."""
        self.value = max(min(value, self.max), self.min)

    def __iadd__(self, rhs: Any) -> "Limit":
        following = self.value + rhs
        self.value = self.max if self.max < following else following
        return self

    def __isub__(self, rhs: Any) -> "Limit":
        following = self.value - rhs
        self.value = self.min if self.min > following else following
        return self

    def __eq__(self, other: object) -> bool:
        """Compare the current value with ``other``."""
        return self.value == other

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self.value)
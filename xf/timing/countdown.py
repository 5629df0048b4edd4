"""A step counter that runs down to zero."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Countdown:
    """Counts ``remaining`` steps down to zero, never below."""

    remaining: int

    def __post_init__(self) -> None:
        if self.remaining < 0:
            raise ValueError("duration must not be negative")

    def decrement(self) -> None:
        if self.remaining > 0:
            self.remaining -= 1

    def is_done(self) -> bool:
        return self.remaining == 0
"""A timer driven by the frame clock."""

from __future__ import annotations

from dataclasses import dataclass

from xf.timing.clock import delta_s


@dataclass
class Timer:
    """Completes once ``duration_s`` seconds of frame time have elapsed."""

    duration_s: float
    elapsed_s: float = 0.0

    @classmethod
    def new_done(cls, duration_s: float) -> "Timer":
        """A timer that has already completed."""
        return cls(duration_s, duration_s)

    def reset(self) -> None:
        self.elapsed_s = 0.0

    def update(self) -> None:
        """Advance by the previous frame's duration."""
        self.elapsed_s += delta_s()

    def update_and_check(self) -> bool:
        """Advance, and if that completes the timer, restart it and return ``True``."""
        self.update()
        if self.is_done():
            self.reset()
            return True
        return False

    def is_done(self) -> bool:
        return self.elapsed_s >= self.duration_s

    def completion(self) -> float:
        """Elapsed time as a fraction of the duration."""
        return self.elapsed_s / self.duration_s
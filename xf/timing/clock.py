"""Process-wide frame clock."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

# The largest frame time taken from a measured duration.
MAX_DELTA_S = 1.0 / 30.0


@dataclass
class _ClockState:
    curr_time_s: float = 0.0
    delta_s: float = 0.0
    frame_num: int = 0

    def advance(self, secs: float) -> None:
        self.delta_s = secs
        self.curr_time_s += secs
        self.frame_num += 1


_state = _ClockState()


def curr_time_s() -> float:
    """Seconds of frame time accumulated since start."""
    return _state.curr_time_s


def delta_s() -> float:
    """Seconds elapsed during the previous frame."""
    return _state.delta_s


def frame_num() -> int:
    """Number of frames counted since start."""
    return _state.frame_num


def update_global_time(delta: timedelta) -> None:
    """Advance one frame by a measured duration, capped at ``MAX_DELTA_S``."""
    _state.advance(min(delta.total_seconds(), MAX_DELTA_S))


def update_global_time_seconds(secs: float) -> None:
    """Advance one frame by exactly ``secs`` seconds."""
    _state.advance(secs)
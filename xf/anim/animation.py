"""Frame sequences taken from a sprite atlas."""

from __future__ import annotations

import math
from dataclasses import dataclass

from xf.num.vec import Vec2

_MAX_INDEX = 2**64 - 1


@dataclass(frozen=True)
class Animation:
    """Atlas tiles shown one after another, each for ``frame_dur_s`` seconds."""

    tiles: list[Vec2]
    size_in_tiles: Vec2
    draw_offset: Vec2
    frame_dur_s: float
    loops: bool

    def at(self, time_s: float) -> Vec2:
        """The atlas tile to show ``time_s`` seconds in."""
        return self.tiles[self.idx(time_s)]

    def idx(self, time_s: float) -> int:
        """The frame number to show ``time_s`` seconds in."""
        if not self.tiles:
            raise ValueError("animation has no tiles")
        frames = time_s / self.frame_dur_s
        if math.isnan(frames) or frames <= 0:
            idx = 0
        elif math.isinf(frames):
            idx = _MAX_INDEX
        else:
            idx = min(int(frames), _MAX_INDEX)
        if self.loops:
            return idx % len(self.tiles)
        return min(idx, len(self.tiles) - 1)

    def total_dur_s(self) -> float:
        """The time needed to show every frame once."""
        return len(self.tiles) * self.frame_dur_s
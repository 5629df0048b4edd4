"""Animations looked up by key, and builders for common atlas layouts."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Generic, Optional, TypeVar

from xf.anim.animation import Animation
from xf.data.direction import Dir4, DirH
from xf.num.vec import Vec2, i2

K = TypeVar("K", bound=Hashable)


class AnimationMap(Generic[K]):
    """A mapping from animation key to ``Animation``."""

    def __init__(self, anims: Optional[dict[K, Animation]] = None) -> None:
        self.anims: dict[K, Animation] = dict(anims or {})

    @classmethod
    def combine(cls, others: Iterable["AnimationMap[K]"]) -> "AnimationMap[K]":
        """Merge several maps; later maps win on shared keys."""
        merged = cls()
        for other in others:
            merged.anims.update(other.anims)
        return merged

    def get(self, key: K) -> Optional[Animation]:
        return self.anims.get(key)


def seq(
    key: K,
    tiles: list[Vec2],
    size_in_tiles: Vec2,
    draw_offset: Vec2,
    frame_dur_s: float,
    loops: bool,
) -> AnimationMap[K]:
    """A single animation made of the given tiles."""
    anim = Animation(list(tiles), size_in_tiles, draw_offset, frame_dur_s, loops)
    return AnimationMap({key: anim})


def row(
    key: K,
    org: Vec2,
    length: int,
    size_in_tiles: Vec2,
    draw_offset: Vec2,
    frame_dur_s: float,
    loops: bool,
) -> AnimationMap[K]:
    """A single animation of ``length`` frames laid side by side from ``org``."""
    tiles = [i2(org.x + i * size_in_tiles.x, org.y) for i in range(length)]
    return seq(key, tiles, size_in_tiles, draw_offset, frame_dur_s, loops)


def _rows(
    keys: Iterable[K],
    org: Vec2,
    length: int,
    size_in_tiles: Vec2,
    draw_offset: Vec2,
    frame_dur_s: float,
    loops: bool,
) -> AnimationMap[K]:
    return AnimationMap.combine(
        row(
            key,
            org + i2(0, offset * size_in_tiles.y),
            length,
            size_in_tiles,
            draw_offset,
            frame_dur_s,
            loops,
        )
        for offset, key in enumerate(keys)
    )


def row_h(
    key_selector: Callable[[DirH], K],
    org: Vec2,
    length: int,
    size_in_tiles: Vec2,
    draw_offset: Vec2,
    frame_dur_s: float,
    loops: bool,
) -> AnimationMap[K]:
    """Two stacked rows: facing left, then facing right."""
    keys = [key_selector(DirH.L), key_selector(DirH.R)]
    return _rows(keys, org, length, size_in_tiles, draw_offset, frame_dur_s, loops)


def row_4(
    key_selector: Callable[[Dir4], K],
    org: Vec2,
    length: int,
    size_in_tiles: Vec2,
    draw_offset: Vec2,
    frame_dur_s: float,
    loops: bool,
) -> AnimationMap[K]:
    """Four stacked rows: facing north, east, south, then west."""
    keys = [key_selector(d) for d in (Dir4.N, Dir4.E, Dir4.S, Dir4.W)]
    return _rows(keys, org, length, size_in_tiles, draw_offset, frame_dur_s, loops)
"""Playback state of an animated sprite."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Generic, TypeVar

from xf.anim.animation import Animation
from xf.anim.animation_map import AnimationMap
from xf.mq.draw import draw_texture
from xf.mq.texture import Texture
from xf.num.irect import IRect, ir
from xf.num.vec import Vec2
from xf.timing.clock import delta_s

K = TypeVar("K", bound=Hashable)


class Animator(Generic[K]):
    """Which animation a sprite is playing, and how far into it."""

    def __init__(
        self,
        start_key: K,
        tile_size: Vec2,
        animations: AnimationMap[K],
        texture: Texture,
    ) -> None:
        self.curr_key = start_key
        self.curr_time_s = 0.0
        self.default_key = start_key
        self.tile_size = tile_size
        self.animations = animations
        self.texture = texture

    def curr_animation(self) -> Animation:
        """The current animation, or the start animation if the key has none."""
        anim = self.animations.get(self.curr_key)
        if anim is not None:
            return anim
        default = self.animations.get(self.default_key)
        if default is None:
            raise KeyError(self.default_key)
        return default

    def is_done(self) -> bool:
        """Has a non-looping current animation run past its end?"""
        anim = self.animations.get(self.curr_key)
        if anim is None:
            return False
        return not anim.loops and anim.total_dur_s() < self.curr_time_s

    def set_key(self, key: K) -> None:
        """Switch animation and restart from its first frame."""
        self.curr_key = key
        self.curr_time_s = 0.0

    def update(self) -> None:
        """Advance by the previous frame's duration."""
        self.curr_time_s += delta_s()

    def curr_draw_offset(self) -> Vec2:
        """Pixel offset to draw the current frame at."""
        anim = self.animations.get(self.curr_key)
        if anim is None:
            return Vec2.ZERO
        return anim.draw_offset * self.tile_size

    def curr_src_tile(self) -> IRect:
        """Pixel area of the current frame within the texture."""
        anim = self.animations.get(self.curr_key)
        if anim is None:
            return IRect.ZERO
        size = anim.size_in_tiles * self.tile_size
        return ir(anim.at(self.curr_time_s) * self.tile_size, size)

    def draw(self, pos: Vec2) -> None:
        """Draw the current frame at ``pos`` on the current target."""
        draw_texture(self.texture, self.curr_src_tile(), pos + self.curr_draw_offset())

    def draw_info(self) -> tuple[Texture, IRect]:
        """The texture and the area of it to draw."""
        return self.texture, self.curr_src_tile()

    def copy(self) -> "Animator[K]":
        """An independent animator sharing the same animations and texture."""
        twin = Animator(self.default_key, self.tile_size, self.animations, self.texture)
        twin.curr_key = self.curr_key
        twin.curr_time_s = self.curr_time_s
        return twin
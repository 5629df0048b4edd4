"""Images shared between the things that draw them."""

from __future__ import annotations

import io
from dataclasses import dataclass

import pygame

from xf.num.vec import Vec2, i2


@dataclass(frozen=True, eq=False)
class Texture:
    """A drawable image; copies of a texture share the same pixels."""

    surface: pygame.Surface

    @classmethod
    def from_bytes(cls, data: bytes) -> "Texture":
        """Decode an encoded image file held in memory."""
        try:
            surface = pygame.image.load(io.BytesIO(data))
        except (pygame.error, ValueError) as exc:
            raise ValueError(f"cannot decode image: {exc}") from exc
        return cls(surface)

    def size(self) -> Vec2:
        """Width and height in pixels."""
        width, height = self.surface.get_size()
        return i2(width, height)
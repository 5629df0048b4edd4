"""Drawing onto the current target surface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pygame

from xf.mq.texture import Texture
from xf.num.irect import IRect
from xf.num.vec import Vec2


@dataclass
class _DrawState:
    target: Optional[pygame.Surface] = None


_state = _DrawState()


def set_target(surface: Optional[pygame.Surface]) -> None:
    """Make ``surface`` the destination of subsequent drawing."""
    _state.target = surface


def current_target() -> Optional[pygame.Surface]:
    """The surface drawing currently goes to, if any."""
    return _state.target


def _require_target() -> pygame.Surface:
    if _state.target is None:
        raise RuntimeError("no draw target set")
    return _state.target


def draw_rect(rect: IRect, color) -> None:
    """Fill ``rect`` with ``color``."""
    pygame.draw.rect(_require_target(), color, rect.as_rect())


def draw_ellipse(center: Vec2, size: Vec2, color) -> None:
    """Fill an ellipse around ``center`` with radii ``size``."""
    bounds = pygame.Rect(
        int(center.x - size.x),
        int(center.y - size.y),
        int(2 * size.x),
        int(2 * size.y),
    )
    pygame.draw.ellipse(_require_target(), color, bounds)


def draw_texture(texture: Texture, src: Optional[IRect], dst: Vec2) -> None:
    """Copy ``texture`` (or its ``src`` part) with its top-left at ``dst``."""
    area = src.as_rect() if src is not None else None
    _require_target().blit(texture.surface, (int(dst.x), int(dst.y)), area)
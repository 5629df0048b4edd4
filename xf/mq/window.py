"""The application window and its low-resolution canvas."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar

import pygame

from xf.mq.draw import set_target
from xf.num.irect import IRect, ir
from xf.num.vec import Vec2


@dataclass(frozen=True)
class WindowParams:
    """Canvas resolution and the factor it is scaled by on screen."""

    resolution: Vec2
    scale: float


class Window:
    """The single window; frames are drawn to a canvas and scaled up."""

    _exists: ClassVar[bool] = False

    def __init__(self, params: WindowParams) -> None:
        if Window._exists:
            raise RuntimeError("Only one window should ever be created.")
        Window._exists = True

        self.params = params
        if not pygame.display.get_init():
            pygame.display.init()
        self._screen_size = (
            int(params.resolution.x * params.scale),
            int(params.resolution.y * params.scale),
        )
        self.screen = pygame.display.set_mode(self._screen_size)
        self.canvas = pygame.Surface(
            (int(params.resolution.x), int(params.resolution.y))
        )

    def bounds(self) -> IRect:
        """The canvas area."""
        return ir(Vec2.ZERO, self.params.resolution)

    def render_pass(self, render_action: Callable[[], None]) -> None:
        """Run ``render_action`` against the canvas, then show it scaled on screen."""
        set_target(self.canvas)
        try:
            render_action()
        finally:
            set_target(self.screen)
            scaled = pygame.transform.scale(self.canvas, self._screen_size)
            self.screen.blit(scaled, (0, 0))
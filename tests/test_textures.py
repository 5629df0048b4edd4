import io

import pygame
import pytest

from xf.mq.textures import Textures


def _bmp(width):
    surface = pygame.Surface((width, 1))
    buffer = io.BytesIO()
    pygame.image.save(surface, buffer, "image.bmp")
    return buffer.getvalue()


class _Loader:
    def __init__(self):
        self.calls = []

    def __call__(self, key):
        self.calls.append(key)
        return _bmp(key)


def test_loads_once_per_key():
    loader = _Loader()
    textures = Textures()
    first = textures.get_or_load(2, loader)
    second = textures.get_or_load(2, loader)
    assert first is second
    assert loader.calls == [2]


def test_distinct_keys_give_distinct_textures():
    loader = _Loader()
    textures = Textures()
    a = textures.get_or_load(2, loader)
    b = textures.get_or_load(3, loader)
    assert a.size().x == 2
    assert b.size().x == 3
    assert loader.calls == [2, 3]


def test_unload_forces_reload():
    loader = _Loader()
    textures = Textures()
    textures.get_or_load(4, loader)
    textures.unload()
    textures.get_or_load(4, loader)
    assert loader.calls == [4, 4]


def test_unload_before_loading_raises():
    with pytest.raises(RuntimeError):
        Textures().unload()
"""A lazily filled cache of textures."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Generic, Optional, TypeVar

from xf.mq.texture import Texture

K = TypeVar("K", bound=Hashable)


class Textures(Generic[K]):
    """Textures decoded on first use and kept by key."""

    def __init__(self) -> None:
        self._map: Optional[dict[K, Texture]] = None

    def get_or_load(self, key: K, map_fn: Callable[[K], bytes]) -> Texture:
        """The texture for ``key``, decoding the bytes ``map_fn`` gives on first use."""
        if self._map is None:
            self._map = {}
        if key not in self._map:
            self._map[key] = Texture.from_bytes(map_fn(key))
        return self._map[key]

    def unload(self) -> None:
        """Forget every loaded texture."""
        if self._map is None:
            raise RuntimeError("no textures have been loaded")
        self._map.clear()
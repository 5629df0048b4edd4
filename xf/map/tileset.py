"""Tilesets: a grid of tile values and the image they are drawn from."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from xf.data.arr2d import Arr2D
from xf.map.tiled_json import JsonTile, JsonTileset
from xf.mq.texture import Texture

Tile = TypeVar("Tile")


@dataclass(frozen=True)
class Tileset(Generic[Tile]):
    """Tile values laid out like the tiles in ``texture``."""

    tiles: Arr2D[Tile]
    texture: Texture

    @classmethod
    def from_json(
        cls,
        json: JsonTileset,
        texture: Texture,
        tile_fn: Callable[[JsonTile], Tile],
        default: Callable[[], Tile],
    ) -> "Tileset[Tile]":
        """Build a tileset; every tile is ``default()`` unless ``tile_fn`` describes it.

        Errors raised by ``tile_fn`` propagate. Tiles whose id lies outside the
        tileset are ignored.
        """
        tiles = Arr2D([default() for _ in range(json.tilecount)], json.columns)
        for json_tile in json.tiles:
            tiles.set_i(json_tile.id, tile_fn(json_tile))
        return cls(tiles, texture)
"""Tilemaps: layers of references into a tileset."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from xf.data.arr2d import Arr2D
from xf.map.tiled_json import JsonTilemap, TileLayer
from xf.map.tileset import Tileset
from xf.num.vec import Vec2, i2

Tile = TypeVar("Tile")


@dataclass(frozen=True)
class Tilemap(Generic[Tile]):
    """One map layer; each cell names a tileset position or is empty."""

    name: str
    tile_srcs: Arr2D[Optional[Vec2]]
    tileset: Tileset[Tile]

    def size(self) -> Vec2:
        return self.tile_srcs.size()

    def get(self, pos: Vec2) -> Optional[Tile]:
        """The tile at ``pos``, or ``None`` if the cell is empty or outside the map."""
        src_pos = self.tile_srcs.get(pos)
        if src_pos is None:
            return None
        return self.tileset.tiles.get(src_pos)

    @classmethod
    def from_json(cls, json: JsonTilemap, tileset: Tileset[Tile]) -> list["Tilemap[Tile]"]:
        """One tilemap for each tile layer of ``json``, in order."""
        tileset_cols = tileset.tiles.size().x
        tilemaps = []
        for layer in json.layers:
            if not isinstance(layer, TileLayer):
                continue
            tile_srcs = [
                None if tile_id == 0
                else i2((tile_id - 1) % tileset_cols, (tile_id - 1) // tileset_cols)
                for tile_id in layer.data
            ]
            tilemaps.append(cls(layer.name, Arr2D(tile_srcs, json.width), tileset))
        return tilemaps
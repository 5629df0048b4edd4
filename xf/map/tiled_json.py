"""Tilemaps and tilesets in the Tiled JSON format."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional, Union


def _load(data: bytes) -> dict:
    try:
        value = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValueError(str(exc)) from exc
    if not isinstance(value, dict):
        raise ValueError("expected a JSON object")
    return value


def _check(value: Any, kind: str, key: str, ctx: str) -> Any:
    ok = {
        "int": isinstance(value, int) and not isinstance(value, bool),
        "uint": isinstance(value, int) and not isinstance(value, bool) and value >= 0,
        "str": isinstance(value, str),
    }[kind]
    if not ok:
        raise ValueError(f"invalid value for `{key}` in {ctx}: {value!r}")
    return value


def _field(obj: dict, key: str, kind: str, ctx: str) -> Any:
    if key not in obj:
        raise ValueError(f"missing field `{key}` in {ctx}")
    return _check(obj[key], kind, key, ctx)


def _optional(obj: dict, key: str, kind: str, ctx: str) -> Any:
    value = obj.get(key)
    return None if value is None else _check(value, kind, key, ctx)


def _objects(obj: dict, key: str, ctx: str) -> list[dict]:
    if key not in obj:
        raise ValueError(f"missing field `{key}` in {ctx}")
    return _optional_objects(obj, key, ctx)


def _optional_objects(obj: dict, key: str, ctx: str) -> list[dict]:
    items = obj[key]
    if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
        raise ValueError(f"`{key}` in {ctx} must be a list of objects")
    return items


@dataclass(frozen=True)
class TiledObject:
    """An object placed in an object group."""

    name: str
    id: int
    type_: str
    x: int
    y: int
    width: Optional[int] = None
    height: Optional[int] = None

    @classmethod
    def _parse(cls, obj: dict) -> "TiledObject":
        ctx = "object"
        return cls(
            name=_field(obj, "name", "str", ctx),
            id=_field(obj, "id", "int", ctx),
            type_=_field(obj, "type", "str", ctx),
            x=_field(obj, "x", "int", ctx),
            y=_field(obj, "y", "int", ctx),
            width=_optional(obj, "width", "int", ctx),
            height=_optional(obj, "height", "int", ctx),
        )


@dataclass(frozen=True)
class TileLayer:
    """A layer of tile ids; 0 marks an empty cell."""

    data: list[int]
    height: int
    width: int
    id: int
    name: str


@dataclass(frozen=True)
class ObjectGroup:
    """A layer of free-standing objects."""

    objects: list[TiledObject]
    id: int
    name: str


Layer = Union[TileLayer, ObjectGroup]


def _parse_layer(obj: dict) -> Layer:
    ctx = "layer"
    kind = _field(obj, "type", "str", ctx)
    if kind == "tilelayer":
        data = obj.get("data")
        if data is None:
            raise ValueError("missing field `data` in layer")
        if not isinstance(data, list):
            raise ValueError("`data` in layer must be a list")
        return TileLayer(
            data=[_check(v, "uint", "data", ctx) for v in data],
            height=_field(obj, "height", "int", ctx),
            width=_field(obj, "width", "int", ctx),
            id=_field(obj, "id", "int", ctx),
            name=_field(obj, "name", "str", ctx),
        )
    if kind == "objectgroup":
        return ObjectGroup(
            objects=[TiledObject._parse(o) for o in _objects(obj, "objects", ctx)],
            id=_field(obj, "id", "int", ctx),
            name=_field(obj, "name", "str", ctx),
        )
    raise ValueError(f"unknown layer type {kind!r}")


@dataclass(frozen=True)
class TilesetRef:
    """A reference from a map to an external tileset."""

    firstgid: int
    source: str


@dataclass(frozen=True)
class JsonTilemap:
    """A Tiled map document."""

    height: int
    width: int
    tileheight: int
    tilewidth: int
    tilesets: list[TilesetRef]
    layers: list[Layer]

    @classmethod
    def from_bytes(cls, data: bytes) -> "JsonTilemap":
        """Parse a map document; raises ``ValueError`` if it is malformed."""
        obj = _load(data)
        ctx = "map"
        tilesets = [
            TilesetRef(
                firstgid=_field(t, "firstgid", "uint", "tileset"),
                source=_field(t, "source", "str", "tileset"),
            )
            for t in _objects(obj, "tilesets", ctx)
        ]
        return cls(
            height=_field(obj, "height", "int", ctx),
            width=_field(obj, "width", "int", ctx),
            tileheight=_field(obj, "tileheight", "int", ctx),
            tilewidth=_field(obj, "tilewidth", "int", ctx),
            tilesets=tilesets,
            layers=[_parse_layer(layer) for layer in _objects(obj, "layers", ctx)],
        )


@dataclass(frozen=True)
class TileProperty:
    """A named custom property of a tile."""

    name: str
    value: str


@dataclass(frozen=True)
class JsonTile:
    """A tileset tile that carries a type or properties."""

    id: int
    type_: Optional[str] = None
    properties: Optional[list[TileProperty]] = None

    @classmethod
    def _parse(cls, obj: dict) -> "JsonTile":
        ctx = "tile"
        properties = None
        if obj.get("properties") is not None:
            properties = [
                TileProperty(
                    name=_field(p, "name", "str", "property"),
                    value=_field(p, "value", "str", "property"),
                )
                for p in _optional_objects(obj, "properties", ctx)
            ]
        return cls(
            id=_field(obj, "id", "int", ctx),
            type_=_optional(obj, "type", "str", ctx),
            properties=properties,
        )


@dataclass(frozen=True)
class JsonTileset:
    """A Tiled tileset document."""

    columns: int
    image: str
    imageheight: int
    imagewidth: int
    name: str
    spacing: int
    tilecount: int
    tileheight: int
    tilewidth: int
    tiles: list[JsonTile]

    @classmethod
    def from_bytes(cls, data: bytes) -> "JsonTileset":
        """Parse a tileset document; raises ``ValueError`` if it is malformed."""
        obj = _load(data)
        ctx = "tileset"
        return cls(
            columns=_field(obj, "columns", "uint", ctx),
            image=_field(obj, "image", "str", ctx),
            imageheight=_field(obj, "imageheight", "int", ctx),
            imagewidth=_field(obj, "imagewidth", "int", ctx),
            name=_field(obj, "name", "str", ctx),
            spacing=_field(obj, "spacing", "int", ctx),
            tilecount=_field(obj, "tilecount", "uint", ctx),
            tileheight=_field(obj, "tileheight", "int", ctx),
            tilewidth=_field(obj, "tilewidth", "int", ctx),
            tiles=[JsonTile._parse(t) for t in _objects(obj, "tiles", ctx)],
        )
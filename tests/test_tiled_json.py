import json

import pytest

from xf.map.tiled_json import (
    JsonTile,
    JsonTilemap,
    JsonTileset,
    ObjectGroup,
    TiledObject,
    TileLayer,
    TileProperty,
    TilesetRef,
)


def _map_doc():
    return {
        "height": 2,
        "width": 3,
        "tileheight": 16,
        "tilewidth": 16,
        "tilesets": [{"firstgid": 1, "source": "tiles.json"}],
        "layers": [
            {
                "type": "tilelayer",
                "data": [0, 1, 2, 3, 4, 5],
                "height": 2,
                "width": 3,
                "id": 1,
                "name": "ground",
            },
            {
                "type": "objectgroup",
                "id": 2,
                "name": "things",
                "objects": [
                    {"name": "door", "id": 7, "type": "exit", "x": 4, "y": 5, "width": 16},
                ],
            },
        ],
        "orientation": "orthogonal",
    }


def _tileset_doc():
    return {
        "columns": 2,
        "image": "tiles.png",
        "imageheight": 32,
        "imagewidth": 32,
        "name": "tiles",
        "spacing": 0,
        "tilecount": 4,
        "tileheight": 16,
        "tilewidth": 16,
        "tiles": [
            {"id": 1, "type": "wall"},
            {"id": 2, "properties": [{"name": "kind", "value": "water"}]},
        ],
    }


def test_tilemap_fields():
    tilemap = JsonTilemap.from_bytes(json.dumps(_map_doc()).encode())
    assert (tilemap.width, tilemap.height) == (3, 2)
    assert tilemap.tilesets == [TilesetRef(1, "tiles.json")]


def test_tilemap_layers():
    tilemap = JsonTilemap.from_bytes(json.dumps(_map_doc()).encode())
    ground, things = tilemap.layers
    assert ground == TileLayer([0, 1, 2, 3, 4, 5], 2, 3, 1, "ground")
    assert isinstance(things, ObjectGroup)
    assert things.name == "things"
    assert things.objects == [TiledObject("door", 7, "exit", 4, 5, 16, None)]


def test_unknown_layer_type_is_rejected():
    doc = _map_doc()
    doc["layers"][0]["type"] = "imagelayer"
    with pytest.raises(ValueError):
        JsonTilemap.from_bytes(json.dumps(doc).encode())


def test_missing_field_is_rejected():
    doc = _map_doc()
    del doc["tilewidth"]
    with pytest.raises(ValueError):
        JsonTilemap.from_bytes(json.dumps(doc).encode())


def test_negative_tile_id_is_rejected():
    doc = _map_doc()
    doc["layers"][0]["data"][0] = -1
    with pytest.raises(ValueError):
        JsonTilemap.from_bytes(json.dumps(doc).encode())


def test_invalid_json_is_rejected():
    with pytest.raises(ValueError):
        JsonTilemap.from_bytes(b"{not json")
    with pytest.raises(ValueError):
        JsonTileset.from_bytes(b"[]")


def test_tileset_fields():
    tileset = JsonTileset.from_bytes(json.dumps(_tileset_doc()).encode())
    assert tileset.columns == 2
    assert tileset.tilecount == 4
    assert tileset.image == "tiles.png"
    assert tileset.tiles == [
        JsonTile(1, "wall", None),
        JsonTile(2, None, [TileProperty("kind", "water")]),
    ]


def test_tileset_wrong_type_is_rejected():
    doc = _tileset_doc()
    doc["columns"] = "two"
    with pytest.raises(ValueError):
        JsonTileset.from_bytes(json.dumps(doc).encode())
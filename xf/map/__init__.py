"""Tiled JSON parsing, tilesets and tilemaps."""
"""Flat 2D grids and directions."""
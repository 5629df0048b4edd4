"""Textures, a texture cache, drawing and the game window."""
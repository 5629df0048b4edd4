"""Small 2D game toolkit built on pygame."""

__version__ = "0.1.0"
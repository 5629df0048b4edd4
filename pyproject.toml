[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xf"
version = "0.1.0"
description = "Small 2D game toolkit: integer vectors and rectangles, grids, directions, timers, sprite animation and Tiled map loading on top of pygame."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["gamedev", "2d", "pygame", "tilemap", "tiled", "animation", "vector"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["xf"]

[tool.pytest.ini_options]
addopts = "-ra"

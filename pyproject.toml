[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "highscore_getter"
version = "0.1.0"
description = "Scene-graph game engine core and side-scrolling action game logic: tile maps, collisions, enemies, projectiles and effects"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "side-scroller", "scene-graph", "tilemap", "collision"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["highscore_getter*"]

[tool.pytest.ini_options]
addopts = "-ra"

"""Scene-graph engine, tile maps, collisions, enemies, projectiles, effects and the stage-clear scene of a side-scrolling action game."""

__version__ = "0.1.0"
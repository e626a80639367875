"""
Data models for level grids.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class LevelTile:
    """Content of one grid cell.

    bottom_tile is always drawn; top_tile is an optional overlay drawn above
    sprites. Cells are mutated in place by the generator's later stages.
    """
    bottom_tile: str
    solid: bool = False
    top_tile: Optional[str] = None


@dataclass(frozen=True)
class TopLayerTile:
    """A set top-layer slot and where it sits."""
    tile_name: str
    grid_x: int
    grid_y: int


@dataclass(eq=False)
class Entity:
    """Something placed on the sprite layer.

    Levels track entities by identity, never by value: two entities with the
    same fields are still distinct members.
    """
    grid_x: int
    grid_y: int
    tile_name: str
    width: int = 1  # in tiles
    height: int = 1
    layer: str = "sprite"

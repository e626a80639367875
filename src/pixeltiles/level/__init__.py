"""
Level grids and the procedural outdoor layout.
"""

from .catalog import TILE_CATALOG, TILEMAP_ASSET, TileMapPort, setup_tile_definitions
from .generator import DEFAULT_SEED, base_tile_for, generate, patch_tile_name
from .level import DEFAULT_TILE, Level
from .models import Entity, LevelTile, TopLayerTile

__all__ = [
    "TILE_CATALOG",
    "TILEMAP_ASSET",
    "TileMapPort",
    "setup_tile_definitions",
    "DEFAULT_SEED",
    "base_tile_for",
    "generate",
    "patch_tile_name",
    "DEFAULT_TILE",
    "Level",
    "Entity",
    "LevelTile",
    "TopLayerTile",
]

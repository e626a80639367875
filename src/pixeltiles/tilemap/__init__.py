"""
Tile map runtime: named tile regions over an encoded sheet.
"""

from ..codec.models import RGBA, TRANSPARENT
from .cache import TileCache, TilePixels
from .models import TILE_PIXELS, TILE_SIZE, TileDefinition, TileLayer
from .tilemap import TileMap

__all__ = [
    "RGBA",
    "TRANSPARENT",
    "TileCache",
    "TilePixels",
    "TILE_PIXELS",
    "TILE_SIZE",
    "TileDefinition",
    "TileLayer",
    "TileMap",
]

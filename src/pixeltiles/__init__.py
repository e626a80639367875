"""
pixeltiles: indexed-color tile sheets for pixel-art levels

Encodes sprite sheets into compact palette + index containers, extracts
named tiles from them at runtime and composes outdoor levels from a tile
catalog.
"""

__version__ = "0.1.0"
__author__ = "pixeltiles Contributors"

# Core codec
from .codec import RGBA, Container, decode, encode, normalized_pixel_at, pixel_at

# Asset build and lookup
from .assets import AssetBundle, AssetRegistry, build_assets, read_artifact

# Runtime
from .tilemap import TILE_SIZE, TileDefinition, TileLayer, TileMap
from .level import Entity, Level, LevelTile, setup_tile_definitions

from .errors import (
    AssetBuildError,
    AssetNotFoundError,
    EncodeError,
    InvalidContainerError,
    PixelTilesError,
)

__all__ = [
    # Codec
    'RGBA',
    'Container',
    'decode',
    'encode',
    'normalized_pixel_at',
    'pixel_at',

    # Assets
    'AssetBundle',
    'AssetRegistry',
    'build_assets',
    'read_artifact',

    # Runtime
    'TILE_SIZE',
    'TileDefinition',
    'TileLayer',
    'TileMap',
    'Entity',
    'Level',
    'LevelTile',
    'setup_tile_definitions',

    # Errors
    'AssetBuildError',
    'AssetNotFoundError',
    'EncodeError',
    'InvalidContainerError',
    'PixelTilesError',
]

"""
Asset build and lookup for encoded tile sheets.
"""

from .builder import asset_name_for, build_assets, encode_image_file, rasterize
from .paths import candidate_asset_paths, find_asset_path
from .registry import AssetRegistry, resolve_tilemap_name
from .serialization import (
    AssetBundle,
    container_from_dict,
    container_to_dict,
    read_artifact,
    write_artifact,
)

__all__ = [
    "asset_name_for",
    "build_assets",
    "encode_image_file",
    "rasterize",
    "candidate_asset_paths",
    "find_asset_path",
    "AssetRegistry",
    "resolve_tilemap_name",
    "AssetBundle",
    "container_from_dict",
    "container_to_dict",
    "read_artifact",
    "write_artifact",
]

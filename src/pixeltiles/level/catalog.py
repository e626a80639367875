"""
Tile catalog for the outdoor tile sheet.

Maps every tile name the generator emits (plus the player sprite) to its
position on the packed sheet.
"""

import logging
from typing import Any, Protocol, Tuple

logger = logging.getLogger(__name__)

TILEMAP_ASSET = "tilemap_packed"


class TileMapPort(Protocol):
    """Anything tiles can be registered against."""

    def define_tile(self, name: str, tile_x: int, tile_y: int, **options: Any) -> Any:
        ...


# (name, tile_x, tile_y, layer)
TILE_CATALOG: Tuple[Tuple[str, int, int, str], ...] = (
    ("grass-flat", 0, 0, "bottom"),
    ("grass-long", 1, 0, "bottom"),
    ("grass-flowery", 2, 0, "bottom"),
    ("dirtpatch-top-left", 0, 1, "bottom"),
    ("dirtpatch-top", 1, 1, "bottom"),
    ("dirtpatch-top-right", 2, 1, "bottom"),
    ("dirtpatch-middle-left", 0, 2, "bottom"),
    ("dirtpatch-middle", 1, 2, "bottom"),
    ("dirtpatch-middle-right", 2, 2, "bottom"),
    ("dirtpatch-bottom-left", 0, 3, "bottom"),
    ("dirtpatch-bottom", 1, 3, "bottom"),
    ("dirtpatch-bottom-right", 2, 3, "bottom"),
    ("mushroom", 5, 1, "sprite"),
    ("vine", 5, 1, "sprite"),
    ("bush", 5, 0, "sprite"),
    ("smalltree-green", 4, 2, "sprite"),
    ("smalltree-brown", 3, 2, "sprite"),
    ("tree-green-top", 4, 0, "top"),
    ("tree-green-bottom", 4, 1, "sprite"),
    ("tree-brown-top", 3, 0, "top"),
    ("tree-brown-bottom", 3, 1, "sprite"),
    ("grass-withrocks", 7, 3, "bottom"),
    # entities
    ("player", 1, 18, "sprite"),
)


def setup_tile_definitions(tile_map: TileMapPort) -> None:
    """Register the whole catalog. Does not load the sheet itself."""
    for name, tile_x, tile_y, layer in TILE_CATALOG:
        tile_map.define_tile(name, tile_x, tile_y, layer=layer)
    logger.debug(f"Registered {len(TILE_CATALOG)} catalog tiles")

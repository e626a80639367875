"""
Data models for tile definitions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

TILE_SIZE = 16
TILE_PIXELS = TILE_SIZE * TILE_SIZE


class TileLayer(str, Enum):
    """Render-order class of a tile.

    Bottom tiles are opaque ground, sprite tiles are drawn over them with
    transparency, top tiles overlay everything else.
    """

    BOTTOM = "bottom"
    SPRITE = "sprite"
    TOP = "top"


@dataclass(frozen=True)
class TileDefinition:
    """A named TILE_SIZE x TILE_SIZE region of a sheet.

    tile_x / tile_y are in tile-grid units, not pixels. flip_x and flip_y
    mirror the extracted block independently.
    """
    name: str
    tile_x: int
    tile_y: int
    layer: TileLayer = TileLayer.BOTTOM
    solid: bool = False
    flip_x: bool = False
    flip_y: bool = False

    @property
    def pixel_origin(self) -> tuple[int, int]:
        """Top-left pixel of the region in the source sheet."""
        return self.tile_x * TILE_SIZE, self.tile_y * TILE_SIZE

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TileDefinition":
        """Create TileDefinition from an authored table entry.

        Args:
            data: Dict with 'name', 'x', 'y' and optional 'layer', 'solid',
                'flipX', 'flipY' keys

        Returns:
            TileDefinition instance
        """
        return cls(
            name=str(data["name"]),
            tile_x=int(data["x"]),
            tile_y=int(data["y"]),
            layer=TileLayer(data.get("layer", TileLayer.BOTTOM.value)),
            solid=bool(data.get("solid", False)),
            flip_x=bool(data.get("flipX", False)),
            flip_y=bool(data.get("flipY", False)),
        )

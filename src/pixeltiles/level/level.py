"""
Level grid: per-cell tile names plus a list of entities.
"""

import random
from typing import Any, List, Optional

from .catalog import TileMapPort, setup_tile_definitions
from .generator import generate
from .models import LevelTile, TopLayerTile


DEFAULT_TILE = "grass"


class Level:
    """Fixed-size grid of LevelTile cells.

    Writes outside the grid are silently ignored and reads outside it return
    None. Not thread-safe.
    """

    def __init__(self, width: int, height: int, default_tile: str = DEFAULT_TILE):
        if width < 0 or height < 0:
            raise ValueError(f"Invalid level size: {width}x{height}")
        self._width = width
        self._height = height
        self._tiles: List[List[LevelTile]] = [
            [LevelTile(bottom_tile=default_tile) for _ in range(width)]
            for _ in range(height)
        ]
        self._entities: List[Any] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def get_width(self) -> int:
        return self._width

    def get_height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        """True if (x, y) lies inside the grid."""
        return 0 <= x < self._width and 0 <= y < self._height

    # === CELLS ===

    def set_tile(self, x: int, y: int, tile: LevelTile) -> None:
        """Replace the cell at (x, y); no-op outside the grid."""
        if self.in_bounds(x, y):
            self._tiles[y][x] = tile

    def get_tile(self, x: int, y: int) -> Optional[LevelTile]:
        """Return the cell at (x, y), or None outside the grid."""
        if self.in_bounds(x, y):
            return self._tiles[y][x]
        return None

    def is_solid(self, x: int, y: int) -> bool:
        """Collision check; everything outside the grid is solid."""
        tile = self.get_tile(x, y)
        return tile.solid if tile is not None else True

    # === ENTITIES ===

    def add_entity(self, entity: Any) -> None:
        """Append an entity."""
        self._entities.append(entity)

    def remove_entity(self, entity: Any) -> None:
        """Remove an entity by identity; no-op if it isn't present."""
        for index, member in enumerate(self._entities):
            if member is entity:
                del self._entities[index]
                return

    def get_entities(self) -> List[Any]:
        """Entities in insertion order."""
        return list(self._entities)

    # === LAYERS ===

    def get_bottom_layer_tiles(self) -> List[List[str]]:
        """Bottom tile names, one list per row."""
        return [[tile.bottom_tile for tile in row] for row in self._tiles]

    def get_top_layer_tiles(self) -> List[TopLayerTile]:
        """Every set top slot, in row-major order."""
        return [
            TopLayerTile(tile_name=tile.top_tile, grid_x=x, grid_y=y)
            for y, row in enumerate(self._tiles)
            for x, tile in enumerate(row)
            if tile.top_tile
        ]

    # === GENERATION ===

    def procedural_generate_level(
        self, seed: int | None = None, rng: random.Random | None = None
    ) -> None:
        """Overwrite the grid with the authored outdoor layout.

        Args:
            seed: Seed for the base-fill stage; defaults to DEFAULT_SEED
            rng: Explicit random source, takes precedence over seed
        """
        generate(self, seed=seed, rng=rng)

    def setup_tile_definitions(self, tile_map: TileMapPort) -> None:
        """Register the tile catalog this level's names refer to."""
        setup_tile_definitions(tile_map)

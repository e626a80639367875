"""
Procedural outdoor level layout.

The layout is composed in five stages over authored coordinate tables. Later
stages may overwrite earlier ones, each under its own rule:

1. Base fill: every cell gets a grass variant drawn from a fixed
   distribution. This is the only random stage.
2. Dirt patches: each rectangle is painted with 9-slice edge-aware names,
   replacing the cell's bottom tile.
3. Tall trees: two-cell trees always claim the top slot of their cell and
   the cell below, and make both solid.
4. Small decorations: small trees, then bushes, then mushrooms; each only
   takes a top slot that is still empty.
5. Path: path cells become flat grass and lose bush and mushroom overlays.
   Trees on the path stay.
"""

import logging
import random
from typing import TYPE_CHECKING, Optional, Tuple

from .models import LevelTile

if TYPE_CHECKING:
    from .level import Level

logger = logging.getLogger(__name__)

DEFAULT_SEED = 0

GRASS_FLAT = "grass-flat"
GRASS_LONG = "grass-long"
GRASS_FLOWERY = "grass-flowery"
GRASS_WITHROCKS = "grass-withrocks"
BUSH = "bush"
MUSHROOM = "mushroom"

# (upper bound, tile); a draw below the bound picks the tile
BASE_FILL_THRESHOLDS: Tuple[Tuple[float, str], ...] = (
    (0.30, GRASS_LONG),
    (0.50, GRASS_FLOWERY),
    (0.55, GRASS_WITHROCKS),
)
BASE_FILL_FALLBACK = GRASS_FLAT

# (x, y, width, height)
DIRT_PATCHES: Tuple[Tuple[int, int, int, int], ...] = (
    (2, 3, 3, 3),
    (8, 1, 3, 3),
    (12, 5, 3, 3),
    (5, 8, 3, 3),
    (15, 10, 3, 3),
    (1, 12, 3, 3),
    (10, 14, 3, 3),
)

# (x, y, kind); the tree's top half sits at (x, y), the bottom half below it
TALL_TREES: Tuple[Tuple[int, int, str], ...] = (
    (6, 2, "green"),
    (14, 3, "brown"),
    (3, 7, "green"),
    (18, 8, "brown"),
    (11, 11, "green"),
    (7, 15, "brown"),
    (16, 14, "green"),
)

SMALL_TREES: Tuple[Tuple[int, int, str], ...] = (
    (1, 1, "smalltree-green"),
    (9, 4, "smalltree-brown"),
    (4, 6, "smalltree-green"),
    (13, 7, "smalltree-brown"),
    (17, 2, "smalltree-green"),
    (2, 10, "smalltree-brown"),
    (15, 12, "smalltree-green"),
    (8, 13, "smalltree-brown"),
    (12, 1, "smalltree-green"),
)

BUSHES: Tuple[Tuple[int, int], ...] = (
    (5, 1), (10, 3), (2, 5),
    (16, 4), (7, 6), (14, 9),
    (3, 11), (9, 10), (18, 13),
    (6, 14), (13, 15), (1, 8),
)

MUSHROOMS: Tuple[Tuple[int, int], ...] = (
    (0, 2), (4, 4), (8, 5),
    (12, 3), (15, 6), (3, 9),
    (10, 8), (17, 11), (5, 12),
    (14, 13), (2, 15), (11, 16),
    (7, 10), (16, 1),
)

PATH_TILES: Tuple[Tuple[int, int], ...] = (
    # main east-west path
    *((x, 9) for x in range(20)),
    # north-south connectors
    *((5, y) for y in (0, 1, 2, 3, 4, 5, 6, 7, 8, 10, 11)),
    *((15, y) for y in (0, 1, 2, 3, 4, 5, 7, 8)),
    # diagonal
    (10, 5), (11, 6), (12, 7), (13, 8),
)

# Overlays the path clears; trees are never cleared
PATH_CLEARS = frozenset({BUSH, MUSHROOM})


def base_tile_for(draw: float) -> str:
    """Map a uniform draw in [0, 1) to a grass variant."""
    for bound, tile in BASE_FILL_THRESHOLDS:
        if draw < bound:
            return tile
    return BASE_FILL_FALLBACK


def patch_tile_name(row: int, col: int, height: int, width: int) -> str:
    """9-slice dirt patch name for a cell at (row, col) inside a patch."""
    if row == 0:
        vertical = "top"
    elif row == height - 1:
        vertical = "bottom"
    else:
        vertical = "middle"

    if col == 0:
        horizontal = "-left"
    elif col == width - 1:
        horizontal = "-right"
    else:
        horizontal = ""

    if vertical == "middle" and not horizontal:
        return "dirtpatch-middle"
    return f"dirtpatch-{vertical}{horizontal}"


def generate(level: "Level", seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
    """Run all five stages over level, in order."""
    if rng is None:
        rng = random.Random(DEFAULT_SEED if seed is None else seed)

    fill_base(level, rng)
    overlay_patches(level)
    place_tall_trees(level)
    place_small_decorations(level)
    carve_path(level)
    logger.debug(
        f"Generated {level.width}x{level.height} level "
        f"({len(level.get_top_layer_tiles())} overlays)"
    )


def fill_base(level: "Level", rng: random.Random) -> None:
    """Stage 1: fresh, non-solid grass on every cell."""
    for y in range(level.height):
        for x in range(level.width):
            level.set_tile(x, y, LevelTile(bottom_tile=base_tile_for(rng.random())))


def overlay_patches(level: "Level") -> None:
    """Stage 2: paint dirt patches over the bottom layer."""
    for patch_x, patch_y, width, height in DIRT_PATCHES:
        for row in range(height):
            for col in range(width):
                x, y = patch_x + col, patch_y + row
                if x >= level.width or y >= level.height:
                    continue
                level.set_tile(
                    x, y, LevelTile(bottom_tile=patch_tile_name(row, col, height, width))
                )


def place_tall_trees(level: "Level") -> None:
    """Stage 3: two-cell trees; always overwrite the top slot."""
    for x, y, kind in TALL_TREES:
        if x >= level.width or y >= level.height - 1:
            continue
        upper = level.get_tile(x, y)
        lower = level.get_tile(x, y + 1)
        if upper is None or lower is None:
            continue
        upper.top_tile = f"tree-{kind}-top"
        upper.solid = True
        lower.top_tile = f"tree-{kind}-bottom"
        lower.solid = True


def place_small_decorations(level: "Level") -> None:
    """Stage 4: first writer wins on the top slot."""
    placements = [(x, y, name, True) for x, y, name in SMALL_TREES]
    placements += [(x, y, BUSH, False) for x, y in BUSHES]
    placements += [(x, y, MUSHROOM, False) for x, y in MUSHROOMS]

    for x, y, name, solid in placements:
        tile = level.get_tile(x, y)
        if tile is None or tile.top_tile:
            continue
        tile.top_tile = name
        tile.solid = solid


def carve_path(level: "Level") -> None:
    """Stage 5: flatten path cells and clear small overlays from them."""
    for x, y in PATH_TILES:
        tile = level.get_tile(x, y)
        if tile is None:
            continue
        tile.bottom_tile = GRASS_FLAT
        if tile.top_tile in PATH_CLEARS:
            tile.top_tile = None

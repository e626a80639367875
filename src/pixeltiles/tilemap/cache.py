"""
Per-name cache of extracted tile pixel blocks.
"""

import logging
from typing import Dict, Optional, Tuple

from ..codec.models import RGBA

TilePixels = Tuple[RGBA, ...]


class TileCache:
    """Holds extracted pixel blocks keyed by tile name.

    Blocks are derived from the bound sheet: the whole cache is cleared when
    the sheet changes, and single entries are invalidated when a tile name is
    redefined.
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._blocks: Dict[str, TilePixels] = {}

    def get(self, name: str) -> Optional[TilePixels]:
        """Return the cached block for name, if any."""
        return self._blocks.get(name)

    def put(self, name: str, pixels: TilePixels) -> None:
        """Store a block under name."""
        self._blocks[name] = pixels

    def invalidate(self, name: str) -> None:
        """Drop the block for one name."""
        self._blocks.pop(name, None)

    def clear(self) -> None:
        """Drop every cached block."""
        cache_size = len(self._blocks)
        self._blocks.clear()
        if cache_size > 0:
            self.logger.debug(f"Tile cache cleared ({cache_size} items)")

    def __contains__(self, name: object) -> bool:
        return name in self._blocks

    def __len__(self) -> int:
        return len(self._blocks)

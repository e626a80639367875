"""
Tile map runtime.

Binds one encoded sheet, keeps named tile definitions against it and
extracts per-tile pixel blocks on demand, with horizontal and vertical flip
support. Extracted blocks are cached by tile name.
"""

import logging
from typing import Callable, Dict, List, Optional, Union

from ..assets.registry import AssetRegistry, resolve_tilemap_name
from ..codec import RGBA, TRANSPARENT, Container, DecodeCache, normalized_pixel_at
from ..errors import AssetNotFoundError
from .cache import TileCache, TilePixels
from .models import TILE_SIZE, TileDefinition, TileLayer


class TileMap:
    """Runtime view of a tile sheet.

    Not thread-safe: definitions and the bound sheet must not change while
    another caller reads tile pixels.
    """

    def __init__(self, registry: Optional[AssetRegistry] = None):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.registry = registry
        self.on_ready: Optional[Callable[[], None]] = None

        self._container: Optional[Container] = None
        self._container_name: Optional[str] = None
        self._definitions: Dict[str, TileDefinition] = {}
        self._tile_cache = TileCache()
        self._decode_cache = DecodeCache()

    # === SHEET BINDING ===

    @property
    def is_loaded(self) -> bool:
        """True once a sheet has been bound."""
        return self._container is not None

    @property
    def container(self) -> Optional[Container]:
        """The bound sheet, if any."""
        return self._container

    @property
    def container_name(self) -> Optional[str]:
        """Registry name of the bound sheet (None when bound directly)."""
        return self._container_name

    def load(self, source: Union[str, Container]) -> None:
        """Bind a sheet and drop every cached tile block.

        Args:
            source: A Container, an asset name, or a '.png' path whose stem
                names a registered asset

        Raises:
            AssetNotFoundError: If the name is not registered
            InvalidContainerError: If the sheet's index buffer is corrupt
        """
        if isinstance(source, Container):
            container, name = source, None
        else:
            name = resolve_tilemap_name(source) if source.lower().endswith(".png") else source
            if self.registry is None:
                raise AssetNotFoundError(name, f"No asset registry bound, cannot load: {name}")
            container = self.registry.get(name)

        # Decode up front so a corrupt sheet fails here, not mid-frame
        self._decode_cache.clear()
        self._decode_cache.get(container)

        self._container = container
        self._container_name = name
        self._tile_cache.clear()
        self.logger.debug(
            f"Loaded tile sheet {name or '<container>'} ({container.width}x{container.height})"
        )

        if self.on_ready is not None:
            self.on_ready()

    # === DEFINITIONS ===

    def define_tile(
        self,
        name: str,
        tile_x: int,
        tile_y: int,
        *,
        solid: bool = False,
        layer: Union[TileLayer, str] = TileLayer.BOTTOM,
        flip_x: bool = False,
        flip_y: bool = False,
    ) -> TileDefinition:
        """Register or replace a named tile region.

        Always invalidates the cached block for name.
        """
        definition = TileDefinition(
            name=name,
            tile_x=tile_x,
            tile_y=tile_y,
            layer=TileLayer(layer),
            solid=solid,
            flip_x=flip_x,
            flip_y=flip_y,
        )
        self._definitions[name] = definition
        self._tile_cache.invalidate(name)
        return definition

    def get_tile_definition(self, name: str) -> Optional[TileDefinition]:
        """Return the definition for name, if any."""
        return self._definitions.get(name)

    def get_tiles_for_layer(self, layer: Union[TileLayer, str]) -> List[str]:
        """Names of all tiles on a layer, in definition order."""
        layer = TileLayer(layer)
        return [name for name, d in self._definitions.items() if d.layer is layer]

    def tile_names(self) -> List[str]:
        """Names of all defined tiles, in definition order."""
        return list(self._definitions)

    # === PIXELS ===

    def get_tile_pixels(self, name: str) -> Optional[TilePixels]:
        """Return the TILE_SIZE x TILE_SIZE block for a tile, row-major.

        Returns None when no sheet is bound or the name is undefined. Source
        pixels falling outside the sheet come back fully transparent.
        """
        cached = self._tile_cache.get(name)
        if cached is not None:
            return cached

        definition = self._definitions.get(name)
        if definition is None or self._container is None:
            return None

        pixels = self._extract(definition, self._container)
        self._tile_cache.put(name, pixels)
        return pixels

    def _extract(self, definition: TileDefinition, container: Container) -> TilePixels:
        """Copy one tile block out of the sheet, applying flips."""
        start_x, start_y = definition.pixel_origin
        last = TILE_SIZE - 1
        pixels: list[RGBA] = []
        for py in range(TILE_SIZE):
            src_y = start_y + (last - py if definition.flip_y else py)
            for px in range(TILE_SIZE):
                src_x = start_x + (last - px if definition.flip_x else px)
                pixel = normalized_pixel_at(container, src_x, src_y, self._decode_cache)
                pixels.append(pixel if pixel is not None else TRANSPARENT)
        return tuple(pixels)

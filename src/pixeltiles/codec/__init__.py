"""
Indexed-color codec: palette + packed index buffer containers.
"""

from .cache import DecodeCache, default_decode_cache
from .core import (
    decode,
    encode,
    normalized_pixel_at,
    pack_indices,
    pixel_at,
    to_rgba_bytes,
)
from .models import (
    RGBA,
    TRANSPARENT,
    Color,
    Container,
    IndexBuffer,
    Palette,
    MAX_SHORT_PALETTE,
    index_width_for,
)

__all__ = [
    "DecodeCache",
    "default_decode_cache",
    "decode",
    "encode",
    "normalized_pixel_at",
    "pack_indices",
    "pixel_at",
    "to_rgba_bytes",
    "RGBA",
    "TRANSPARENT",
    "Color",
    "Container",
    "IndexBuffer",
    "Palette",
    "MAX_SHORT_PALETTE",
    "index_width_for",
]

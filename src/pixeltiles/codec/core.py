"""
Palette + packed-index codec.

Encoding scans RGBA pixels in row-major order and assigns every distinct
color the next palette slot in first-seen order. Indices are packed one byte
per pixel while the palette fits in 256 entries and two bytes (little-endian)
otherwise. All functions here are pure; decoded buffers are memoized by
`DecodeCache`.
"""

import logging
import struct
from typing import Dict, Optional

from ..errors import EncodeError, InvalidContainerError
from .cache import DecodeCache, default_decode_cache
from .models import (
    RGBA,
    Color,
    Container,
    IndexBuffer,
    MAX_SHORT_PALETTE,
    VALID_INDEX_WIDTHS,
    index_width_for,
)

logger = logging.getLogger(__name__)

BYTES_PER_PIXEL = 4


def encode(pixels: bytes | bytearray | memoryview, width: int, height: int) -> Container:
    """Encode a flat RGBA byte buffer into a container.

    Args:
        pixels: width * height * 4 bytes, row-major RGBA
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        Container with a first-seen-order palette

    Raises:
        EncodeError: If dimensions are negative, the buffer length is wrong
            or the image has more than MAX_SHORT_PALETTE colors
    """
    if width < 0 or height < 0:
        raise EncodeError(f"Invalid image dimensions: {width}x{height}")

    data = bytes(pixels)
    expected = width * height * BYTES_PER_PIXEL
    if len(data) != expected:
        raise EncodeError(
            f"Pixel buffer has {len(data)} bytes, expected {expected} for {width}x{height} RGBA"
        )

    # dict preserves insertion order; slot == first-seen position
    color_slots: Dict[Color, int] = {}
    indices: list[int] = []
    for offset in range(0, len(data), BYTES_PER_PIXEL):
        color = (data[offset], data[offset + 1], data[offset + 2], data[offset + 3])
        slot = color_slots.get(color)
        if slot is None:
            slot = len(color_slots)
            color_slots[color] = slot
        indices.append(slot)

    palette = tuple(color_slots)
    if len(palette) > MAX_SHORT_PALETTE:
        raise EncodeError(
            f"Image has {len(palette)} distinct colors, at most {MAX_SHORT_PALETTE} are supported"
        )
    index_width = index_width_for(len(palette))
    logger.debug(
        f"Encoded {width}x{height} image: {len(palette)} colors, {index_width} byte(s) per index"
    )
    return Container(
        width=width,
        height=height,
        palette=palette,
        packed_indices=pack_indices(indices, index_width),
        index_width=index_width,
    )


def pack_indices(indices: list[int], index_width: int) -> bytes:
    """Pack palette indices into bytes using the given index width."""
    if index_width == 1:
        return bytes(indices)
    if index_width == 2:
        return struct.pack(f"<{len(indices)}H", *indices)
    raise EncodeError(f"Unsupported index width: {index_width}")


def decode(container: Container) -> IndexBuffer:
    """Unpack a container's indices.

    Raises:
        InvalidContainerError: If the unpacked length differs from
            width * height, the index width is unknown, or an index falls
            outside the palette.
    """
    index_width = container.index_width
    packed = container.packed_indices
    if index_width not in VALID_INDEX_WIDTHS:
        raise InvalidContainerError(f"Unsupported index width: {index_width}")
    if len(packed) % index_width:
        raise InvalidContainerError(
            f"Packed buffer of {len(packed)} bytes is not a multiple of index width {index_width}"
        )

    if index_width == 1:
        indices = tuple(packed)
    else:
        indices = struct.unpack(f"<{len(packed) // 2}H", packed)

    if len(indices) != container.pixel_count:
        raise InvalidContainerError(
            f"Decoded {len(indices)} indices, expected {container.pixel_count} "
            f"for {container.width}x{container.height}"
        )
    if indices and max(indices) >= len(container.palette):
        raise InvalidContainerError(
            f"Index {max(indices)} out of range for palette of {len(container.palette)} colors"
        )
    return indices


def to_rgba_bytes(container: Container, cache: Optional[DecodeCache] = None) -> bytes:
    """Expand a container back into a flat RGBA byte buffer."""
    indices = _cache_or_default(cache).get(container)
    palette = container.palette
    out = bytearray(len(indices) * BYTES_PER_PIXEL)
    for i, slot in enumerate(indices):
        offset = i * BYTES_PER_PIXEL
        out[offset:offset + BYTES_PER_PIXEL] = bytes(palette[slot])
    return bytes(out)


def pixel_at(
    container: Container, x: int, y: int, cache: Optional[DecodeCache] = None
) -> Color | None:
    """Return the RGBA byte quadruple at (x, y), or None if out of range."""
    if x < 0 or x >= container.width or y < 0 or y >= container.height:
        return None
    indices = _cache_or_default(cache).get(container)
    return container.palette[indices[y * container.width + x]]


def normalized_pixel_at(
    container: Container, x: int, y: int, cache: Optional[DecodeCache] = None
) -> RGBA | None:
    """Return the color at (x, y) with channels scaled to [0, 1], or None."""
    pixel = pixel_at(container, x, y, cache)
    if pixel is None:
        return None
    return RGBA.from_ints(*pixel)


def _cache_or_default(cache: Optional[DecodeCache]) -> DecodeCache:
    return cache if cache is not None else default_decode_cache

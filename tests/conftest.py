"""Shared fixtures for pixeltiles tests."""

from typing import Callable

import pytest


def gradient_pixels(width: int, height: int) -> bytes:
    """RGBA buffer where pixel (x, y) is (x, y, 0, 255)."""
    out = bytearray()
    for y in range(height):
        for x in range(width):
            out += bytes((x, y, 0, 255))
    return bytes(out)


@pytest.fixture
def make_gradient() -> Callable[[int, int], bytes]:
    """Factory for gradient pixel buffers (dimensions must stay below 256)."""
    return gradient_pixels


@pytest.fixture
def gradient_tile():
    """A single TILE_SIZE x TILE_SIZE gradient sheet."""
    from pixeltiles.codec import encode
    from pixeltiles.tilemap import TILE_SIZE

    return encode(gradient_pixels(TILE_SIZE, TILE_SIZE), TILE_SIZE, TILE_SIZE)


@pytest.fixture
def gradient_sheet():
    """A 2 x 2 tile gradient sheet (1024 colors, two-byte indices)."""
    from pixeltiles.codec import encode
    from pixeltiles.tilemap import TILE_SIZE

    size = TILE_SIZE * 2
    return encode(gradient_pixels(size, size), size, size)

"""
Data models for the indexed-color container format.

A container holds one source image as a palette of RGBA byte quadruples and a
packed buffer of per-pixel palette indices. Models are plain value objects:
no decoding or file-system logic lives here.
"""

import logging
import re
from dataclasses import dataclass
from typing import NamedTuple, Tuple

Color = Tuple[int, int, int, int]
Palette = Tuple[Color, ...]
IndexBuffer = Tuple[int, ...]

# Palettes up to this size pack one byte per pixel
MAX_BYTE_PALETTE = 256
# Largest palette a uint16 index can address
MAX_SHORT_PALETTE = 0x10000
VALID_INDEX_WIDTHS = (1, 2)

_HEX_COLOR = re.compile(r"[0-9A-Fa-f]{6}")

logger = logging.getLogger(__name__)


def index_width_for(palette_size: int) -> int:
    """Return the number of bytes per packed index for a palette size."""
    return 1 if palette_size <= MAX_BYTE_PALETTE else 2


@dataclass(frozen=True, eq=False)
class Container:
    """Serialized unit for a single source image.

    Containers compare by identity so that decode caches can key on them;
    use `same_content` to compare two containers by value.
    """
    width: int
    height: int
    palette: Palette
    packed_indices: bytes
    index_width: int = 1

    @property
    def pixel_count(self) -> int:
        """Number of pixels described by the header."""
        return self.width * self.height

    @property
    def byte_size(self) -> int:
        """Approximate in-memory size: packed indices plus 4 bytes per palette entry."""
        return len(self.packed_indices) + len(self.palette) * 4

    def same_content(self, other: "Container") -> bool:
        """Return True if both containers are byte-identical."""
        return (
            self.width == other.width
            and self.height == other.height
            and self.palette == other.palette
            and self.packed_indices == other.packed_indices
            and self.index_width == other.index_width
        )


class RGBA(NamedTuple):
    """Normalized color with channels in [0, 1]."""
    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_ints(cls, r: int, g: int, b: int, a: int = 255) -> "RGBA":
        """Build from 0-255 channel values."""
        return cls(r / 255, g / 255, b / 255, a / 255)

    @classmethod
    def from_hex(cls, value: str) -> "RGBA":
        """Parse '#rgb' or '#rrggbb'. Invalid input yields opaque magenta."""
        digits = value[1:] if value.startswith("#") else value
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if not _HEX_COLOR.fullmatch(digits):
            logger.warning(f"Invalid hex color: {value}, defaulting to magenta")
            return cls(1.0, 0.0, 1.0, 1.0)
        return cls.from_ints(
            int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
        )

    def to_ints(self) -> Color:
        """Convert back to 0-255 channel values."""
        return (
            round(self.r * 255),
            round(self.g * 255),
            round(self.b * 255),
            round(self.a * 255),
        )


TRANSPARENT = RGBA(0.0, 0.0, 0.0, 0.0)

"""
Serialization of containers to and from the generated data artifact.

The artifact is a JSON object with two sections, ``tilemaps`` and ``images``,
each mapping an asset name to::

    {"width": int, "height": int, "palette": [[r, g, b, a], ...],
     "pixelsBase64": str, "bytesPerPixel": 1 | 2}
"""

import base64
import binascii
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, cast

import orjson

from ..codec.models import Container, VALID_INDEX_WIDTHS
from ..errors import InvalidContainerError

logger = logging.getLogger(__name__)

SECTIONS = ("tilemaps", "images")


@dataclass
class AssetBundle:
    """All containers produced by one asset build, grouped by section."""
    tilemaps: Dict[str, Container] = field(default_factory=lambda: {})
    images: Dict[str, Container] = field(default_factory=lambda: {})

    def section(self, name: str) -> Dict[str, Container]:
        """Return the named section ("tilemaps" or "images")."""
        if name == "tilemaps":
            return self.tilemaps
        if name == "images":
            return self.images
        raise ValueError(f"Unknown artifact section: {name}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to the artifact's JSON-ready structure."""
        return {
            section: {
                name: container_to_dict(container)
                for name, container in self.section(section).items()
            }
            for section in SECTIONS
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AssetBundle":
        """Create AssetBundle from parsed artifact JSON.

        Raises:
            InvalidContainerError: If any entry is malformed
        """
        bundle = cls()
        for section in SECTIONS:
            raw = data.get(section, {})
            if not isinstance(raw, dict):
                raise InvalidContainerError(f"Artifact section '{section}' is not an object")
            target = bundle.section(section)
            for name, entry in cast(dict[str, Any], raw).items():
                if not isinstance(entry, dict):
                    raise InvalidContainerError(f"Asset '{name}' is not an object")
                target[str(name)] = container_from_dict(cast(dict[str, Any], entry))
        return bundle


def container_to_dict(container: Container) -> dict[str, Any]:
    """Convert a container to its artifact entry."""
    return {
        "width": container.width,
        "height": container.height,
        "palette": [list(color) for color in container.palette],
        "pixelsBase64": base64.b64encode(container.packed_indices).decode("ascii"),
        "bytesPerPixel": container.index_width,
    }


def container_from_dict(data: dict[str, Any]) -> Container:
    """Create a container from an artifact entry.

    Only the entry's shape is checked here; the packed length is verified
    when the container is decoded.

    Raises:
        InvalidContainerError: If a field is missing or has the wrong type
    """
    try:
        width = int(data["width"])
        height = int(data["height"])
        index_width = int(data.get("bytesPerPixel", 1))
        palette = tuple(
            cast(tuple[int, int, int, int], tuple(int(channel) for channel in color))
            for color in data["palette"]
        )
        packed = base64.b64decode(str(data["pixelsBase64"]), validate=True)
    except (KeyError, TypeError, ValueError, binascii.Error) as e:
        raise InvalidContainerError(f"Malformed container entry: {e}") from e

    if any(len(color) != 4 for color in palette):
        raise InvalidContainerError("Palette entries must have exactly 4 channels")
    if index_width not in VALID_INDEX_WIDTHS:
        raise InvalidContainerError(f"Unsupported bytesPerPixel: {index_width}")

    return Container(
        width=width,
        height=height,
        palette=palette,
        packed_indices=packed,
        index_width=index_width,
    )


def write_artifact(bundle: AssetBundle, output_path: Path) -> Path:
    """Write the bundle as JSON, creating parent directories as needed."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(orjson.dumps(bundle.to_dict(), option=orjson.OPT_INDENT_2))
    logger.info(f"Generated asset data at: {output_path}")
    return output_path


def read_artifact(path: Path) -> AssetBundle:
    """Load an artifact written by `write_artifact`.

    Raises:
        FileNotFoundError: If the file doesn't exist
        InvalidContainerError: If the JSON is invalid or an entry is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Asset data file not found: {path}")

    try:
        data = orjson.loads(path.read_bytes())
    except orjson.JSONDecodeError as e:
        raise InvalidContainerError(f"Failed to parse JSON from {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidContainerError(f"Asset data in {path} is not a JSON object")

    bundle = AssetBundle.from_dict(cast(dict[str, Any], data))
    logger.debug(
        f"Loaded {len(bundle.tilemaps)} tilemap(s) and {len(bundle.images)} image(s) from {path}"
    )
    return bundle

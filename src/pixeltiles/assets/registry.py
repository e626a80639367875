"""
Name-based lookup of encoded containers.
"""

import logging
import re
from pathlib import Path
from typing import Dict, Iterator, Optional

from ..codec import Container
from ..errors import AssetNotFoundError
from .serialization import AssetBundle, read_artifact

logger = logging.getLogger(__name__)

_PNG_NAME = re.compile(r"([^/\\]+)\.png$", re.IGNORECASE)


def resolve_tilemap_name(path: str) -> str:
    """Map a sheet path such as 'assets/tilemap_packed.png' to 'tilemap_packed'.

    Raises:
        AssetNotFoundError: If the path does not name a PNG file
    """
    match = _PNG_NAME.search(path)
    if not match:
        raise AssetNotFoundError(path, f"Invalid tilemap path: {path}")
    return match.group(1)


class AssetRegistry:
    """Registry of containers keyed by asset name.

    Containers are read-only, so the registry hands out the same instance
    on every lookup; decode caches keyed by identity stay warm.
    """

    def __init__(self, containers: Optional[Dict[str, Container]] = None):
        self._containers: Dict[str, Container] = dict(containers or {})

    @classmethod
    def from_bundle(cls, bundle: AssetBundle, section: str = "tilemaps") -> "AssetRegistry":
        """Create a registry over one section of a bundle."""
        return cls(bundle.section(section))

    @classmethod
    def from_file(cls, path: Path, section: str = "tilemaps") -> "AssetRegistry":
        """Create a registry from an artifact file on disk."""
        registry = cls.from_bundle(read_artifact(path), section)
        logger.debug(f"Registered {len(registry)} {section} from {path}")
        return registry

    def register(self, name: str, container: Container) -> None:
        """Add or replace a container."""
        self._containers[name] = container

    def get(self, name: str) -> Container:
        """Return the container registered under name.

        Raises:
            AssetNotFoundError: If no container has that name
        """
        container = self._containers.get(name)
        if container is None:
            raise AssetNotFoundError(
                name, f"Tilemap data not found for: {name}. Run the asset build to generate it."
            )
        return container

    def names(self) -> list[str]:
        """Registered names in registration order."""
        return list(self._containers)

    def __contains__(self, name: object) -> bool:
        return name in self._containers

    def __iter__(self) -> Iterator[str]:
        return iter(self._containers)

    def __len__(self) -> int:
        return len(self._containers)

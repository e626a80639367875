"""
Decode cache for containers.

Decoding a container is the expensive step; pixel queries look the decoded
index buffer up here instead of unpacking per access. Entries are keyed by
container identity and held weakly, so dropping a container drops its entry.
"""

import logging
import weakref
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Container, IndexBuffer


class DecodeCache:
    """Identity-keyed cache of decoded index buffers."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._decoded: "weakref.WeakKeyDictionary[Container, IndexBuffer]" = (
            weakref.WeakKeyDictionary()
        )

    def get(self, container: "Container") -> "IndexBuffer":
        """Return decoded indices, decoding on first access."""
        indices = self._decoded.get(container)
        if indices is None:
            from .core import decode

            indices = decode(container)
            self._decoded[container] = indices
            self.logger.debug(
                f"Decoded {container.width}x{container.height} container "
                f"({len(container.palette)} colors, {container.index_width} byte(s) per index)"
            )
        return indices

    def invalidate(self, container: "Container") -> None:
        """Drop the cached indices for one container."""
        self._decoded.pop(container, None)

    def clear(self) -> None:
        """Drop all cached indices."""
        cache_size = len(self._decoded)
        self._decoded.clear()
        if cache_size > 0:
            self.logger.debug(f"Decode cache cleared ({cache_size} items)")

    def __contains__(self, container: object) -> bool:
        try:
            return container in self._decoded
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._decoded)


default_decode_cache = DecodeCache()

"""
Asset path resolution.
"""

import logging
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)


def candidate_asset_paths(asset_name: str, search_roots: Iterable[Path]) -> List[Path]:
    """List where an asset may live, in lookup order.

    Each root is tried directly and with an `assets/` subdirectory.
    """
    candidates: List[Path] = []
    for root in search_roots:
        root = Path(root)
        candidates.append(root / asset_name)
        candidates.append(root / "assets" / asset_name)
    return candidates


def find_asset_path(asset_name: str, search_roots: Iterable[Path]) -> Path:
    """Return the first existing candidate path for an asset.

    Falls back to `<cwd>/assets/<asset_name>` with a warning when nothing
    matches; the caller's subsequent open reports the failure.
    """
    for path in candidate_asset_paths(asset_name, search_roots):
        if path.exists():
            return path

    default = Path.cwd() / "assets" / asset_name
    logger.warning(f"Asset not found: {asset_name}, trying default path {default}")
    return default

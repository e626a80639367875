"""
Asset build step: rasterize PNG sheets and encode them into containers.

Source layout::

    <source_dir>/tilemaps/*.png   -> bundle.tilemaps
    <source_dir>/images/*.png     -> bundle.images

Any unreadable image, or two files with the same stem, aborts the build.
"""

import logging
from pathlib import Path
from typing import Dict

from PIL import Image, UnidentifiedImageError

from ..codec import Container, encode
from ..errors import AssetBuildError
from .serialization import SECTIONS, AssetBundle, write_artifact

logger = logging.getLogger(__name__)


def asset_name_for(path: Path) -> str:
    """Derive the artifact key for an image file: its stem, unchanged.

    Must agree with `resolve_tilemap_name` so a sheet loads by its file name.
    """
    return Path(path).stem


def rasterize(path: Path) -> tuple[bytes, int, int]:
    """Read an image file into a flat RGBA byte buffer.

    Returns:
        (pixels, width, height)

    Raises:
        AssetBuildError: If the file is missing or not a readable image
    """
    try:
        with Image.open(path) as image:
            rgba = image.convert("RGBA")
            return rgba.tobytes(), rgba.width, rgba.height
    except (UnidentifiedImageError, OSError) as e:
        raise AssetBuildError(f"Cannot read image {path}: {e}") from e


def encode_image_file(path: Path) -> Container:
    """Rasterize and encode a single image file."""
    pixels, width, height = rasterize(path)
    container = encode(pixels, width, height)

    logger.info(f"  Dimensions: {width}x{height}")
    logger.info(f"  Palette size: {len(container.palette)} colors")
    logger.info(
        f"  Pixel data: {len(container.packed_indices)} bytes, "
        f"{container.index_width} byte(s) per pixel"
    )
    return container


def _encode_directory(directory: Path, kind: str) -> Dict[str, Container]:
    """Encode every PNG in a directory, in filename order."""
    containers: Dict[str, Container] = {}
    if not directory.exists() or not directory.is_dir():
        logger.warning(f"No {kind} directory at {directory}, skipping")
        return containers

    png_files = sorted(
        (p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == ".png"),
        key=lambda p: p.name,
    )
    sources: Dict[str, Path] = {}
    for png in png_files:
        name = asset_name_for(png)
        if name in sources:
            raise AssetBuildError(
                f"Duplicate {kind} name '{name}': {sources[name].name} and {png.name}"
            )
        sources[name] = png

    for name, png in sources.items():
        logger.info(f"Processing {kind}: {png.name}...")
        containers[name] = encode_image_file(png)
    return containers


def build_assets(source_dir: Path, output_path: Path | None = None) -> AssetBundle:
    """Encode all source images and optionally write the artifact.

    Args:
        source_dir: Directory holding `tilemaps/` and `images/`
        output_path: Artifact destination; nothing is written if None

    Returns:
        The encoded AssetBundle

    Raises:
        AssetBuildError: If source_dir is missing, an image can't be read
            or two images share a name
    """
    source_dir = Path(source_dir)
    if not source_dir.exists() or not source_dir.is_dir():
        raise AssetBuildError(f"Asset directory not found: {source_dir}")

    bundle = AssetBundle(
        tilemaps=_encode_directory(source_dir / "tilemaps", "tilemap"),
        images=_encode_directory(source_dir / "images", "image"),
    )

    if output_path is not None:
        write_artifact(bundle, Path(output_path))

    log_bundle_summary(bundle)
    return bundle


def log_bundle_summary(bundle: AssetBundle) -> None:
    """Log per-asset size statistics for a bundle."""
    logger.info(f"Total tilemaps processed: {len(bundle.tilemaps)}")
    logger.info(f"Total images processed: {len(bundle.images)}")
    for section in SECTIONS:
        for name, container in bundle.section(section).items():
            logger.info(
                f"  {name}: {container.width}x{container.height}, "
                f"{len(container.palette)} colors, ~{container.byte_size / 1024:.1f}KB"
            )

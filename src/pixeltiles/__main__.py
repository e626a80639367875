"""
Asset build entry point for pixeltiles.
Usage: python -m pixeltiles [source_dir] [output_path]
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .assets import build_assets
from .errors import PixelTilesError
from .settings import AppSettings
from .utils.logging_config import setup_logging


def main(argv: Optional[List[str]] = None) -> int:
    """Build the asset data artifact; returns a process exit code."""
    args = sys.argv[1:] if argv is None else argv
    logger = logging.getLogger(f"{__name__}.main")

    settings = AppSettings()
    setup_logging(settings)
    logger.info(f"pixeltiles {__version__}: building asset data")
    logger.debug(f"Configuration loaded from {settings.get_settings_file_path()}")

    # Command-line paths override the stored ones for this run only
    if args:
        source_dir = Path(args[0])
        output_path = Path(args[1]) if len(args) > 1 else settings.artifact_path
    else:
        validation = settings.validate()
        for warning in validation.warnings:
            logger.warning(f"  {warning}")
        if not validation.is_valid:
            logger.error("Configuration validation failed:")
            for error in validation.errors:
                logger.error(f"  {error}")
            return 1
        source_dir, output_path = settings.assets_source_dir, settings.artifact_path

    try:
        build_assets(source_dir, output_path)
    except PixelTilesError as e:
        logger.error(f"Asset build failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

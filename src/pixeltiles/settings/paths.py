"""
Path-related settings for pixeltiles.
"""

from pathlib import Path
from typing import Union

from .base import SettingsSection

DEFAULT_ASSETS_SOURCE_DIR = "assets"
DEFAULT_ARTIFACT_PATH = "build/tilemap_data.json"


class PathSettings(SettingsSection):
    """Manages where source sheets are read from and the artifact is written."""

    @property
    def assets_source_dir(self) -> Path:
        """Directory holding `tilemaps/` and `images/` source PNGs."""
        return Path(self._get_str("paths/assets_source", DEFAULT_ASSETS_SOURCE_DIR))

    @assets_source_dir.setter
    def assets_source_dir(self, value: Union[str, Path]) -> None:
        self._set("paths/assets_source", str(value))

    @property
    def artifact_path(self) -> Path:
        """Where the generated asset data JSON is written."""
        return Path(self._get_str("paths/artifact", DEFAULT_ARTIFACT_PATH))

    @artifact_path.setter
    def artifact_path(self, value: Union[str, Path]) -> None:
        self._set("paths/artifact", str(value))

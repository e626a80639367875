"""
Settings validation system for pixeltiles.
"""

import logging
from typing import List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        source_dir = self.settings.assets_source_dir
        if not source_dir.exists():
            errors.append(f"Asset source directory does not exist: {source_dir}")
        elif not (source_dir / "tilemaps").exists():
            warnings.append(f"Asset source directory has no 'tilemaps' directory: {source_dir}")

        artifact = self.settings.artifact_path
        if artifact.exists() and artifact.is_dir():
            errors.append(f"Artifact path is a directory: {artifact}")

        generator = self.settings.generator
        if generator.level_width <= 0 or generator.level_height <= 0:
            errors.append(
                f"Invalid level size: {generator.level_width}x{generator.level_height}"
            )

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )

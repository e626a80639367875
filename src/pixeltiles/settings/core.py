"""
Core settings management for pixeltiles.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QSettings

from .generator import GeneratorSettings
from .logging import LoggingSettings
from .paths import PathSettings
from .types import ConfigError, ConfigVersion, ValidationResult
from .validation import SettingsValidator

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to settings with cross-platform storage.
    Pass settings_file to keep everything in a single INI file instead of
    the platform's native store.
    """

    def __init__(
        self, profile: str = "default", settings_file: Optional[Union[str, Path]] = None
    ):
        """Initialize settings for a profile.

        Args:
            profile: Settings profile name (default: "default")
            settings_file: Optional INI file to use as the backing store
        """
        if settings_file is not None:
            self.settings = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings("pixeltiles", "pixeltiles")
        self.profile = profile

        # Profile is a group: pixeltiles/<profile>/...
        self.settings.beginGroup(profile)

        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._logging = LoggingSettings(self.settings)
        self._generator = GeneratorSettings(self.settings)

        self._ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    def _ensure_version(self) -> None:
        """Stamp the configuration version on first run."""
        if not str(self.settings.value("app/version", "")):
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.setValue("app/first_run", True)
            self.settings.sync()
            if self.settings.status() == QSettings.Status.AccessError:
                raise ConfigError(
                    f"Cannot write settings to {self.settings.fileName()}"
                )
            logger.info("First run detected, initializing configuration")

    # === SUBSYSTEM ACCESS ===

    @property
    def paths(self) -> PathSettings:
        """Access path settings subsystem."""
        return self._paths

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    @property
    def generator(self) -> GeneratorSettings:
        """Access level generator settings subsystem."""
        return self._generator

    # === VERSION AND FIRST RUN ===

    @property
    def is_first_run(self) -> bool:
        """Check if this is the first run of the application."""
        value = self.settings.value("app/first_run", True)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value)

    def set_first_run_complete(self) -> None:
        """Mark first run as complete."""
        self.settings.setValue("app/first_run", False)
        self.settings.sync()

    @property
    def version(self) -> str:
        """Get configuration version."""
        value = self.settings.value("app/version", ConfigVersion.CURRENT.value)
        return str(value)

    # === PATH SETTINGS (DELEGATED) ===

    @property
    def assets_source_dir(self) -> Path:
        """Directory holding source sheets."""
        return self._paths.assets_source_dir

    @assets_source_dir.setter
    def assets_source_dir(self, value: Union[str, Path]) -> None:
        self._paths.assets_source_dir = value

    @property
    def artifact_path(self) -> Path:
        """Where the generated asset data is written."""
        return self._paths.artifact_path

    @artifact_path.setter
    def artifact_path(self, value: Union[str, Path]) -> None:
        self._paths.artifact_path = value

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        """Get log file path."""
        return self._logging.log_file_path

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()

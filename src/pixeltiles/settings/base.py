"""
Shared accessors for settings sections.
"""

from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SettingsSection:
    """Base for a group of settings stored in one QSettings instance.

    QSettings returns strings for values read back from INI files, so every
    getter coerces to the expected type.
    """

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_bool(self, key: str, default: bool = False) -> bool:
        """Type-safe boolean retrieval from settings."""
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _get_int(self, key: str, default: int = 0) -> int:
        """Type-safe integer retrieval from settings."""
        value = self.settings.value(key, default)
        try:
            return int(cast(str | int, value)) if value is not None else default
        except (ValueError, TypeError):
            return default

    def _set(self, key: str, value: object) -> None:
        """Store a value and flush it to disk."""
        self.settings.setValue(key, value)
        self.settings.sync()

"""
Settings package for pixeltiles.

Type-safe configuration on top of Qt's QSettings.

Usage:
    from pixeltiles.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .generator import GeneratorSettings
from .logging import LoggingSettings
from .paths import PathSettings
from .types import ConfigVersion, ConfigError, ValidationResult

__all__ = [
    "AppSettings",
    "GeneratorSettings",
    "LoggingSettings",
    "PathSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
]

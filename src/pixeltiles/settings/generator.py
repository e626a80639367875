"""
Level generation settings for pixeltiles.
"""

import logging

from ..level.generator import DEFAULT_SEED
from ..level.level import Level
from .base import SettingsSection

logger = logging.getLogger(__name__)

DEFAULT_LEVEL_WIDTH = 20
DEFAULT_LEVEL_HEIGHT = 17


class GeneratorSettings(SettingsSection):
    """Size and seed used when generating the outdoor level."""

    @property
    def level_width(self) -> int:
        return self._get_int("generator/level_width", DEFAULT_LEVEL_WIDTH)

    @level_width.setter
    def level_width(self, value: int) -> None:
        if value > 0:
            self._set("generator/level_width", value)
        else:
            logger.warning(f"Invalid level width: {value}, keeping current: {self.level_width}")

    @property
    def level_height(self) -> int:
        return self._get_int("generator/level_height", DEFAULT_LEVEL_HEIGHT)

    @level_height.setter
    def level_height(self, value: int) -> None:
        if value > 0:
            self._set("generator/level_height", value)
        else:
            logger.warning(f"Invalid level height: {value}, keeping current: {self.level_height}")

    @property
    def level_seed(self) -> int:
        """Seed for the random base-fill stage."""
        return self._get_int("generator/level_seed", DEFAULT_SEED)

    @level_seed.setter
    def level_seed(self, value: int) -> None:
        self._set("generator/level_seed", value)

    def create_level(self) -> Level:
        """Build and generate a level using the stored size and seed."""
        width, height, seed = self.level_width, self.level_height, self.level_seed
        level = Level(width, height)
        level.procedural_generate_level(seed=seed)
        logger.debug(f"Created {width}x{height} level with seed {seed}")
        return level

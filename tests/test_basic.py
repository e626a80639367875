"""Basic unit tests for pixeltiles settings and logging setup."""

import logging
from pathlib import Path

import pytest

from pixeltiles.settings import AppSettings, ConfigVersion


@pytest.fixture
def settings_obj(tmp_path: Path) -> AppSettings:
    """AppSettings backed by a throwaway INI file."""
    return AppSettings(settings_file=tmp_path / "settings.ini")


@pytest.fixture
def restore_logging():
    """Put the root logger back the way the test runner left it."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


class TestSettingsInitialization:
    """Test settings initialization and basic operations."""

    def test_app_settings_init(self, settings_obj: AppSettings) -> None:
        """Test AppSettings can be initialized and stamps its version."""
        assert settings_obj.version == ConfigVersion.CURRENT.value
        assert settings_obj.is_first_run

        settings_obj.set_first_run_complete()
        assert not settings_obj.is_first_run

    def test_defaults(self, settings_obj: AppSettings) -> None:
        """Test default paths and generator settings."""
        assert settings_obj.assets_source_dir == Path("assets")
        assert settings_obj.artifact_path == Path("build/tilemap_data.json")
        assert settings_obj.generator.level_width == 20
        assert settings_obj.generator.level_height == 17
        assert settings_obj.generator.level_seed == 0

    def test_values_persist_in_file(self, tmp_path: Path) -> None:
        """Test values survive reopening the same settings file."""
        settings_file = tmp_path / "settings.ini"
        first = AppSettings(settings_file=settings_file)
        first.assets_source_dir = tmp_path / "art"
        first.generator.level_width = 32

        second = AppSettings(settings_file=settings_file)

        assert second.assets_source_dir == tmp_path / "art"
        assert second.generator.level_width == 32

    def test_profiles_are_separate(self, tmp_path: Path) -> None:
        """Test profiles do not share values."""
        settings_file = tmp_path / "settings.ini"
        AppSettings(settings_file=settings_file).console_log_level = "debug"

        other = AppSettings(profile="other", settings_file=settings_file)

        assert AppSettings(settings_file=settings_file).console_log_level == "DEBUG"
        assert other.console_log_level == "INFO"

    def test_create_level_uses_stored_values(self, settings_obj: AppSettings) -> None:
        """Test the generator settings drive level size and seed."""
        from pixeltiles.level import Level

        settings_obj.generator.level_width = 8
        settings_obj.generator.level_height = 4
        settings_obj.generator.level_seed = 7

        level = settings_obj.generator.create_level()

        expected = Level(8, 4)
        expected.procedural_generate_level(seed=7)
        assert (level.width, level.height) == (8, 4)
        assert level.get_bottom_layer_tiles() == expected.get_bottom_layer_tiles()
        assert level.get_top_layer_tiles() == expected.get_top_layer_tiles()

    def test_invalid_values_are_ignored(self, settings_obj: AppSettings) -> None:
        """Test invalid setter values keep the current value."""
        settings_obj.console_log_level = "LOUD"
        settings_obj.generator.level_height = 0

        assert settings_obj.console_log_level == "INFO"
        assert settings_obj.generator.level_height == 17


class TestSettingsValidation:
    """Test configuration validation."""

    def test_missing_source_dir(self, settings_obj: AppSettings, tmp_path: Path) -> None:
        """Test a missing asset source directory is an error."""
        settings_obj.assets_source_dir = tmp_path / "missing"

        validation = settings_obj.validate()

        assert not validation.is_valid
        assert any("does not exist" in error for error in validation.errors)

    def test_source_without_tilemaps_warns(
        self, settings_obj: AppSettings, tmp_path: Path
    ) -> None:
        """Test a source directory without tilemaps/ only warns."""
        settings_obj.assets_source_dir = tmp_path
        settings_obj.artifact_path = tmp_path / "out.json"

        validation = settings_obj.validate()

        assert validation.is_valid
        assert len(validation.warnings) == 1

    def test_artifact_path_is_directory(self, settings_obj: AppSettings, tmp_path: Path) -> None:
        """Test an artifact path pointing at a directory is an error."""
        (tmp_path / "tilemaps").mkdir()
        settings_obj.assets_source_dir = tmp_path
        settings_obj.artifact_path = tmp_path

        validation = settings_obj.validate()

        assert not validation.is_valid
        assert validation.warnings == []


class TestUtilsLogging:
    """Test logging configuration."""

    def test_logging_setup_with_settings(
        self, settings_obj: AppSettings, restore_logging: None
    ) -> None:
        """Test logging setup installs a console handler at the configured level."""
        from pixeltiles.utils.logging_config import setup_logging

        settings_obj.console_log_level = "WARNING"
        setup_logging(settings_obj)

        assert logging.getLogger("pixeltiles").level == logging.DEBUG
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert handlers[0].level == logging.WARNING

    def test_pillow_loggers_are_capped(
        self, settings_obj: AppSettings, restore_logging: None
    ) -> None:
        """Test Pillow's debug chatter is filtered out, plugin loggers included."""
        from pixeltiles.utils.logging_config import QUIET_LOGGERS, setup_logging

        setup_logging(settings_obj)

        assert "PIL" in QUIET_LOGGERS
        assert logging.getLogger("PIL.PngImagePlugin").getEffectiveLevel() == logging.INFO
        assert logging.getLogger("pixeltiles.assets").getEffectiveLevel() == logging.DEBUG

    def test_file_logging_writes_csv(
        self,
        settings_obj: AppSettings,
        restore_logging: None,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test file logging writes semicolon-separated records."""
        from pixeltiles.utils.logging_config import setup_logging

        monkeypatch.chdir(tmp_path)
        settings_obj.console_logging = False
        settings_obj.file_logging = True
        setup_logging(settings_obj)

        logging.getLogger("pixeltiles.test").info('said "hi"')
        for handler in logging.getLogger().handlers:
            handler.flush()
            handler.close()

        lines = (tmp_path / settings_obj.log_file_path).read_text(encoding="utf-8").splitlines()
        assert lines[-1].endswith('"said ""hi"""')
        assert ';INFO    ;' in lines[-1]

"""Unit tests for the config module."""

import pytest
from pathlib import Path
import tempfile

from event_reminder.config import (
    AppConfig,
    GeneralConfig,
    SchedulerConfig,
    PopupConfig,
    ConfigManager,
    parse_config_data,
    load_config_file
)


FIXTURES_DIR = Path(__file__).parent / "fixtures"


class TestGeneralConfig:
    """Tests for GeneralConfig dataclass."""

    def test_relative_events_file_resolves_in_config_dir(self):
        """Test that a relative events file resolves in the config dir."""
        config = GeneralConfig.from_dict({"events_file": "my.txt"}, Path("/config"))
        assert config.events_file == Path("/config/my.txt")

    def test_absolute_events_file_kept(self):
        """Test that an absolute events file is kept as is."""
        config = GeneralConfig.from_dict({"events_file": "/data/events.txt"}, Path("/config"))
        assert config.events_file == Path("/data/events.txt")

    def test_defaults(self):
        """Test GeneralConfig defaults."""
        config = GeneralConfig.from_dict({}, Path("/config"))
        assert config.events_file == Path("/config/events.txt")
        assert config.log_level == "WARNING"

    def test_log_level_case_insensitive(self):
        """Test that log_level is case insensitive."""
        config = GeneralConfig.from_dict({"log_level": "debug"}, Path("/config"))
        assert config.log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test that an unknown log_level raises ValueError."""
        with pytest.raises(ValueError, match="log_level"):
            GeneralConfig.from_dict({"log_level": "LOUD"}, Path("/config"))

    def test_non_string_log_level(self):
        """Test that a numeric log_level raises ValueError naming the key."""
        with pytest.raises(ValueError, match="log_level"):
            GeneralConfig.from_dict({"log_level": 10}, Path("/config"))

    def test_non_string_events_file(self):
        """Test that a non-string events_file raises ValueError naming the key."""
        with pytest.raises(ValueError, match="events_file"):
            GeneralConfig.from_dict({"events_file": 5}, Path("/config"))

    def test_events_file_string_converted(self):
        """Test that a string events_file becomes a Path."""
        config = GeneralConfig(events_file="events.txt")
        assert isinstance(config.events_file, Path)


class TestSchedulerConfig:
    """Tests for SchedulerConfig dataclass."""

    def test_default_values(self):
        """Test that SchedulerConfig has correct default values."""
        config = SchedulerConfig()

        assert config.check_interval == 1.0
        assert config.console is True
        assert config.popup is True

    def test_from_dict(self):
        """Test creating SchedulerConfig from a dictionary."""
        config = SchedulerConfig.from_dict({
            "check_interval": 2,
            "console": False,
            "popup": False
        })

        assert config.check_interval == 2.0
        assert config.console is False
        assert config.popup is False

    @pytest.mark.parametrize("interval", [0, -1.5])
    def test_non_positive_interval(self, interval):
        """Test that a non-positive check_interval raises ValueError."""
        with pytest.raises(ValueError, match="check_interval"):
            SchedulerConfig.from_dict({"check_interval": interval})

    def test_non_numeric_interval(self):
        """Test that a non-numeric check_interval raises ValueError."""
        with pytest.raises(ValueError, match="check_interval"):
            SchedulerConfig.from_dict({"check_interval": "fast"})

    @pytest.mark.parametrize("key,value", [
        ("console", "false"),
        ("console", 0),
        ("popup", "no"),
        ("popup", 1),
    ])
    def test_non_bool_switch(self, key, value):
        """Test that a non-bool console or popup value raises ValueError."""
        with pytest.raises(ValueError, match=key):
            SchedulerConfig.from_dict({key: value})


class TestPopupConfig:
    """Tests for PopupConfig dataclass."""

    def test_default_values(self):
        """Test that PopupConfig has correct default values."""
        config = PopupConfig()

        assert config.text_font == "Sans Serif"
        assert config.text_size == 24
        assert config.max_opacity == 0.85
        assert config.fade_in_duration == 600
        assert config.fade_out_duration == 300

    def test_from_dict_partial(self):
        """Test creating PopupConfig with only some values specified."""
        config = PopupConfig.from_dict({"text_font": "Arial", "text_size": 30})

        assert config.text_font == "Arial"
        assert config.text_size == 30
        assert config.max_opacity == 0.85  # default
        assert config.fade_in_duration == 600  # default


class TestParseConfigData:
    """Tests for parse_config_data function."""

    def test_parse_all_sections(self):
        """Test parsing every config section."""
        config_data = {
            "general": {"events_file": "ev.txt", "log_level": "INFO"},
            "scheduler": {"check_interval": 0.5, "popup": False},
            "popup": {"text_size": 18},
        }

        config = parse_config_data(config_data, Path("/config"))

        assert config.general.events_file == Path("/config/ev.txt")
        assert config.general.log_level == "INFO"
        assert config.scheduler.check_interval == 0.5
        assert config.scheduler.popup is False
        assert config.popup.text_size == 18

    def test_parse_empty_uses_defaults(self):
        """Test that empty config data gives defaults."""
        config = parse_config_data({}, Path("/config"))

        assert isinstance(config, AppConfig)
        assert config.general.events_file == Path("/config/events.txt")
        assert config.scheduler.check_interval == 1.0
        assert config.popup.text_font == "Sans Serif"

    def test_parse_skips_non_dict_sections(self):
        """Test that non-dictionary sections are ignored."""
        config = parse_config_data({"scheduler": "fast", "popup": 3}, Path("/config"))

        assert config.scheduler.check_interval == 1.0
        assert config.popup.text_size == 24


class TestConfigManager:
    """Tests for ConfigManager class."""

    def test_custom_config_dir(self):
        """Test using custom config directory."""
        manager = ConfigManager(Path("/custom/path"))
        assert manager.config_dir == Path("/custom/path")
        assert manager.config_file == Path("/custom/path/config.toml")

    def test_default_config_dir(self):
        """Test default config directory."""
        manager = ConfigManager()
        assert manager.config_dir == Path.home() / ".config" / "event-reminder"

    def test_defaults_before_loading(self):
        """Test that the manager has defaults before loading."""
        manager = ConfigManager(Path("/custom/path"))
        assert manager.config.general.events_file == Path("/custom/path/events.txt")

    def test_load_config_file_not_found(self):
        """Test loading non-existent config file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            manager = ConfigManager(Path(tmpdir))
            with pytest.raises(FileNotFoundError):
                manager.load_config()

    def test_load_config_from_fixtures(self):
        """Test loading config from fixtures directory."""
        manager = ConfigManager(FIXTURES_DIR)
        config = manager.load_config()

        assert config.general.events_file == FIXTURES_DIR / "events.txt"
        assert config.general.log_level == "INFO"
        assert config.scheduler.check_interval == 0.5
        assert config.popup.fade_in_duration == 600
        assert manager.config is config

    def test_load_from_data(self):
        """Test loading config from pre-parsed data."""
        manager = ConfigManager(Path("/tmp"))
        config = manager.load_from_data({"scheduler": {"console": False}})

        assert config.scheduler.console is False
        assert manager.config.scheduler.console is False

    def test_create_example_config_round_trips(self, tmp_path):
        """Test that the example config loads back."""
        manager = ConfigManager(tmp_path / "fresh")
        manager.create_example_config()

        assert manager.config_file.exists()
        config = manager.load_config()
        assert config.general.events_file == tmp_path / "fresh" / "events.txt"
        assert config.scheduler.check_interval == 1.0
        assert config.popup.max_opacity == 0.85


class TestLoadConfigFile:
    """Tests for load_config_file function."""

    def test_load_valid_file(self):
        """Test loading a valid TOML file."""
        data = load_config_file(FIXTURES_DIR / "config.toml")
        assert isinstance(data, dict)
        assert "scheduler" in data

    def test_load_nonexistent_file(self):
        """Test loading a file that doesn't exist."""
        with pytest.raises(FileNotFoundError):
            load_config_file(Path("/nonexistent/config.toml"))

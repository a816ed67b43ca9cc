"""Configuration parser for the event reminder system."""

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _number(settings: dict, key: str, default: float) -> float:
    value = settings.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' must be a number, got {value!r}")
    return float(value)


@dataclass
class GeneralConfig:
    """General settings: where events live and how much to log."""
    events_file: Path = Path("events.txt")
    log_level: str = "WARNING"

    def __post_init__(self):
        if isinstance(self.events_file, str):
            self.events_file = Path(self.events_file)
        if not isinstance(self.log_level, str):
            raise ValueError(f"Invalid 'log_level': {self.log_level!r}")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid 'log_level': {self.log_level}")

    @classmethod
    def from_dict(cls, settings: dict, config_dir: Path) -> "GeneralConfig":
        """Create a GeneralConfig, resolving the events file against config_dir."""
        events_file = settings.get("events_file", "events.txt")
        if not isinstance(events_file, str):
            raise ValueError(f"Invalid 'events_file': {events_file!r}")
        events_file = Path(events_file).expanduser()
        if not events_file.is_absolute():
            events_file = config_dir / events_file

        return cls(
            events_file=events_file,
            log_level=settings.get("log_level", "WARNING"),
        )


@dataclass
class SchedulerConfig:
    """Reminder scheduler settings."""
    check_interval: float = 1.0  # seconds
    console: bool = True  # Print reminders to the terminal
    popup: bool = True  # Show reminder popups

    def __post_init__(self):
        for key in ("console", "popup"):
            if not isinstance(getattr(self, key), bool):
                raise ValueError(
                    f"'{key}' must be true or false, got {getattr(self, key)!r}"
                )
        if self.check_interval <= 0:
            raise ValueError(
                f"'check_interval' must be positive, got {self.check_interval}"
            )

    @classmethod
    def from_dict(cls, settings: dict) -> "SchedulerConfig":
        return cls(
            check_interval=_number(settings, "check_interval", 1.0),
            console=settings.get("console", True),
            popup=settings.get("popup", True),
        )


@dataclass
class PopupConfig:
    """Appearance of the reminder popup."""
    text_font: str = "Sans Serif"
    text_size: int = 24
    max_opacity: float = 0.85
    fade_in_duration: int = 600  # milliseconds
    fade_out_duration: int = 300  # milliseconds

    @classmethod
    def from_dict(cls, settings: dict) -> "PopupConfig":
        return cls(
            text_font=settings.get("text_font", "Sans Serif"),
            text_size=settings.get("text_size", 24),
            max_opacity=settings.get("max_opacity", 0.85),
            fade_in_duration=settings.get("fade_in_duration", 600),
            fade_out_duration=settings.get("fade_out_duration", 300),
        )


@dataclass
class AppConfig:
    """Complete application configuration."""
    general: GeneralConfig = field(default_factory=GeneralConfig)
    scheduler: SchedulerConfig = field(default_factory=SchedulerConfig)
    popup: PopupConfig = field(default_factory=PopupConfig)


def parse_config_data(config_data: dict, config_dir: Path) -> AppConfig:
    """
    Parse configuration data into an AppConfig.

    Args:
        config_data: Raw parsed TOML data
        config_dir: Directory relative event file paths resolve against

    Returns:
        AppConfig with defaults for any missing section
    """
    def section(name: str) -> dict:
        settings = config_data.get(name, {})
        return settings if isinstance(settings, dict) else {}

    return AppConfig(
        general=GeneralConfig.from_dict(section("general"), config_dir),
        scheduler=SchedulerConfig.from_dict(section("scheduler")),
        popup=PopupConfig.from_dict(section("popup")),
    )


def load_config_file(config_file: Path) -> dict:
    """Load and parse a TOML configuration file."""
    if not config_file.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_file}\n"
            f"Please create a config file at {config_file}"
        )

    with open(config_file, "rb") as f:
        return tomllib.load(f)


class ConfigManager:
    """Manages loading and parsing of the application configuration."""

    DEFAULT_CONFIG_DIR = Path.home() / ".config" / "event-reminder"
    CONFIG_FILE = "config.toml"

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else self.DEFAULT_CONFIG_DIR
        self.config_file = self.config_dir / self.CONFIG_FILE
        self.config: AppConfig = self.defaults()

    def defaults(self) -> AppConfig:
        """Default configuration with the events file inside the config dir."""
        return parse_config_data({}, self.config_dir)

    def ensure_config_dir(self) -> None:
        """Create the config directory if it doesn't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

    def load_config(self) -> AppConfig:
        """Load and parse the configuration file."""
        config_data = load_config_file(self.config_file)
        self.config = parse_config_data(config_data, self.config_dir)
        return self.config

    def load_from_data(self, config_data: dict) -> AppConfig:
        """Load configuration from already-parsed data."""
        self.config = parse_config_data(config_data, self.config_dir)
        return self.config

    def create_example_config(self) -> None:
        """Create an example configuration file."""
        self.ensure_config_dir()

        example_config = '''# Event Reminder Configuration
# Lives in ~/.config/event-reminder/

[general]
events_file = "events.txt"  # Relative paths are inside this directory
log_level = "WARNING"       # DEBUG, INFO, WARNING, ERROR or CRITICAL

[scheduler]
check_interval = 1.0        # Seconds between scans
console = true              # Print reminders in the terminal
popup = true                # Show a popup window for reminders

[popup]
text_font = "Sans Serif"
text_size = 24
max_opacity = 0.85          # Opacity of the popup background (0.0-1.0)
fade_in_duration = 600      # Milliseconds
fade_out_duration = 300     # Milliseconds
'''

        with open(self.config_file, "w") as f:
            f.write(example_config)

        print(f"Created example config at: {self.config_file}")

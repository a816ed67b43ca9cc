"""Main application for the event reminder system."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from .config import AppConfig, ConfigManager
from .notifications import console_notifier
from .persistence import EventFile, PersistenceError
from .scheduler import ReminderScheduler
from .shell import EventShell
from .store import EventStore

logger = logging.getLogger(__name__)


class ReminderApp:
    """
    Coordinates the event reminder system.

    Manages:
    - Configuration loading
    - Loading and saving the events file
    - Scheduler lifecycle
    - The interactive menu
    """

    def __init__(
        self,
        config_dir: Optional[Path] = None,
        events_file: Optional[Path] = None,
        input_func: Callable[[str], str] = input
    ):
        """
        Initialize the ReminderApp.

        Args:
            config_dir: Optional custom config directory path
            events_file: Optional events file overriding the configured one
            input_func: Source of menu input (for testing)
        """
        self.config_manager = ConfigManager(config_dir)
        self.config: AppConfig = self.config_manager.config
        self._events_file_override = Path(events_file) if events_file else None
        self._input = input_func

        self.store = EventStore()
        self.event_file: Optional[EventFile] = None
        self.scheduler: Optional[ReminderScheduler] = None
        self.shell: Optional[EventShell] = None

    def initialize(self) -> bool:
        """
        Load configuration and events, and wire up the scheduler.

        A missing config file is replaced by the example config. A missing
        or unreadable events file leaves the store empty.

        Returns:
            True on success, False if the configuration is invalid
        """
        try:
            self.config = self.config_manager.load_config()
        except FileNotFoundError:
            print("No configuration found, creating example configuration...")
            try:
                self.config_manager.create_example_config()
            except OSError as e:
                logger.warning("Could not write example config: %s", e)
            self.config = self.config_manager.defaults()
        except ValueError as e:
            print(f"Error in configuration: {e}")
            return False

        path = self._events_file_override or self.config.general.events_file
        self.event_file = EventFile(path)
        try:
            count = self.event_file.load_into(self.store)
            logger.info("Loaded %d events from %s", count, path)
        except PersistenceError as e:
            logger.error("Error loading file: %s", e)
            print(f"Error loading file: {e}")

        self.scheduler = ReminderScheduler(
            self.store,
            check_interval=self.config.scheduler.check_interval
        )
        if self.config.scheduler.console:
            self.scheduler.add_listener(console_notifier)

        self.shell = EventShell(self.store, self.event_file, input_func=self._input)
        return True

    def run_console(self) -> None:
        """Run the scheduler and the interactive menu until the user exits."""
        self.scheduler.start()
        try:
            self.shell.run()
        finally:
            self.scheduler.stop()

    def shutdown(self) -> None:
        """Save events and stop the scheduler."""
        if self.shell:
            self.shell.save()
        if self.scheduler:
            self.scheduler.stop()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Keep a list of events and get reminded when they start"
    )
    parser.add_argument(
        "--config-dir", "-c",
        type=Path,
        default=None,
        help="Configuration directory (default: ~/.config/event-reminder)"
    )
    parser.add_argument(
        "--events-file", "-f",
        type=Path,
        default=None,
        help="Events file to use instead of the configured one"
    )
    parser.add_argument(
        "--no-popup",
        action="store_true",
        help="Only print reminders in the terminal"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    reminder_app = ReminderApp(config_dir=args.config_dir, events_file=args.events_file)
    if not reminder_app.initialize():
        sys.exit(1)

    if not args.verbose:
        logging.getLogger().setLevel(reminder_app.config.general.log_level)

    if args.no_popup or not reminder_app.config.scheduler.popup:
        reminder_app.run_console()
        return

    from .gui import run_gui
    sys.exit(run_gui(reminder_app))


if __name__ == "__main__":
    main()

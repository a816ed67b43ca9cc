"""Interactive menu for managing events from the terminal."""

import logging
from datetime import datetime
from typing import Callable, Iterable, Optional

from .models import RECORD_DELIMITER, Event, EventParseError, parse_datetime
from .persistence import EventFile, PersistenceError
from .store import EventStore

logger = logging.getLogger(__name__)


MENU = """
Menu:
1) Add event
2) View all events
3) View upcoming events
4) View passed events
5) Delete event
6) Exit"""


class EventShell:
    """
    Numbered menu driving the event store.

    Every successful add or delete is flushed to the events file, and so is
    leaving the menu. Save failures are reported and the session continues
    with the in-memory store.
    """

    def __init__(
        self,
        store: EventStore,
        event_file: EventFile,
        input_func: Callable[[str], str] = input,
        clock: Callable[[], datetime] = datetime.now
    ):
        self.store = store
        self.event_file = event_file
        self._input = input_func
        self._clock = clock

    def run(self) -> None:
        """Run the menu until the user exits or input ends."""
        while True:
            print(MENU)
            try:
                choice = self._input("Choose: ").strip()
            except (EOFError, KeyboardInterrupt):
                print()
                choice = "6"

            if choice == "1":
                self.add_event()
            elif choice == "2":
                self._print_events(self.store.list())
            elif choice == "3":
                self._print_events(self.store.upcoming(self._clock()))
            elif choice == "4":
                self._print_events(self.store.passed(self._clock()))
            elif choice == "5":
                self.delete_event()
            elif choice == "6":
                self.save()
                print("Exiting...")
                return
            else:
                print("Invalid choice. Try again.")

    def add_event(self) -> Optional[int]:
        """Prompt for a new event; returns its id or None if rejected."""
        try:
            title = self._input("Enter title: ")
            description = self._input("Enter description: ")
            location = self._input("Enter location: ")
            when = self._input("Enter date and time (yyyy-MM-dd HH:mm): ")
        except (EOFError, KeyboardInterrupt):
            print("\nAdd cancelled.")
            return None

        if any(RECORD_DELIMITER in text for text in (title, description, location)):
            print(f"Title, description and location must not contain '{RECORD_DELIMITER}'.")
            return None

        try:
            scheduled_at = parse_datetime(when)
        except EventParseError:
            print("Invalid date/time format. Use yyyy-MM-dd HH:mm")
            return None

        event_id = self.store.add(title, description, location, scheduled_at)
        print(f"Event added with ID {event_id}.")
        self.save()
        return event_id

    def delete_event(self) -> bool:
        """Prompt for an id and delete that event."""
        self._print_events(self.store.list())
        try:
            event_id = int(self._input("Enter event ID to delete: ").strip())
        except ValueError:
            print("Invalid ID.")
            return False
        except (EOFError, KeyboardInterrupt):
            print()
            return False

        if not self.store.delete(event_id):
            print("No event found with that ID.")
            return False

        self.save()
        print("Event deleted.")
        return True

    def save(self) -> bool:
        """Flush the store to the events file, reporting any failure."""
        try:
            self.event_file.save(self.store.list())
        except PersistenceError as e:
            logger.error("Save failed: %s", e)
            print(f"Error saving file: {e}")
            return False
        return True

    def _print_events(self, events: Iterable[Event]) -> None:
        now = self._clock()
        events = list(events)
        if not events:
            print("No events.")
            return
        for event in events:
            print(event.describe(now))

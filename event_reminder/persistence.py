"""Flat-file persistence for the event store."""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from .models import Event
from .store import EventStore

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Raised when the events file cannot be read or written."""
    pass


class EventFile:
    """
    Events file with one ``id;title;description;location;time`` line per event.

    Fields are not escaped, so they must not contain the ``;`` delimiter.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def read_records(self) -> List[str]:
        """
        Read the raw record lines.

        A missing file is an empty store, not an error.

        Raises:
            PersistenceError: If the file exists but cannot be read
        """
        if not self.path.exists():
            logger.info("Events file %s not found, starting empty", self.path)
            return []

        try:
            with open(self.path, "r", encoding="utf-8", newline="\n") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Cannot read {self.path}: {e}") from e

        # Only "\n" ends a record; other line breaks may appear inside fields
        records = content.split("\n")
        if records[-1] == "":
            records.pop()
        return records

    def load_into(self, store: EventStore) -> int:
        """Append the file's events to the store and return how many loaded."""
        return store.load(self.read_records())

    def save(self, events: Iterable[Event]) -> None:
        """
        Write all events, replacing the file contents.

        Raises:
            PersistenceError: If the file cannot be written
        """
        lines = [event.to_record() + "\n" for event in events]

        # Write to a temp file then rename, so a failed write keeps the old file
        temp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_path, "w", encoding="utf-8", newline="\n") as f:
                f.writelines(lines)
            temp_path.replace(self.path)
        except OSError as e:
            raise PersistenceError(f"Cannot write {self.path}: {e}") from e

        logger.debug("Saved %d events to %s", len(lines), self.path)

"""In-memory event store shared by the command surface and the scheduler."""

import logging
import threading
from datetime import datetime
from typing import Iterable, List, Optional

from .models import Event, EventParseError

logger = logging.getLogger(__name__)


class EventStore:
    """
    Ordered collection of events keyed by a monotonically assigned id.

    All access goes through a single lock, so the store can be read by the
    reminder scheduler while the command surface adds and deletes events.
    Ids are never reused, even after deletion.
    """

    def __init__(self):
        self._events: List[Event] = []
        self._next_id = 1
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    @property
    def next_id(self) -> int:
        """The id the next added event will receive."""
        with self._lock:
            return self._next_id

    def add(
        self,
        title: str,
        description: str,
        location: str,
        scheduled_at: datetime
    ) -> int:
        """
        Create an event and append it to the store.

        Args:
            title: Short title of the event
            description: Free-text description
            location: Where the event takes place
            scheduled_at: When the event starts (naive, local time)

        Returns:
            The id assigned to the new event
        """
        with self._lock:
            event_id = self._next_id
            self._next_id += 1
            self._events.append(Event(
                id=event_id,
                title=title,
                description=description,
                location=location,
                scheduled_at=scheduled_at
            ))

        logger.info("Added event %d: %s", event_id, title)
        return event_id

    def list(self) -> List[Event]:
        """Return a snapshot of all events in insertion order."""
        with self._lock:
            return list(self._events)

    def get(self, event_id: int) -> Optional[Event]:
        with self._lock:
            for event in self._events:
                if event.id == event_id:
                    return event
        return None

    def upcoming(self, now: Optional[datetime] = None) -> List[Event]:
        """Events scheduled strictly after ``now``."""
        if now is None:
            now = datetime.now()
        return [e for e in self.list() if e.scheduled_at > now]

    def passed(self, now: Optional[datetime] = None) -> List[Event]:
        """
        Events scheduled strictly before ``now``.

        An event scheduled exactly at ``now`` is neither upcoming nor passed.
        """
        if now is None:
            now = datetime.now()
        return [e for e in self.list() if e.scheduled_at < now]

    def delete(self, event_id: int) -> bool:
        """
        Remove the event with the given id.

        Returns:
            True if an event was removed, False if no event had that id
        """
        with self._lock:
            for index, event in enumerate(self._events):
                if event.id == event_id:
                    del self._events[index]
                    logger.info("Deleted event %d", event_id)
                    return True
        return False

    def load(self, records: Iterable[str]) -> int:
        """
        Append events parsed from flat records.

        Malformed records, and records whose id is already in the store, are
        skipped. The id counter moves past the highest loaded id.

        Args:
            records: Lines in ``id;title;description;location;time`` form

        Returns:
            Number of events loaded
        """
        loaded = 0
        with self._lock:
            known_ids = {e.id for e in self._events}
            for record in records:
                if not record.strip():
                    continue
                try:
                    event = Event.from_record(record)
                except EventParseError as e:
                    logger.warning("Skipping invalid event record: %s", e)
                    continue

                if event.id in known_ids:
                    logger.warning("Skipping duplicate event id %d", event.id)
                    continue

                self._events.append(event)
                known_ids.add(event.id)
                self._next_id = max(self._next_id, event.id + 1)
                loaded += 1

        logger.debug("Loaded %d events", loaded)
        return loaded

"""Data model for scheduled events."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


DATETIME_FORMAT = "%Y-%m-%d %H:%M"  # yyyy-MM-dd HH:mm
RECORD_DELIMITER = ";"
RECORD_FIELDS = 5


class EventParseError(ValueError):
    """Raised when a timestamp, id or stored record cannot be parsed."""
    pass


class EventStatus(Enum):
    """Status of an event relative to the current time."""
    UPCOMING = "UPCOMING"
    PASSED = "PASSED"


def truncate_to_minute(value: datetime) -> datetime:
    """Drop seconds and anything finer."""
    return value.replace(second=0, microsecond=0)


def parse_datetime(text: str) -> datetime:
    """
    Parse a ``yyyy-MM-dd HH:mm`` timestamp.

    Raises:
        EventParseError: If the text does not match the format
    """
    try:
        return datetime.strptime(text.strip(), DATETIME_FORMAT)
    except ValueError as e:
        raise EventParseError(
            f"Invalid date/time '{text}'. Use yyyy-MM-dd HH:mm"
        ) from e


def format_datetime(value: datetime) -> str:
    return value.strftime(DATETIME_FORMAT)


@dataclass(frozen=True)
class Event:
    """A titled activity with a location and a scheduled time."""
    id: int
    title: str
    description: str
    location: str
    scheduled_at: datetime  # Naive datetime in local time

    def status(self, now: Optional[datetime] = None) -> EventStatus:
        """
        Status derived from the scheduled time.

        Args:
            now: Time to compare against (defaults to the current time)

        Returns:
            UPCOMING if the event is strictly in the future, else PASSED
        """
        if now is None:
            now = datetime.now()
        if self.scheduled_at > now:
            return EventStatus.UPCOMING
        return EventStatus.PASSED

    def to_record(self) -> str:
        """Serialize to a flat ``id;title;description;location;time`` line."""
        return RECORD_DELIMITER.join([
            str(self.id),
            self.title,
            self.description,
            self.location,
            format_datetime(self.scheduled_at),
        ])

    @classmethod
    def from_record(cls, record: str) -> "Event":
        """
        Parse a flat record line.

        Raises:
            EventParseError: If the field count, id or timestamp is invalid
        """
        parts = record.rstrip("\r\n").split(RECORD_DELIMITER)
        if len(parts) != RECORD_FIELDS:
            raise EventParseError(
                f"Expected {RECORD_FIELDS} fields, got {len(parts)}: {record!r}"
            )

        id_text, title, description, location, when = parts
        try:
            event_id = int(id_text)
        except ValueError as e:
            raise EventParseError(f"Invalid event id: {id_text!r}") from e

        return cls(
            id=event_id,
            title=title,
            description=description,
            location=location,
            scheduled_at=parse_datetime(when),
        )

    def describe(self, now: Optional[datetime] = None) -> str:
        """One-line listing: id, time, status, title, description, location."""
        return " | ".join([
            str(self.id),
            format_datetime(self.scheduled_at),
            self.status(now).value,
            self.title,
            self.description,
            self.location,
        ])

    def __str__(self) -> str:
        return self.describe()

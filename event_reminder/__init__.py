"""Personal event list with minute-resolution reminders."""

__version__ = "1.0.0"

"""Console notification sink."""

from .models import Event


def reminder_message(event: Event) -> str:
    return f"Reminder: {event.title} is happening now!"


def console_notifier(event: Event) -> None:
    """Print a reminder line for the event."""
    print(f"\n🔔 {reminder_message(event)}", flush=True)

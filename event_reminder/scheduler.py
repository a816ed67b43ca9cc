"""Minute-matching reminder scheduler for stored events."""

import logging
import threading
from datetime import datetime
from typing import Callable, List, Optional, Set

from .models import Event, truncate_to_minute
from .store import EventStore

logger = logging.getLogger(__name__)

Listener = Callable[[Event], None]


class ReminderScheduler:
    """
    Scheduler that fires one reminder per event when its minute arrives.

    Uses a background thread to scan the store. Each event is notified at
    most once per scheduler lifetime; events whose minute passes while the
    scheduler is not running are never notified.
    """

    CHECK_INTERVAL = 1.0  # Check every second

    def __init__(
        self,
        store: EventStore,
        check_interval: float = CHECK_INTERVAL,
        clock: Callable[[], datetime] = datetime.now
    ):
        self.store = store
        self.check_interval = check_interval
        self._clock = clock
        self._listeners: List[Listener] = []
        self._notified: Set[int] = set()
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def add_listener(self, callback: Listener) -> None:
        """
        Register a notification sink.

        Args:
            callback: Called with the Event when its reminder fires
        """
        with self._lock:
            self._listeners.append(callback)

    def notified_ids(self) -> Set[int]:
        """Ids of events already notified."""
        with self._lock:
            return set(self._notified)

    def start(self) -> None:
        """Start the scheduler background thread."""
        if self.is_running:
            return

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run_loop,
            name="reminder-scheduler",
            daemon=True
        )
        self._thread.start()
        logger.info("Scheduler started (interval %.1fs)", self.check_interval)

    def stop(self) -> None:
        """Stop the scheduler."""
        self._stop_event.set()
        if self._thread:
            self._thread.join(timeout=2.0)
            self._thread = None
        logger.info("Scheduler stopped")

    def scan(self, now: Optional[datetime] = None) -> List[Event]:
        """
        Run a single scan tick.

        Args:
            now: Time of the tick (defaults to the scheduler clock)

        Returns:
            Events whose reminder fired on this tick
        """
        if now is None:
            now = self._clock()
        current_minute = truncate_to_minute(now)

        fired = []
        for event in self.store.list():
            try:
                if truncate_to_minute(event.scheduled_at) != current_minute:
                    continue

                # Mark before dispatching so a slow sink can't cause a repeat
                with self._lock:
                    if event.id in self._notified:
                        continue
                    self._notified.add(event.id)
                    listeners = list(self._listeners)
            except Exception:
                logger.exception("Error checking event %r", event)
                continue

            logger.info("Reminder due for event %d: %s", event.id, event.title)
            fired.append(event)
            for callback in listeners:
                try:
                    self._dispatch(callback, event)
                except Exception:
                    logger.exception("Could not dispatch reminder for event %d", event.id)

        return fired

    def _dispatch(self, callback: Listener, event: Event) -> None:
        # Deliver in a separate thread to not block the scan
        threading.Thread(
            target=self._deliver,
            args=(callback, event),
            daemon=True
        ).start()

    def _deliver(self, callback: Listener, event: Event) -> None:
        try:
            callback(event)
        except Exception:
            logger.exception("Notification for event %d failed", event.id)

    def _run_loop(self) -> None:
        """Main scheduler loop."""
        while not self._stop_event.is_set():
            try:
                self.scan()
            except Exception:
                logger.exception("Scan failed")
            self._stop_event.wait(self.check_interval)

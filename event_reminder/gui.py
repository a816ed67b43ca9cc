"""Qt front end: reminder popups alongside the terminal menu."""

import signal
import sys
import threading
from typing import List, Optional, TYPE_CHECKING

from PyQt6.QtWidgets import QApplication
from PyQt6.QtCore import QObject, pyqtSignal, QTimer

from .models import Event
from .overlay import EventPopup

if TYPE_CHECKING:
    from .app import ReminderApp


class ReminderTrigger(QObject):
    """Bridge between worker threads and the Qt main thread."""
    triggered = pyqtSignal(object)
    quit_requested = pyqtSignal()


class PopupController(QObject):
    """
    Shows reminder popups on the Qt main thread.

    The scheduler delivers events from its own threads; they are forwarded
    through a queued signal and shown one at a time. Reminders that arrive
    while a popup is showing wait in a queue.
    """

    def __init__(self, reminder_app: "ReminderApp"):
        super().__init__()
        self.reminder_app = reminder_app

        self.popup = EventPopup(popup_config=reminder_app.config.popup)
        self.popup.dismissed.connect(self._on_dismissed)

        # Bridge for thread-safe Qt signal emission
        self.trigger = ReminderTrigger()
        self.trigger.triggered.connect(self._on_reminder_triggered)
        self.trigger.quit_requested.connect(self.quit)

        self.active_event: Optional[Event] = None
        self.reminder_queue: List[Event] = []
        self._shell_thread: Optional[threading.Thread] = None
        self._shell_done = False

    def notify_threadsafe(self, event: Event):
        """Notification sink for the scheduler; may run on any thread."""
        self.trigger.triggered.emit(event)

    def _on_reminder_triggered(self, event: Event):
        """Handle a reminder being triggered (main thread)."""
        if self.active_event is not None:
            self.reminder_queue.append(event)
            return
        self._show(event)

    def _show(self, event: Event):
        self.active_event = event
        self.popup.show_reminder(event)

    def _on_dismissed(self, event_id: int):
        self.active_event = None
        self._process_queue()

    def _process_queue(self):
        """Show the next queued reminder."""
        if self.reminder_queue:
            next_event = self.reminder_queue.pop(0)
            self.active_event = next_event
            # Small delay before showing next
            QTimer.singleShot(500, lambda: self._show(next_event))

    def _run_shell(self):
        self.reminder_app.shell.run()
        self._shell_done = True
        self.trigger.quit_requested.emit()

    def start(self):
        """Start the scheduler and the menu thread."""
        self.reminder_app.scheduler.add_listener(self.notify_threadsafe)
        self.reminder_app.scheduler.start()

        # Daemon so a pending input() never blocks exit
        self._shell_thread = threading.Thread(
            target=self._run_shell,
            name="event-shell",
            daemon=True
        )
        self._shell_thread.start()

    def quit(self):
        """Save, stop the scheduler and leave the Qt event loop."""
        if self._shell_done:
            # The menu already saved on exit
            self.reminder_app.scheduler.stop()
        else:
            self.reminder_app.shutdown()
        QApplication.quit()


def run_gui(reminder_app: "ReminderApp") -> int:
    """
    Run the Qt event loop with popups enabled.

    Returns:
        The Qt application exit code
    """
    app = QApplication(sys.argv)
    app.setQuitOnLastWindowClosed(False)  # Popups closing must not end the app
    app.setApplicationName("Event Reminder")

    controller = PopupController(reminder_app)

    # Handle SIGINT (Ctrl+C)
    signal.signal(signal.SIGINT, lambda *args: controller.quit())

    # Timer to allow signal handling
    timer = QTimer()
    timer.timeout.connect(lambda: None)
    timer.start(500)

    controller.start()
    return app.exec()

"""Popup window for displaying event reminders."""

from typing import Optional, TYPE_CHECKING

from PyQt6.QtCore import Qt, QPropertyAnimation, QEasingCurve, pyqtSignal
from PyQt6.QtGui import QColor, QPainter, QGuiApplication
from PyQt6.QtWidgets import (
    QWidget, QLabel, QPushButton, QVBoxLayout, QGraphicsOpacityEffect
)

from .models import Event, format_datetime
from .notifications import reminder_message

if TYPE_CHECKING:
    from .config import PopupConfig


class EventPopup(QWidget):
    """
    A frameless popup that announces an event.

    Features:
    - Borderless, translucent window centered on the primary screen
    - Fade-in on show and fade-out on dismiss
    - Title line plus the event's time, location and description
    - Dismissed with the OK button, Enter or Escape
    """

    dismissed = pyqtSignal(int)  # Emits the event id when dismissed

    WIDTH = 520
    HEIGHT = 280

    # Default styling - can be overridden by config
    DEFAULT_TEXT_FONT = "Sans Serif"
    DEFAULT_TEXT_SIZE = 24
    DEFAULT_MAX_OPACITY = 0.85
    DEFAULT_FADE_IN_DURATION = 600
    DEFAULT_FADE_OUT_DURATION = 300

    def __init__(self, parent=None, popup_config: Optional["PopupConfig"] = None):
        super().__init__(parent)

        self.event_id: Optional[int] = None

        if popup_config:
            self.text_font = popup_config.text_font
            self.text_size = popup_config.text_size
            self.max_opacity = popup_config.max_opacity
            self.fade_in_duration = popup_config.fade_in_duration
            self.fade_out_duration = popup_config.fade_out_duration
        else:
            self.text_font = self.DEFAULT_TEXT_FONT
            self.text_size = self.DEFAULT_TEXT_SIZE
            self.max_opacity = self.DEFAULT_MAX_OPACITY
            self.fade_in_duration = self.DEFAULT_FADE_IN_DURATION
            self.fade_out_duration = self.DEFAULT_FADE_OUT_DURATION

        self._setup_window()
        self._setup_ui()
        self._setup_animations()

    def _setup_window(self):
        """Configure window properties for popup behavior."""
        self.setWindowFlags(
            Qt.WindowType.FramelessWindowHint |
            Qt.WindowType.WindowStaysOnTopHint |
            Qt.WindowType.Tool  # Doesn't show in taskbar
        )
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setWindowTitle("Event Reminder")
        self.setFixedSize(self.WIDTH, self.HEIGHT)

        screen = QGuiApplication.primaryScreen()
        if screen:
            center = screen.availableGeometry().center()
            self.move(center.x() - self.WIDTH // 2, center.y() - self.HEIGHT // 2)

    def _setup_ui(self):
        """Set up the UI components."""
        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.setContentsMargins(30, 24, 30, 24)
        layout.setSpacing(12)

        self.title_label = QLabel()
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet(f"""
            background: transparent;
            color: white;
            font-family: "{self.text_font}";
            font-size: {self.text_size}px;
            font-weight: bold;
        """)
        layout.addWidget(self.title_label)

        self.details_label = QLabel()
        self.details_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.details_label.setWordWrap(True)
        self.details_label.setStyleSheet(f"""
            background: transparent;
            color: #E0E0E0;
            font-family: "{self.text_font}";
            font-size: {max(self.text_size // 2, 10)}px;
        """)
        layout.addWidget(self.details_label)

        self.ok_btn = QPushButton("OK")
        self.ok_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.ok_btn.setFixedWidth(120)
        self.ok_btn.setStyleSheet("""
            QPushButton {
                background: #4CAF50; color: white; border: none;
                border-radius: 6px; padding: 8px; font-weight: bold;
            }
            QPushButton:hover { background: #66BB6A; }
        """)
        self.ok_btn.clicked.connect(self.dismiss)
        layout.addWidget(self.ok_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        self.opacity_effect = QGraphicsOpacityEffect()
        self.opacity_effect.setOpacity(0.0)
        self.setGraphicsEffect(self.opacity_effect)

    def _setup_animations(self):
        """Set up the fade animations."""
        self.fade_in_anim = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_in_anim.setStartValue(0.0)
        self.fade_in_anim.setEndValue(1.0)
        self.fade_in_anim.setEasingCurve(QEasingCurve.Type.InOutQuad)

        self.fade_out_anim = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_out_anim.setEndValue(0.0)
        self.fade_out_anim.finished.connect(self.hide)

    def paintEvent(self, event):
        """Paint the rounded, semi-transparent background."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor(20, 20, 20, int(255 * self.max_opacity)))
        painter.drawRoundedRect(self.rect(), 16, 16)

    def show_reminder(self, event: Event):
        """
        Show the reminder for an event.

        Args:
            event: The event whose scheduled time has arrived
        """
        self.event_id = event.id
        self.title_label.setText(reminder_message(event))

        details = [format_datetime(event.scheduled_at)]
        if event.location:
            details.append(f"Location: {event.location}")
        if event.description:
            details.append(event.description)
        self.details_label.setText("\n".join(details))

        self.fade_out_anim.stop()
        self.opacity_effect.setOpacity(0.0)
        self.show()
        self.raise_()
        self.activateWindow()

        self.fade_in_anim.setDuration(self.fade_in_duration)
        self.fade_in_anim.start()

    def dismiss(self):
        """Fade out and report the dismissal."""
        if self.event_id is None:
            return
        event_id = self.event_id
        self.event_id = None

        self.fade_in_anim.stop()
        self.fade_out_anim.setDuration(self.fade_out_duration)
        self.fade_out_anim.setStartValue(self.opacity_effect.opacity())
        self.fade_out_anim.start()

        self.dismissed.emit(event_id)

    def keyPressEvent(self, event):
        """Handle key presses."""
        if event.key() in (Qt.Key.Key_Escape, Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self.dismiss()
        super().keyPressEvent(event)

# src/linecounter/gui/status_bar.py
from PySide6.QtWidgets import QStatusBar, QLabel
import qtawesome as qta

from .components import Colors, Typography
from linecounter.core.session_state import SessionState


class StatusBar(QStatusBar):
    """
    An event-driven status bar showing the outcome of the last event,
    green for success and red for errors.
    """

    def __init__(self, event_bus):
        super().__init__()
        self.event_bus = event_bus
        self.setObjectName("StatusBar")
        self.setStyleSheet(f"""
            #StatusBar {{
                background-color: {Colors.BACKGROUND.name()};
                border-top: 1px solid {Colors.TEXT_MUTED.name()};
                padding: 2px 8px;
            }}
        """)
        self.setFont(Typography.small())
        self.setSizeGripEnabled(True)

        self.status_icon = QLabel()
        self.status_label = QLabel()
        self.addWidget(self.status_icon)
        self.addWidget(self.status_label, 1)
        self.show_status(SessionState().status_message, is_error=False)

        self._connect_events()

    def _connect_events(self):
        self.event_bus.subscribe("session_state_changed", self.on_session_state_changed)

    def on_session_state_changed(self, state: SessionState):
        self.show_status(state.status_message, state.is_error)

    def show_status(self, message: str, is_error: bool):
        """Public method to update the status text and its icon."""
        color = Colors.ACCENT_RED if is_error else Colors.ACCENT_GREEN
        icon_name = "fa5s.exclamation-circle" if is_error else "fa5s.check-circle"
        self.status_label.setText(message)
        self.status_label.setStyleSheet(f"color: {color.name()};")
        self.status_icon.setPixmap(qta.icon(icon_name, color=color.name()).pixmap(12, 12))

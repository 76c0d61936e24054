# src/linecounter/core/managers/window_manager.py
import logging
from typing import Optional

from linecounter.core.app_config import AppConfig
from linecounter.core.event_bus import EventBus
from linecounter.core.session_state import SessionState
from linecounter.gui.main_window import MainWindow

logger = logging.getLogger(__name__)


class WindowManager:
    """
    Creates and manages the GUI window.
    Single responsibility: Window lifecycle and redraws on state changes.
    """

    def __init__(self, event_bus: EventBus, config: AppConfig):
        self.event_bus = event_bus
        self.config = config
        self.main_window: Optional[MainWindow] = None
        logger.info("WindowManager initialized")

    def initialize_windows(self):
        """Create the main window and hook it to state changes."""
        self.main_window = MainWindow(self.event_bus, self.config.window_size, self.config.resizable)
        self.event_bus.subscribe("session_state_changed", self.handle_session_state_change)
        logger.info("Windows initialized")

    def handle_session_state_change(self, state: SessionState):
        """Central point for UI reaction to state changes."""
        if self.main_window:
            self.main_window.render(state)

    def get_main_window(self) -> Optional[MainWindow]:
        return self.main_window

    def show_main_window(self):
        if self.main_window: self.main_window.show()

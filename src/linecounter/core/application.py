# src/linecounter/core/application.py

import asyncio
import logging

from linecounter.core.app_config import AppConfig
from linecounter.core.controller import Controller
from linecounter.core.event_bus import EventBus
from linecounter.core.managers import EventCoordinator, TaskManager
from linecounter.core.managers.window_manager import WindowManager
from linecounter.services.clipboard_service import ClipboardService
from linecounter.services.file_picker import FilePicker

logger = logging.getLogger(__name__)


class Application:
    """
    Main application class that coordinates all components.
    """

    def __init__(self, config: AppConfig):
        """
        Initialize the application.

        Args:
            config: Loaded application settings.
        """
        self.config = config

        self.event_bus = EventBus()
        self.file_picker = FilePicker()
        self.clipboard_service = ClipboardService()
        self.task_manager = TaskManager(self.event_bus)
        self.window_manager = WindowManager(self.event_bus, self.config)
        self.controller = Controller(
            self.event_bus,
            self.task_manager,
            file_picker=self.file_picker.pick_file,
            clipboard_writer=self.clipboard_service.write_text,
            count_in_background=self.config.count_in_background,
        )
        self.event_coordinator = EventCoordinator(self.event_bus, self.controller)
        self._shutdown_started = False

        self._initialize()

    def _initialize(self):
        self.window_manager.initialize_windows()
        # Dialogs are parented to the main window so they stay on top of it.
        self.file_picker.parent = self.window_manager.get_main_window()
        self.event_coordinator.wire_all_events()
        self.event_bus.subscribe("application_shutdown", lambda: asyncio.create_task(self.shutdown()))
        self.window_manager.handle_session_state_change(self.controller.state)
        logger.info("Application initialized")

    def show(self):
        self.window_manager.show_main_window()

    async def shutdown(self):
        if self._shutdown_started:
            return
        self._shutdown_started = True
        logger.info("Shutting down application components...")
        await self.task_manager.cancel_all_tasks()
        logger.info("All components shut down.")

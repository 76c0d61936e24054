# src/linecounter/core/managers/event_coordinator.py
import logging

from linecounter.core.controller import Controller
from linecounter.core.event_bus import EventBus
from linecounter.core.events import RequestFileDialog, PathChosen, RequestCount, CountFinished, RequestCopy

logger = logging.getLogger(__name__)


class EventCoordinator:
    """
    Routes bus events into the controller.
    Single responsibility: Event routing and component integration.
    """

    def __init__(self, event_bus: EventBus, controller: Controller):
        self.event_bus = event_bus
        self.controller = controller
        logger.info("EventCoordinator initialized")

    def wire_all_events(self):
        """Wire all events between components."""
        logger.info("Wiring all events...")
        self._wire_ui_events()
        self._wire_task_events()
        logger.info("All events wired successfully.")

    def _wire_ui_events(self):
        dispatch = self.controller.dispatch
        self.event_bus.subscribe("file_dialog_requested", lambda: dispatch(RequestFileDialog()))
        self.event_bus.subscribe("count_requested", lambda: dispatch(RequestCount()))
        self.event_bus.subscribe("copy_requested", lambda: dispatch(RequestCopy()))
        # Typed paths and picker results share the same event.
        self.event_bus.subscribe("file_path_chosen", lambda path: dispatch(PathChosen(path)))

    def _wire_task_events(self):
        dispatch = self.controller.dispatch
        self.event_bus.subscribe("line_count_finished", lambda path, result: dispatch(CountFinished(path, result)))

# src/linecounter/core/controller.py
from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Awaitable, Callable, Deque

from linecounter.core.event_bus import EventBus
from linecounter.core.events import OpenFilePicker, CountLines, WriteClipboard, CountFinished
from linecounter.core.session_state import SessionState
from linecounter.core.transitions import transition
from linecounter.services.line_counter import LineCountResult, count_lines_in_file

if TYPE_CHECKING:
    from linecounter.core.managers.task_manager import TaskManager

logger = logging.getLogger(__name__)


class Controller:
    """
    Owns the Session State and processes events one at a time.

    Events dispatched while another event is being processed (for example the
    CountFinished produced by a synchronous count) are queued and handled after
    the current one completes, never nested. Every processed event is broadcast
    as 'session_state_changed' so the UI can redraw.
    """

    def __init__(self, event_bus: EventBus,
                 task_manager: "TaskManager",
                 file_picker: Callable[[], Awaitable[str]],
                 clipboard_writer: Callable[[str], None],
                 line_counter: Callable[[str], LineCountResult] = count_lines_in_file,
                 count_in_background: bool = False):
        self.event_bus = event_bus
        self.task_manager = task_manager
        self.file_picker = file_picker
        self.clipboard_writer = clipboard_writer
        self.line_counter = line_counter
        self.count_in_background = count_in_background

        self._state = SessionState()
        self._queue: Deque[object] = deque()
        self._draining = False
        logger.info("Controller initialized (count_in_background=%s)", count_in_background)

    @property
    def state(self) -> SessionState:
        return self._state

    def dispatch(self, event):
        """Queues an event and drains the queue unless a drain is already in progress."""
        self._queue.append(event)
        if self._draining:
            return

        self._draining = True
        try:
            while self._queue:
                self._process(self._queue.popleft())
        finally:
            self._draining = False

    def _process(self, event):
        previous = self._state
        self._state, effects = transition(previous, event)
        logger.debug("Processed %s: %s -> %s", type(event).__name__, previous.phase.name, self._state.phase.name)

        for effect in effects:
            self._run_effect(effect)

        self.event_bus.emit("session_state_changed", self._state)

    def _run_effect(self, effect):
        if isinstance(effect, OpenFilePicker):
            self.task_manager.start_file_dialog_task(self.file_picker)
        elif isinstance(effect, CountLines):
            if self.count_in_background:
                self.task_manager.start_count_task(effect.path, self.line_counter)
            else:
                self.dispatch(CountFinished(effect.path, self.line_counter(effect.path)))
        elif isinstance(effect, WriteClipboard):
            self.clipboard_writer(effect.text)
            logger.info("Result copied to clipboard")
        else:
            raise TypeError(f"Unknown effect: {effect!r}")

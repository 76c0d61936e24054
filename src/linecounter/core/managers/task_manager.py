# src/linecounter/core/managers/task_manager.py
import asyncio
import logging
from typing import Awaitable, Callable, Optional

from linecounter.core.event_bus import EventBus
from linecounter.services.line_counter import LineCountResult

logger = logging.getLogger(__name__)


class TaskManager:
    """
    Manages background task lifecycle.
    Single responsibility: Task creation, completion reporting, and cleanup.

    Tasks never touch the Session State. Each one reports back with a single
    event on the bus ('file_path_chosen' or 'line_count_finished').
    """

    def __init__(self, event_bus: EventBus):
        self.event_bus = event_bus

        # Active tasks
        self.file_dialog_task: Optional[asyncio.Task] = None
        self.count_task: Optional[asyncio.Task] = None

        logger.info("TaskManager initialized")

    def start_file_dialog_task(self, picker: Callable[[], Awaitable[str]]) -> bool:
        """Start the file picker as a detached task. Refused while a dialog is already open."""
        if self.file_dialog_task and not self.file_dialog_task.done():
            logger.warning("File dialog is already open; ignoring request")
            return False

        self.file_dialog_task = asyncio.create_task(picker())
        self.file_dialog_task.add_done_callback(self._on_file_dialog_done)

        logger.info("Started file dialog task")
        return True

    def start_count_task(self, path: str, counter: Callable[[str], LineCountResult]):
        """
        Run the line counter in a worker thread.
        A count still running for an earlier request is superseded: its task is
        cancelled and its result is never posted.
        """
        if self.count_task and not self.count_task.done():
            logger.info("Superseding the running line count with a count for %s", path)
            self.count_task.cancel()

        self.count_task = asyncio.create_task(asyncio.to_thread(counter, path))
        self.count_task.add_done_callback(lambda t: self._on_count_done(t, path))

        logger.info("Started background count for %s", path)

    def _on_file_dialog_done(self, task: asyncio.Task):
        """Handle file dialog completion. A failed picker is reported as a cancel."""
        try:
            path = task.result() or ""
        except asyncio.CancelledError:
            logger.info("File dialog task was cancelled")
            return
        except Exception:
            logger.exception("File dialog failed")
            path = ""

        if not path:
            logger.info("File dialog closed without a selection")
        self.event_bus.emit("file_path_chosen", path)

    def _on_count_done(self, task: asyncio.Task, path: str):
        """Handle background count completion."""
        try:
            result = task.result()
        except asyncio.CancelledError:
            logger.info("Count task for %s was cancelled", path)
            return
        except Exception as e:
            logger.exception("Count task for %s failed", path)
            result = LineCountResult.failure(str(e))

        self.event_bus.emit("line_count_finished", path, result)

    async def cancel_all_tasks(self):
        """Cancel all running tasks and wait for them to complete."""
        tasks_to_cancel = []

        for task in (self.file_dialog_task, self.count_task):
            if task and not task.done():
                task.cancel()
                tasks_to_cancel.append(task)

        if tasks_to_cancel:
            logger.info("Waiting for %d tasks to cancel...", len(tasks_to_cancel))
            await asyncio.gather(*tasks_to_cancel, return_exceptions=True)

        self.file_dialog_task = None
        self.count_task = None

        logger.info("All tasks cancelled")


# src/linecounter/core/managers/__init__.py
from .event_coordinator import EventCoordinator
from .task_manager import TaskManager
# WindowManager pulls in PySide6 widgets; import it from its module.

__all__ = [
    "EventCoordinator",
    "TaskManager",
]

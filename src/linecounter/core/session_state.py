# src/linecounter/core/session_state.py
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

READY_STATUS = "ready"


class Phase(Enum):
    """
    The phase the UI is in, derived from the session fields.
    """
    IDLE = auto()           # No file selected yet.
    PATH_SELECTED = auto()  # A file is selected but has no valid count (fresh selection or failed count).
    COUNTED = auto()        # A file is selected and its line count is available.


@dataclass(frozen=True)
class SessionState:
    """
    The application's single record of the selected file, the last count and the status text.
    Transitions never mutate a state; they build a new one with dataclasses.replace.
    """
    selected_path: Optional[str] = None
    last_count: Optional[int] = None
    status_message: str = READY_STATUS

    @property
    def phase(self) -> Phase:
        if not self.selected_path:
            return Phase.IDLE
        if self.last_count is None:
            return Phase.PATH_SELECTED
        return Phase.COUNTED

    @property
    def is_error(self) -> bool:
        return self.status_message.startswith("error")

# src/linecounter/core/transitions.py
from dataclasses import replace
from typing import List, Tuple

from linecounter.core.events import (
    RequestFileDialog, PathChosen, RequestCount, CountFinished, RequestCopy,
    OpenFilePicker, CountLines, WriteClipboard,
)
from linecounter.core.session_state import SessionState

SELECT_FILE_FIRST = "error: select a file first"
NOTHING_TO_COPY = "nothing to copy"
COPIED = "copied to clipboard"


def format_clipboard_text(path: str, count: int) -> str:
    return f"file: {path}\nline count: {count}"


def transition(state: SessionState, event) -> Tuple[SessionState, List[object]]:
    """
    Maps (state, event) to (new state, effects).

    This function performs no I/O. Anything that touches the outside world
    (opening the picker, counting, writing the clipboard) is returned as an
    effect for the controller to run.
    """
    if isinstance(event, RequestFileDialog):
        return state, [OpenFilePicker()]

    if isinstance(event, PathChosen):
        if not event.path:
            # Cancelled picker or cleared field.
            return state, []
        return SessionState(
            selected_path=event.path,
            last_count=None,
            status_message=f"file selected: {event.path}",
        ), []

    if isinstance(event, RequestCount):
        if not state.selected_path:
            return replace(state, status_message=SELECT_FILE_FIRST), []
        return state, [CountLines(state.selected_path)]

    if isinstance(event, CountFinished):
        if event.path != state.selected_path:
            # Result for a file that is no longer selected.
            return state, []
        if event.result.ok:
            return replace(state, last_count=event.result.count,
                           status_message=f"counted: {event.result.count}"), []
        return replace(state, last_count=None, status_message=f"error: {event.result.error}"), []

    if isinstance(event, RequestCopy):
        if state.last_count is None:
            return replace(state, status_message=NOTHING_TO_COPY), []
        text = format_clipboard_text(state.selected_path, state.last_count)
        return replace(state, status_message=COPIED), [WriteClipboard(text)]

    raise TypeError(f"Unknown event: {event!r}")

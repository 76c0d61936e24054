# src/linecounter/core/events.py
# Events fed into the controller and the side-effect commands it returns.

from dataclasses import dataclass

from linecounter.services.line_counter import LineCountResult


# --- Events ---

@dataclass(frozen=True)
class RequestFileDialog:
    pass


@dataclass(frozen=True)
class PathChosen:
    path: str


@dataclass(frozen=True)
class RequestCount:
    pass


@dataclass(frozen=True)
class CountFinished:
    """Posted once the line counter has produced a result for `path`."""
    path: str
    result: LineCountResult


@dataclass(frozen=True)
class RequestCopy:
    pass


# --- Effects ---

@dataclass(frozen=True)
class OpenFilePicker:
    pass


@dataclass(frozen=True)
class CountLines:
    path: str


@dataclass(frozen=True)
class WriteClipboard:
    text: str

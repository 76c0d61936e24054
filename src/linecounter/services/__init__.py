# src/linecounter/services/__init__.py
from .line_counter import LineCountResult, count_lines_in_file
# FilePicker and ClipboardService need a running QApplication; import them
# from their modules so the counter stays usable without Qt.

__all__ = [
    "LineCountResult",
    "count_lines_in_file",
]

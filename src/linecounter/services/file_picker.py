# src/linecounter/services/file_picker.py
import asyncio
import logging
from typing import Optional

from PySide6.QtWidgets import QFileDialog, QWidget

logger = logging.getLogger(__name__)

DIALOG_TITLE = "Select a text file"
TEXT_EXTENSIONS = ("txt", "rs", "py", "c", "cpp", "h", "html", "css", "js")
NAME_FILTERS = [
    "Text files ({})".format(" ".join(f"*.{ext}" for ext in TEXT_EXTENSIONS)),
    "All files (*)",
]


class FilePicker:
    """
    Presents the native file-selection dialog without blocking the event loop.

    The dialog is opened non-modally and its signals resolve an asyncio future,
    so the caller can await the choice from a task while Qt keeps repainting.
    """

    def __init__(self, parent: Optional[QWidget] = None):
        self.parent = parent

    async def pick_file(self) -> str:
        """Returns the selected path, or an empty string if the user cancelled."""
        dialog = QFileDialog(self.parent, DIALOG_TITLE)
        dialog.setFileMode(QFileDialog.FileMode.ExistingFile)
        dialog.setNameFilters(NAME_FILTERS)

        future = asyncio.get_running_loop().create_future()

        def _resolve(path: str):
            if not future.done():
                future.set_result(path)

        dialog.fileSelected.connect(_resolve)
        dialog.rejected.connect(lambda: _resolve(""))
        dialog.open()
        logger.debug("File dialog opened")

        try:
            return await future
        finally:
            if dialog.isVisible():
                dialog.close()
            dialog.deleteLater()

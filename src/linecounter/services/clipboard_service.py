# src/linecounter/services/clipboard_service.py
import logging

from PySide6.QtGui import QGuiApplication

logger = logging.getLogger(__name__)


class ClipboardService:
    """Writes text to the system clipboard."""

    def write_text(self, text: str):
        clipboard = QGuiApplication.clipboard()
        clipboard.setText(text)
        logger.debug("Clipboard updated (%d characters)", len(text))

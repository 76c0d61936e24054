from PySide6.QtGui import QColor, QFont
from PySide6.QtWidgets import QPushButton, QLabel
from PySide6.QtCore import Qt


class Colors:
    """
    A light, calm palette used across the whole window.
    """
    PRIMARY = QColor("#4585e6")  # Headings and the result
    TEXT = QColor("#333333")
    TEXT_MUTED = QColor("#808080")  # Placeholder text
    BUTTON = QColor("#5c9ce6")
    BACKGROUND = QColor("#f2f2f7")
    WHITE = QColor("#ffffff")

    # --- Status Colors ---
    ACCENT_GREEN = QColor("#008000")  # For success states
    ACCENT_RED = QColor("#cc0000")  # For error states


class Typography:
    """A central place for defining font styles."""

    @staticmethod
    def get_font(size=12, weight=QFont.Weight.Normal, family="Segoe UI"):
        return QFont(family, size, weight)

    @staticmethod
    def heading():
        return Typography.get_font(24, QFont.Weight.Bold)

    @staticmethod
    def result():
        return Typography.get_font(18, QFont.Weight.Bold)

    @staticmethod
    def body():
        return Typography.get_font(12, QFont.Weight.Normal)

    @staticmethod
    def small():
        return Typography.get_font(10, QFont.Weight.Normal)


class ModernButton(QPushButton):
    """A custom-styled button that fits the application's theme."""

    def __init__(self, text=""):
        super().__init__(text)
        self.setMinimumHeight(36)
        self.setFont(Typography.body())
        self.setCursor(Qt.PointingHandCursor)

        hover_color = Colors.BUTTON.darker(110)

        self.setStyleSheet(f"""
            QPushButton {{
                background-color: {Colors.BUTTON.name()};
                color: {Colors.WHITE.name()};
                border: none;
                border-bottom: 1px solid {Colors.BUTTON.darker(130).name()};
                border-radius: 5px;
                padding: 8px 15px;
            }}
            QPushButton:hover {{
                background-color: {hover_color.name()};
                border-bottom: 2px solid {Colors.BUTTON.darker(140).name()};
            }}
            QPushButton:pressed {{
                background-color: {hover_color.name()};
                border-bottom: none;
            }}
        """)


class ResultLabel(QLabel):
    """Shows the line count, or a muted placeholder when there is none."""

    PLACEHOLDER = "The result will be shown here"

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.set_count(None)

    def set_count(self, count):
        if count is None:
            self.setText(self.PLACEHOLDER)
            self.setFont(Typography.body())
            self.setStyleSheet(f"color: {Colors.TEXT_MUTED.name()};")
        else:
            self.setText(f"line count: {count}")
            self.setFont(Typography.result())
            self.setStyleSheet(f"color: {Colors.PRIMARY.name()};")

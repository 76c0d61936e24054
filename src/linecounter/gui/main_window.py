# src/linecounter/gui/main_window.py
import logging

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QApplication
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QCloseEvent
import qtawesome as qta

from linecounter.core.event_bus import EventBus
from linecounter.core.session_state import SessionState
from linecounter.gui.components import Colors, Typography, ModernButton, ResultLabel
from linecounter.gui.status_bar import StatusBar

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Line Count Utility"
DESCRIPTION = "Counts the number of lines in a text file"
CONTENT_MAX_WIDTH = 600


class MainWindow(QMainWindow):
    """
    Main window of the application. Turns clicks into bus events and redraws
    itself from the Session State; it holds no state of its own.
    """

    def __init__(self, event_bus: EventBus, window_size=(800, 600), resizable: bool = True):
        super().__init__()
        self.event_bus = event_bus
        self._closing = False

        # --- Window Properties ---
        self.setWindowTitle(WINDOW_TITLE)
        width, height = window_size
        if resizable:
            self.resize(width, height)
        else:
            self.setFixedSize(width, height)

        # --- Central Widget and Layout ---
        central_widget = QWidget()
        central_widget.setObjectName("CentralWidget")
        central_widget.setStyleSheet(f"""
            #CentralWidget {{
                background-color: {Colors.BACKGROUND.name()};
            }}
            QLabel {{
                color: {Colors.TEXT.name()};
            }}
        """)
        self.setCentralWidget(central_widget)
        outer_layout = QHBoxLayout(central_widget)
        outer_layout.setContentsMargins(20, 20, 20, 20)

        content = QWidget()
        content.setMaximumWidth(CONTENT_MAX_WIDTH)
        content_layout = QVBoxLayout(content)
        content_layout.setSpacing(20)
        content_layout.setAlignment(Qt.AlignmentFlag.AlignVCenter)
        outer_layout.addWidget(content, 0, Qt.AlignmentFlag.AlignCenter)

        # --- Components ---
        self.title_label = QLabel(WINDOW_TITLE)
        self.title_label.setFont(Typography.heading())
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.title_label.setStyleSheet(f"color: {Colors.PRIMARY.name()};")

        self.description_label = QLabel(DESCRIPTION)
        self.description_label.setFont(Typography.body())
        self.description_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.path_input = QLineEdit()
        self.path_input.setPlaceholderText("Path to file...")
        self.path_input.setFont(Typography.body())
        self.path_input.setMinimumHeight(36)

        self.open_button = ModernButton("Choose file")
        self.open_button.setIcon(qta.icon("fa5s.folder-open", color=Colors.WHITE.name()))

        file_row = QHBoxLayout()
        file_row.setSpacing(10)
        file_row.addWidget(self.path_input, 1)
        file_row.addWidget(self.open_button)

        self.count_button = ModernButton("Count lines")
        self.result_label = ResultLabel()
        self.copy_button = ModernButton("Copy result")
        self.copy_button.setIcon(qta.icon("fa5s.copy", color=Colors.WHITE.name()))

        # --- Add Components to Layout ---
        content_layout.addWidget(self.title_label)
        content_layout.addWidget(self.description_label)
        content_layout.addLayout(file_row)
        content_layout.addWidget(self.count_button)
        content_layout.addWidget(self.result_label)
        content_layout.addWidget(self.copy_button)

        self.status_bar = StatusBar(self.event_bus)
        self.setStatusBar(self.status_bar)

        self._connect_signals()

    def _connect_signals(self):
        self.open_button.clicked.connect(lambda: self.event_bus.emit("file_dialog_requested"))
        self.count_button.clicked.connect(lambda: self.event_bus.emit("count_requested"))
        self.copy_button.clicked.connect(lambda: self.event_bus.emit("copy_requested"))
        self.path_input.returnPressed.connect(self._on_path_entered)

    def _on_path_entered(self):
        self.event_bus.emit("file_path_chosen", self.path_input.text().strip())

    def render(self, state: SessionState):
        """Redraws the widgets from the current Session State."""
        path_text = state.selected_path or ""
        if self.path_input.text() != path_text:
            self.path_input.setText(path_text)
        self.result_label.set_count(state.last_count)

    def closeEvent(self, event: QCloseEvent):
        """
        Handle window close event with async cleanup.
        """
        if self._closing:
            event.accept()
            return

        self._closing = True
        logger.info("Close event triggered - starting graceful shutdown...")
        self.event_bus.emit("application_shutdown")

        event.ignore()
        QTimer.singleShot(500, QApplication.instance().quit)

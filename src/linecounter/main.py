import sys
from pathlib import Path

import asyncio
import logging
import qasync
from PySide6.QtWidgets import QApplication, QMessageBox
from PySide6.QtCore import QStandardPaths, QTimer

from linecounter.core.app_config import AppConfig, DEFAULT_SETTINGS
from linecounter.core.application import Application
from linecounter.utils.exception_handler import setup_exception_hook
from linecounter.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


APP_NAME = "Line Count Utility"


def get_config_dir() -> Path:
    """
    Per-user, writable directory for settings.json and the log file
    (e.g. ~/.config/Line Count Utility on Linux, %APPDATA% on Windows).
    Application and organization names must be set before calling this.
    """
    location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppConfigLocation)
    if not location:
        return Path.home() / ".linecounter"
    return Path(location)


async def main_async_logic(app_instance: QApplication, config: AppConfig):
    """
    The main asynchronous coroutine for the application.
    """
    line_counter_app = None
    shutdown_future = asyncio.get_event_loop().create_future()

    async def on_about_to_quit():
        logger.info("Application is about to quit. Starting graceful shutdown...")
        if line_counter_app:
            await line_counter_app.shutdown()
        if not shutdown_future.done():
            shutdown_future.set_result(True)

    app_instance.aboutToQuit.connect(lambda: asyncio.create_task(on_about_to_quit()))

    try:
        line_counter_app = Application(config)
        line_counter_app.show()
        logger.info("Application ready and displayed.")
        await shutdown_future
    except Exception as e:
        logger.critical("CRITICAL ERROR during application startup: %s", e, exc_info=True)
        QMessageBox.critical(None, "Startup Error", f"Failed to start {APP_NAME}.\n\nError: {e}")
    finally:
        logger.info("Main async logic has finished. Exiting.")
        # asyncio tasks might keep the Qt loop alive
        QTimer.singleShot(100, app_instance.quit)


def run():
    QApplication.setApplicationName(APP_NAME)
    QApplication.setOrganizationName(APP_NAME)
    config_dir = get_config_dir()

    # Logging comes up first so config load warnings are recorded.
    setup_logging(config_dir / DEFAULT_SETTINGS["log_file"])
    setup_exception_hook()

    config = AppConfig.for_config_dir(config_dir)
    if not config.config_file.exists():
        try:
            config.save_config()
        except OSError as e:
            logger.warning("Could not write default settings to %s: %s", config.config_file, e)
    setup_logging(config.log_file_path, config.log_level)

    app = QApplication(sys.argv)

    qasync.run(main_async_logic(app, config))
    logger.info("Application has exited cleanly.")


if __name__ == "__main__":
    run()

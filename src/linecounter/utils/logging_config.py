# src/linecounter/utils/logging_config.py
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "linecounter"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'


def setup_logging(log_file_path: Optional[Path] = None, level: str = "INFO") -> logging.Logger:
    """
    Configures the 'linecounter' logger with a rotating file handler and a console handler.
    Calling it again replaces the handlers it installed earlier.
    """
    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    if log_file_path is not None:
        try:
            log_file_path.parent.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(log_file_path, maxBytes=5 * 1024 * 1024, backupCount=2, encoding='utf-8')
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(formatter)
            app_logger.addHandler(fh)
        except OSError as e:
            # Console logging still works without the file
            print(f"CRITICAL: Failed to set up file logger at {log_file_path}: {e}", file=sys.stderr)

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(logging.INFO)
    ch.setFormatter(formatter)
    app_logger.addHandler(ch)

    app_logger.info("Logging initialized. Log file: %s", log_file_path)
    return app_logger

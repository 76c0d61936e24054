# src/linecounter/core/app_config.py
# Application settings persisted as JSON

import json
import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "settings.json"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "window_width": 800,
    "window_height": 600,
    "resizable": True,
    "count_in_background": False,
    "log_level": "INFO",
    "log_file": "linecounter.log",
}


class AppConfig:
    """
    Manages application settings persistence and validation.
    Single responsibility: Handle settings storage and retrieval.
    """

    def __init__(self, config_file: Path):
        self.config_file = Path(config_file)

        # Configuration structure:
        # {
        #   "window_width": 800,
        #   "window_height": 600,
        #   "resizable": true,
        #   "count_in_background": false,
        #   "log_level": "INFO",
        #   "log_file": "linecounter.log"
        # }
        self._config_data: Dict[str, Any] = deepcopy(DEFAULT_SETTINGS)

        self._load_config()

    @classmethod
    def for_config_dir(cls, config_dir: Path) -> "AppConfig":
        return cls(Path(config_dir) / CONFIG_FILE_NAME)

    def _load_config(self):
        """Load configuration from file. Invalid entries keep their defaults."""
        if not self.config_file.exists():
            logger.info("No config file found at %s. Using defaults.", self.config_file)
            return

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                loaded_data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Error loading config file %s: %s. Using defaults.", self.config_file, e)
            return

        if not isinstance(loaded_data, dict):
            logger.warning("Config file %s does not hold an object. Using defaults.", self.config_file)
            return

        for key, value in loaded_data.items():
            if key not in DEFAULT_SETTINGS:
                continue
            if self._is_valid(key, value):
                self._config_data[key] = value
            else:
                logger.warning("Invalid value for '%s' in %s: %r. Using default %r.",
                               key, self.config_file, value, DEFAULT_SETTINGS[key])

        logger.info("Loaded configuration from %s", self.config_file)

    @staticmethod
    def _is_valid(key: str, value: Any) -> bool:
        if key in ("window_width", "window_height"):
            return isinstance(value, int) and not isinstance(value, bool) and value > 0
        if key in ("resizable", "count_in_background"):
            return isinstance(value, bool)
        if key == "log_level":
            return isinstance(value, str) and value.upper() in LOG_LEVELS
        if key == "log_file":
            return isinstance(value, str) and bool(value)
        return False

    def save_config(self):
        """Save current configuration to file."""
        self.config_file.parent.mkdir(exist_ok=True, parents=True)
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(self._config_data, f, indent=2)
        logger.info("Saved configuration to %s", self.config_file)

    # --- Accessors ---
    @property
    def window_size(self):
        return self._config_data["window_width"], self._config_data["window_height"]

    @property
    def resizable(self) -> bool:
        return self._config_data["resizable"]

    @property
    def count_in_background(self) -> bool:
        return self._config_data["count_in_background"]

    @property
    def log_level(self) -> str:
        return self._config_data["log_level"].upper()

    @property
    def log_file_path(self) -> Path:
        """Log file location, next to the settings file."""
        return self.config_file.parent / self._config_data["log_file"]


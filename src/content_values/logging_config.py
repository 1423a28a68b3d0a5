"""
Logging configuration for applications embedding content_values.

The library itself only creates module loggers; setup_logging is for the
host process and installs a single console handler on the root logger.
"""

import logging
import sys
import threading
from typing import Optional, Union

from content_values.config import env_str
from content_values.exceptions import ConfigurationError

LOG_LEVEL_ENV = "CONTENT_VALUES_LOG_LEVEL"

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_HANDLER_NAME = "content_values.console"


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = env_str(LOG_LEVEL_ENV, or_value="INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ConfigurationError.invalid_value(LOG_LEVEL_ENV, level, "not a logging level name")
    return resolved


def _build_console_handler(level: int) -> logging.Handler:
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    return console_handler


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Configure console logging; repeated calls only update the level"""

    with _config_lock:
        root_logger = logging.getLogger()
        resolved = _resolve_level(level)

        existing = next((handler for handler in root_logger.handlers if handler.get_name() == _HANDLER_NAME), None)
        if existing is None:
            root_logger.addHandler(_build_console_handler(resolved))
        else:
            existing.setLevel(resolved)

        root_logger.setLevel(resolved)
        logging.getLogger("content_values").setLevel(resolved)
        return root_logger


__all__ = ["LOG_LEVEL_ENV", "setup_logging"]

# src/reqlog/core/logging/builder.py
"""
Logging builder: create and apply a dictConfig logging configuration.

This module:
 - builds a dictConfig-compatible mapping from Settings
 - routes the access logger (Settings.REQUEST_LOG_LOGGER) to the console and,
   when file logging is enabled, to a rotating `access.log`
 - applies it with setup_logging(settings)

Configuration knobs (on your Settings object):
 - LOG_TO_STDOUT, LOG_DIR, LOG_FORMAT, LOG_LEVEL, LOG_MAX_BYTES,
   LOG_BACKUP_COUNT, ENV, REQUEST_LOG_LOGGER.

Any object with those attributes works (tests pass a SimpleNamespace).
"""

from __future__ import annotations

from pathlib import Path
import logging
import logging.config

from .formatters import JsonFormatter, ColorFormatter
from .handlers import (
    get_console_handler,
    get_access_file_handler,
    get_error_console_handler,
)

# Settings type (avoid calling get_settings() here to prevent import-time side effects)
from reqlog.config.settings import Settings
from .middleware import DEFAULT_ACCESS_LOGGER


def _file_logging_enabled(settings: Settings) -> bool:
    return (not settings.LOG_TO_STDOUT) and bool(settings.LOG_DIR)


def make_dict_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping using the provided settings.

    The returned mapping includes:
      - formatters: "standard" (color/dev or plain) and "json"
      - handlers: console, plus access_file (file mode) or error_console (stdout mode)
      - loggers: root and the access logger
    """
    formatters = {
        "standard": {
            # use ColorFormatter only in text development mode
            "()": ColorFormatter if settings.LOG_FORMAT == "text" and settings.ENV == "development" else logging.Formatter,
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        },
        "json": {
            "()": JsonFormatter,
            "env": settings.ENV,
            "service": "reqlog",
        },
    }

    handlers: dict[str, dict] = {"console": get_console_handler(settings)}
    access_handlers = ["console"]

    if _file_logging_enabled(settings):
        handlers["access_file"] = get_access_file_handler(settings)
        access_handlers.append("access_file")
    else:
        handlers["error_console"] = get_error_console_handler(settings)

    access_logger = getattr(settings, "REQUEST_LOG_LOGGER", None) or DEFAULT_ACCESS_LOGGER

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "handlers": handlers,
        "loggers": {
            "": {
                "handlers": [name for name in handlers if name != "access_file"],
                "level": settings.LOG_LEVEL,
            },
            # Access lines are INFO; keep them even when the root level is WARNING.
            access_logger: {
                "handlers": access_handlers,
                "level": "INFO",
                "propagate": False,
            },
        },
    }


def setup_logging(settings: Settings) -> None:
    """
    Initialize logging using settings.

    Steps:
      1. Ensure LOG_DIR exists when writing files.
      2. Apply dictConfig(make_dict_config(settings)).
    """
    if _file_logging_enabled(settings):
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(make_dict_config(settings))

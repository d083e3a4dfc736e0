# src/reqlog/core/logging/handlers.py
"""
Handler factories for logging.dictConfig.

Each function returns a plain handler configuration dict; builder.py decides
which of them to wire in. Keeping them as pure functions of Settings makes
each one trivial to unit test.
"""

from reqlog.config.settings import Settings
from pathlib import Path


def _formatter_name(settings: Settings) -> str:
    # The builder's "formatters" mapping must contain "json" and "standard".
    return "json" if settings.LOG_FORMAT == "json" else "standard"


def get_console_handler(settings: Settings) -> dict:
    """
    Return a logging handler configuration dict for a console/stream handler.

    Access lines go to stdout so container runtimes pick them up with the rest
    of the service output.
    """
    return {
        "class": "logging.StreamHandler",
        "formatter": _formatter_name(settings),
        "level": settings.LOG_LEVEL,
        "stream": "ext://sys.stdout",
    }

def get_access_file_handler(settings: Settings) -> dict:
    file_path = str(Path(settings.LOG_DIR) / "access.log")
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "formatter": _formatter_name(settings),
        "level": "INFO",
        "filename": file_path,
        "maxBytes": settings.LOG_MAX_BYTES,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
    }

def get_error_console_handler(settings: Settings) -> dict:
    return {
        "class": "logging.StreamHandler",
        "formatter": "json",
        "level": "ERROR",
    }

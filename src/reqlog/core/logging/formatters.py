# src/reqlog/core/logging/formatters.py

"""
Custom logging formatters.

This module provides the two formatters the dictConfig builder can select:

  - JsonFormatter: emits one JSON object per record, for log collectors. Access
    lines produced by the request logger carry their structured extras
    (http_method, http_status, response_time_ms) as top-level keys next to the
    rendered `message`.

  - ColorFormatter: a compact, ANSI-colored line for local development consoles.

The rendered access line itself is always the record's message; these formatters
only decide how that message is wrapped on its way to the sink.
"""

import json
import logging
from logging import LogRecord
from typing import Any

from reqlog.utils.metadata import get_project_version

PROJECT_VERSION = get_project_version()

# Attributes every LogRecord has; anything else on record.__dict__ came from `extra=`.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """
    Structured JSON formatter.

    Construction:
      - env: environment name (e.g., "development" | "production"); optional.
      - service: logical service name to include in logs (defaults to "reqlog").
      - datefmt: optional date format passed to logging.Formatter (used by formatTime).

    Never raises on odd extras: values json cannot encode are stringified.
    """

    def __init__(self, *, env: str | None = None, service: str = "reqlog", datefmt: str | None = None):
        super().__init__(datefmt=datefmt)
        self.env = env
        self.service = service

    def format(self, record: LogRecord) -> str:
        log_record: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service,
            "env": self.env,
            "version": PROJECT_VERSION,
        }

        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            log_record["stack_info"] = self.formatStack(record.stack_info)

        for k, v in record.__dict__.items():
            if k in _RESERVED_ATTRS or k in log_record or k.startswith("_"):
                continue
            try:
                json.dumps(v)
                log_record[k] = v
            except (TypeError, ValueError):
                log_record[k] = str(v)

        return json.dumps(log_record, ensure_ascii=False, default=str)


class ColorFormatter(logging.Formatter):
    """
    Development-friendly colored formatter.

    Produces `TIMESTAMP | LEVEL | LOGGER | MESSAGE` with the level wrapped in an
    ANSI color. Not meant for files or collectors: the escape codes end up in
    the output verbatim.
    """

    COLOR_CODES = {
        "DEBUG": "\033[1;36;47m",   # bold cyan on white
        "INFO": "\033[32m",         # green
        "WARNING": "\033[33m",      # yellow
        "ERROR": "\033[31m",        # red
        "CRITICAL": "\033[1;41m",   # bold on red background
        "RESET": "\033[0m",
    }

    def __init__(self, fmt: str | None = None, datefmt: str | None = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)

    def format(self, record: LogRecord) -> str:
        color = self.COLOR_CODES.get(record.levelname, "")
        # Reset right after the level so the color doesn't bleed into the message.
        reset = self.COLOR_CODES["RESET"]
        timestamp = self.formatTime(record, self.datefmt)

        base = (
            f"{timestamp} | {color}{record.levelname:<8}{reset} | "
            f"{record.name:<20} | "
            f"{record.getMessage()}"
        )

        if record.exc_info:
            base = base + "\n" + self.formatException(record.exc_info)

        return base

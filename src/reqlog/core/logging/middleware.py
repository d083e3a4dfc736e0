# src/reqlog/core/logging/middleware.py
"""
Request logging middleware for FastAPI / Starlette.

Purpose
-------
Emit one access-log line per HTTP request, rendered from a template compiled
once at startup (see `reqlog.formatting`). Default template:

    {method} {uri} -> {status} ({response-time} ms)

How it works (high level)
-------------------------
1. Before the request reaches the application, `RequestLogger.mark_start()`
   stores a `RequestStart` (wall clock + monotonic clock) on `request.state`.
2. The request is forwarded via `call_next(request)`.
3. After the response is produced, `RequestLogger.log()` reads the start,
   computes the elapsed milliseconds, builds a `RenderContext`, renders the
   line and emits it at INFO on the access logger.
4. If the application raises, the line is still logged, with no status (it
   renders as `<missing status code>`), and the exception propagates unchanged.

Integration notes
-----------------
- Register the middleware last so it wraps everything else and the measured
  time covers the whole chain:
      install_request_logging(app, settings)
- A malformed REQUEST_LOG_TEMPLATE fails in `install_request_logging` (or
  already when Settings load), never on a request.

Concurrency model
-----------------
- The compiled `Format` is a frozen value shared by every request.
- The only per-request state is the `RequestStart` on `request.state`, which
  Starlette scopes to one request.
"""

from __future__ import annotations

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from reqlog.config.settings import Settings, get_settings
from reqlog.exceptions import StartTimeMissingError
from reqlog.formatting import DEFAULT_FORMAT, Format, RenderContext, RequestStart, render

DEFAULT_ACCESS_LOGGER = "reqlog.access"

# Attribute name on request.state
_START_ATTR = "reqlog_start"


def format_remote_addr(request: Request) -> str:
    """
    Render the client socket address as host:port ([host]:port for IPv6).

    Transports that do not expose a client (some test clients, unix sockets)
    yield "-".
    """
    client = request.client
    if client is None:
        return "-"
    host, port = client.host, client.port
    if ":" in host:
        host = f"[{host}]"
    return f"{host}:{port}"


class RequestLogger:
    """
    Framework-facing half of the request logger.

    Holds one compiled Format and the logger it writes to. `mark_start` is the
    "before" hook and `log` the "after" hook; the middleware below calls both,
    but they can be wired into any request lifecycle that exposes `request.state`.
    """

    def __init__(self, fmt: Format | None = None, logger: logging.Logger | None = None):
        self.format = fmt if fmt is not None else DEFAULT_FORMAT
        self.logger = logger or logging.getLogger(DEFAULT_ACCESS_LOGGER)

    def mark_start(self, request: Request) -> RequestStart:
        start = RequestStart()
        setattr(request.state, _START_ATTR, start)
        return start

    def build_context(self, request: Request, status: int | None) -> RenderContext:
        start = getattr(request.state, _START_ATTR, None)
        if start is None:
            raise StartTimeMissingError(
                "request completed without a recorded start; "
                "mark_start() must run before log()"
            )
        return RenderContext(
            method=request.method,
            uri=str(request.url),
            remote_addr=format_remote_addr(request),
            request_time=start.wall,
            response_time_ms=start.elapsed_ms(),
            status=status,
        )

    def log(self, request: Request, status: int | None) -> str:
        """
        Render and emit the access line for a finished request; return the line.

        Raises:
            StartTimeMissingError: mark_start() was never called for this request.
        """
        ctx = self.build_context(request, status)
        line = render(self.format, ctx)
        self.logger.info(
            line,
            extra={
                "http_method": ctx.method,
                "http_status": ctx.status,
                "response_time_ms": ctx.response_time_ms,
            },
        )
        return line


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """
    Starlette / FastAPI middleware that logs one line per request.

    Args:
        app: the downstream ASGI app.
        fmt: compiled Format; None selects the default format.
        logger_name: access logger name (defaults to "reqlog.access").
    """

    def __init__(self, app, fmt: Format | None = None, logger_name: str = DEFAULT_ACCESS_LOGGER):
        super().__init__(app)
        self.request_logger = RequestLogger(fmt, logging.getLogger(logger_name))

    async def dispatch(self, request: Request, call_next):
        self.request_logger.mark_start(request)
        try:
            response = await call_next(request)
        except Exception:
            self.request_logger.log(request, None)
            raise
        self.request_logger.log(request, response.status_code)
        return response


def install_request_logging(app, settings: Settings | None = None) -> RequestLogger:
    """
    Compile the configured template and register RequestLoggerMiddleware on `app`.

    Call from the app factory after every other middleware has been added.
    Returns a RequestLogger sharing the same format and logger, handy for
    frameworks or background jobs that log outside the middleware.
    """
    settings = settings or get_settings()
    fmt = settings.request_log_format
    app.add_middleware(RequestLoggerMiddleware, fmt=fmt, logger_name=settings.REQUEST_LOG_LOGGER)
    return RequestLogger(fmt, logging.getLogger(settings.REQUEST_LOG_LOGGER))

# src/reqlog/formatting/renderer.py
"""
Render a compiled `Format` into one access-log line.

Rendering is a pure function of `(Format, RenderContext)`: it does no I/O,
never logs, and never raises. Values that are not available fall back to
sentinels (e.g. `<missing status code>`), so a bad request can never take
down the logging path. Emitting the returned string is the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from http import HTTPStatus
from typing import Callable

from .compiler import FieldKind, FieldPlaceholder, Format, FormatUnit, LiteralText

MISSING_STATUS = "<missing status code>"

# Microseconds and a numeric offset, with a literal 'Z' between them.
REQUEST_TIME_PATTERN = "%Y-%m-%dT%H:%M:%S.%fZ%z"


@dataclass(frozen=True)
class RenderContext:
    """
    Per-request snapshot of everything a template can reference.

    Attributes:
        method: HTTP method token exactly as received (e.g. "GET").
        uri: full request URL.
        remote_addr: client socket address, e.g. "127.0.0.1:54321".
        request_time: when the request arrived; rendered in the zone it carries.
        response_time_ms: elapsed milliseconds, already computed by the caller.
        status: response status code or line; None when no handler set one.
    """

    method: str
    uri: str
    remote_addr: str
    request_time: datetime
    response_time_ms: float
    status: int | str | None = None


def format_status(status: int | str | None) -> str:
    if status is None:
        return MISSING_STATUS
    if isinstance(status, str):
        return status
    try:
        known = HTTPStatus(status)
    except ValueError:
        return str(int(status))
    return f"{known.value} {known.phrase}"


def format_response_time(ms: float) -> str:
    """
    Shortest exact decimal form of `ms` followed by ' ms'.

    Whole values drop the trailing '.0' (2500.0 -> '2500 ms'); fractions keep
    every significant digit (12.5 -> '12.5 ms').
    """
    text = repr(float(ms))
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text} ms"


def format_request_time(moment: datetime) -> str:
    return moment.strftime(REQUEST_TIME_PATTERN)


_FIELD_RENDERERS: dict[FieldKind, Callable[[RenderContext], str]] = {
    FieldKind.METHOD: lambda ctx: ctx.method,
    FieldKind.URI: lambda ctx: ctx.uri,
    FieldKind.STATUS: lambda ctx: format_status(ctx.status),
    FieldKind.RESPONSE_TIME: lambda ctx: format_response_time(ctx.response_time_ms),
    FieldKind.REMOTE_ADDR: lambda ctx: ctx.remote_addr,
    FieldKind.REQUEST_TIME: lambda ctx: format_request_time(ctx.request_time),
}


def render_unit(unit: FormatUnit, ctx: RenderContext) -> str:
    if isinstance(unit, LiteralText):
        return unit.text
    if isinstance(unit, FieldPlaceholder):
        return _FIELD_RENDERERS[unit.kind](ctx)
    raise TypeError(f"not a format unit: {unit!r}")


def render(fmt: Format, ctx: RenderContext) -> str:
    """Concatenate the rendering of every unit in order, with no separators."""
    return "".join(render_unit(unit, ctx) for unit in fmt)


__all__ = [
    "MISSING_STATUS",
    "REQUEST_TIME_PATTERN",
    "RenderContext",
    "format_status",
    "format_response_time",
    "format_request_time",
    "render_unit",
    "render",
]

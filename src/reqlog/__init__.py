"""reqlog: template-driven access-log lines for Starlette / FastAPI."""

from .exceptions import FormatError, UnknownFieldTokenError, UnterminatedPlaceholderError
from .formatting import (
    DEFAULT_FORMAT,
    FieldKind,
    Format,
    RenderContext,
    compile_format,
    render,
)

__all__ = [
    "FormatError",
    "UnknownFieldTokenError",
    "UnterminatedPlaceholderError",
    "DEFAULT_FORMAT",
    "FieldKind",
    "Format",
    "RenderContext",
    "compile_format",
    "render",
]

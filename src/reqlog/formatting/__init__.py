# src/reqlog/formatting/
# ├─ __init__.py            # public API re-exports
# ├─ compiler.py            # FieldKind, Format, compile_format(), DEFAULT_FORMAT
# ├─ renderer.py            # RenderContext, render()
# └─ timing.py              # RequestStart, elapsed_ms()

from .compiler import (
    DEFAULT_FORMAT,
    DEFAULT_TEMPLATE,
    FieldKind,
    FieldPlaceholder,
    Format,
    FormatUnit,
    LiteralText,
    compile_format,
)
from .renderer import MISSING_STATUS, RenderContext, render
from .timing import RequestStart, elapsed_ms, timedelta_ms

__all__ = [
    "DEFAULT_FORMAT",
    "DEFAULT_TEMPLATE",
    "FieldKind",
    "FieldPlaceholder",
    "Format",
    "FormatUnit",
    "LiteralText",
    "compile_format",
    "MISSING_STATUS",
    "RenderContext",
    "render",
    "RequestStart",
    "elapsed_ms",
    "timedelta_ms",
]

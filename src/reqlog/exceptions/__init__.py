from .base import (
    FormatError,
    UnterminatedPlaceholderError,
    UnknownFieldTokenError,
    StartTimeMissingError,
)

__all__ = [
    "FormatError",
    "UnterminatedPlaceholderError",
    "UnknownFieldTokenError",
    "StartTimeMissingError",
]

# reqlog/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   └── base.py                    # FormatError family + StartTimeMissingError

# src/reqlog/formatting/compiler.py
"""
Request log template compiler.

A template is plain text with `{field}` placeholders, e.g.:

    {method} {uri} -> {status} ({response-time} ms)

`compile_format()` turns it into a `Format`: an immutable, ordered tuple of
units, each either a `LiteralText` (emitted verbatim) or a `FieldPlaceholder`
(one of the six `FieldKind`s, resolved per request by the renderer).

Grammar
-------
- `{` opens a placeholder; the token runs up to the next `}`.
- Tokens are matched exactly (case-sensitive) against `FieldKind` values.
- Everything else, including a stray `}`, is literal text.
- There is no escape for a literal `{`.

Compilation is all-or-nothing: the first problem raises a `FormatError`
subclass and no partial format is returned. Compile once at startup and share
the result; a `Format` is a frozen value and safe to read from any number of
threads or tasks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Union

from reqlog.exceptions import UnknownFieldTokenError, UnterminatedPlaceholderError


class FieldKind(str, Enum):
    """The closed set of request/response fields a template can interpolate."""

    METHOD = "method"
    URI = "uri"
    STATUS = "status"
    RESPONSE_TIME = "response-time"
    REMOTE_ADDR = "remote-addr"
    REQUEST_TIME = "request-time"


@dataclass(frozen=True)
class LiteralText:
    text: str


@dataclass(frozen=True)
class FieldPlaceholder:
    kind: FieldKind


FormatUnit = Union[LiteralText, FieldPlaceholder]


@dataclass(frozen=True)
class Format:
    """
    A compiled request log template.

    Units are kept in a tuple so the whole object is hashable and comparable by
    value: two formats compiled from equivalent templates are equal.
    """

    units: tuple[FormatUnit, ...] = ()

    def __iter__(self) -> Iterator[FormatUnit]:
        return iter(self.units)

    def __len__(self) -> int:
        return len(self.units)

    @classmethod
    def from_template(cls, template: str | None) -> "Format":
        """Compile `template`, or return the default format when it is None."""
        if template is None:
            return DEFAULT_FORMAT
        return compile_format(template)


_TOKENS: dict[str, FieldKind] = {kind.value: kind for kind in FieldKind}


def parse_field_token(token: str, *, position: int | None = None) -> FieldKind:
    """Map a placeholder token to its FieldKind or raise UnknownFieldTokenError."""
    try:
        return _TOKENS[token]
    except KeyError:
        raise UnknownFieldTokenError(token, position=position) from None


def compile_format(template: str) -> Format:
    """
    Compile a template string into a Format.

    Raises:
        UnterminatedPlaceholderError: a '{' with no closing '}'.
        UnknownFieldTokenError: a placeholder naming an unknown field.
    """
    units: list[FormatUnit] = []
    literal: list[str] = []
    i = 0
    length = len(template)

    while i < length:
        char = template[i]
        if char != "{":
            literal.append(char)
            i += 1
            continue

        if literal:
            units.append(LiteralText("".join(literal)))
            literal = []

        close = template.find("}", i + 1)
        if close == -1:
            raise UnterminatedPlaceholderError(i)

        kind = parse_field_token(template[i + 1:close], position=i)
        units.append(FieldPlaceholder(kind))
        i = close + 1

    if literal:
        units.append(LiteralText("".join(literal)))

    return Format(tuple(units))


DEFAULT_TEMPLATE = "{method} {uri} -> {status} ({response-time} ms)"

# Built by hand so importing this module never runs the parser.
DEFAULT_FORMAT = Format((
    FieldPlaceholder(FieldKind.METHOD),
    LiteralText(" "),
    FieldPlaceholder(FieldKind.URI),
    LiteralText(" -> "),
    FieldPlaceholder(FieldKind.STATUS),
    LiteralText(" ("),
    FieldPlaceholder(FieldKind.RESPONSE_TIME),
    LiteralText(" ms)"),
))


__all__ = [
    "FieldKind",
    "LiteralText",
    "FieldPlaceholder",
    "FormatUnit",
    "Format",
    "parse_field_token",
    "compile_format",
    "DEFAULT_TEMPLATE",
    "DEFAULT_FORMAT",
]

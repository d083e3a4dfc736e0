# src/reqlog/tests/test_formatting/test_compiler.py
import pytest

from reqlog.exceptions import FormatError, UnknownFieldTokenError, UnterminatedPlaceholderError
from reqlog.formatting.compiler import (
    DEFAULT_FORMAT,
    DEFAULT_TEMPLATE,
    FieldKind,
    FieldPlaceholder,
    Format,
    LiteralText,
    compile_format,
    parse_field_token,
)


def test_default_template_compiles_to_default_format():
    assert compile_format("{method} {uri} -> {status} ({response-time} ms)") == DEFAULT_FORMAT
    assert compile_format(DEFAULT_TEMPLATE) == DEFAULT_FORMAT


def test_from_template_none_returns_default_format():
    assert Format.from_template(None) is DEFAULT_FORMAT
    assert Format.from_template("{uri}") == Format((FieldPlaceholder(FieldKind.URI),))


def test_empty_template_compiles_to_empty_format():
    fmt = compile_format("")
    assert fmt == Format(())
    assert len(fmt) == 0
    # empty is legal and distinct from "no template"
    assert Format.from_template("") != DEFAULT_FORMAT


def test_literal_around_placeholder():
    assert compile_format("X{method}Y").units == (
        LiteralText("X"),
        FieldPlaceholder(FieldKind.METHOD),
        LiteralText("Y"),
    )


def test_adjacent_placeholders_have_no_empty_literals():
    assert compile_format("{method}{uri}").units == (
        FieldPlaceholder(FieldKind.METHOD),
        FieldPlaceholder(FieldKind.URI),
    )


def test_literal_only_template_is_one_unit():
    assert compile_format("plain text").units == (LiteralText("plain text"),)


@pytest.mark.parametrize(
    "token, kind",
    [
        ("method", FieldKind.METHOD),
        ("uri", FieldKind.URI),
        ("status", FieldKind.STATUS),
        ("response-time", FieldKind.RESPONSE_TIME),
        ("remote-addr", FieldKind.REMOTE_ADDR),
        ("request-time", FieldKind.REQUEST_TIME),
    ],
)
def test_every_field_token_is_recognized(token, kind):
    assert parse_field_token(token) is kind
    assert compile_format("{" + token + "}").units == (FieldPlaceholder(kind),)


def test_unknown_token_fails():
    with pytest.raises(UnknownFieldTokenError) as exc_info:
        compile_format("{unknown}")
    err = exc_info.value
    assert err.token == "unknown"
    assert err.position == 0
    assert err.error_code == "unknown_field"
    assert "unknown" in str(err)


@pytest.mark.parametrize("token", ["Method", "METHOD", "response_time", "responseTime", " method", ""])
def test_tokens_are_case_and_spelling_sensitive(token):
    with pytest.raises(UnknownFieldTokenError) as exc_info:
        compile_format("{" + token + "}")
    assert exc_info.value.token == token


def test_unterminated_placeholder_fails():
    with pytest.raises(UnterminatedPlaceholderError) as exc_info:
        compile_format("{method")
    assert exc_info.value.position == 0
    assert exc_info.value.error_code == "unterminated_placeholder"


def test_unterminated_placeholder_reports_opening_brace_position():
    with pytest.raises(UnterminatedPlaceholderError) as exc_info:
        compile_format("{method} -> {status")
    assert exc_info.value.position == 12


def test_unknown_token_after_valid_ones_reports_its_position():
    with pytest.raises(UnknownFieldTokenError) as exc_info:
        compile_format("{method} {user-agent}")
    assert exc_info.value.position == 9


def test_closing_brace_outside_placeholder_is_literal():
    assert compile_format("a}b{uri}").units == (
        LiteralText("a}b"),
        FieldPlaceholder(FieldKind.URI),
    )


def test_nested_open_brace_becomes_part_of_the_token():
    with pytest.raises(UnknownFieldTokenError) as exc_info:
        compile_format("{a{method}")
    assert exc_info.value.token == "a{method"


def test_format_errors_share_a_value_error_base():
    for template in ("{nope}", "{method"):
        with pytest.raises(FormatError):
            compile_format(template)
        with pytest.raises(ValueError):
            compile_format(template)


def test_error_payload_is_structured():
    with pytest.raises(UnknownFieldTokenError) as exc_info:
        compile_format("-- {bogus}")
    assert exc_info.value.to_payload() == {
        "detail": "Unknown field token in request log template",
        "code": "unknown_field",
        "token": "bogus",
        "position": 3,
    }


def test_format_is_immutable_and_hashable():
    fmt = compile_format("{method} {uri}")
    with pytest.raises(AttributeError):
        fmt.units = ()
    assert hash(fmt) == hash(compile_format("{method} {uri}"))
    assert list(fmt) == list(fmt.units)

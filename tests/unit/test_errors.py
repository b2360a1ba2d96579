"""Tests for the calcdemo error types."""

from calcdemo.core.errors import (
    CalcError,
    ErrorContext,
    EvaluationError,
    LiteralRangeError,
    ParseError,
    make_parse_error,
)


def test_hierarchy():
    for cls in (ParseError, LiteralRangeError, EvaluationError):
        assert issubclass(cls, CalcError)


def test_message_without_context():
    err = EvaluationError("Division by zero")
    assert str(err) == "Division by zero"
    assert err.context is None


def test_context_format():
    context = ErrorContext(source="(2 + 3", column=7)
    assert context.format() == "column 7\n  (2 + 3\n        ^"


def test_context_underlines_token_width():
    context = ErrorContext(source="1 + 99999", column=5, length=5)
    assert context.format().splitlines()[-1] == "      ^^^^^"


def test_make_parse_error():
    err = make_parse_error("Primary expression expected.", "2 * ", 4)
    assert isinstance(err, ParseError)
    assert err.context == ErrorContext(source="2 * ", column=5, length=1)
    assert str(err).endswith("\nPrimary expression expected.")
    assert str(err).startswith("column 5\n")

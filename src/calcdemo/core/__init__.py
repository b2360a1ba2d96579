"""Core calcdemo functionality: IR, scanner, parser, evaluator, printer, settings."""

from . import ir
from .environment import Settings, load_settings
from .errors import (
    CalcError,
    ErrorContext,
    EvaluationError,
    LiteralRangeError,
    ParseError,
)

__all__ = [
    "ir",
    "CalcError",
    "ErrorContext",
    "EvaluationError",
    "LiteralRangeError",
    "ParseError",
    "Settings",
    "load_settings",
]

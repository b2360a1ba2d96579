"""
calcdemo - a minimal integer arithmetic expression interpreter.

Scans, parses, and evaluates infix expressions over + - * / and
parentheses, and prints the parsed tree for inspection.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import CalcError, EvaluationError, LiteralRangeError, ParseError
from .core.expression_lang import calculate, evaluate, format_tree, parse_expr

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "CalcError",
    "EvaluationError",
    "LiteralRangeError",
    "ParseError",
    "calculate",
    "evaluate",
    "format_tree",
    "parse_expr",
]

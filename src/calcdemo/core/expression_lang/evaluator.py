"""
Expression evaluator for the calcdemo expression language.

Folds an AST into an integer. Pure evaluation: no I/O, no mutable state,
so evaluating the same tree twice yields the same result.

Integer semantics:
    - Division truncates toward zero, as C integer division does.
    - With a bounded width (CALCDEMO_INT_BITS, default 32) every
      intermediate result must fit the signed range; overflow raises
      instead of wrapping. Width 0 uses Python's unbounded integers.
"""

from __future__ import annotations

import logging
from typing import assert_never

from calcdemo.core.environment import Settings, load_settings
from calcdemo.core.errors import EvaluationError
from calcdemo.core.expression_lang.parser import parse_expr
from calcdemo.core.ir.expressions import (
    AddExpr,
    BinaryExpr,
    DivideExpr,
    Expr,
    MultiplyExpr,
    NumberLiteral,
    SubtractExpr,
)

logger = logging.getLogger(__name__)


def evaluate(expr: Expr, settings: Settings | None = None) -> int:
    """Evaluate an expression tree.

    Args:
        expr: Parsed expression AST.
        settings: Integer width settings; read from the environment if omitted.

    Returns:
        The integer value of the expression.

    Raises:
        EvaluationError: On division by zero or integer overflow.
    """
    if settings is None:
        settings = load_settings()
    result = _interpret(expr, settings)
    logger.debug("Evaluated %s = %d", expr, result)
    return result


def calculate(source: str, settings: Settings | None = None) -> int:
    """Parse and evaluate an expression string."""
    if settings is None:
        settings = load_settings()
    return evaluate(parse_expr(source, settings), settings)


def _interpret(expr: Expr, settings: Settings) -> int:
    """Post-order fold with an explicit stack.

    Each binary node is visited twice: first to schedule its children
    (left on top, so it is evaluated first), then to combine their values.
    """
    values: list[int] = []
    stack: list[tuple[Expr, bool]] = [(expr, False)]
    while stack:
        node, children_done = stack.pop()
        if isinstance(node, NumberLiteral):
            values.append(node.value)
        elif not children_done:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))
        else:
            right = values.pop()
            left = values.pop()
            values.append(_apply(node, left, right, settings))
    return values.pop()


def _apply(expr: BinaryExpr, left: int, right: int, settings: Settings) -> int:
    """Dispatch on the operator kind."""
    if isinstance(expr, AddExpr):
        return _checked(expr, left + right, settings)
    if isinstance(expr, SubtractExpr):
        return _checked(expr, left - right, settings)
    if isinstance(expr, MultiplyExpr):
        return _checked(expr, left * right, settings)
    if isinstance(expr, DivideExpr):
        if right == 0:
            raise EvaluationError(f"Division by zero in {expr}")
        return _checked(expr, _truncating_div(left, right), settings)

    assert_never(expr)


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _checked(expr: Expr, value: int, settings: Settings) -> int:
    if not settings.fits(value):
        raise EvaluationError(
            f"Integer overflow: {expr} = {value} does not fit a "
            f"{settings.int_bits}-bit integer "
            f"[{settings.int_min}, {settings.int_max}]."
        )
    return value

"""Tests for the calcdemo evaluator."""

from __future__ import annotations

import pytest

from calcdemo.core.environment import Settings
from calcdemo.core.errors import EvaluationError
from calcdemo.core.expression_lang.evaluator import calculate, evaluate
from calcdemo.core.expression_lang.parser import parse_expr
from calcdemo.core.ir.expressions import DivideExpr, NumberLiteral, SubtractExpr


class TestArithmetic:
    """Per-operator semantics, precedence, and associativity."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("42", 42),
            ("(42)", 42),
            ("  ( ( 42 ) )  ", 42),
            ("2 + 3", 5),
            ("9 - 4", 5),
            ("6 * 7", 42),
            ("8 / 2", 4),
            ("2 + 3 * 4", 14),
            ("(2 + 3) * 4", 20),
            ("8 - 3 - 2", 3),
            ("8 / 4 / 2", 1),
            ("10 - 2 * 3", 4),
            ("100 / 7 * 7", 98),
        ],
    )
    def test_expressions(self, source: str, expected: int) -> None:
        assert calculate(source) == expected

    @pytest.mark.parametrize("source", ["2+3", "2 + 3", "  2  +  3  "])
    def test_whitespace_insensitive(self, source: str) -> None:
        assert calculate(source) == 5


class TestDivision:
    """Division truncates toward zero and rejects zero divisors."""

    def test_truncates_positive(self) -> None:
        assert calculate("7 / 2") == 3

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("(0 - 7) / 2", -3),
            ("7 / (0 - 2)", -3),
            ("(0 - 7) / (0 - 2)", 3),
            ("(0 - 1) / 2", 0),
        ],
    )
    def test_truncates_toward_zero_for_negatives(self, source: str, expected: int) -> None:
        assert calculate(source) == expected

    def test_division_by_zero(self) -> None:
        with pytest.raises(EvaluationError, match="Division by zero"):
            calculate("1 / 0")

    def test_division_by_computed_zero(self) -> None:
        with pytest.raises(EvaluationError, match="Division by zero"):
            calculate("1 / (2 - 2)")

    def test_zero_divisor_is_not_a_parse_error(self) -> None:
        assert isinstance(parse_expr("1 / 0"), DivideExpr)


class TestOverflow:
    """Bounded widths raise on overflow instead of wrapping."""

    def test_int32_add_overflow(self, int32: Settings) -> None:
        with pytest.raises(EvaluationError, match="Integer overflow"):
            calculate("2147483647 + 1", int32)

    def test_int32_mul_overflow(self, int32: Settings) -> None:
        with pytest.raises(EvaluationError, match="Integer overflow"):
            calculate("65536 * 65536", int32)

    def test_int32_minimum_reachable(self, int32: Settings) -> None:
        assert calculate("0 - 2147483647 - 1", int32) == -2147483648

    def test_int32_min_divided_by_minus_one(self, int32: Settings) -> None:
        with pytest.raises(EvaluationError, match="Integer overflow"):
            calculate("(0 - 2147483647 - 1) / (0 - 1)", int32)

    def test_int8(self) -> None:
        settings = Settings(int_bits=8)
        assert calculate("100 + 27", settings) == 127
        with pytest.raises(EvaluationError):
            calculate("100 + 28", settings)

    def test_unbounded(self, unbounded: Settings) -> None:
        assert calculate("65536 * 65536", unbounded) == 4294967296

    def test_width_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CALCDEMO_INT_BITS", "0")
        assert calculate("4294967296 * 2") == 8589934592


class TestEvaluatorPurity:
    """Evaluation has no side effects on the tree."""

    def test_idempotent(self) -> None:
        expr = parse_expr("(2 + 3) * 4 - 6 / 4")
        before = expr.model_dump()
        assert evaluate(expr) == evaluate(expr) == 19
        assert expr.model_dump() == before

    def test_hand_built_tree(self) -> None:
        expr = SubtractExpr(left=NumberLiteral(value=1), right=NumberLiteral(value=5))
        assert evaluate(expr) == -4


class TestLongExpressions:
    """Tree size is limited by memory, not by the interpreter stack."""

    def test_flat_addition_chain(self) -> None:
        source = " + ".join(["1"] * 5000)
        assert calculate(source) == 5000

    def test_flat_mixed_chain(self, unbounded: Settings) -> None:
        source = "1" + " - 1 + 2 * 1" * 5000
        assert calculate(source, unbounded) == 5001

    def test_long_chain_reports_zero_division(self) -> None:
        source = " + ".join(["1"] * 5000) + " / 0"
        with pytest.raises(EvaluationError, match="Division by zero"):
            calculate(source)

    def test_nested_parentheses_within_limit(self) -> None:
        assert calculate("(" * 100 + "7" + ")" * 100) == 7

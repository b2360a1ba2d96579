"""
Recursive descent parser for the calcdemo expression language.

Grammar (precedence low to high, all binary operators left-associative):
    expr     → add_expr
    add_expr → mul_expr (("+"|"-") mul_expr)*
    mul_expr → primary (("*"|"/") primary)*
    primary  → NUMBER | "(" expr ")"

The grammar is LL(1): the parser looks only at the scanner's current token
and never backtracks. The first error aborts parsing.

Operator chains are folded in loops, so their length is unbounded.
Parentheses recurse, and their nesting is capped at MAX_NESTING_DEPTH.
"""

from __future__ import annotations

import logging

from calcdemo.core.environment import Settings, load_settings
from calcdemo.core.errors import ErrorContext, LiteralRangeError, ParseError, make_parse_error
from calcdemo.core.expression_lang.tokenizer import Scanner, TokenKind
from calcdemo.core.ir.expressions import (
    AddExpr,
    DivideExpr,
    Expr,
    MultiplyExpr,
    NumberLiteral,
    SubtractExpr,
)

logger = logging.getLogger(__name__)

MAX_NESTING_DEPTH = 100


class ExprParser:
    """Parse one expression string into an AST."""

    def __init__(self, source: str, settings: Settings | None = None) -> None:
        self.settings = settings if settings is not None else load_settings()
        self._scanner = Scanner(source)
        self._depth = 0

    @property
    def current(self) -> TokenKind:
        return self._scanner.current_token

    def advance(self) -> None:
        self._scanner.tokenize()

    def expect(self, kind: TokenKind) -> None:
        """Consume the current token, which must be of the given kind."""
        if self.current != kind:
            raise self._error(
                f"Unexpected token {self.current.display}. "
                f"Expected token {kind.display} instead."
            )
        self.advance()

    def parse(self) -> Expr:
        """Parse the whole input; trailing tokens are a syntax error."""
        try:
            expr = self.parse_expr()
        except RecursionError as e:
            raise self._error("Expression nested too deeply.") from e
        if self.current != TokenKind.EOF:
            raise self._error(
                f"Unexpected token {self.current.display}. "
                f"Expected token {TokenKind.EOF.display} instead."
            )
        logger.debug("Parsed %r as %s", self._scanner.source, expr)
        return expr

    # -- Grammar rules --

    def parse_expr(self) -> Expr:
        return self.parse_add_expr()

    def parse_add_expr(self) -> Expr:
        """mul_expr (('+' | '-') mul_expr)*"""
        left = self.parse_mul_expr()
        while True:
            if self.current == TokenKind.PLUS:
                self.advance()
                left = AddExpr(left=left, right=self.parse_mul_expr())
            elif self.current == TokenKind.MINUS:
                self.advance()
                left = SubtractExpr(left=left, right=self.parse_mul_expr())
            else:
                return left

    def parse_mul_expr(self) -> Expr:
        """primary (('*' | '/') primary)*"""
        left = self.parse_primary()
        while True:
            if self.current == TokenKind.STAR:
                self.advance()
                left = MultiplyExpr(left=left, right=self.parse_primary())
            elif self.current == TokenKind.SLASH:
                self.advance()
                left = DivideExpr(left=left, right=self.parse_primary())
            else:
                return left

    def parse_primary(self) -> Expr:
        """NUMBER | '(' expr ')'"""
        if self.current == TokenKind.NUMBER:
            literal = self._decode_number()
            self.advance()
            return literal

        if self.current == TokenKind.LPAREN:
            if self._depth >= MAX_NESTING_DEPTH:
                raise self._error("Expression nested too deeply.")
            self._depth += 1
            self.advance()
            expr = self.parse_expr()
            self.expect(TokenKind.RPAREN)
            self._depth -= 1
            return expr

        raise self._error("Primary expression expected.")

    def _decode_number(self) -> NumberLiteral:
        text = self._scanner.literal
        context = ErrorContext(
            source=self._scanner.source,
            column=self._scanner.token_start + 1,
            length=len(text),
        )
        try:
            value = int(text, 10)
        except ValueError as e:
            # interpreter-wide digit limit (sys.set_int_max_str_digits)
            raise LiteralRangeError(f"Number literal is too long: {e}", context) from e

        if not self.settings.fits(value):
            raise LiteralRangeError(
                f"Number literal {text} is out of range for a "
                f"{self.settings.int_bits}-bit integer "
                f"[{self.settings.int_min}, {self.settings.int_max}].",
                context,
            )
        return NumberLiteral(value=value)

    def _error(self, message: str) -> ParseError:
        width = len(self._scanner.literal) or 1
        return make_parse_error(message, self._scanner.source, self._scanner.token_start, width)


def parse_expr(source: str, settings: Settings | None = None) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "2 + 3 * 4")
        settings: Integer width settings; read from the environment if omitted.

    Returns:
        Parsed expression AST.

    Raises:
        ParseError: If the expression is syntactically invalid.
        LiteralRangeError: If a number literal does not fit the integer width.
    """
    return ExprParser(source, settings).parse()

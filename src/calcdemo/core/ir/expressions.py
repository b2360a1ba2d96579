"""
Expression AST for calcdemo.

A closed tagged union over five node kinds:
- NumberLiteral: integer leaf
- AddExpr, SubtractExpr, MultiplyExpr, DivideExpr: binary operations

Nodes are frozen; each binary node owns its two children and the tree has
no back-references. Parentheses are structural and never appear as nodes.
"""

from __future__ import annotations

from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class NumberLiteral(BaseModel):
    """An integer literal."""

    kind: Literal["number"] = "number"
    value: int = Field(description="Decoded integer value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.value)


class _BinaryNode(BaseModel):
    """Shared shape of the four binary operations: left op right."""

    symbol: ClassVar[str]

    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render_infix(self)


class AddExpr(_BinaryNode):
    """left + right"""

    symbol: ClassVar[str] = "+"
    kind: Literal["add"] = "add"


class SubtractExpr(_BinaryNode):
    """left - right"""

    symbol: ClassVar[str] = "-"
    kind: Literal["subtract"] = "subtract"


class MultiplyExpr(_BinaryNode):
    """left * right"""

    symbol: ClassVar[str] = "*"
    kind: Literal["multiply"] = "multiply"


class DivideExpr(_BinaryNode):
    """left / right, truncating toward zero"""

    symbol: ClassVar[str] = "/"
    kind: Literal["divide"] = "divide"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

BinaryExpr = AddExpr | SubtractExpr | MultiplyExpr | DivideExpr
Expr = NumberLiteral | AddExpr | SubtractExpr | MultiplyExpr | DivideExpr

# Rebuild models for recursive forward references
AddExpr.model_rebuild()
SubtractExpr.model_rebuild()
MultiplyExpr.model_rebuild()
DivideExpr.model_rebuild()


def render_infix(expr: Expr) -> str:
    """Fully parenthesized infix text, e.g. "(2 + (3 * 4))".

    Walks the tree with an explicit stack so long operator chains do not
    hit the interpreter's recursion limit.
    """
    parts: list[str] = []
    stack: list[Expr | str] = [expr]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, NumberLiteral):
            parts.append(str(item.value))
        else:
            stack.extend([")", item.right, f" {item.symbol} ", item.left, "("])
    return "".join(parts)


def node_kind(expr: Expr) -> str:
    """Name of the node variant, as shown by the tree printer."""
    return type(expr).__name__

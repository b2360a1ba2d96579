"""
calcdemo Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .expressions import (
    AddExpr,
    BinaryExpr,
    DivideExpr,
    Expr,
    MultiplyExpr,
    NumberLiteral,
    SubtractExpr,
    node_kind,
    render_infix,
)

__all__ = [
    "AddExpr",
    "BinaryExpr",
    "DivideExpr",
    "Expr",
    "MultiplyExpr",
    "NumberLiteral",
    "SubtractExpr",
    "node_kind",
    "render_infix",
]

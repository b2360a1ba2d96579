"""
Indented tree printer for expression ASTs.

Output for "2 + 3 * 4":

    expr:
      AddExpr:
        lhs:
          NumberLiteral: 2
        rhs:
          MultiplyExpr:
            lhs:
              NumberLiteral: 3
            rhs:
              NumberLiteral: 4

Nodes are written pre-order, left child before right, two spaces of
indentation per level. This is a debugging aid; the text is not meant to
be parsed back.
"""

from __future__ import annotations

import io
import sys
from typing import TextIO, assert_never

from calcdemo.core.ir.expressions import (
    AddExpr,
    DivideExpr,
    Expr,
    MultiplyExpr,
    NumberLiteral,
    SubtractExpr,
    node_kind,
)

INDENT = "  "


def print_tree(
    expr: Expr,
    label: str = "expr",
    depth: int = 0,
    out: TextIO | None = None,
) -> None:
    """Write expr under the given label, starting at depth."""
    if out is None:
        out = sys.stdout

    # right pushed before left so lhs is written first
    stack: list[tuple[Expr, str, int]] = [(expr, label, depth)]
    while stack:
        node, node_label, level = stack.pop()
        out.write(f"{INDENT * level}{node_label}:\n")

        if isinstance(node, NumberLiteral):
            out.write(f"{INDENT * (level + 1)}{node_kind(node)}: {node.value}\n")
        elif isinstance(node, (AddExpr, SubtractExpr, MultiplyExpr, DivideExpr)):
            out.write(f"{INDENT * (level + 1)}{node_kind(node)}:\n")
            stack.append((node.right, "rhs", level + 2))
            stack.append((node.left, "lhs", level + 2))
        else:
            assert_never(node)


def format_tree(expr: Expr, label: str = "expr") -> str:
    """Return the print_tree() output as a string."""
    buf = io.StringIO()
    print_tree(expr, label, out=buf)
    return buf.getvalue()

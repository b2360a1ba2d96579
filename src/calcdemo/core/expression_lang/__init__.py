"""
calcdemo expression language.

Scanner, parser, evaluator, and tree printer for integer arithmetic over
+ - * / and parentheses.

Usage:
    from calcdemo.core.expression_lang import evaluate, parse_expr

    expr = parse_expr("2 + 3 * 4")
    result = evaluate(expr)
    # result == 14
"""

from calcdemo.core.expression_lang.evaluator import calculate, evaluate
from calcdemo.core.expression_lang.parser import ExprParser, parse_expr
from calcdemo.core.expression_lang.printer import format_tree, print_tree
from calcdemo.core.expression_lang.tokenizer import Scanner, Token, TokenKind, iter_tokens

__all__ = [
    "ExprParser",
    "Scanner",
    "Token",
    "TokenKind",
    "calculate",
    "evaluate",
    "format_tree",
    "iter_tokens",
    "parse_expr",
    "print_tree",
]

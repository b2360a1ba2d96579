"""
calcdemo command line.

Evaluates one expression and prints the result followed by its parse tree:

    $ calcdemo "2 + 3 * 4"
    Result: 14
    expr:
      AddExpr:
      ...

Errors go to stderr with exit status 1 and nothing is written to stdout.

An expression starting with "-" is accepted as is; use "--" before it if it
happens to contain a letter that is also a short option (-v, -V).

Environment:
    LOG_LEVEL          - Logging level (default: WARNING)
    CALCDEMO_INT_BITS  - Signed integer width, 0 for unbounded (default: 32)
"""

import logging
import platform
import sys

import typer

from calcdemo._version import get_version
from calcdemo.core.environment import get_log_level, load_settings
from calcdemo.core.errors import CalcError
from calcdemo.core.expression_lang.evaluator import evaluate
from calcdemo.core.expression_lang.parser import parse_expr
from calcdemo.core.expression_lang.printer import print_tree
from calcdemo.core.expression_lang.tokenizer import iter_tokens

logger = logging.getLogger(__name__)

DEFAULT_EXPRESSION = "2 + 3 * 4"

LOG_FORMAT = "[%(asctime)s] %(name)s - %(levelname)s - %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"calcdemo version {get_version()}")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Integer width: {load_settings().int_bits or 'unbounded'}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    # Log to stderr so stdout carries only the result and tree
    logging.basicConfig(
        level=logging.DEBUG if verbose else get_log_level(),
        stream=sys.stderr,
        format=LOG_FORMAT,
    )


app = typer.Typer(
    help="calcdemo: evaluate integer arithmetic expressions (+ - * / and parentheses).",
    add_completion=False,
)


# Unknown options are passed through so "-1" or "- 1" reach the parser
# (and fail there, since there is no unary minus) instead of click's usage error.
@app.command(context_settings={"ignore_unknown_options": True})
def main(
    expression: str = typer.Argument(
        DEFAULT_EXPRESSION,
        help="Expression to evaluate",
        show_default=True,
    ),
    tree: bool = typer.Option(
        True,
        "--tree/--no-tree",
        help="Print the parse tree after the result",
    ),
    tokens: bool = typer.Option(
        False,
        "--tokens",
        help="Print the token stream instead of evaluating",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable debug logging on stderr",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """Evaluate EXPRESSION and print the result and its parse tree."""
    _configure_logging(verbose)

    if tokens:
        for tok in iter_tokens(expression):
            typer.echo(f"{tok.pos:>3} {tok.kind.name:<8} {tok.value}".rstrip())
        return

    settings = load_settings()
    logger.debug("Evaluating %r with %s", expression, settings)

    try:
        expr = parse_expr(expression, settings)
        result = evaluate(expr, settings)
    except CalcError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Result: {result}")
    if tree:
        print_tree(expr, "expr", out=sys.stdout)


def run() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    run()

import sys
from typing import TextIO, overload

from ..frontend.ast_expressions import Expression
from ..frontend.ast_printer import print_ast
from ..frontend.parser import ParseError, parse
from .core import EvalError, Object, RuntimeContext
from .expression_evaluator import evaluate


def run_for_cli(
    source: str,
    context: RuntimeContext | None = None,
    stderr: TextIO | None = None,
    show_tree: bool = False,
) -> Object | None:
    stream = stderr if stderr is not None else sys.stderr
    context = context or RuntimeContext()

    try:
        expr = parse(source)
    except ParseError as error:
        print(f"Syntax error: {error}", file=stream)
        return None

    if show_tree:
        context.writer.println(print_ast(expr))

    try:
        return run(expr, context)
    except EvalError as error:
        print(f"Runtime error: {error}", file=stream)
        return None


@overload
def run(
    expr_or_source: Expression, context: RuntimeContext | None = None
) -> Object: ...


@overload
def run(expr_or_source: str, context: RuntimeContext | None = None) -> Object: ...


def run(
    expr_or_source: Expression | str, context: RuntimeContext | None = None
) -> Object:
    if isinstance(expr_or_source, str):
        expr = parse(expr_or_source)
    else:
        expr = expr_or_source

    return evaluate(expr, context or RuntimeContext())

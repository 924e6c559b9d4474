import sys
from typing import TextIO

from .frontend.ast_printer import print_ast
from .frontend.parser import ParseError, parse
from .runtime.core import EvalError, RuntimeContext
from .runtime.expression_evaluator import evaluate

PROMPT = "=> "
EXIT_COMMAND = "exit"


def evaluate_line(source: str, context: RuntimeContext, show_tree: bool = False) -> str:
    """What the REPL prints for one line of input."""
    try:
        expr = parse(source)
    except ParseError as error:
        return f"Syntax error: {error}"

    output: list[str] = []
    if show_tree:
        output.append(print_ast(expr))

    try:
        output.append(str(evaluate(expr, context)))
    except EvalError as error:
        output.append(f"Runtime error: {error}")

    return "\n".join(output)


def run_repl(
    stdin: TextIO | None = None,
    context: RuntimeContext | None = None,
    show_tree: bool = False,
) -> None:
    """Reads one expression per line until `exit` or end of input."""
    lines = stdin if stdin is not None else sys.stdin
    context = context or RuntimeContext()
    writer = context.writer

    while True:
        writer.print(PROMPT)
        writer.flush()

        line = lines.readline()
        if not line:
            writer.newline()
            return

        source = line.strip()
        if source == EXIT_COMMAND:
            return
        if not source:
            continue

        writer.println(evaluate_line(source, context, show_tree))

from __future__ import annotations

import argparse
import sys

from .repl import run_repl
from .runtime.core import RuntimeContext
from .runtime.interpreter import run_for_cli
from .writer import IndentingWriter


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="mono")
    parser.add_argument("-c", dest="expression", default=None, help="evaluate and exit")
    parser.add_argument(
        "--tree", action="store_true", help="print the parsed tree before its value"
    )
    parser.add_argument(
        "--debug", action="store_true", help="trace every evaluation step"
    )
    args = parser.parse_args(argv)

    context = RuntimeContext(writer=IndentingWriter(debug=args.debug or None))

    if args.expression is None:
        run_repl(context=context, show_tree=args.tree)
        return 0

    value = run_for_cli(args.expression, context, show_tree=args.tree)
    if value is None:
        return 1
    context.writer.println(str(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())

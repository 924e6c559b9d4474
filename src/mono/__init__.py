from .frontend.ast_expressions import Expression
from .frontend.ast_printer import print_ast, render_source
from .frontend.parser import ParseError, parse
from .runtime.core import Boolean, EvalError, Integer, Object, RuntimeContext, String
from .runtime.expression_evaluator import evaluate
from .runtime.interpreter import run

__all__ = [
    "Boolean",
    "EvalError",
    "Expression",
    "Integer",
    "Object",
    "ParseError",
    "RuntimeContext",
    "String",
    "evaluate",
    "parse",
    "print_ast",
    "render_source",
    "run",
]

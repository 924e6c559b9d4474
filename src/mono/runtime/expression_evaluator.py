import operator
from typing import Callable

from ..frontend.ast_expressions import (
    BinaryExpression,
    BooleanLiteral,
    Expression,
    Grouping,
    IntegerLiteral,
    StringLiteral,
    UnaryExpression,
)
from ..frontend.ast_printer import print_ast
from ..frontend.parser import INT_MAX, INT_MIN
from ..frontend.token import Token, TokenKind
from ..writer import indented_output
from .core import Boolean, EvalError, Integer, Object, RuntimeContext, String


def _divide(left: int, right: int) -> int:
    # Truncates toward zero; Python's // floors.
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_arithmetic_ops: dict[TokenKind, Callable[[int, int], int]] = {
    TokenKind.MINUS: operator.sub,
    TokenKind.PLUS: operator.add,
    TokenKind.STAR: operator.mul,
    TokenKind.SLASH: _divide,
}

_comparison_ops: dict[TokenKind, Callable[[int, int], bool]] = {
    TokenKind.GREATER: operator.gt,
    TokenKind.GREATER_EQUALS: operator.ge,
    TokenKind.SMALLER: operator.lt,
    TokenKind.SMALLER_EQUALS: operator.le,
}

_equality_ops: dict[TokenKind, Callable[[object, object], bool]] = {
    TokenKind.EQUALS: operator.eq,
    TokenKind.BANG_EQUALS: operator.ne,
}


def evaluate(expr: Expression, context: RuntimeContext | None = None) -> Object:
    try:
        return eval_expr(expr, context or RuntimeContext())
    except RecursionError:
        raise EvalError("Expression nested too deeply", expr.token) from None


def eval_expr(expr: Expression, context: RuntimeContext) -> Object:
    if isinstance(expr, IntegerLiteral):
        return Integer(expr.value)

    if isinstance(expr, BooleanLiteral):
        return Boolean(expr.value)

    if isinstance(expr, StringLiteral):
        return String(expr.value)

    if isinstance(expr, Grouping):
        return eval_expr(expr.inner, context)

    if isinstance(expr, UnaryExpression):
        with indented_output(context.writer):
            operand = eval_expr(expr.operand, context)
        result = _apply_unary(expr.token, operand)
        _trace(expr, result, context)
        return result

    if isinstance(expr, BinaryExpression):
        return _eval_binary_chain(expr, context)

    raise TypeError(f"Unsupported expression type: {type(expr).__name__}")


def _eval_binary_chain(expr: BinaryExpression, context: RuntimeContext) -> Object:
    # Left-folded chains like `1 + 2 + ... + n` nest along their left operand;
    # walk that spine in a loop so chain length is not bounded by recursion.
    chain = [expr]
    while isinstance(chain[-1].left, BinaryExpression):
        chain.append(chain[-1].left)

    writer = context.writer
    depth = 0
    try:
        for _ in chain:
            writer.indent()
            depth += 1

        result = eval_expr(chain[-1].left, context)
        for node in reversed(chain):
            right = eval_expr(node.right, context)
            writer.dedent()
            depth -= 1
            result = _apply_binary(node.token, result, right)
            _trace(node, result, context)
    finally:
        for _ in range(depth):
            writer.dedent()

    return result


def _trace(expr: Expression, result: Object, context: RuntimeContext) -> None:
    if context.writer.debugging:
        context.writer.debugln(f"[{print_ast(expr)} => {result}]")


def _apply_unary(token: Token, operand: Object) -> Object:
    if token.kind is TokenKind.BANG:
        if isinstance(operand, Boolean):
            return Boolean(not operand.value)
        raise EvalError("Invalid operand for '!', expected boolean expression", token)

    if token.kind is TokenKind.MINUS:
        if isinstance(operand, Integer):
            return Integer(_checked(-operand.value, token))
        raise EvalError("Invalid operand for '-', expected integer expression", token)

    raise EvalError(f"Unsupported unary operator '{token.lexeme}'", token)


def _apply_binary(token: Token, left: Object, right: Object) -> Object:
    kind = token.kind
    both_integers = isinstance(left, Integer) and isinstance(right, Integer)

    if kind in _arithmetic_ops:
        if not both_integers:
            raise _invalid_operands(token)
        assert isinstance(left, Integer) and isinstance(right, Integer)
        if kind is TokenKind.SLASH and right.value == 0:
            raise EvalError("Division by zero", token)
        return Integer(_checked(_arithmetic_ops[kind](left.value, right.value), token))

    if kind in _comparison_ops:
        if not both_integers:
            raise _invalid_operands(token)
        assert isinstance(left, Integer) and isinstance(right, Integer)
        return Boolean(_comparison_ops[kind](left.value, right.value))

    if kind in _equality_ops:
        both_booleans = isinstance(left, Boolean) and isinstance(right, Boolean)
        if not (both_integers or both_booleans):
            raise _invalid_operands(token)
        return Boolean(_equality_ops[kind](left, right))

    raise EvalError(f"Unsupported binary operator '{token.lexeme}'", token)


def _invalid_operands(token: Token) -> EvalError:
    return EvalError(f"Invalid operands for '{token.lexeme}'", token)


def _checked(value: int, token: Token) -> int:
    if not INT_MIN <= value <= INT_MAX:
        raise EvalError(
            f"Integer overflow, result of '{token.lexeme}' does not fit in 32 bits",
            token,
        )
    return value

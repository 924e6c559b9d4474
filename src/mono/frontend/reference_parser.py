from functools import lru_cache
from importlib.resources import files
from typing import Any, cast

from lark import Lark, Transformer, Tree
from lark import Token as LarkToken
from lark.exceptions import VisitError

from .ast_expressions import (
    BinaryExpression,
    BooleanLiteral,
    Expression,
    Grouping,
    IntegerLiteral,
    StringLiteral,
    UnaryExpression,
)
from .parser import ParseError, integer_value
from .token import Token, TokenKind


class AstTransformer(Transformer[LarkToken, Expression]):
    """Builds the same node types as `Parser` from a lark parse tree."""

    def start(self, children: list[object]) -> Expression:
        [expr] = children
        return self._as_expression(expr)

    def binary(self, children: list[object]) -> BinaryExpression:
        [left, operator, right] = children
        assert isinstance(operator, LarkToken)
        return BinaryExpression(
            _as_token(operator), self._as_expression(left), self._as_expression(right)
        )

    def unary(self, children: list[object]) -> UnaryExpression:
        [operator, operand] = children
        assert isinstance(operator, LarkToken)
        return UnaryExpression(_as_token(operator), self._as_expression(operand))

    def grouping(self, children: list[object]) -> Grouping:
        [left_paren, inner, _right_paren] = children
        assert isinstance(left_paren, LarkToken)
        return Grouping(_as_token(left_paren), self._as_expression(inner))

    def integer(self, children: list[object]) -> IntegerLiteral:
        [number] = children
        assert isinstance(number, LarkToken)
        token = _as_token(number)
        return IntegerLiteral(token, integer_value(token))

    def boolean(self, children: list[object]) -> BooleanLiteral:
        [value] = children
        assert isinstance(value, LarkToken)
        return BooleanLiteral(_as_token(value), str(value) == "true")

    def string(self, children: list[object]) -> StringLiteral:
        [value] = children
        assert isinstance(value, LarkToken)
        token = Token(TokenKind.STRING_LITERAL, str(value)[1:-1], _line(value))
        return StringLiteral(token, token.lexeme)

    def _as_expression(self, value: object) -> Expression:
        assert isinstance(value, Expression)
        return value


def _as_token(token: LarkToken) -> Token:
    return Token(TokenKind[token.type], str(token), _line(token))


def _line(token: LarkToken) -> int:
    return token.line if token.line is not None else 1


def _load_grammar_text() -> str:
    grammar_file = files("mono.frontend").joinpath("grammar.lark")
    return grammar_file.read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def get_parser() -> Lark:
    grammar = _load_grammar_text()
    return Lark(grammar, start="start", parser="lalr")


def parse_tree(source: str) -> Tree[LarkToken]:
    parser: Any = get_parser()
    tree = parser.parse(source)
    return cast(Tree[LarkToken], tree)


def parse_reference(source: str) -> Expression:
    """Parses `source` with the lark grammar instead of the hand-written parser."""
    parsed = parse_tree(source)
    try:
        expr = AstTransformer().transform(parsed)
    except VisitError as error:
        if isinstance(error.orig_exc, ParseError):
            raise error.orig_exc from error
        raise
    assert isinstance(expr, Expression)
    return expr

from typing import Callable

from .ast_expressions import (
    BinaryExpression,
    BooleanLiteral,
    Expression,
    Grouping,
    IntegerLiteral,
    StringLiteral,
    UnaryExpression,
)
from .lexer import Lexer
from .token import Token, TokenKind

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class ParseError(ValueError):
    """Raised when source text does not match the expression grammar."""

    expected = "valid input"

    def __init__(self, token: Token) -> None:
        self.token = token
        super().__init__(
            f"Error at {token.location}: "
            f"Expected {self.expected}, but '{token.lexeme}' was found"
        )


class MissingExpression(ParseError):
    """A literal or an opening parenthesis was expected."""

    expected = "expression"


class MissingBrace(ParseError):
    """A parenthesized expression was not closed."""

    expected = "')' after expression"


class UnexpectedToken(ParseError):
    """A complete expression was followed by more input."""

    expected = "end of input"


class IntegerOutOfRange(ParseError):
    """An integer literal does not fit in 32 bits."""

    expected = f"integer literal between {INT_MIN} and {INT_MAX}"


class ExpressionTooDeep(ParseError):
    """Parentheses or unary operators are nested past the recursion limit."""

    expected = "expression nested less deeply"


_equality_operators = (TokenKind.EQUALS, TokenKind.BANG_EQUALS)
_comparison_operators = (
    TokenKind.GREATER,
    TokenKind.GREATER_EQUALS,
    TokenKind.SMALLER,
    TokenKind.SMALLER_EQUALS,
)
_term_operators = (TokenKind.MINUS, TokenKind.PLUS)
_factor_operators = (TokenKind.STAR, TokenKind.SLASH)
_unary_operators = (TokenKind.BANG, TokenKind.MINUS)


class Parser:
    """Recursive-descent parser with a single token of lookahead.

    Each precedence level has its own method; binary levels parse an operand
    with the next level up and fold repeated operators to the left.
    """

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._current = lexer.next_token()

    def parse(self) -> Expression:
        try:
            expr = self.expression()
        except RecursionError:
            raise ExpressionTooDeep(self._current) from None
        if self._current.kind is not TokenKind.EOF:
            raise UnexpectedToken(self._current)
        return expr

    def expression(self) -> Expression:
        return self.equality()

    def equality(self) -> Expression:
        return self._left_fold(self.comparison, _equality_operators)

    def comparison(self) -> Expression:
        return self._left_fold(self.term, _comparison_operators)

    def term(self) -> Expression:
        return self._left_fold(self.factor, _term_operators)

    def factor(self) -> Expression:
        return self._left_fold(self.unary, _factor_operators)

    def unary(self) -> Expression:
        if self._current.kind in _unary_operators:
            operator = self._advance()
            return UnaryExpression(operator, self.unary())
        return self.primary()

    def primary(self) -> Expression:
        token = self._current
        kind = token.kind

        if kind is TokenKind.INTEGER_LITERAL:
            self._advance()
            return IntegerLiteral(token, integer_value(token))

        if kind is TokenKind.BOOLEAN_LITERAL:
            self._advance()
            return BooleanLiteral(token, token.lexeme == "true")

        if kind is TokenKind.STRING_LITERAL:
            self._advance()
            return StringLiteral(token, token.lexeme)

        if kind is TokenKind.LEFT_PAREN:
            self._advance()
            inner = self.expression()
            if self._current.kind is not TokenKind.RIGHT_PAREN:
                raise MissingBrace(self._current)
            self._advance()
            return Grouping(token, inner)

        raise MissingExpression(token)

    def _left_fold(
        self,
        operand: Callable[[], Expression],
        operators: tuple[TokenKind, ...],
    ) -> Expression:
        expr = operand()
        while self._current.kind in operators:
            operator = self._advance()
            expr = BinaryExpression(operator, expr, operand())
        return expr

    def _advance(self) -> Token:
        consumed = self._current
        self._current = self._lexer.next_token()
        return consumed


def integer_value(token: Token) -> int:
    value = int(token.lexeme)
    if value > INT_MAX:
        raise IntegerOutOfRange(token)
    return value


def parse(source: str) -> Expression:
    return Parser(Lexer(source)).parse()

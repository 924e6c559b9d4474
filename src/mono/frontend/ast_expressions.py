from dataclasses import dataclass

from .token import Token


@dataclass(frozen=True, slots=True)
class IntegerLiteral:
    token: Token
    value: int


@dataclass(frozen=True, slots=True)
class BooleanLiteral:
    token: Token
    value: bool


@dataclass(frozen=True, slots=True)
class StringLiteral:
    token: Token
    value: str


# `token` is the opening parenthesis.
@dataclass(frozen=True, slots=True)
class Grouping:
    token: Token
    inner: "Expression"


@dataclass(frozen=True, slots=True)
class UnaryExpression:
    token: Token
    operand: "Expression"


@dataclass(frozen=True, slots=True)
class BinaryExpression:
    token: Token
    left: "Expression"
    right: "Expression"


Expression = (
    IntegerLiteral
    | BooleanLiteral
    | StringLiteral
    | Grouping
    | UnaryExpression
    | BinaryExpression
)

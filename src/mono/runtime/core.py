from __future__ import annotations

from dataclasses import dataclass, field

from ..frontend.token import Token
from ..writer import IndentingWriter


@dataclass(frozen=True, slots=True)
class Integer:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, slots=True)
class String:
    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'


Object = Integer | Boolean | String


class EvalError(ValueError):
    """Raised when an operator is applied to operands it does not accept."""

    def __init__(self, message: str, token: Token) -> None:
        self.message = message
        self.token = token
        super().__init__(f"Error at {token.location}: {message}")


@dataclass
class RuntimeContext:
    writer: IndentingWriter = field(default_factory=IndentingWriter)

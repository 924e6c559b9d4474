from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    # Single character tokens
    SEMICOLON = "semicolon"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    LEFT_BRACE = "left_brace"
    RIGHT_BRACE = "right_brace"
    BANG = "bang"

    # Arithmetic operators
    MINUS = "minus"
    PLUS = "plus"
    STAR = "star"
    SLASH = "slash"
    DOT = "dot"

    # Operators that may take a trailing '=' (!=, ==, <=, >=)
    ASSIGNMENT = "assignment"
    EQUALS = "equals"
    BANG_EQUALS = "bang_equals"
    GREATER = "greater"
    GREATER_EQUALS = "greater_equals"
    SMALLER = "smaller"
    SMALLER_EQUALS = "smaller_equals"

    # Keywords
    IF = "if"

    IDENTIFIER = "identifier"

    # Literals
    INTEGER_LITERAL = "integer_literal"
    STRING_LITERAL = "string_literal"
    BOOLEAN_LITERAL = "boolean_literal"

    # Special tokens
    INVALID_TOKEN = "invalid_token"
    EOF = "eof"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    lexeme: str
    line: int = 1

    @property
    def location(self) -> str:
        if self.kind is TokenKind.EOF:
            return "end of file"
        return f"line {self.line}"

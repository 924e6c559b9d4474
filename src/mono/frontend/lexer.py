from typing import Callable, Iterator

from .token import Token, TokenKind

_END = ""

KEYWORDS: dict[str, TokenKind] = {
    "if": TokenKind.IF,
    "true": TokenKind.BOOLEAN_LITERAL,
    "false": TokenKind.BOOLEAN_LITERAL,
}

_single_char_tokens: dict[str, TokenKind] = {
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ";": TokenKind.SEMICOLON,
}

# character -> (kind on its own, kind when followed by '=')
_equals_suffixed_tokens: dict[str, tuple[TokenKind, TokenKind]] = {
    "=": (TokenKind.ASSIGNMENT, TokenKind.EQUALS),
    "!": (TokenKind.BANG, TokenKind.BANG_EQUALS),
    "<": (TokenKind.SMALLER, TokenKind.SMALLER_EQUALS),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUALS),
}


class Lexer:
    """Turns source text into tokens, one per `next_token` call.

    Lexing never fails: characters outside the language come back as
    `INVALID_TOKEN` tokens and are left for the parser to reject. Once the
    input is exhausted every call returns an `EOF` token.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._line = 1

    def next_token(self) -> Token:
        self._skip_whitespace()
        char = self._current()
        line = self._line

        if char == _END:
            return Token(TokenKind.EOF, "EOF", line)

        if _is_digit(char):
            return Token(TokenKind.INTEGER_LITERAL, self._read_while(_is_digit), line)

        if _is_identifier_start(char):
            text = self._read_while(_is_identifier_char)
            return Token(KEYWORDS.get(text, TokenKind.IDENTIFIER), text, line)

        if char == '"':
            return Token(TokenKind.STRING_LITERAL, self._read_string(), line)

        self._advance()

        if char in _single_char_tokens:
            return Token(_single_char_tokens[char], char, line)

        if char in _equals_suffixed_tokens:
            single, double = _equals_suffixed_tokens[char]
            if self._matches("="):
                return Token(double, char + "=", line)
            return Token(single, char, line)

        return Token(TokenKind.INVALID_TOKEN, char, line)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token.kind is TokenKind.EOF:
                return
            yield token

    def _read_string(self) -> str:
        # opening quote
        self._advance()
        start = self._position
        while self._current() not in (_END, '"'):
            self._advance()
        content = self._source[start : self._position]
        # closing quote, absent when the string runs to the end of input
        if self._current() == '"':
            self._advance()
        return content

    def _read_while(self, predicate: Callable[[str], bool]) -> str:
        start = self._position
        while self._current() != _END and predicate(self._current()):
            self._advance()
        return self._source[start : self._position]

    def _skip_whitespace(self) -> None:
        while self._current() != _END and self._current().isspace():
            self._advance()

    def _current(self) -> str:
        if self._position < len(self._source):
            return self._source[self._position]
        return _END

    def _advance(self) -> None:
        if self._current() == "\n":
            self._line += 1
        self._position += 1

    def _matches(self, expected: str) -> bool:
        if self._current() == expected:
            self._advance()
            return True
        return False


def tokenize(source: str) -> list[Token]:
    """All tokens of `source`, excluding the final EOF."""
    return list(Lexer(source))


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_identifier_start(char: str) -> bool:
    return char.isalpha() or char == "_"


def _is_identifier_char(char: str) -> bool:
    return char.isalnum() or char == "_"

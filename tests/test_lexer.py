from mono.frontend.lexer import Lexer, tokenize
from mono.frontend.token import Token, TokenKind


def token(kind: TokenKind, lexeme: str, line: int = 1) -> Token:
    return Token(kind, lexeme, line)


# ===== Literals And Keywords =====
def test_lex_boolean_expressions() -> None:
    assert tokenize("true false !true") == [
        token(TokenKind.BOOLEAN_LITERAL, "true"),
        token(TokenKind.BOOLEAN_LITERAL, "false"),
        token(TokenKind.BANG, "!"),
        token(TokenKind.BOOLEAN_LITERAL, "true"),
    ]


def test_lex_integer_literals_leave_sign_to_the_parser() -> None:
    assert tokenize("5 88989 -2928") == [
        token(TokenKind.INTEGER_LITERAL, "5"),
        token(TokenKind.INTEGER_LITERAL, "88989"),
        token(TokenKind.MINUS, "-"),
        token(TokenKind.INTEGER_LITERAL, "2928"),
    ]


def test_lex_identifiers() -> None:
    assert tokenize("_x x_x_x78 Yh0A99") == [
        token(TokenKind.IDENTIFIER, "_x"),
        token(TokenKind.IDENTIFIER, "x_x_x78"),
        token(TokenKind.IDENTIFIER, "Yh0A99"),
    ]


def test_keyword_prefix_is_an_identifier() -> None:
    assert tokenize("if iffy trueish") == [
        token(TokenKind.IF, "if"),
        token(TokenKind.IDENTIFIER, "iffy"),
        token(TokenKind.IDENTIFIER, "trueish"),
    ]


def test_lex_strings_keep_content_between_quotes() -> None:
    assert tokenize('"bla \n bla bla"  ') == [
        token(TokenKind.STRING_LITERAL, "bla \n bla bla"),
    ]


def test_unterminated_string_runs_to_end_of_input() -> None:
    assert tokenize('1 "never closed') == [
        token(TokenKind.INTEGER_LITERAL, "1"),
        token(TokenKind.STRING_LITERAL, "never closed"),
    ]


def test_empty_string_literal() -> None:
    assert tokenize('""') == [token(TokenKind.STRING_LITERAL, "")]


# ===== Operators And Delimiters =====
def test_lex_comparison_operators() -> None:
    assert tokenize("= == != <= >= <>") == [
        token(TokenKind.ASSIGNMENT, "="),
        token(TokenKind.EQUALS, "=="),
        token(TokenKind.BANG_EQUALS, "!="),
        token(TokenKind.SMALLER_EQUALS, "<="),
        token(TokenKind.GREATER_EQUALS, ">="),
        token(TokenKind.SMALLER, "<"),
        token(TokenKind.GREATER, ">"),
    ]


def test_lex_arithmetic_operators() -> None:
    assert tokenize(" + - */") == [
        token(TokenKind.PLUS, "+"),
        token(TokenKind.MINUS, "-"),
        token(TokenKind.STAR, "*"),
        token(TokenKind.SLASH, "/"),
    ]


def test_lex_parenthesis_and_braces() -> None:
    kinds = [t.kind for t in tokenize("({}( ))")]
    assert kinds == [
        TokenKind.LEFT_PAREN,
        TokenKind.LEFT_BRACE,
        TokenKind.RIGHT_BRACE,
        TokenKind.LEFT_PAREN,
        TokenKind.RIGHT_PAREN,
        TokenKind.RIGHT_PAREN,
    ]


def test_lex_semicolon() -> None:
    assert tokenize("47;") == [
        token(TokenKind.INTEGER_LITERAL, "47"),
        token(TokenKind.SEMICOLON, ";"),
    ]


def test_operator_at_end_of_input_does_not_probe_past_it() -> None:
    assert tokenize("1 <") == [
        token(TokenKind.INTEGER_LITERAL, "1"),
        token(TokenKind.SMALLER, "<"),
    ]


# ===== Invalid Input =====
def test_unknown_characters_become_invalid_tokens() -> None:
    assert tokenize("# . @") == [
        token(TokenKind.INVALID_TOKEN, "#"),
        token(TokenKind.INVALID_TOKEN, "."),
        token(TokenKind.INVALID_TOKEN, "@"),
    ]


def test_lex_combined() -> None:
    source = """
           x = -4;

        yolo = 56789"iii"
        z42     = "mono is cool"
        #if==

        """
    assert [(t.kind, t.lexeme) for t in tokenize(source)] == [
        (TokenKind.IDENTIFIER, "x"),
        (TokenKind.ASSIGNMENT, "="),
        (TokenKind.MINUS, "-"),
        (TokenKind.INTEGER_LITERAL, "4"),
        (TokenKind.SEMICOLON, ";"),
        (TokenKind.IDENTIFIER, "yolo"),
        (TokenKind.ASSIGNMENT, "="),
        (TokenKind.INTEGER_LITERAL, "56789"),
        (TokenKind.STRING_LITERAL, "iii"),
        (TokenKind.IDENTIFIER, "z42"),
        (TokenKind.ASSIGNMENT, "="),
        (TokenKind.STRING_LITERAL, "mono is cool"),
        (TokenKind.INVALID_TOKEN, "#"),
        (TokenKind.IF, "if"),
        (TokenKind.EQUALS, "=="),
    ]


# ===== End Of Input =====
def test_empty_and_blank_input_has_no_tokens() -> None:
    assert tokenize("") == []
    assert tokenize("\r \t \n   ") == []


def test_eof_is_returned_forever() -> None:
    lexer = Lexer("7")
    assert lexer.next_token() == token(TokenKind.INTEGER_LITERAL, "7")
    for _ in range(3):
        assert lexer.next_token() == token(TokenKind.EOF, "EOF")


# ===== Line Tracking =====
def test_newlines_advance_the_line() -> None:
    tokens = tokenize("1\n+\n\n2")
    assert [t.line for t in tokens] == [1, 2, 4]


def test_string_token_keeps_its_starting_line() -> None:
    lexer = Lexer('"a\nb\nc" 1')
    assert lexer.next_token() == token(TokenKind.STRING_LITERAL, "a\nb\nc", line=1)
    assert lexer.next_token() == token(TokenKind.INTEGER_LITERAL, "1", line=3)


def test_eof_token_reports_last_line() -> None:
    lexer = Lexer("1\n\n")
    lexer.next_token()
    assert lexer.next_token() == token(TokenKind.EOF, "EOF", line=3)


def test_lines_never_decrease() -> None:
    lines = [t.line for t in tokenize('a\n"b\n"\nc d\n\n(e)')]
    assert lines == sorted(lines)


def test_eof_location_is_end_of_file() -> None:
    assert token(TokenKind.EOF, "EOF", line=9).location == "end of file"
    assert token(TokenKind.PLUS, "+", line=9).location == "line 9"

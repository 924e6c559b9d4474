from .ast_expressions import (
    BinaryExpression,
    BooleanLiteral,
    Expression,
    Grouping,
    IntegerLiteral,
    StringLiteral,
    UnaryExpression,
)

# Both printers walk the tree with an explicit stack of pending nodes and text
# so that long operator chains do not hit the recursion limit.


def print_ast(expr: Expression) -> str:
    """Fully parenthesized form of a tree, e.g. `(- (IntLit 7) (IntLit 3))`."""
    parts: list[str] = []
    pending: list[Expression | str] = [expr]

    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, IntegerLiteral):
            parts.append(f"(IntLit {item.value})")
        elif isinstance(item, BooleanLiteral):
            parts.append(f"(BoolLit {_bool_text(item.value)})")
        elif isinstance(item, StringLiteral):
            parts.append(f"(StrLit {item.value})")
        elif isinstance(item, Grouping):
            parts.append("(Group ")
            pending.extend([")", item.inner])
        elif isinstance(item, UnaryExpression):
            parts.append(f"({item.token.lexeme} ")
            pending.extend([")", item.operand])
        elif isinstance(item, BinaryExpression):
            parts.append(f"({item.token.lexeme} ")
            pending.extend([")", item.right, " ", item.left])
        else:
            raise TypeError(f"Unsupported expression type: {type(item).__name__}")

    return "".join(parts)


def render_source(expr: Expression) -> str:
    """Source text for a tree built by the parser.

    Parsing the result yields a tree that prints the same as `expr`. Hand-built
    trees that put a lower-precedence operator under a higher one without a
    `Grouping` do not survive the trip.
    """
    parts: list[str] = []
    pending: list[Expression | str] = [expr]

    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, IntegerLiteral):
            parts.append(str(item.value))
        elif isinstance(item, BooleanLiteral):
            parts.append(_bool_text(item.value))
        elif isinstance(item, StringLiteral):
            parts.append(f'"{item.value}"')
        elif isinstance(item, Grouping):
            parts.append("(")
            pending.extend([")", item.inner])
        elif isinstance(item, UnaryExpression):
            parts.append(item.token.lexeme)
            pending.append(item.operand)
        elif isinstance(item, BinaryExpression):
            pending.extend([item.right, f" {item.token.lexeme} ", item.left])
        else:
            raise TypeError(f"Unsupported expression type: {type(item).__name__}")

    return "".join(parts)


def _bool_text(value: bool) -> str:
    return "true" if value else "false"

"""Pretty printer: AST back to source text.

Binary expressions are always parenthesized so that re-parsing the output
reproduces the same tree regardless of precedence and associativity.
"""

from decimal import Decimal

from .ast_nodes import ASTNode, Assignment, BinaryExpr, DataType, Literal, UnaryExpr, Variable


def print_ast(node: ASTNode) -> str:
    if isinstance(node, Assignment):
        return f"{node.name} = {_print_expr(node.value)}"
    return _print_expr(node)


def print_program(nodes: list[ASTNode]) -> str:
    """One statement per line."""
    return "\n".join(print_ast(node) for node in nodes)


def _print_expr(expr) -> str:
    # Explicit stack: operator chains can be deeper than the recursion limit.
    done: list[str] = []
    stack = [(expr, False)]
    while stack:
        node, children_done = stack.pop()

        if isinstance(node, Literal):
            done.append(_format_literal(node))
        elif isinstance(node, Variable):
            done.append(node.name)
        elif isinstance(node, UnaryExpr):
            if not children_done:
                stack.append((node, True))
                stack.append((node.operand, False))
                continue
            operand = done.pop()
            if isinstance(node.operand, BinaryExpr):
                done.append(f"{node.operator}({operand})")
            else:
                done.append(f"{node.operator}{operand}")
        elif isinstance(node, BinaryExpr):
            if not children_done:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
                continue
            right = done.pop()
            left = done.pop()
            done.append(f"({left} {node.operator} {right})")
        else:
            raise TypeError(f"Unknown AST node {type(node).__name__}")

    return done.pop()


def _format_literal(node: Literal) -> str:
    if node.data_type == DataType.INTEGER:
        # str(int) is capped at sys.get_int_max_str_digits(); Decimal is not.
        return str(Decimal(int(node.value)))
    return _format_float(node.value)


def _format_float(value: float) -> str:
    # The lexer only reads digits '.' digits, so no exponent notation.
    text = format(Decimal(repr(float(value))), 'f')
    if '.' not in text:
        text += ".0"
    return text

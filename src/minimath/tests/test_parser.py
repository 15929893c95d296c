"""Tests for the minimath parser."""

import pytest
from minimath.lexer import scan
from minimath.parser import Parser, ParseResult, parse
from minimath.ast_nodes import (
    Assignment,
    BinaryExpr,
    DataType,
    Literal,
    UnaryExpr,
    Variable,
)
from minimath.errors import ErrorPhase
from minimath.tokens import Position


def parse_source(source: str) -> ParseResult:
    return parse(scan(source))


def parse_expr(source: str):
    """Parse a single expression statement that must be error-free."""
    result = parse_source(source)
    assert result.errors == []
    assert len(result.ast) == 1
    return result.ast[0]


def evaluate(node, env: dict | None = None) -> float:
    """Evaluate an expression tree numerically."""
    env = env or {}
    if isinstance(node, Literal):
        return node.value
    if isinstance(node, Variable):
        return env[node.name]
    if isinstance(node, UnaryExpr):
        value = evaluate(node.operand, env)
        return -value if node.operator == "-" else value
    if isinstance(node, BinaryExpr):
        left = evaluate(node.left, env)
        right = evaluate(node.right, env)
        if node.operator == "+":
            return left + right
        if node.operator == "-":
            return left - right
        if node.operator == "*":
            return left * right
        if node.operator == "/":
            return left / right
        return left ** right
    if isinstance(node, Assignment):
        return evaluate(node.value, env)
    raise TypeError(node)


def shape(node):
    """Structure of a tree with positions dropped."""
    if isinstance(node, Literal):
        return (node.value, node.data_type)
    if isinstance(node, Variable):
        return node.name
    if isinstance(node, UnaryExpr):
        return (node.operator, shape(node.operand))
    if isinstance(node, BinaryExpr):
        return (node.operator, shape(node.left), shape(node.right))
    if isinstance(node, Assignment):
        return ("=", node.name, shape(node.value))
    raise TypeError(node)


SMALL = [1, 2, 3, 7, 10]
TRIPLES = [(a, b, c) for a in SMALL for b in SMALL for c in SMALL[:3]]


# --- Primaries ---

class TestPrimary:
    def test_integer_literal(self):
        node = parse_expr("42")
        assert isinstance(node, Literal)
        assert node.value == 42
        assert node.data_type == DataType.INTEGER
        assert node.resolved_type is None

    def test_float_literal(self):
        node = parse_expr("2.5")
        assert isinstance(node, Literal)
        assert node.value == 2.5
        assert node.data_type == DataType.FLOAT

    def test_variable(self):
        node = parse_expr("total")
        assert isinstance(node, Variable)
        assert node.name == "total"
        assert node.position == Position(1, 1)

    def test_parenthesized(self):
        node = parse_expr("((7))")
        assert shape(node) == (7, DataType.INTEGER)


# --- Operators ---

class TestOperators:
    def test_scenario_add_mul(self):
        node = parse_expr("2 + 3 * 4")
        assert shape(node) == (
            "+", (2, DataType.INTEGER),
            ("*", (3, DataType.INTEGER), (4, DataType.INTEGER)),
        )

    def test_operator_position(self):
        node = parse_expr("a + b * c")
        assert node.position == Position(1, 3)
        assert node.right.position == Position(1, 7)

    def test_unary_position(self):
        node = parse_expr("  -x")
        assert isinstance(node, UnaryExpr)
        assert node.position == Position(1, 3)

    def test_chained_unary(self):
        node = parse_expr("--x")
        assert shape(node) == ("-", ("-", "x"))

    def test_mixed_unary(self):
        node = parse_expr("-+-2")
        assert shape(node) == ("-", ("+", ("-", (2, DataType.INTEGER))))

    def test_unary_binds_tighter_than_power(self):
        node = parse_expr("-2 ^ 2")
        assert shape(node) == ("^", ("-", (2, DataType.INTEGER)), (2, DataType.INTEGER))

    def test_power_right_operand_may_be_unary(self):
        node = parse_expr("2 ^ -1")
        assert shape(node) == ("^", (2, DataType.INTEGER), ("-", (1, DataType.INTEGER)))

    def test_power_is_right_associative(self):
        node = parse_expr("a ^ b ^ c")
        assert shape(node) == ("^", "a", ("^", "b", "c"))

    def test_subtraction_is_left_associative(self):
        node = parse_expr("a - b - c")
        assert shape(node) == ("-", ("-", "a", "b"), "c")

    def test_division_is_left_associative(self):
        node = parse_expr("a / b / c")
        assert shape(node) == ("/", ("/", "a", "b"), "c")

    def test_parentheses_override(self):
        node = parse_expr("(a + b) * c")
        assert shape(node) == ("*", ("+", "a", "b"), "c")


class TestPrecedenceByEvaluation:
    @pytest.mark.parametrize("a,b,c", TRIPLES)
    def test_mul_before_add(self, a, b, c):
        assert evaluate(parse_expr(f"{a} + {b} * {c}")) == a + b * c

    @pytest.mark.parametrize("a,b,c", TRIPLES)
    def test_div_before_sub(self, a, b, c):
        assert evaluate(parse_expr(f"{a} - {b} / {c}")) == pytest.approx(a - b / c)

    @pytest.mark.parametrize("a,b,c", [(2, 3, 2), (3, 2, 2), (2, 2, 3), (3, 3, 2)])
    def test_power_right_assoc(self, a, b, c):
        assert evaluate(parse_expr(f"{a} ^ {b} ^ {c}")) == a ** (b ** c)

    @pytest.mark.parametrize("a,b,c", TRIPLES)
    def test_sub_left_assoc(self, a, b, c):
        assert evaluate(parse_expr(f"{a} - {b} - {c}")) == (a - b) - c

    @pytest.mark.parametrize("a,b,c", TRIPLES)
    def test_power_before_mul(self, a, b, c):
        assert evaluate(parse_expr(f"{a} * {b} ^ {c}")) == a * b ** c

    @pytest.mark.parametrize("a,b,c", TRIPLES)
    def test_parentheses(self, a, b, c):
        assert evaluate(parse_expr(f"({a} + {b}) * {c}")) == (a + b) * c

    def test_mixed(self):
        node = parse_expr("1 + 2 * 3 ^ 2 / 6 - -4")
        assert evaluate(node) == pytest.approx(1 + 2 * 3 ** 2 / 6 - -4)

    def test_with_variables(self):
        node = parse_expr("x * (y - 2) ^ 2")
        assert evaluate(node, {"x": 3, "y": 5}) == 27


# --- Statements ---

class TestStatements:
    def test_assignment(self):
        result = parse_source("x = 1 + 2")
        assert result.errors == []
        stmt = result.ast[0]
        assert isinstance(stmt, Assignment)
        assert stmt.name == "x"
        assert stmt.position == Position(1, 1)
        assert shape(stmt.value) == ("+", (1, DataType.INTEGER), (2, DataType.INTEGER))

    def test_identifier_without_equals_is_expression(self):
        stmt = parse_expr("x + 1")
        assert isinstance(stmt, BinaryExpr)

    def test_multiple_lines(self):
        result = parse_source("x = 10\ny = x + 2.5")
        assert result.errors == []
        assert [type(s) for s in result.ast] == [Assignment, Assignment]
        assert result.ast[1].position == Position(2, 1)

    def test_expression_statements_on_separate_lines(self):
        result = parse_source("1 + 2\n3 * 4\nx")
        assert result.errors == []
        assert len(result.ast) == 3

    def test_assignment_on_same_line_starts_new_statement(self):
        result = parse_source("x = 1 y = 2")
        assert result.errors == []
        assert [s.name for s in result.ast] == ["x", "y"]

    def test_blank_lines_are_ignored(self):
        result = parse_source("\n\nx = 1\n\n\n")
        assert result.errors == []
        assert len(result.ast) == 1

    def test_empty_input(self):
        result = parse_source("")
        assert result.ast == []
        assert result.errors == []

    def test_parser_class_matches_parse(self):
        tokens = scan("a = 2 ^ 3")
        assert Parser(tokens).parse() == parse(tokens)


# --- Errors ---

class TestSyntaxErrors:
    def test_adjacent_identifiers(self):
        result = parse_source("x + y w * 2")
        assert len(result.errors) == 1
        err = result.errors[0]
        assert err.phase == ErrorPhase.SYNTAX
        assert "Unexpected token" in err.message
        assert err.position == Position(1, 7)
        assert err.actual == "IDENTIFIER"
        assert result.ast == []

    def test_adjacent_identifiers_in_assignment(self):
        result = parse_source("result = x + y w * 2")
        assert len(result.errors) == 1
        assert "Unexpected token" in result.errors[0].message

    def test_trailing_number(self):
        result = parse_source("1 + 2 3")
        assert len(result.errors) == 1
        assert result.errors[0].actual == "INTEGER"

    def test_missing_rparen(self):
        result = parse_source("(1 + 2")
        assert len(result.errors) == 1
        err = result.errors[0]
        assert err.message == "Expected ')' after expression"
        assert err.expected == "RPAREN"
        assert err.actual == "EOF"

    def test_missing_operand(self):
        result = parse_source("2 +")
        assert len(result.errors) == 1
        err = result.errors[0]
        assert err.message == "Expected expression"
        assert err.expected == "expression"
        assert err.actual == "EOF"

    def test_unexpected_rparen(self):
        result = parse_source(")")
        assert result.errors[0].message == "Expected expression"
        assert result.errors[0].actual == "RPAREN"
        assert result.errors[0].position == Position(1, 1)

    def test_assignment_without_value(self):
        result = parse_source("x =")
        assert result.errors[0].message == "Expected expression"

    def test_stray_rparen_after_expression(self):
        result = parse_source("1 + 2)")
        assert len(result.errors) == 1
        assert result.errors[0].actual == "RPAREN"

    def test_parsing_stops_at_first_error(self):
        result = parse_source("a = 1\nb = (2\nc = 3 +\nd = )")
        assert len(result.errors) == 1
        assert [s.name for s in result.ast] == ["a"]
        assert result.errors[0].position.line == 3

    @pytest.mark.parametrize("source", [
        "", "1", "1 +", "+", "((", "))", "1 2 3 4", "x = = 1", "= =",
        "a b\nc d", "1 @ 2", "(1))", "x = 1\n2 3",
    ])
    def test_at_most_one_syntax_error(self, source):
        assert len(parse_source(source).errors) <= 1


class TestErrorTokens:
    def test_error_tokens_only(self):
        result = parse_source("@ # $")
        assert result.ast == []
        assert result.errors == []

    def test_error_token_between_statements_is_skipped(self):
        result = parse_source("x = 1 @\n@ y = 2")
        assert result.errors == []
        assert [s.name for s in result.ast] == ["x", "y"]

    def test_error_token_where_operand_expected(self):
        result = parse_source("1 + @")
        assert len(result.errors) == 1
        assert result.errors[0].actual == "ERROR"

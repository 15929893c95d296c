"""AST node definitions for the minimath language.

The node set is closed: every statement is an Assignment or one of the four
expression kinds. Nodes are immutable; the analyzer returns rebuilt copies
with ``resolved_type`` filled in rather than mutating the parser's output.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .tokens import Position


class DataType(Enum):
    INTEGER = "Integer"
    FLOAT = "Float"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Literal:
    value: int | float
    data_type: DataType
    position: Position
    resolved_type: Optional[DataType] = None


@dataclass(frozen=True)
class Variable:
    name: str
    position: Position
    resolved_type: Optional[DataType] = None


@dataclass(frozen=True)
class UnaryExpr:
    operator: str  # '-' | '+'
    operand: Expr
    position: Position
    resolved_type: Optional[DataType] = None


@dataclass(frozen=True)
class BinaryExpr:
    operator: str  # '+' | '-' | '*' | '/' | '^'
    left: Expr
    right: Expr
    position: Position
    resolved_type: Optional[DataType] = None


@dataclass(frozen=True)
class Assignment:
    name: str
    value: Expr
    position: Position


Expr = Union[Literal, Variable, UnaryExpr, BinaryExpr]
ASTNode = Union[Assignment, Literal, Variable, UnaryExpr, BinaryExpr]


def resolved_type_of(node: ASTNode) -> Optional[DataType]:
    """Type of a node; an assignment has the type of its value."""
    if isinstance(node, Assignment):
        return resolved_type_of(node.value)
    if isinstance(node, (Literal, Variable, UnaryExpr, BinaryExpr)):
        return node.resolved_type
    raise TypeError(f"Unknown AST node {type(node).__name__}")

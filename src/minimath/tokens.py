"""Token type definitions for the minimath language."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto


class TokenType(Enum):
    # Literals
    INTEGER = auto()
    FLOAT = auto()
    IDENTIFIER = auto()

    # Operators
    PLUS = auto()          # +
    MINUS = auto()         # -
    STAR = auto()          # *
    SLASH = auto()         # /
    CARET = auto()         # ^
    EQUALS = auto()        # =

    # Delimiters
    LPAREN = auto()        # (
    RPAREN = auto()        # )

    # Special
    EOF = auto()
    ERROR = auto()


@dataclass(frozen=True)
class Position:
    line: int
    column: int

    def __str__(self):
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    position: Position
    literal: int | float | None = None

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def __repr__(self):
        if self.literal is not None:
            # repr() of an int is capped like int(str); Decimal is not.
            lit = Decimal(self.literal) if isinstance(self.literal, int) else repr(self.literal)
            return (f"Token({self.type.name}, {self.lexeme!r}, "
                    f"lit={lit}, {self.position})")
        return f"Token({self.type.name}, {self.lexeme!r}, {self.position})"


# Single-character operator and delimiter table
OPERATORS: dict[str, TokenType] = {
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.STAR,
    '/': TokenType.SLASH,
    '^': TokenType.CARET,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '=': TokenType.EQUALS,
}

NUMERIC_TYPES: set[TokenType] = {TokenType.INTEGER, TokenType.FLOAT}

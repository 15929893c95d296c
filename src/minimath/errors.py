"""Compiler error records shared by all three phases."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .tokens import Position


class ErrorPhase(Enum):
    LEXICAL = "lexical"
    SYNTAX = "syntax"
    SEMANTIC = "semantic"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class CompilerError:
    phase: ErrorPhase
    message: str
    position: Position
    expected: Optional[str] = None
    actual: Optional[str] = None
    variable_name: Optional[str] = None

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def __str__(self):
        return f"{self.message} at {self.position}"

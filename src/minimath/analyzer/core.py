"""Analyzer core: symbol table, result structure, and the statement walk."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..ast_nodes import ASTNode, DataType
from ..errors import CompilerError, ErrorPhase
from ..tokens import Position


@dataclass(frozen=True)
class SymbolEntry:
    name: str
    type: DataType
    defined_at: Position


@dataclass
class SymbolTable:
    """Variable name -> most recent SymbolEntry. Last write wins."""

    symbols: dict[str, SymbolEntry] = field(default_factory=dict)

    def lookup(self, name: str) -> SymbolEntry | None:
        return self.symbols.get(name)

    def define(self, entry: SymbolEntry):
        self.symbols[entry.name] = entry

    def get(self, name: str, default: Optional[SymbolEntry] = None) -> SymbolEntry | None:
        return self.symbols.get(name, default)

    def entries(self) -> list[SymbolEntry]:
        return list(self.symbols.values())

    def __contains__(self, name: object) -> bool:
        return name in self.symbols

    def __getitem__(self, name: str) -> SymbolEntry:
        return self.symbols[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)


@dataclass
class AnalysisResult:
    symbol_table: SymbolTable
    annotated_ast: list[ASTNode] = field(default_factory=list)
    errors: list[CompilerError] = field(default_factory=list)


class AnalyzerBase:
    def __init__(self):
        self.symbol_table = SymbolTable()
        self.errors: list[CompilerError] = []

    def analyze(self, ast: list[ASTNode]) -> AnalysisResult:
        # Single pass: statement N sees assignments from statements before it
        # and never those after it.
        annotated = [self._analyze_node(node) for node in ast]
        return AnalysisResult(
            symbol_table=self.symbol_table,
            annotated_ast=annotated,
            errors=self.errors,
        )

    def _error(self, msg: str, position: Position, variable_name: str | None = None):
        self.errors.append(CompilerError(
            phase=ErrorPhase.SEMANTIC,
            message=msg,
            position=position,
            variable_name=variable_name,
        ))

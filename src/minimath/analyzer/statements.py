"""Statement analysis: assignments and symbol table updates."""

from dataclasses import replace

from ..ast_nodes import Assignment
from .core import SymbolEntry


class StatementsMixin:

    def _analyze_assignment(self, stmt: Assignment) -> Assignment:
        value = self._analyze_expr(stmt.value)
        # An untyped value leaves the target undefined; reassignment may
        # change a variable's type.
        if value.resolved_type is not None:
            self.symbol_table.define(SymbolEntry(
                name=stmt.name,
                type=value.resolved_type,
                defined_at=stmt.position,
            ))
        return replace(stmt, value=value)

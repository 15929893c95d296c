"""Analyzer assembly: combines all analysis mixins into the final Analyzer class."""

from ..ast_nodes import ASTNode
from .core import AnalyzerBase, AnalysisResult, SymbolEntry, SymbolTable
from .statements import StatementsMixin
from .expressions import ExpressionsMixin
from .type_inference import TypeInferenceMixin


class Analyzer(
    TypeInferenceMixin,
    ExpressionsMixin,
    StatementsMixin,
    AnalyzerBase,
):
    """Semantic analyzer for the minimath language."""
    pass


def analyze(ast: list[ASTNode]) -> AnalysisResult:
    """Resolve types, build the symbol table, and report undefined variables."""
    return Analyzer().analyze(ast)


__all__ = [
    "Analyzer", "AnalysisResult", "SymbolEntry", "SymbolTable", "analyze",
]

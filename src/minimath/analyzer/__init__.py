"""Semantic analysis for minimath."""

from .analyzer import Analyzer, AnalysisResult, SymbolEntry, SymbolTable, analyze

__all__ = [
    "Analyzer", "AnalysisResult", "SymbolEntry", "SymbolTable", "analyze",
]

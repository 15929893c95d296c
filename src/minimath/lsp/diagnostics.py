"""Diagnostic computation for minimath documents.

Runs the compiler pipeline (lexer -> parser -> analyzer) on source text
and converts errors into LSP Diagnostic objects.
"""

from dataclasses import dataclass, field
from typing import Optional

from lsprotocol import types as lsp

from ..errors import CompilerError, ErrorPhase
from ..pipeline import CompilationResult, compile_source

SOURCE_NAME = "minimath"


@dataclass
class AnalysisResult:
    """Cached result of analyzing a document."""

    uri: str
    source: str
    diagnostics: list[lsp.Diagnostic] = field(default_factory=list)
    compilation: Optional[CompilationResult] = None


def to_lsp_position(line: int, col: int) -> lsp.Position:
    """Convert a 1-based minimath position to a 0-based LSP position."""
    return lsp.Position(line=max(0, line - 1), character=max(0, col - 1))


def make_diagnostic(error: CompilerError) -> lsp.Diagnostic:
    """Create an LSP Diagnostic from a compiler error.

    Undefined-variable errors span the variable name; everything else
    marks a single character.
    """
    start = to_lsp_position(error.line, error.column)
    width = 1
    if error.phase == ErrorPhase.SEMANTIC and error.variable_name:
        width = len(error.variable_name)
    return lsp.Diagnostic(
        range=lsp.Range(
            start=start,
            end=lsp.Position(line=start.line, character=start.character + width),
        ),
        message=error.message,
        severity=lsp.DiagnosticSeverity.Error,
        code=error.phase.value,
        source=SOURCE_NAME,
    )


def compute_diagnostics(uri: str, source: str) -> AnalysisResult:
    """Run the compiler pipeline and return diagnostics."""
    compilation = compile_source(source)
    return AnalysisResult(
        uri=uri,
        source=source,
        diagnostics=[make_diagnostic(e) for e in compilation.errors],
        compilation=compilation,
    )

"""Compiler pipeline: lexer -> parser -> analyzer, with errors merged in phase order."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .analyzer import SymbolTable, analyze
from .ast_nodes import ASTNode
from .errors import CompilerError, ErrorPhase
from .lexer import scan
from .parser import parse
from .tokens import Token, TokenType

logger = logging.getLogger(__name__)


@dataclass
class CompilationResult:
    """Output of every phase that ran.

    ``ast``, ``symbol_table`` and ``annotated_ast`` are None when their
    phase never ran; analysis is skipped when parsing produced no statements.
    """

    tokens: list[Token] = field(default_factory=list)
    ast: Optional[list[ASTNode]] = None
    symbol_table: Optional[SymbolTable] = None
    annotated_ast: Optional[list[ASTNode]] = None
    errors: list[CompilerError] = field(default_factory=list)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def errors_for(self, phase: ErrorPhase) -> list[CompilerError]:
        return [e for e in self.errors if e.phase == phase]


def lexical_errors(tokens: list[Token]) -> list[CompilerError]:
    """One lexical error per ERROR token, in source order."""
    return [
        CompilerError(
            phase=ErrorPhase.LEXICAL,
            message=f"Unexpected character '{tok.lexeme}'",
            position=tok.position,
        )
        for tok in tokens
        if tok.type == TokenType.ERROR
    ]


def compile_source(source: str) -> CompilationResult:
    """Run all three phases over source text. Never raises for user input."""
    result = CompilationResult()

    result.tokens = scan(source)
    result.errors.extend(lexical_errors(result.tokens))

    # The parser runs even after lexical errors; it skips ERROR tokens.
    parsed = parse(result.tokens)
    result.errors.extend(parsed.errors)

    if parsed.ast:
        result.ast = parsed.ast
        analysis = analyze(parsed.ast)
        result.errors.extend(analysis.errors)
        result.symbol_table = analysis.symbol_table
        result.annotated_ast = analysis.annotated_ast

    logger.debug(
        "compiled %d tokens, %d statements, %d errors",
        len(result.tokens), len(parsed.ast), len(result.errors),
    )
    return result

"""Hover provider for minimath.

Shows the tracked type of a variable, or the type of a numeric literal,
under the cursor.
"""

from typing import Optional

from lsprotocol import types as lsp

from ..ast_nodes import DataType
from ..lexer import is_numeric
from ..tokens import Token, TokenType
from .diagnostics import AnalysisResult, to_lsp_position


def _find_token_at_position(tokens: list[Token], position: lsp.Position) -> Optional[Token]:
    """Find the token that covers the given 0-based position."""
    target_line = position.line + 1  # minimath tokens use 1-based lines
    target_col = position.character + 1  # minimath tokens use 1-based cols

    for tok in tokens:
        if tok.type == TokenType.EOF or tok.line != target_line:
            continue
        if tok.column <= target_col < tok.column + len(tok.lexeme):
            return tok
    return None


def _token_range(tok: Token) -> lsp.Range:
    start = to_lsp_position(tok.line, tok.column)
    return lsp.Range(
        start=start,
        end=lsp.Position(line=start.line, character=start.character + len(tok.lexeme)),
    )


def _markdown(text: str) -> lsp.MarkupContent:
    return lsp.MarkupContent(kind=lsp.MarkupKind.Markdown, value=text)


def get_hover_info(result: AnalysisResult, position: lsp.Position) -> Optional[lsp.Hover]:
    compilation = result.compilation
    if compilation is None:
        return None

    tok = _find_token_at_position(compilation.tokens, position)
    if tok is None:
        return None

    if is_numeric(tok):
        data_type = DataType.FLOAT if tok.type == TokenType.FLOAT else DataType.INTEGER
        return lsp.Hover(
            contents=_markdown(f"```minimath\n{tok.lexeme}: {data_type}\n```"),
            range=_token_range(tok),
        )

    if tok.type == TokenType.IDENTIFIER and compilation.symbol_table is not None:
        entry = compilation.symbol_table.lookup(tok.lexeme)
        if entry is None:
            return None
        return lsp.Hover(
            contents=_markdown(
                f"```minimath\n{entry.name}: {entry.type}\n```\n"
                f"Last assigned on line {entry.defined_at.line}"
            ),
            range=_token_range(tok),
        )

    return None

"""Document symbol provider: one Variable symbol per symbol-table entry."""

from lsprotocol import types as lsp

from .diagnostics import AnalysisResult, to_lsp_position


def get_document_symbols(result: AnalysisResult) -> list[lsp.DocumentSymbol]:
    compilation = result.compilation
    if compilation is None or compilation.symbol_table is None:
        return []

    symbols = []
    for entry in compilation.symbol_table.entries():
        start = to_lsp_position(entry.defined_at.line, entry.defined_at.column)
        name_range = lsp.Range(
            start=start,
            end=lsp.Position(line=start.line, character=start.character + len(entry.name)),
        )
        symbols.append(lsp.DocumentSymbol(
            name=entry.name,
            kind=lsp.SymbolKind.Variable,
            range=name_range,
            selection_range=name_range,
            detail=str(entry.type),
        ))
    return symbols

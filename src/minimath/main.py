#!/usr/bin/env python3
"""minimath: compile single-line math statements through lexing, parsing and analysis.

Usage: minimath <input.mm | -> [--emit-tokens] [--emit-ast] [--emit-symbols] [--verbose]
"""

import argparse
import logging
import os
import sys

from .errors import CompilerError
from .pipeline import compile_source
from .printer import print_ast
from .ast_nodes import resolved_type_of
from .validation import validate_input

logger = logging.getLogger("minimath")


def _format_error(source: str, filename: str, error: CompilerError) -> str:
    """Render an error as a header, its location, and the source line under a caret.

    A position outside the source gets the header and location only.
    """
    header = f"{error.phase} error: {error.message}"
    location = f"{filename}:{error.position}"
    source_lines = source.split('\n')
    if not 1 <= error.line <= len(source_lines):
        return f"{header}\n --> {location}"

    gutter = " " * len(str(error.line))
    marker = " " * max(error.column - 1, 0) + "^"
    return "\n".join([
        header,
        f" {gutter}--> {location}",
        f" {gutter} |",
        f" {error.line} | {source_lines[error.line - 1]}",
        f" {gutter} | {marker}",
    ])


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r") as f:
        return f.read()


def main(argv: list[str] | None = None) -> int:
    argparser = argparse.ArgumentParser(description="minimath compiler front end")
    argparser.add_argument("input", help="Input source file, or '-' for stdin")
    argparser.add_argument("--emit-tokens", action="store_true", help="Print token stream")
    argparser.add_argument("--emit-ast", action="store_true",
                           help="Print the annotated AST, one statement per line")
    argparser.add_argument("--emit-symbols", action="store_true", help="Print the symbol table")
    argparser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = argparser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        stream=sys.stderr)

    try:
        source = _read_source(args.input)
    except FileNotFoundError:
        print(f"Error: File '{args.input}' not found", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: Cannot read '{args.input}': {e}", file=sys.stderr)
        return 1

    validation = validate_input(source)
    if not validation.is_valid:
        print(f"Error: {validation.message}", file=sys.stderr)
        return 1

    filename = "<stdin>" if args.input == "-" else os.path.basename(args.input)
    logger.debug("compiling %s (%d chars)", filename, len(source))
    result = compile_source(source)

    if args.emit_tokens:
        for tok in result.tokens:
            print(tok)

    if args.emit_ast and result.annotated_ast is not None:
        for node in result.annotated_ast:
            node_type = resolved_type_of(node)
            print(f"{print_ast(node)}  : {node_type if node_type else '?'}")

    if args.emit_symbols and result.symbol_table is not None:
        for entry in result.symbol_table.entries():
            print(f"{entry.name}: {entry.type} (defined at {entry.defined_at})")

    for error in result.errors:
        print(_format_error(source, filename, error), file=sys.stderr)

    return 1 if result.has_errors() else 0


if __name__ == "__main__":
    sys.exit(main())

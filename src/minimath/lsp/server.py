#!/usr/bin/env python3
"""minimath Language Server.

Provides diagnostics, document symbols and hover for minimath documents by
reusing the compiler's lexer, parser and analyzer.
"""

import argparse
import asyncio
import logging
import sys

from lsprotocol import types as lsp
from pygls.lsp.server import LanguageServer

from .diagnostics import AnalysisResult, compute_diagnostics
from .hover import get_hover_info
from .requests import RequestTracker
from .symbols import get_document_symbols

SERVER_NAME = "minimath-lsp"
SERVER_VERSION = "0.1.0"

logger = logging.getLogger(SERVER_NAME)

server = LanguageServer(SERVER_NAME, SERVER_VERSION)

# Cache: uri -> AnalysisResult (latest published)
_analysis_cache: dict[str, AnalysisResult] = {}

_requests = RequestTracker()


async def _validate_document(uri: str, source: str):
    """Compile off the event loop and publish diagnostics if still current."""
    request_id = _requests.issue(uri)
    result = await asyncio.to_thread(compute_diagnostics, uri, source)
    if not _requests.is_current(uri, request_id):
        logger.debug("Discarding stale result %d for %s", request_id, uri)
        return
    _analysis_cache[uri] = result
    server.text_document_publish_diagnostics(
        lsp.PublishDiagnosticsParams(uri=uri, diagnostics=result.diagnostics)
    )


@server.feature(lsp.TEXT_DOCUMENT_DID_OPEN)
async def did_open(params: lsp.DidOpenTextDocumentParams):
    logger.info("Opened %s", params.text_document.uri)
    await _validate_document(
        params.text_document.uri,
        params.text_document.text,
    )


@server.feature(lsp.TEXT_DOCUMENT_DID_CHANGE)
async def did_change(params: lsp.DidChangeTextDocumentParams):
    doc = server.workspace.get_text_document(params.text_document.uri)
    await _validate_document(params.text_document.uri, doc.source)


@server.feature(lsp.TEXT_DOCUMENT_DID_SAVE)
async def did_save(params: lsp.DidSaveTextDocumentParams):
    doc = server.workspace.get_text_document(params.text_document.uri)
    await _validate_document(params.text_document.uri, doc.source)


@server.feature(lsp.TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: lsp.DidCloseTextDocumentParams):
    uri = params.text_document.uri
    logger.info("Closed %s", uri)
    _requests.discard(uri)
    _analysis_cache.pop(uri, None)
    server.text_document_publish_diagnostics(
        lsp.PublishDiagnosticsParams(uri=uri, diagnostics=[])
    )


@server.feature(lsp.TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbol(params: lsp.DocumentSymbolParams):
    result = _analysis_cache.get(params.text_document.uri)
    if result:
        return get_document_symbols(result)
    return []


@server.feature(lsp.TEXT_DOCUMENT_HOVER)
def hover(params: lsp.HoverParams):
    result = _analysis_cache.get(params.text_document.uri)
    if result:
        return get_hover_info(result, params.position)
    return None


def main(argv: list[str] | None = None):
    argparser = argparse.ArgumentParser(description="minimath language server (stdio)")
    argparser.add_argument("--log-level", default="INFO",
                           choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                           help="Logging level (logs go to stderr)")
    args = argparser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), stream=sys.stderr)
    logger.info("Starting %s %s", SERVER_NAME, SERVER_VERSION)
    server.start_io()


if __name__ == "__main__":
    main()

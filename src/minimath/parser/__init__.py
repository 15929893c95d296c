"""Recursive descent parser for minimath."""

from .parser import Parser, ParseError, ParseResult, parse

__all__ = ["Parser", "ParseError", "ParseResult", "parse"]

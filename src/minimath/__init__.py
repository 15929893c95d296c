"""minimath compiler front end: lexer, parser and semantic analyzer."""

from .lexer import Lexer as Lexer, scan as scan
from .parser import Parser as Parser, ParseError as ParseError, parse as parse
from .analyzer import Analyzer as Analyzer, analyze as analyze
from .pipeline import CompilationResult as CompilationResult, compile_source as compile_source

__version__ = "0.1.0"

"""Parser assembly: combines all parsing mixins into the final Parser class."""

from ..tokens import Token
from .core import ParserBase, ParseError, ParseResult
from .statements import StatementsMixin
from .expressions import ExpressionsMixin
from .primary import PrimaryMixin


class Parser(
    PrimaryMixin,
    ExpressionsMixin,
    StatementsMixin,
    ParserBase,
):
    """Recursive descent parser for the minimath language."""
    pass


def parse(tokens: list[Token]) -> ParseResult:
    """Parse a token sequence into statements plus at most one syntax error."""
    return Parser(tokens).parse()


__all__ = ["Parser", "ParseError", "ParseResult", "parse"]

"""Parser core: token manipulation, error handling, and parse() entry point."""

from dataclasses import dataclass, field

from ..ast_nodes import ASTNode
from ..errors import CompilerError, ErrorPhase
from ..tokens import Token, TokenType


class ParseError(Exception):
    """Unwinds the recursive descent on the first syntax error."""

    def __init__(self, error: CompilerError):
        self.error = error
        super().__init__(str(error))


@dataclass
class ParseResult:
    ast: list[ASTNode] = field(default_factory=list)
    errors: list[CompilerError] = field(default_factory=list)


class ParserBase:
    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.pos = 0

    def parse(self) -> ParseResult:
        result = ParseResult()
        # No error recovery: the first syntax error ends the parse.
        try:
            while not self._at_end():
                stmt = self._parse_statement()
                if stmt is not None:
                    result.ast.append(stmt)
        except ParseError as e:
            result.errors.append(e.error)
        except RecursionError:
            # Each '(' and unary operator costs interpreter stack frames.
            result.errors.append(self._error("Expression nested too deeply").error)
        return result

    # ---- Token helpers ----

    def _peek(self, offset: int = 0) -> Token:
        pos = self.pos + offset
        if pos < len(self.tokens):
            return self.tokens[pos]
        return self.tokens[-1]  # EOF

    def _previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def _advance(self) -> Token:
        tok = self.tokens[self.pos]
        if tok.type != TokenType.EOF:
            self.pos += 1
        return tok

    def _at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _check(self, *types: TokenType) -> bool:
        return self._peek().type in types

    def _match(self, *types: TokenType) -> Token | None:
        if self._peek().type in types:
            return self._advance()
        return None

    def _expect(self, token_type: TokenType, msg: str) -> Token:
        tok = self._peek()
        if tok.type == token_type:
            return self._advance()
        raise self._error(msg, expected=token_type.name)

    def _error(self, msg: str, expected: str | None = None) -> ParseError:
        tok = self._peek()
        return ParseError(CompilerError(
            phase=ErrorPhase.SYNTAX,
            message=msg,
            position=tok.position,
            expected=expected,
            actual=tok.type.name,
        ))

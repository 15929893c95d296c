"""Lexer for the minimath language.

Single left-to-right pass over the source. Unrecognized characters become
ERROR tokens inline so that one pass reports every bad character; the lexer
itself never raises.
"""

from decimal import Decimal

from .tokens import NUMERIC_TYPES, OPERATORS, Position, Token, TokenType


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.col = 1
        self.tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        while self.pos < len(self.source):
            ch = self._peek()

            if ch in (' ', '\t', '\r', '\n'):
                self._advance()
            elif ch in OPERATORS:
                line, col = self.line, self.col
                self._advance()
                self._emit(OPERATORS[ch], ch, line, col)
            elif _is_digit(ch):
                self._read_number()
            elif _is_alpha(ch):
                self._read_identifier()
            else:
                line, col = self.line, self.col
                self._advance()
                self._emit(TokenType.ERROR, ch, line, col)

        self.tokens.append(Token(TokenType.EOF, "", Position(self.line, self.col)))
        return self.tokens

    # --- Character helpers ---

    def _peek(self, offset: int = 0) -> str:
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return '\0'

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch

    def _emit(self, token_type: TokenType, lexeme: str, line: int, col: int,
              literal: int | float | None = None):
        self.tokens.append(Token(token_type, lexeme, Position(line, col), literal))

    # --- Numbers ---

    def _read_number(self):
        line, col = self.line, self.col
        start = self.pos
        while _is_digit(self._peek()):
            self._advance()

        # A '.' only belongs to the number when a digit follows it; "42."
        # leaves the '.' behind as its own ERROR token.
        token_type = TokenType.INTEGER
        if self._peek() == '.' and _is_digit(self._peek(1)):
            token_type = TokenType.FLOAT
            self._advance()  # .
            while _is_digit(self._peek()):
                self._advance()

        lexeme = self.source[start:self.pos]
        if token_type == TokenType.FLOAT:
            literal = float(lexeme)
        else:
            # int(str) refuses more than sys.get_int_max_str_digits() digits;
            # going through Decimal has no such cap.
            literal = int(Decimal(lexeme))
        self._emit(token_type, lexeme, line, col, literal)

    # --- Identifiers ---

    def _read_identifier(self):
        line, col = self.line, self.col
        start = self.pos
        while _is_alpha(self._peek()) or _is_digit(self._peek()):
            self._advance()
        self._emit(TokenType.IDENTIFIER, self.source[start:self.pos], line, col)


def _is_digit(ch: str) -> bool:
    return '0' <= ch <= '9'


def _is_alpha(ch: str) -> bool:
    return ('a' <= ch <= 'z') or ('A' <= ch <= 'Z') or ch == '_'


def scan(source: str) -> list[Token]:
    """Tokenize source text. Always ends with exactly one EOF token."""
    return Lexer(source).tokenize()


def is_numeric(token: Token) -> bool:
    return token.type in NUMERIC_TYPES

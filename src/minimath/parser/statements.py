"""Statement parsing: assignment detection and statement boundaries."""

from ..ast_nodes import Assignment
from ..tokens import TokenType


class StatementsMixin:

    def _parse_statement(self):
        self._skip_error_tokens()
        if self._at_end():
            return None

        if self._is_assignment_start():
            stmt = self._parse_assignment()
        else:
            stmt = self._parse_expr()
        self._expect_statement_end()
        return stmt

    def _is_assignment_start(self) -> bool:
        """IDENTIFIER followed by '=' starts an assignment (non-consuming)."""
        return (self._peek().type == TokenType.IDENTIFIER
                and self._peek(1).type == TokenType.EQUALS)

    def _parse_assignment(self) -> Assignment:
        name_tok = self._advance()
        self._advance()  # =
        value = self._parse_expr()
        return Assignment(name=name_tok.lexeme, value=value,
                          position=name_tok.position)

    def _expect_statement_end(self):
        last_line = self._previous().line
        self._skip_error_tokens()
        if self._at_end() or self._is_assignment_start():
            return
        # One statement per line: a token on a later line opens a new one.
        if self._peek().line > last_line:
            return
        tok = self._peek()
        raise self._error(f"Unexpected token '{tok.lexeme}' after expression")

    def _skip_error_tokens(self):
        # ERROR tokens are already reported by the lexical phase.
        while self._check(TokenType.ERROR):
            self._advance()

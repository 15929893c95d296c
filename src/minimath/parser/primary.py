"""Primary expression parsing: numeric literals, variables, parentheses."""

from ..ast_nodes import DataType, Literal, Variable
from ..tokens import TokenType


class PrimaryMixin:

    def _parse_primary(self):
        tok = self._peek()

        if tok.type == TokenType.INTEGER:
            self._advance()
            return Literal(value=tok.literal, data_type=DataType.INTEGER,
                           position=tok.position)

        if tok.type == TokenType.FLOAT:
            self._advance()
            return Literal(value=tok.literal, data_type=DataType.FLOAT,
                           position=tok.position)

        if tok.type == TokenType.IDENTIFIER:
            self._advance()
            return Variable(name=tok.lexeme, position=tok.position)

        if tok.type == TokenType.LPAREN:
            self._advance()
            expr = self._parse_expr()
            self._expect(TokenType.RPAREN, "Expected ')' after expression")
            return expr

        raise self._error("Expected expression", expected="expression")

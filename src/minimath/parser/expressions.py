"""Expression parsing: precedence climbing from additive down to unary.

Each level parses its operands with the next tighter-binding level. Binary
and unary nodes carry the position of their operator token.
"""

from ..ast_nodes import BinaryExpr, UnaryExpr
from ..tokens import TokenType


class ExpressionsMixin:

    def _parse_expr(self):
        return self._parse_additive()

    def _parse_additive(self):
        left = self._parse_multiplicative()
        while self._check(TokenType.PLUS, TokenType.MINUS):
            op_tok = self._advance()
            right = self._parse_multiplicative()
            left = BinaryExpr(operator=op_tok.lexeme, left=left, right=right,
                              position=op_tok.position)
        return left

    def _parse_multiplicative(self):
        left = self._parse_power()
        while self._check(TokenType.STAR, TokenType.SLASH):
            op_tok = self._advance()
            right = self._parse_power()
            left = BinaryExpr(operator=op_tok.lexeme, left=left, right=right,
                              position=op_tok.position)
        return left

    def _parse_power(self):
        left = self._parse_unary()
        op_tok = self._match(TokenType.CARET)
        if op_tok:
            # Right-associative: a ^ b ^ c is a ^ (b ^ c)
            right = self._parse_power()
            return BinaryExpr(operator="^", left=left, right=right,
                              position=op_tok.position)
        return left

    def _parse_unary(self):
        op_tok = self._match(TokenType.MINUS, TokenType.PLUS)
        if op_tok:
            operand = self._parse_unary()
            return UnaryExpr(operator=op_tok.lexeme, operand=operand,
                             position=op_tok.position)
        return self._parse_primary()

"""Type promotion for binary operators."""

from __future__ import annotations

from ..ast_nodes import DataType


class TypeInferenceMixin:

    def _binary_result_type(self, op: str, left: DataType | None,
                            right: DataType | None) -> DataType | None:
        """Result type of ``left op right``; None when an operand is untyped.

        Division always yields Float. Every other operator yields Float when
        either side is Float and Integer otherwise.
        """
        if left is None or right is None:
            return None
        if op == "/":
            return DataType.FLOAT
        if DataType.FLOAT in (left, right):
            return DataType.FLOAT
        return DataType.INTEGER

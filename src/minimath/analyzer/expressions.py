"""Expression analysis: rebuilds each expression node with its resolved type."""

from dataclasses import replace

from ..ast_nodes import Assignment, BinaryExpr, Literal, UnaryExpr, Variable


class ExpressionsMixin:

    def _analyze_node(self, node):
        if isinstance(node, Assignment):
            return self._analyze_assignment(node)
        return self._analyze_expr(node)

    def _analyze_expr(self, expr):
        """Rebuild ``expr`` bottom-up with resolved types.

        Walks with an explicit stack so that long operator chains such as
        ``1 + 1 + ... + 1`` are not bounded by the interpreter's recursion
        limit. Operands are visited left to right, so undefined variables are
        reported in source order.
        """
        done = []
        stack = [(expr, False)]
        while stack:
            node, children_done = stack.pop()

            if isinstance(node, Literal):
                done.append(replace(node, resolved_type=node.data_type))

            elif isinstance(node, Variable):
                done.append(self._analyze_variable(node))

            elif isinstance(node, UnaryExpr):
                if not children_done:
                    stack.append((node, True))
                    stack.append((node.operand, False))
                    continue
                operand = done.pop()
                done.append(replace(node, operand=operand,
                                    resolved_type=operand.resolved_type))

            elif isinstance(node, BinaryExpr):
                if not children_done:
                    stack.append((node, True))
                    stack.append((node.right, False))
                    stack.append((node.left, False))
                    continue
                right = done.pop()
                left = done.pop()
                # An untyped side was already reported where it failed to resolve.
                resolved = self._binary_result_type(
                    node.operator, left.resolved_type, right.resolved_type)
                done.append(replace(node, left=left, right=right, resolved_type=resolved))

            else:
                raise TypeError(f"Unknown expression node {type(node).__name__}")

        return done.pop()

    def _analyze_variable(self, var: Variable) -> Variable:
        entry = self.symbol_table.lookup(var.name)
        if entry is None:
            self._error(f"Undefined variable '{var.name}'", var.position,
                        variable_name=var.name)
            return var
        return replace(var, resolved_type=entry.type)

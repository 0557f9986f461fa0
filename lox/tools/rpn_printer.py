"""
Reverse Polish printer for Lox expression trees.

Operands come before their operator and groupings vanish, since postfix
order already fixes the evaluation order: ``(1 + 2) * 3`` prints as
``1 2 + 3 *``.
"""

from ..parser.ast_nodes import Expr, ExprVisitor, Binary, Grouping, Literal, Unary, Ternary
from .ast_printer import stringify_literal


class RpnPrinter(ExprVisitor[str]):

    def print(self, expr: Expr) -> str:
        return expr.accept(self)

    def visit_binary_expr(self, expr: Binary) -> str:
        return f"{expr.left.accept(self)} {expr.right.accept(self)} {expr.operator.lexeme}"

    def visit_grouping_expr(self, expr: Grouping) -> str:
        return expr.expression.accept(self)

    def visit_literal_expr(self, expr: Literal) -> str:
        return stringify_literal(expr.value)

    def visit_unary_expr(self, expr: Unary) -> str:
        # Same spelling as binary minus; "1 -" is negation here
        return f"{expr.right.accept(self)} {expr.operator.lexeme}"

    def visit_ternary_expr(self, expr: Ternary) -> str:
        return (f"{expr.condition.accept(self)} {expr.then_branch.accept(self)} "
                f"{expr.else_branch.accept(self)} ?:")

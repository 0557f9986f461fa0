"""
Prefix (Lisp-style) printer for Lox expression trees.

Mostly a debugging aid: ``1 + 2 * 3`` prints as ``(+ 1 (* 2 3))``.
"""

from typing import Any

from ..errors import LoxInternalError
from ..parser.ast_nodes import Expr, ExprVisitor, Binary, Grouping, Literal, Unary, Ternary


def stringify_literal(value: Any) -> str:
    """
    Render a literal value the way Lox source would spell it.

    Raises:
        LoxInternalError: If the value is not nil, a bool, a float or a str
    """
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return value
    raise LoxInternalError(f"Cannot render literal of type {type(value).__name__}")


class AstPrinter(ExprVisitor[str]):
    """Renders expressions fully parenthesized, operator first."""

    def print(self, expr: Expr) -> str:
        return expr.accept(self)

    def visit_binary_expr(self, expr: Binary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_grouping_expr(self, expr: Grouping) -> str:
        return self._parenthesize("group", expr.expression)

    def visit_literal_expr(self, expr: Literal) -> str:
        return stringify_literal(expr.value)

    def visit_unary_expr(self, expr: Unary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.right)

    def visit_ternary_expr(self, expr: Ternary) -> str:
        return self._parenthesize("?:", expr.condition, expr.then_branch, expr.else_branch)

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name] + [expr.accept(self) for expr in exprs]
        return "(" + " ".join(parts) + ")"

"""
Abstract Syntax Tree node definitions for Lox expressions.

The node set is closed: Binary, Grouping, Literal, Unary and Ternary. New
behaviour (printing, evaluation, analysis) is added by writing an
``ExprVisitor`` subclass; since every ``visit_*`` method is abstract, a visitor
that forgets a variant fails at instantiation instead of at some later call.

The layout follows what ``lox.tools.generate_ast`` emits for the grammar in
``EXPR_GRAMMAR``. Regenerate and merge by hand when the grammar changes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ..lexer.tokens import Token

R = TypeVar("R")

# Grammar description consumed by lox.tools.generate_ast
EXPR_GRAMMAR = [
    "Binary   : Expr left, Token operator, Expr right",
    "Grouping : Expr expression",
    "Literal  : Any value",
    "Unary    : Token operator, Expr right",
    "Ternary  : Expr condition, Expr then_branch, Expr else_branch",
]


class ExprVisitor(ABC, Generic[R]):
    """Visitor interface: one method per expression variant."""

    @abstractmethod
    def visit_binary_expr(self, expr: "Binary") -> R:
        pass

    @abstractmethod
    def visit_grouping_expr(self, expr: "Grouping") -> R:
        pass

    @abstractmethod
    def visit_literal_expr(self, expr: "Literal") -> R:
        pass

    @abstractmethod
    def visit_unary_expr(self, expr: "Unary") -> R:
        pass

    @abstractmethod
    def visit_ternary_expr(self, expr: "Ternary") -> R:
        pass


class Expr(ABC):
    """Base class for expressions."""

    @abstractmethod
    def accept(self, visitor: ExprVisitor[R]) -> R:
        """Dispatch to the visitor method for this variant."""
        pass


@dataclass(frozen=True)
class Binary(Expr):
    """Infix operator application, e.g. ``1 + 2``."""
    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_binary_expr(self)


@dataclass(frozen=True)
class Grouping(Expr):
    """
    Parenthesized sub-expression.

    Kept in the tree rather than collapsed so ``(1 + 2) * 3`` and
    ``1 + 2 * 3`` print differently.
    """
    expression: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_grouping_expr(self)


@dataclass(frozen=True)
class Literal(Expr):
    """Constant value: None (nil), bool, float or str."""
    value: Any

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_literal_expr(self)


@dataclass(frozen=True)
class Unary(Expr):
    """Prefix operator application (``!`` or ``-``)."""
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_unary_expr(self)


@dataclass(frozen=True)
class Ternary(Expr):
    """Conditional expression ``condition ? then_branch : else_branch``."""
    condition: Expr
    then_branch: Expr
    else_branch: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_ternary_expr(self)

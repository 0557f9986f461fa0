"""
Lox Parser Package

Recursive descent parser for Lox expressions, producing immutable AST nodes
that support the visitor pattern.

Key Features:
- One method per precedence level, shared left-associative helper
- Syntax errors returned as values rather than raised
- Statement-boundary synchronization for batch parsing
"""

from .ast_nodes import Expr, ExprVisitor, Binary, Grouping, Literal, Unary, Ternary
from .parser import Parser, parse, parse_string, parse_file
from .errors import ParseError, ParseFailure

__all__ = [
    # Core parser
    "Parser",
    "parse",
    "parse_string",
    "parse_file",

    # AST nodes
    "Expr", "ExprVisitor",
    "Binary", "Grouping", "Literal", "Unary", "Ternary",

    # Error handling
    "ParseError", "ParseFailure",
]

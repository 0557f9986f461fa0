"""
Lox Tools Package

Reference consumers of the expression visitor interface, plus the
development-time generator for the node module.
"""

from .ast_printer import AstPrinter, stringify_literal
from .rpn_printer import RpnPrinter

__all__ = [
    "AstPrinter",
    "RpnPrinter",
    "stringify_literal",
]

"""
Package-wide error types for the Lox front end.

Lexical and syntax errors are collected as diagnostics (see
``lox.lexer.errors`` and ``lox.parser.errors``); the exceptions here are only
for contract violations inside the package itself.
"""


class LoxError(Exception):
    """Base class for exceptions raised by the Lox front end."""


class LoxInternalError(LoxError):
    """
    Raised when the package breaks one of its own invariants.

    Seeing one means there is a defect in the front end, not in the Lox
    source being processed.
    """

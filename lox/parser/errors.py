"""
Error handling for the Lox parser.

Syntax errors are values, not exceptions: every grammar rule returns either an
expression or a ``ParseFailure`` wrapping the ``ParseError``, and the failure is
passed straight back up to ``Parser.parse``. This module also holds the
statement-boundary tables used to resynchronize after an error.
"""

from typing import List, Optional
from dataclasses import dataclass

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic


class ParseError:
    """
    A syntax error found while parsing.

    Records the offending token and a location tag, ``at end`` for the EOF
    sentinel and ``at '<lexeme>'`` otherwise.
    """

    def __init__(self, message: str, token: Token, code: Optional[str] = None):
        self.diagnostic = Diagnostic(
            message=message,
            line=token.line,
            severity="error",
            code=code,
            where=location_of(token),
        )
        self.token = token

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def where(self) -> str:
        return self.diagnostic.where

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"ParseError({self.message!r}, line={self.line}, where={self.where!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.diagnostic == other.diagnostic and self.token == other.token

    def __hash__(self) -> int:
        return hash((self.diagnostic, self.token))


@dataclass(frozen=True)
class ParseFailure:
    """Result of a grammar rule that could not produce an expression."""
    error: ParseError


def location_of(token: Token) -> str:
    """Location tag used when reporting an error at ``token``."""
    if token.is_eof:
        return "at end"
    return f"at '{token.lexeme}'"


class SyntaxErrorRecovery:
    """
    Tables for error recovery in the parser.

    After a syntax error the parser discards tokens until it reaches a point
    where a new statement can start, so a later expression in the same token
    stream can still be parsed.
    """

    # Tokens that begin a declaration or statement
    STATEMENT_STARTS = frozenset({
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    })

    @staticmethod
    def is_statement_boundary(previous: Token, current: Token) -> bool:
        """True once a ';' was just consumed or ``current`` starts a statement."""
        if previous.type == TokenType.SEMICOLON:
            return True
        return current.type in SyntaxErrorRecovery.STATEMENT_STARTS


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Expected token not found",
    "P002": "Expected expression",
    "P003": "Unexpected input after expression",
    "P004": "Expression nested too deeply",
}


# Helper functions for creating common parser errors

def create_missing_token_error(message: str, found: Token) -> ParseError:
    """Create an error for a required token that is absent."""
    return ParseError(message, found, code="P001")


def create_expected_expression_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start an expression."""
    return ParseError("Expect expression.", found, code="P002")


def create_trailing_input_error(found: Token) -> ParseError:
    """Create an error for tokens left over after a complete expression."""
    return ParseError("Expect end of expression.", found, code="P003")


def create_nesting_error(found: Token) -> ParseError:
    """Create an error for an expression nested past the parser's depth limit."""
    return ParseError("Expression nested too deeply.", found, code="P004")


def format_errors(errors: List) -> str:
    """Render collected diagnostics one per line, ready for an error stream."""
    return "\n".join(str(error) for error in errors)

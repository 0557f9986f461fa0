"""
Error reporting for the Lox lexer.

Lexical errors never interrupt scanning: the lexer records a diagnostic and
carries on with the rest of the input. The ``Diagnostic`` record here is
shared with the parser.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """Base record for line-tagged diagnostics (errors, warnings)."""
    message: str
    line: int
    severity: str = "error"         # "error" or "warning"
    code: Optional[str] = None
    where: str = ""                 # location tag, e.g. "at end"

    def __str__(self) -> str:
        location = f" {self.where}" if self.where else ""
        return f"[line {self.line}] {self.severity.capitalize()}{location}: {self.message}"


class LexerError:
    """
    A lexical error collected while scanning.

    Not an exception: the lexer appends these to its ``errors`` list and keeps
    going.
    """

    def __init__(self, message: str, line: int, code: Optional[str] = None):
        self.diagnostic = Diagnostic(
            message=message,
            line=line,
            severity="error",
            code=code,
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"LexerError({self.message!r}, line={self.line})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, LexerError):
            return NotImplemented
        return self.diagnostic == other.diagnostic

    def __hash__(self) -> int:
        return hash(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
    "L003": "Unterminated block comment",
    "L004": "Number literal out of range",
}


# Helper functions for creating common errors

def create_unexpected_character_error(char: str, line: int) -> LexerError:
    """Create an error for a character that starts no token."""
    if char.isprintable():
        message = f"Unexpected character '{char}'."
    else:
        message = f"Unexpected character U+{ord(char):04X}."
    return LexerError(message, line, code="L001")


def create_unterminated_string_error(line: int) -> LexerError:
    """Create an error for a string literal that reaches end of input."""
    return LexerError("Unterminated string.", line, code="L002")


def create_unterminated_block_comment_error(line: int) -> LexerError:
    """Create an error for a block comment that reaches end of input."""
    return LexerError("Unterminated block comment.", line, code="L003")


def create_number_out_of_range_error(lexeme: str, line: int) -> LexerError:
    """Create an error for a number literal too large to represent."""
    if len(lexeme) > 20:
        lexeme = lexeme[:17] + "..."
    return LexerError(f"Number literal '{lexeme}' is too large.", line, code="L004")

"""
Lox Lexer Package

Implements the lexical analyzer (tokenizer) for Lox.

Key Features:
- Line tracking across strings and block comments
- Keyword recognition from a fixed reserved-word table
- Error collection without aborting the scan
"""

from .tokens import Token, TokenType, KEYWORDS
from .lexer import Lexer, scan, scan_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Diagnostic",
    "LexerError",
    "scan",
    "scan_file",
]

"""
Lox Lexer - turns source text into tokens

Single pass over the source with two cursors: ``start`` marks the first
character of the lexeme being scanned and ``current`` the next character to
read. Errors are collected, never raised, so one bad character doesn't hide
the rest of the file's problems.
"""

import logging
import math
from typing import List, Optional, Tuple

from .tokens import (
    Token, TokenType, KEYWORDS, SINGLE_CHAR_TOKENS, EQUAL_SUFFIX_TOKENS
)
from .errors import (
    LexerError, create_unexpected_character_error,
    create_unterminated_string_error, create_unterminated_block_comment_error,
    create_number_out_of_range_error
)

logger = logging.getLogger(__name__)


class Lexer:
    """
    Lox lexical analyzer.

    Converts source text into a list of tokens terminated by an EOF token,
    tracking line numbers and collecting lexical errors along the way.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file, used in log messages
        """
        self.source = source
        self.filename = filename
        self.start = 0
        self.current = 0
        self.line = 1
        self.token_line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens, always ending with a single EOF token
        """
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens = []
        self.errors = []

        while not self._is_at_end():
            self.start = self.current
            self.token_line = self.line
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))

        logger.debug(
            "%s: scanned %d tokens with %d errors",
            self.filename, len(self.tokens), len(self.errors)
        )
        return self.tokens

    def _scan_token(self):
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in EQUAL_SUFFIX_TOKENS:
            single, double = EQUAL_SUFFIX_TOKENS[char]
            self._add_token(double if self._match("=") else single)
        elif char == "/":
            if self._match("/"):
                # A comment goes until the end of the line
                while self._peek() != "\n" and not self._is_at_end():
                    self.current += 1
            elif self._match("*"):
                self._skip_block_comment()
            else:
                self._add_token(TokenType.SLASH)
        elif char in (" ", "\r", "\t"):
            pass
        elif char == "\n":
            self.line += 1
        elif char == '"':
            self._tokenize_string()
        elif _is_digit(char):
            self._tokenize_number()
        elif _is_alpha(char):
            self._tokenize_identifier_or_keyword()
        else:
            self._report(create_unexpected_character_error(char, self.line))

    def _tokenize_string(self):
        """Tokenize a string literal; the opening quote is already consumed."""
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self.current += 1

        if self._is_at_end():
            # Keep what we have so the parser still sees a string here
            self._report(create_unterminated_string_error(self.line))
            value = self.source[self.start + 1:self.current]
        else:
            self.current += 1  # Closing quote
            value = self.source[self.start + 1:self.current - 1]

        self._add_token(TokenType.STRING, value)

    def _tokenize_number(self):
        """Tokenize a number literal. No leading or trailing dots."""
        while _is_digit(self._peek()):
            self.current += 1

        if self._peek() == "." and _is_digit(self._peek_next()):
            self.current += 1  # The dot
            while _is_digit(self._peek()):
                self.current += 1

        lexeme = self.source[self.start:self.current]
        value = float(lexeme)
        if math.isinf(value):
            self._report(create_number_out_of_range_error(lexeme, self.line))
        self._add_token(TokenType.NUMBER, value)

    def _tokenize_identifier_or_keyword(self):
        while _is_alphanumeric(self._peek()):
            self.current += 1

        lexeme = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(lexeme, TokenType.IDENTIFIER))

    def _skip_block_comment(self):
        """Skip a /* ... */ comment. They don't nest."""
        while not (self._peek() == "*" and self._peek_next() == "/"):
            if self._is_at_end():
                self._report(create_unterminated_block_comment_error(self.line))
                return
            if self._peek() == "\n":
                self.line += 1
            self.current += 1

        self.current += 2  # Closing */

    def _add_token(self, token_type: TokenType, literal: object = None):
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, lexeme, literal, self.token_line))

    def _report(self, error: LexerError):
        logger.debug("%s: %s", self.filename, error)
        self.errors.append(error)

    def _advance(self) -> str:
        char = self.source[self.current]
        self.current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is the expected one."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alpha(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"


def _is_alphanumeric(char: str) -> bool:
    return _is_alpha(char) or _is_digit(char)


def scan(source: str, filename: str = "<string>") -> Tuple[List[Token], List[LexerError]]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for log messages

    Returns:
        Tuple of (tokens, errors). Never raises on bad input.
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()
    return tokens, lexer.errors


def scan_file(filepath: str, encoding: Optional[str] = "utf-8") -> Tuple[List[Token], List[LexerError]]:
    """
    Convenience function to tokenize a source file.

    Raises:
        IOError: If file cannot be read
    """
    with open(filepath, "r", encoding=encoding) as f:
        source = f.read()

    return scan(source, filepath)

"""
Lox Expression Parser

Recursive descent over the expression grammar, one method per precedence
level, lowest first:

    expression -> ternary
    ternary    -> equality ( "?" equality ":" equality )?
    equality   -> comparison ( ( "!=" | "==" ) comparison )*
    comparison -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term       -> factor ( ( "-" | "+" ) factor )*
    factor     -> unary ( ( "*" | "/" ) unary )*
    unary      -> ( "!" | "-" ) unary | primary
    primary    -> NUMBER | STRING | "true" | "false" | "nil"
                | "(" expression ")"

Ternary branches are parsed at equality precedence, so a conditional in
either branch needs parentheses.

Rules return an ``Expr`` on success or a ``ParseFailure`` on a syntax error;
the failure is handed back up unchanged, which aborts the current top-level
expression.
"""

import logging
from typing import Callable, List, Optional, Tuple, Union

from ..lexer.tokens import Token, TokenType
from .ast_nodes import Expr, Binary, Grouping, Literal, Unary, Ternary
from .errors import (
    ParseError, ParseFailure, SyntaxErrorRecovery, create_missing_token_error,
    create_expected_expression_error, create_trailing_input_error, create_nesting_error
)

logger = logging.getLogger(__name__)

ParseResult = Union[Expr, ParseFailure]

# Open parentheses plus stacked unary operators. One parenthesis costs about
# a dozen interpreter frames; the limit keeps parsing under the default
# recursion limit.
MAX_NESTING_DEPTH = 48


class Parser:
    """
    Lox expression parser.

    Holds the token cursor and the list of syntax errors found so far.
    """

    def __init__(self, tokens: List[Token]):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer, ending with EOF
        """
        self.tokens = tokens
        self.current = 0
        self.errors: List[ParseError] = []
        self.depth = 0

    def parse(self) -> Optional[Expr]:
        """
        Parse a single expression, optionally followed by ';'.

        Returns:
            The expression tree, or None if a syntax error was found. The error
            is appended to ``self.errors``.
        """
        self.depth = 0
        result = self._expression()

        if not isinstance(result, ParseFailure):
            self._match(TokenType.SEMICOLON)
            if not self._is_at_end():
                result = ParseFailure(create_trailing_input_error(self._peek()))

        if isinstance(result, ParseFailure):
            self._record(result.error)
            self.synchronize()
            return None

        return result

    def parse_batch(self) -> List[Expr]:
        """
        Parse ';'-terminated expressions until the end of input.

        Each syntax error is recorded and followed by synchronization, so one
        bad expression doesn't stop the ones after it.
        """
        expressions: List[Expr] = []

        while not self._is_at_end():
            self.depth = 0
            result = self._expression()

            if not isinstance(result, ParseFailure):
                if self._match(TokenType.SEMICOLON):
                    expressions.append(result)
                    continue
                result = ParseFailure(create_missing_token_error(
                    "Expect ';' after expression.", self._peek()
                ))

            self._record(result.error)
            self.synchronize()

        return expressions

    def synchronize(self):
        """Discard tokens until the start of the next statement."""
        self._advance()

        while not self._is_at_end():
            if SyntaxErrorRecovery.is_statement_boundary(self._previous(), self._peek()):
                return
            self._advance()

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    # Grammar rules

    def _expression(self) -> ParseResult:
        return self._ternary()

    def _ternary(self) -> ParseResult:
        condition = self._equality()
        if isinstance(condition, ParseFailure) or not self._match(TokenType.QUESTION):
            return condition

        then_branch = self._equality()
        if isinstance(then_branch, ParseFailure):
            return then_branch

        colon = self._consume(
            TokenType.COLON, "Expect ':' after then branch of conditional expression."
        )
        if isinstance(colon, ParseFailure):
            return colon

        else_branch = self._equality()
        if isinstance(else_branch, ParseFailure):
            return else_branch

        return Ternary(condition, then_branch, else_branch)

    def _equality(self) -> ParseResult:
        return self._left_associative(
            self._comparison, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL
        )

    def _comparison(self) -> ParseResult:
        return self._left_associative(
            self._term,
            TokenType.GREATER, TokenType.GREATER_EQUAL,
            TokenType.LESS, TokenType.LESS_EQUAL,
        )

    def _term(self) -> ParseResult:
        return self._left_associative(self._factor, TokenType.MINUS, TokenType.PLUS)

    def _factor(self) -> ParseResult:
        return self._left_associative(self._unary, TokenType.SLASH, TokenType.STAR)

    def _left_associative(self, operand: Callable[[], ParseResult], *operators: TokenType) -> ParseResult:
        """Parse ``operand (operator operand)*`` into a left-leaning Binary chain."""
        left = operand()
        if isinstance(left, ParseFailure):
            return left

        while self._match(*operators):
            operator = self._previous()
            right = operand()
            if isinstance(right, ParseFailure):
                return right
            left = Binary(left, operator, right)

        return left

    def _unary(self) -> ParseResult:
        if self._match(TokenType.BANG, TokenType.MINUS):
            operator = self._previous()
            right = self._nested(self._unary)
            if isinstance(right, ParseFailure):
                return right
            return Unary(operator, right)

        return self._primary()

    def _primary(self) -> ParseResult:
        if self._match(TokenType.FALSE):
            return Literal(False)
        if self._match(TokenType.TRUE):
            return Literal(True)
        if self._match(TokenType.NIL):
            return Literal(None)

        if self._match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self._previous().literal)

        if self._match(TokenType.LEFT_PAREN):
            expr = self._nested(self._expression)
            if isinstance(expr, ParseFailure):
                return expr
            closing = self._consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            if isinstance(closing, ParseFailure):
                return closing
            return Grouping(expr)

        return ParseFailure(create_expected_expression_error(self._peek()))

    def _nested(self, rule: Callable[[], ParseResult]) -> ParseResult:
        """Run ``rule`` one nesting level deeper, failing at the depth limit."""
        if self.depth >= MAX_NESTING_DEPTH:
            return ParseFailure(create_nesting_error(self._previous()))

        self.depth += 1
        result = rule()
        self.depth -= 1
        return result

    # Utility methods

    def _match(self, *token_types: TokenType) -> bool:
        """Consume the current token if it has one of the given types."""
        for token_type in token_types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _consume(self, token_type: TokenType, message: str) -> Union[Token, ParseFailure]:
        """Consume a required token, or describe why it is missing."""
        if self._check(token_type):
            return self._advance()
        return ParseFailure(create_missing_token_error(message, self._peek()))

    def _advance(self) -> Token:
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self._peek().is_eof

    def _peek(self) -> Token:
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        # Token list without a sentinel; behave as if it had one
        line = self.tokens[-1].line if self.tokens else 1
        return Token(TokenType.EOF, "", None, line)

    def _previous(self) -> Token:
        if self.current == 0:
            return self._peek()
        return self.tokens[self.current - 1]

    def _record(self, error: ParseError):
        logger.debug("syntax error: %s", error)
        self.errors.append(error)


def parse(tokens: List[Token]) -> Tuple[Optional[Expr], List[ParseError]]:
    """
    Convenience function to parse one expression from a token list.

    Returns:
        Tuple of (expression or None, syntax errors)
    """
    parser = Parser(tokens)
    expr = parser.parse()
    return expr, parser.errors


def parse_string(source: str, filename: str = "<string>") -> Tuple[Optional[Expr], list]:
    """
    Convenience function to scan and parse a source string.

    Lexical errors come first in the returned error list, then syntax errors.
    The parser still runs when scanning reported errors.
    """
    from ..lexer import scan

    tokens, lex_errors = scan(source, filename)
    expr, parse_errors = parse(tokens)
    return expr, list(lex_errors) + parse_errors


def parse_file(filepath: str) -> Tuple[Optional[Expr], list]:
    """
    Convenience function to parse a source file.

    Raises:
        IOError: If file cannot be read
    """
    with open(filepath, "r", encoding="utf-8") as f:
        source = f.read()

    return parse_string(source, filepath)

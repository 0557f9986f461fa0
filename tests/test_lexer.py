"""
Test suite for the Lox lexer.

Tests cover:
- Punctuation and operator tokens
- Whitespace, line comments and block comments
- Number, string, identifier and keyword literals
- Line tracking
- Error collection without aborting the scan
"""

import os
import sys
import tempfile
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.lexer import Lexer, Token, TokenType, LexerError, scan, scan_file


def _types(tokens):
    return [token.type for token in tokens]


class TestPunctuationAndOperators(unittest.TestCase):
    """Single and two character tokens."""

    def test_single_character_tokens(self):
        """Each punctuation character yields exactly one token of its kind."""
        expected = {
            "(": TokenType.LEFT_PAREN,
            ")": TokenType.RIGHT_PAREN,
            "{": TokenType.LEFT_BRACE,
            "}": TokenType.RIGHT_BRACE,
            ",": TokenType.COMMA,
            ".": TokenType.DOT,
            "-": TokenType.MINUS,
            "+": TokenType.PLUS,
            ";": TokenType.SEMICOLON,
            "*": TokenType.STAR,
            "/": TokenType.SLASH,
            "?": TokenType.QUESTION,
            ":": TokenType.COLON,
        }

        for char, token_type in expected.items():
            with self.subTest(char=char):
                tokens, errors = scan(char)
                self.assertEqual(errors, [])
                self.assertEqual(len(tokens), 2)
                self.assertEqual(tokens[0], Token(token_type, char, None, 1))
                self.assertEqual(tokens[1].type, TokenType.EOF)

    def test_one_or_two_character_operators(self):
        """Operators followed by '=' become their two-character form."""
        tokens, errors = scan("!= ! == = <= < >= >")

        self.assertEqual(errors, [])
        self.assertEqual(_types(tokens), [
            TokenType.BANG_EQUAL, TokenType.BANG,
            TokenType.EQUAL_EQUAL, TokenType.EQUAL,
            TokenType.LESS_EQUAL, TokenType.LESS,
            TokenType.GREATER_EQUAL, TokenType.GREATER,
            TokenType.EOF,
        ])
        self.assertEqual(tokens[0].lexeme, "!=")
        self.assertEqual(tokens[1].lexeme, "!")

    def test_operators_without_spaces(self):
        tokens, _ = scan("!!=(==)")
        self.assertEqual(_types(tokens), [
            TokenType.BANG, TokenType.BANG_EQUAL, TokenType.LEFT_PAREN,
            TokenType.EQUAL_EQUAL, TokenType.RIGHT_PAREN, TokenType.EOF,
        ])


class TestWhitespaceAndComments(unittest.TestCase):
    """Input that produces no tokens."""

    def test_empty_source(self):
        tokens, errors = scan("")
        self.assertEqual(tokens, [Token(TokenType.EOF, "", None, 1)])
        self.assertEqual(errors, [])

    def test_only_whitespace_and_comments(self):
        """Whitespace and comments leave only the EOF sentinel."""
        source = " \t\r\n// a line comment\n/* a block\n comment */  \n"
        tokens, errors = scan(source)

        self.assertEqual(errors, [])
        self.assertEqual(tokens, [Token(TokenType.EOF, "", None, 5)])

    def test_line_comment_runs_to_end_of_line(self):
        tokens, _ = scan("1 // 2 3\n4")
        self.assertEqual([t.literal for t in tokens[:-1]], [1.0, 4.0])
        self.assertEqual(tokens[1].line, 2)

    def test_block_comment_between_tokens(self):
        tokens, errors = scan("1 /* ignored * / still */ + /**/ 2")
        self.assertEqual(errors, [])
        self.assertEqual(_types(tokens), [
            TokenType.NUMBER, TokenType.PLUS, TokenType.NUMBER, TokenType.EOF
        ])

    def test_block_comments_do_not_nest(self):
        tokens, errors = scan("/* outer /* inner */ 1 */")
        self.assertEqual(errors, [])
        self.assertEqual(_types(tokens), [
            TokenType.NUMBER, TokenType.STAR, TokenType.SLASH, TokenType.EOF
        ])

    def test_unterminated_block_comment(self):
        """An open block comment consumes the rest of the input and reports it."""
        tokens, errors = scan("1 /* never\nclosed")

        self.assertEqual(_types(tokens), [TokenType.NUMBER, TokenType.EOF])
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].message, "Unterminated block comment.")
        self.assertEqual(errors[0].line, 2)
        self.assertEqual(errors[0].code, "L003")


class TestLiterals(unittest.TestCase):
    """Numbers, strings, identifiers and keywords."""

    def test_integer_and_decimal_numbers(self):
        tokens, errors = scan("123 45.67 0")
        self.assertEqual(errors, [])
        self.assertEqual(tokens[0], Token(TokenType.NUMBER, "123", 123.0, 1))
        self.assertEqual(tokens[1], Token(TokenType.NUMBER, "45.67", 45.67, 1))
        self.assertIsInstance(tokens[2].literal, float)

    def test_trailing_dot_is_not_part_of_number(self):
        tokens, _ = scan("1.")
        self.assertEqual(_types(tokens), [TokenType.NUMBER, TokenType.DOT, TokenType.EOF])
        self.assertEqual(tokens[0].lexeme, "1")

    def test_leading_dot_is_not_part_of_number(self):
        tokens, _ = scan(".5")
        self.assertEqual(_types(tokens), [TokenType.DOT, TokenType.NUMBER, TokenType.EOF])
        self.assertEqual(tokens[1].literal, 5.0)

    def test_number_too_large_for_a_float(self):
        """An overflowing literal is reported; the token is still produced."""
        tokens, errors = scan("1" * 400 + " + 1")

        self.assertEqual(_types(tokens), [
            TokenType.NUMBER, TokenType.PLUS, TokenType.NUMBER, TokenType.EOF
        ])
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].code, "L004")
        self.assertEqual(errors[0].message, "Number literal '11111111111111111...' is too large.")

    def test_largest_finite_number_is_accepted(self):
        tokens, errors = scan("1" + "0" * 300)
        self.assertEqual(errors, [])
        self.assertEqual(tokens[0].literal, 1e300)

    def test_string_literal_excludes_quotes(self):
        """A terminated string's literal is exactly the text between the quotes."""
        tokens, errors = scan('"hello"')
        self.assertEqual(errors, [])
        self.assertEqual(tokens[0], Token(TokenType.STRING, '"hello"', "hello", 1))

    def test_empty_string(self):
        tokens, _ = scan('""')
        self.assertEqual(tokens[0].literal, "")
        self.assertEqual(tokens[0].lexeme, '""')

    def test_multiline_string(self):
        """A string token carries the line of its opening quote."""
        tokens, errors = scan('"a\nb" 1')
        self.assertEqual(errors, [])
        self.assertEqual(tokens[0].literal, "a\nb")
        self.assertEqual(tokens[0].line, 1)
        self.assertEqual(tokens[1].line, 2)

    def test_unterminated_string(self):
        """Unterminated string: one error, a best-effort token, then EOF."""
        tokens, errors = scan('"abc')

        self.assertEqual(len(errors), 1)
        self.assertIn("Unterminated string", errors[0].message)
        self.assertEqual(errors[0].line, 1)
        self.assertEqual(tokens, [
            Token(TokenType.STRING, '"abc', "abc", 1),
            Token(TokenType.EOF, "", None, 1),
        ])

    def test_unterminated_string_reports_line_where_input_ends(self):
        _, errors = scan('1\n"ab\ncd')
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].line, 3)

    def test_identifiers(self):
        tokens, _ = scan("foo _bar x1 andy")
        self.assertEqual(_types(tokens[:-1]), [TokenType.IDENTIFIER] * 4)
        self.assertEqual([t.lexeme for t in tokens[:-1]], ["foo", "_bar", "x1", "andy"])
        self.assertIsNone(tokens[0].literal)

    def test_keywords(self):
        source = "and class else false for fun if nil or print return super this true var while"
        tokens, errors = scan(source)

        self.assertEqual(errors, [])
        self.assertEqual(_types(tokens), [
            TokenType.AND, TokenType.CLASS, TokenType.ELSE, TokenType.FALSE,
            TokenType.FOR, TokenType.FUN, TokenType.IF, TokenType.NIL,
            TokenType.OR, TokenType.PRINT, TokenType.RETURN, TokenType.SUPER,
            TokenType.THIS, TokenType.TRUE, TokenType.VAR, TokenType.WHILE,
            TokenType.EOF,
        ])


class TestErrorsAndLines(unittest.TestCase):
    """Error collection and line tracking."""

    def test_unexpected_character_is_skipped(self):
        tokens, errors = scan("1 @ 2")

        self.assertEqual(_types(tokens), [TokenType.NUMBER, TokenType.NUMBER, TokenType.EOF])
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].message, "Unexpected character '@'.")
        self.assertEqual(str(errors[0]), "[line 1] Error: Unexpected character '@'.")

    def test_scanning_continues_after_errors(self):
        tokens, errors = scan("#\n$ 1\n%")
        self.assertEqual([e.line for e in errors], [1, 2, 3])
        self.assertEqual(_types(tokens), [TokenType.NUMBER, TokenType.EOF])
        self.assertEqual(tokens[-1].line, 3)

    def test_lines_never_decrease(self):
        source = '1\n"two\nlines" /* and\n a comment */ 3\n\n// c\n4 ? 5 : 6'
        tokens, errors = scan(source)

        self.assertEqual(errors, [])
        lines = [token.line for token in tokens]
        self.assertEqual(lines, sorted(lines))
        self.assertTrue(all(line >= 1 for line in lines))
        self.assertEqual(tokens[-2].line, 7)

    def test_lexer_errors_compare_by_content(self):
        self.assertEqual(LexerError("x", 1, "L001"), LexerError("x", 1, "L001"))
        self.assertNotEqual(LexerError("x", 1), LexerError("x", 2))


class TestLexerInterface(unittest.TestCase):
    """Class interface and convenience functions."""

    def test_lexer_class(self):
        lexer = Lexer("1 + &")
        tokens = lexer.tokenize()

        self.assertEqual(len(tokens), 3)
        self.assertTrue(lexer.has_errors())
        self.assertEqual(len(lexer.errors), 1)

    def test_tokenize_resets_state(self):
        lexer = Lexer("1 ~")
        first = lexer.tokenize()
        second = lexer.tokenize()
        self.assertEqual(first, second)
        self.assertEqual(len(lexer.errors), 1)

    def test_token_str(self):
        self.assertEqual(str(Token(TokenType.NUMBER, "1.5", 1.5, 1)), "NUMBER 1.5{1.5}")
        self.assertEqual(str(Token(TokenType.LEFT_PAREN, "(", None, 1)), "LEFT_PAREN ({}")

    def test_scan_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "script.lox")
            with open(path, "w", encoding="utf-8") as f:
                f.write("1 +\n2")

            tokens, errors = scan_file(path)

        self.assertEqual(errors, [])
        self.assertEqual(_types(tokens), [
            TokenType.NUMBER, TokenType.PLUS, TokenType.NUMBER, TokenType.EOF
        ])
        self.assertEqual(tokens[2].line, 2)


if __name__ == "__main__":
    unittest.main()

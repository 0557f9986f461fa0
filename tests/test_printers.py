"""
Test suite for the AST and RPN printers and the visitor contract.
"""

import os
import sys
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox import LoxInternalError, parse_string
from lox.lexer import Token, TokenType
from lox.parser import ExprVisitor, Binary, Grouping, Literal, Unary, Ternary
from lox.tools import AstPrinter, RpnPrinter, stringify_literal


class TestAstPrinter(unittest.TestCase):

    def setUp(self):
        self.printer = AstPrinter()

    def test_hand_built_tree(self):
        expr = Binary(
            Unary(Token(TokenType.MINUS, "-", None, 1), Literal(123.0)),
            Token(TokenType.STAR, "*", None, 1),
            Grouping(Literal(45.67)),
        )
        self.assertEqual(self.printer.print(expr), "(* (- 123) (group 45.67))")

    def test_nil_bool_and_string_literals(self):
        expr, _ = parse_string('"hi" == nil ? true : false')
        self.assertEqual(self.printer.print(expr), "(?: (== hi nil) true false)")

    def test_unrenderable_literal(self):
        with self.assertRaises(LoxInternalError):
            self.printer.print(Literal(object()))


class TestRpnPrinter(unittest.TestCase):

    def setUp(self):
        self.printer = RpnPrinter()

    def _rpn(self, source):
        expr, errors = parse_string(source)
        self.assertEqual(errors, [])
        return self.printer.print(expr)

    def test_grouping_is_dropped(self):
        """(1 + 2) * 3 prints operands before operators, without parentheses."""
        self.assertEqual(self._rpn("(1 + 2) * 3"), "1 2 + 3 *")

    def test_precedence(self):
        self.assertEqual(self._rpn("1 + 2 * 3"), "1 2 3 * +")
        self.assertEqual(self._rpn("(1 + 2) * (4 - 3)"), "1 2 + 4 3 - *")

    def test_unary_and_ternary(self):
        self.assertEqual(self._rpn("-1 + 2"), "1 - 2 +")
        self.assertEqual(self._rpn("!true ? 1 : 2"), "true ! 1 2 ?:")

    def test_unrenderable_literal(self):
        with self.assertRaises(LoxInternalError):
            self.printer.print(Grouping(Literal([1, 2])))


class TestStringifyLiteral(unittest.TestCase):

    def test_values(self):
        self.assertEqual(stringify_literal(None), "nil")
        self.assertEqual(stringify_literal(True), "true")
        self.assertEqual(stringify_literal(False), "false")
        self.assertEqual(stringify_literal(1.0), "1")
        self.assertEqual(stringify_literal(-0.5), "-0.5")
        self.assertEqual(stringify_literal(2.5), "2.5")
        self.assertEqual(stringify_literal("text"), "text")

    def test_only_lox_value_kinds(self):
        """Python ints are not Lox numbers; literals always hold floats."""
        for value in (1, object(), (1.0,)):
            with self.subTest(value=value):
                with self.assertRaises(LoxInternalError):
                    stringify_literal(value)


class TestVisitorContract(unittest.TestCase):

    def test_incomplete_visitor_cannot_be_instantiated(self):
        class BinaryOnly(ExprVisitor):
            def visit_binary_expr(self, expr):
                return "binary"

        with self.assertRaises(TypeError):
            BinaryOnly()

    def test_accept_dispatches_by_variant(self):
        class NameVisitor(ExprVisitor):
            def visit_binary_expr(self, expr):
                return "binary"

            def visit_grouping_expr(self, expr):
                return "grouping"

            def visit_literal_expr(self, expr):
                return "literal"

            def visit_unary_expr(self, expr):
                return "unary"

            def visit_ternary_expr(self, expr):
                return "ternary"

        bang = Token(TokenType.BANG, "!", None, 1)
        plus = Token(TokenType.PLUS, "+", None, 1)
        one = Literal(1.0)
        visitor = NameVisitor()

        self.assertEqual(Binary(one, plus, one).accept(visitor), "binary")
        self.assertEqual(Grouping(one).accept(visitor), "grouping")
        self.assertEqual(one.accept(visitor), "literal")
        self.assertEqual(Unary(bang, one).accept(visitor), "unary")
        self.assertEqual(Ternary(one, one, one).accept(visitor), "ternary")


if __name__ == "__main__":
    unittest.main()

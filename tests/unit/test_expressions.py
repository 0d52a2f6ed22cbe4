"""
PocketBASIC tests.test_expressions
Tests for the expression parser

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from pocketbasic.basic.tokeniser import Tokeniser
from pocketbasic.basic.parser import Parser
from pocketbasic.basic.parser.nodes import (
    NumberLiteral, StringLiteral, Variable, ArrayElement, UnaryOp, BinaryOp
)
from pocketbasic.basic.base import error

from tests.unit.utils import TestCase, run_tests


def num(n):
    return NumberLiteral(float(n))

def var(name):
    return Variable(name, name.endswith(u'$'))


class ExpressionParserTest(TestCase):
    """Unit tests for the expression parser."""

    tag = u'expressions'

    def _parse(self, text):
        tokens = Tokeniser().tokenise_line(text, 10)
        return Parser().parse_expression_line(tokens, 10)

    def test_terms(self):
        """Literals, variables and array elements."""
        assert self._parse(u'12') == num(12)
        assert self._parse(u'"AB"') == StringLiteral(u'AB')
        assert self._parse(u'X$') == Variable(u'X$', True)
        assert self._parse(u'A(I+1)') == ArrayElement(
            u'A', False, BinaryOp(u'+', var(u'I'), num(1))
        )

    def test_multiplication_binds_tighter(self):
        """Multiplication before addition."""
        assert self._parse(u'1+2*3') == BinaryOp(u'+', num(1), BinaryOp(u'*', num(2), num(3)))
        assert self._parse(u'(1+2)*3') == BinaryOp(u'*', BinaryOp(u'+', num(1), num(2)), num(3))

    def test_left_associative(self):
        """Operators of the same level fold to the left."""
        assert self._parse(u'8-4-2') == BinaryOp(u'-', BinaryOp(u'-', num(8), num(4)), num(2))
        assert self._parse(u'A<B=C') == BinaryOp(
            u'=', BinaryOp(u'<', var(u'A'), var(u'B')), var(u'C')
        )

    def test_unary(self):
        """Unary minus binds tighter than multiplication."""
        assert self._parse(u'-2*3') == BinaryOp(u'*', UnaryOp(u'-', num(2)), num(3))
        assert self._parse(u'--A') == UnaryOp(u'-', UnaryOp(u'-', var(u'A')))

    def test_logical_ladder(self):
        """OR below AND below NOT below comparison."""
        assert self._parse(u'A OR B AND C') == BinaryOp(
            u'OR', var(u'A'), BinaryOp(u'AND', var(u'B'), var(u'C'))
        )
        assert self._parse(u'NOT A=B') == UnaryOp(u'NOT', BinaryOp(u'=', var(u'A'), var(u'B')))
        assert self._parse(u'NOT NOT A') == UnaryOp(u'NOT', UnaryOp(u'NOT', var(u'A')))

    def test_incomplete(self):
        """Missing operand or bracket."""
        for text in (u'1+', u'(1+2', u'A(1', u'*2', u''):
            with self.assertRaises(error.BASICSyntaxError):
                self._parse(text)

    def test_nesting_limit(self):
        """Expressions nested too deeply to evaluate are syntax errors."""
        for text in (u'(' * 150 + u'1' + u')' * 150, u'NOT ' * 150 + u'A', u'-' * 150 + u'1'):
            with self.assertRaises(error.BASICSyntaxError) as cm:
                self._parse(text)
            assert cm.exception.detail == u'expression too complex'
        assert self._parse(u'(' * 20 + u'A' + u')' * 20) == var(u'A')

    def test_trailing_tokens(self):
        """An expression must use up the whole input."""
        with self.assertRaises(error.BASICSyntaxError):
            self._parse(u'1 2')


if __name__ == '__main__':
    run_tests()

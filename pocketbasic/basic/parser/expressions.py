"""
PocketBASIC - expressions.py
Expression parser

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from ..base import tokens as tk
from . import nodes
from . import operators as op


# deepest expression tree the parser accepts
MAX_DEPTH = 60


class ExpressionParser(object):
    """Recursive-descent expression parser."""

    def __init__(self):
        """Initialise expression parser."""
        self._nesting = 0
        self._operators = 0

    def parse(self, ins):
        """Parse an expression at the cursor and return its tree."""
        self._nesting, self._operators = 0, 0
        return self._parse_or(ins)

    def parse_lvalue(self, ins):
        """Parse a variable or array element reference."""
        self._nesting, self._operators = 0, 0
        token = ins.require_kind(tk.NAME, u'expected variable name')
        return self._parse_reference(ins, token)

    def _parse_or(self, ins):
        """OR level: left-associative."""
        left = self._parse_and(ins)
        while ins.read_if((tk.OR,)):
            left = self._binary(ins, tk.OR, left, self._parse_and(ins))
        return left

    def _parse_and(self, ins):
        """AND level: left-associative."""
        left = self._parse_not(ins)
        while ins.read_if((tk.AND,)):
            left = self._binary(ins, tk.AND, left, self._parse_not(ins))
        return left

    def _parse_not(self, ins):
        """NOT level: prefix, right-associative."""
        if ins.read_if((tk.NOT,)):
            return nodes.UnaryOp(tk.NOT, self._nested(ins, self._parse_not))
        return self._parse_comparison(ins)

    def _parse_comparison(self, ins):
        """Comparison level: left-associative, all six operators equal."""
        left = self._parse_additive(ins)
        while True:
            operator = ins.read_if(op.COMPARISON)
            if not operator:
                return left
            left = self._binary(ins, operator, left, self._parse_additive(ins))

    def _parse_additive(self, ins):
        """Addition and subtraction."""
        left = self._parse_multiplicative(ins)
        while True:
            operator = ins.read_if(op.ADDITIVE)
            if not operator:
                return left
            left = self._binary(ins, operator, left, self._parse_multiplicative(ins))

    def _parse_multiplicative(self, ins):
        """Multiplication and division."""
        left = self._parse_unary(ins)
        while True:
            operator = ins.read_if(op.MULTIPLICATIVE)
            if not operator:
                return left
            left = self._binary(ins, operator, left, self._parse_unary(ins))

    def _parse_unary(self, ins):
        """Unary plus and minus."""
        operator = ins.read_if(op.ADDITIVE)
        if operator:
            return nodes.UnaryOp(operator, self._nested(ins, self._parse_unary))
        return self._parse_term(ins)

    def _parse_term(self, ins):
        """Literal, variable reference or bracketed expression."""
        token = ins.peek()
        if token is None:
            ins.syntax_error(u'expected expression')
        if token.kind == tk.NUMBER:
            ins.read()
            return nodes.NumberLiteral(token.value)
        elif token.kind == tk.STRING:
            ins.read()
            return nodes.StringLiteral(token.value)
        elif token.kind == tk.NAME:
            ins.read()
            return self._parse_reference(ins, token)
        elif ins.read_if((tk.LPAREN,)):
            expr = self._nested(ins, self._parse_or)
            ins.require_read((tk.RPAREN,))
            return expr
        ins.syntax_error(u'expected expression')

    def _parse_reference(self, ins, token):
        """Variable or array element, given its name token."""
        name = token.value
        is_string = name.endswith(tk.STR_SIGIL)
        if ins.read_if((tk.LPAREN,)):
            index = self._nested(ins, self._parse_or)
            ins.require_read((tk.RPAREN,))
            return nodes.ArrayElement(name, is_string, index)
        return nodes.Variable(name, is_string)

    def _binary(self, ins, operator, left, right):
        """Build a binary node; long operator chains deepen the tree."""
        self._operators += 1
        self._check_depth(ins)
        return nodes.BinaryOp(operator, left, right)

    def _nested(self, ins, parse):
        """Parse a sub-expression one nesting level down."""
        self._nesting += 1
        self._check_depth(ins)
        try:
            return parse(ins)
        finally:
            self._nesting -= 1

    def _check_depth(self, ins):
        """Raise syntax error if the tree would grow too deep to evaluate."""
        if self._nesting + self._operators > MAX_DEPTH:
            ins.syntax_error(u'expression too complex')

"""
PocketBASIC - semantics.py
Static checks on a loaded program

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from collections import namedtuple

from .base import tokens as tk
from .parser import nodes
from .parser import operators as op
from . import values


Diagnostic = namedtuple('Diagnostic', ['line', 'message'])

# operators that only take numbers
NUMERIC_OPERATORS = (tk.O_MINUS, tk.O_TIMES, tk.O_DIV, tk.AND, tk.OR, tk.NOT)


def _type_name(sigil):
    return u'string' if sigil == values.STR else u'numeric'


class SemanticChecker(object):
    """Find type and reference errors without running the program."""

    def __init__(self, program):
        """Initialise checker."""
        self._program = program

    def check(self):
        """Return a list of Diagnostics, in line order."""
        self._diagnostics = []
        self._dimmed = set()
        self._for_names = set()
        for _, statements in self._program:
            for statement in statements:
                if isinstance(statement, nodes.Dim):
                    self._dimmed.add(statement.name)
        for line_number, statements in self._program:
            self._line = line_number
            for statement in statements:
                self._check_statement(statement)
        return self._diagnostics

    def _report(self, message):
        self._diagnostics.append(Diagnostic(self._line, message))

    def _check_line_target(self, line_number):
        if line_number not in self._program:
            self._report(u'undefined line number %d' % (line_number,))

    def _require(self, expr, sigil, what):
        """Check that an expression has the given type."""
        found = self._type_of(expr)
        if found is not None and found != sigil:
            self._report(u'%s must be %s' % (what, _type_name(sigil)))

    def _check_target(self, target, value_type, what):
        """Check an assignment target against the type of the assigned value."""
        target_type = self._type_of(target)
        if value_type is not None and value_type != target_type:
            self._report(u'cannot %s %s value to %s variable %s' % (
                what, _type_name(value_type), _type_name(target_type), target.name
            ))

    def _check_statement(self, statement):
        """Check a single statement."""
        if isinstance(statement, nodes.Let):
            self._check_target(statement.target, self._type_of(statement.expression), u'assign')
        elif isinstance(statement, (nodes.Print, nodes.Pause)):
            for item in statement.items:
                self._type_of(item)
        elif isinstance(statement, nodes.Input):
            if statement.prompt is not None:
                self._type_of(statement.prompt)
            self._type_of(statement.target)
        elif isinstance(statement, nodes.Wait):
            if statement.duration is not None:
                self._require(statement.duration, values.NUM, u'WAIT duration')
        elif isinstance(statement, nodes.If):
            self._require(statement.condition, values.NUM, u'IF condition')
            self._check_statement(statement.then_branch)
            if statement.else_branch is not None:
                self._check_statement(statement.else_branch)
        elif isinstance(statement, nodes.For):
            for expr in (statement.start, statement.limit, statement.step):
                if expr is not None:
                    self._require(expr, values.NUM, u'FOR bound')
            self._for_names.add(statement.name)
        elif isinstance(statement, nodes.Next):
            if statement.name is not None and statement.name not in self._for_names:
                self._report(u'NEXT %s without matching FOR' % (statement.name,))
        elif isinstance(statement, (nodes.Goto, nodes.Gosub)):
            self._check_line_target(statement.line)
        elif isinstance(statement, nodes.Restore):
            if statement.line is not None:
                self._check_line_target(statement.line)
        elif isinstance(statement, nodes.Read):
            for target in statement.targets:
                self._type_of(target)
        elif isinstance(statement, nodes.Poke):
            for expr in [statement.address] + list(statement.values):
                self._require(expr, values.NUM, u'POKE argument')
        elif isinstance(statement, nodes.Call):
            self._require(statement.address, values.NUM, u'CALL address')

    def _type_of(self, expr):
        """Static type of an expression; None if it is already in error."""
        if isinstance(expr, nodes.NumberLiteral):
            return values.NUM
        elif isinstance(expr, nodes.StringLiteral):
            return values.STR
        elif isinstance(expr, nodes.Variable):
            return values.type_of(expr.name)
        elif isinstance(expr, nodes.ArrayElement):
            if expr.name not in self._dimmed:
                self._report(u'array %s used without DIM' % (expr.name,))
            self._require(expr.index, values.NUM, u'array subscript')
            return values.type_of(expr.name)
        elif isinstance(expr, nodes.UnaryOp):
            operand = self._type_of(expr.operand)
            if operand == values.STR:
                self._report(u'string operand for %s' % (expr.op,))
                return None
            return None if operand is None else values.NUM
        left = self._type_of(expr.left)
        right = self._type_of(expr.right)
        if left is None or right is None:
            return None
        if expr.op in NUMERIC_OPERATORS:
            if values.STR in (left, right):
                self._report(u'string operand for %s' % (expr.op,))
                return None
            return values.NUM
        if left != right:
            self._report(u'type mismatch in %s' % (expr.op,))
            return None
        if expr.op in op.COMPARISON:
            return values.NUM
        # + on two strings concatenates
        return left

"""
PocketBASIC - evaluator.py
Expression evaluation against the variable store

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from . import values
from .parser import nodes
from .parser import operators as op


class Evaluator(object):
    """Evaluate expression trees."""

    def __init__(self, memory):
        """Initialise evaluator."""
        self._memory = memory
        self._evaluators = {
            nodes.NumberLiteral: self._evaluate_number,
            nodes.StringLiteral: self._evaluate_string,
            nodes.Variable: self._evaluate_variable,
            nodes.ArrayElement: self._evaluate_array_element,
            nodes.UnaryOp: self._evaluate_unary,
            nodes.BinaryOp: self._evaluate_binary,
        }

    def evaluate(self, expr):
        """Compute the value of an expression."""
        return self._evaluators[type(expr)](expr)

    def evaluate_index(self, element):
        """Compute the subscript of an array element."""
        return values.to_int(self.evaluate(element.index))

    def assign(self, target, value):
        """Store a value in a variable or array element."""
        if isinstance(target, nodes.ArrayElement):
            self._memory.set_array(target.name, self.evaluate_index(target), value)
        else:
            self._memory.set_scalar(target.name, value)

    def _evaluate_number(self, expr):
        return values.Number(expr.value)

    def _evaluate_string(self, expr):
        return values.String(expr.value)

    def _evaluate_variable(self, expr):
        return self._memory.get_scalar(expr.name)

    def _evaluate_array_element(self, expr):
        return self._memory.get_array(expr.name, self.evaluate_index(expr))

    def _evaluate_unary(self, expr):
        return op.UNARY[expr.op](self.evaluate(expr.operand))

    def _evaluate_binary(self, expr):
        # both operands are always evaluated, left first
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        return op.BINARY[expr.op](left, right)

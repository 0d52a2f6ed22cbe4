"""
PocketBASIC - lister.py
Convert parsed program lines back to plain-text BASIC

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from .base import tokens as tk
from .parser import nodes
from .parser import operators as op


# operators written as words need blanks around them
WORD_OPERATORS = (tk.AND, tk.OR)


class Lister(object):
    """BASIC detokeniser."""

    def __init__(self):
        """Initialise lister."""
        self._statement_listers = {
            nodes.Let: self._list_let,
            nodes.Print: lambda s: self._list_items(tk.PRINT, s.items),
            nodes.Pause: lambda s: self._list_items(tk.PAUSE, s.items),
            nodes.Input: self._list_input,
            nodes.Wait: lambda s: self._list_optional(tk.WAIT, s.duration),
            nodes.If: self._list_if,
            nodes.For: self._list_for,
            nodes.Next: lambda s: tk.NEXT + (u' ' + s.name if s.name else u''),
            nodes.Goto: lambda s: u'%s %d' % (tk.GOTO, s.line),
            nodes.Gosub: lambda s: u'%s %d' % (tk.GOSUB, s.line),
            nodes.Return: lambda s: tk.RETURN,
            nodes.End: lambda s: tk.END,
            nodes.Rem: lambda s: tk.REM + (u' ' + s.text if s.text else u''),
            nodes.Data: self._list_data,
            nodes.Read: lambda s: u'%s %s' % (
                tk.READ, tk.COMMA.join(self.list_expression(t) for t in s.targets)
            ),
            nodes.Restore: lambda s: tk.RESTORE + (
                u' %d' % (s.line,) if s.line is not None else u''
            ),
            nodes.Poke: lambda s: u'%s %s' % (
                tk.POKE, tk.COMMA.join(self.list_expression(e) for e in [s.address] + list(s.values))
            ),
            nodes.Call: lambda s: u'%s %s' % (tk.CALL, self.list_expression(s.address)),
            nodes.Dim: self._list_dim,
        }

    def list_program(self, program):
        """List all lines of a program."""
        return [self.list_line(line_number, statements) for line_number, statements in program]

    def list_line(self, line_number, statements):
        """List one program line."""
        return u'%d %s' % (line_number, tk.COLON.join(self.list_statement(s) for s in statements))

    def list_statement(self, statement):
        """List a single statement."""
        return self._statement_listers[type(statement)](statement)

    ###########################################################################
    # expressions

    def list_expression(self, expr, level=0):
        """List an expression; bracket it if it binds looser than level."""
        own_level = self._level(expr)
        if isinstance(expr, nodes.NumberLiteral):
            text = self._list_number(expr.value)
        elif isinstance(expr, nodes.StringLiteral):
            text = tk.QUOTE + expr.value + tk.QUOTE
        elif isinstance(expr, nodes.Variable):
            text = expr.name
        elif isinstance(expr, nodes.ArrayElement):
            text = u'%s(%s)' % (expr.name, self.list_expression(expr.index))
        elif isinstance(expr, nodes.UnaryOp):
            if expr.op == tk.NOT:
                text = u'NOT ' + self.list_expression(expr.operand, own_level)
            else:
                text = expr.op + self.list_expression(expr.operand, own_level)
        else:
            # left-associative: right operand of equal level needs brackets
            left = self.list_expression(expr.left, own_level)
            right = self.list_expression(expr.right, own_level + 1)
            if expr.op in WORD_OPERATORS:
                text = u'%s %s %s' % (left, expr.op, right)
            else:
                text = u'%s%s%s' % (left, expr.op, right)
        if own_level < level:
            return u'(%s)' % (text,)
        return text

    def _level(self, expr):
        """Binding level of an expression node."""
        if isinstance(expr, nodes.UnaryOp):
            return op.PRECEDENCE[(expr.op, 1)]
        elif isinstance(expr, nodes.BinaryOp):
            return op.PRECEDENCE[(expr.op, 2)]
        return op.TERM_LEVEL

    def _list_number(self, value):
        """List a numeric literal."""
        if value == int(value):
            return u'%d' % (value,)
        return repr(value)

    ###########################################################################
    # statements

    def _list_items(self, keyword, items):
        """List PRINT or PAUSE."""
        if not items:
            return keyword
        return u'%s %s' % (keyword, tk.SEMICOLON.join(self.list_expression(e) for e in items))

    def _list_optional(self, keyword, expr):
        """List a keyword with optional argument."""
        if expr is None:
            return keyword
        return u'%s %s' % (keyword, self.list_expression(expr))

    def _list_let(self, statement):
        return u'%s=%s' % (
            self.list_expression(statement.target), self.list_expression(statement.expression)
        )

    def _list_input(self, statement):
        target = self.list_expression(statement.target)
        if statement.prompt is None:
            return u'%s %s' % (tk.INPUT, target)
        return u'%s %s;%s' % (tk.INPUT, self.list_expression(statement.prompt), target)

    def _list_if(self, statement):
        text = u'%s %s %s %s' % (
            tk.IF, self.list_expression(statement.condition),
            tk.THEN, self.list_statement(statement.then_branch)
        )
        if statement.else_branch is not None:
            text += u' %s %s' % (tk.ELSE, self.list_statement(statement.else_branch))
        return text

    def _list_for(self, statement):
        text = u'%s %s=%s %s %s' % (
            tk.FOR, statement.name, self.list_expression(statement.start),
            tk.TO, self.list_expression(statement.limit)
        )
        if statement.step is not None:
            text += u' %s %s' % (tk.STEP, self.list_expression(statement.step))
        return text

    def _list_data(self, statement):
        items = []
        for item in statement.items:
            if isinstance(item, float):
                items.append(self._list_number(item))
            else:
                items.append(tk.QUOTE + item + tk.QUOTE)
        return u'%s %s' % (tk.DATA, tk.COMMA.join(items))

    def _list_dim(self, statement):
        text = u'%s %s(%d)' % (tk.DIM, statement.name, statement.size)
        if statement.length is not None:
            text += u'*%d' % (statement.length,)
        return text

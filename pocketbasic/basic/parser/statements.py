"""
PocketBASIC - statements.py
Statement parser

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from ..base import error
from ..base import tokens as tk
from ..base.codestream import TokenStream
from . import expressions
from . import nodes


class Parser(object):
    """BASIC statement parser."""

    def __init__(self):
        """Initialise statement context."""
        # expression parser
        self.expression_parser = expressions.ExpressionParser()
        # initialise syntax parser tables
        self._init_syntax()

    def _init_syntax(self):
        """Initialise syntax parsers."""
        self._simple = {
            tk.REM: self._parse_rem,
            tk.LET: self._parse_let,
            tk.PRINT: self._parse_print,
            tk.PAUSE: self._parse_pause,
            tk.INPUT: self._parse_input,
            tk.WAIT: self._parse_wait,
            tk.IF: self._parse_if,
            tk.FOR: self._parse_for,
            tk.NEXT: self._parse_next,
            tk.GOTO: self._parse_goto,
            tk.GOSUB: self._parse_gosub,
            tk.RETURN: self._parse_return,
            tk.END: self._parse_end,
            tk.DATA: self._parse_data,
            tk.READ: self._parse_read,
            tk.RESTORE: self._parse_restore,
            tk.POKE: self._parse_poke,
            tk.CALL: self._parse_call,
            tk.DIM: self._parse_dim,
        }

    def parse_line(self, tokens, line_number=None, end_column=None):
        """Parse the tokens of a line into a non-empty list of statements."""
        ins = TokenStream(tokens, line_number, end_column)
        statements = []
        while True:
            statements.append(self.parse_statement(ins))
            if ins.at_end():
                return statements
            ins.require_read((tk.COLON,), u'expected : or end of line')

    def parse_expression_line(self, tokens, line_number=None):
        """Parse tokens that should form exactly one expression."""
        ins = TokenStream(tokens, line_number)
        expr = self.parse_expression(ins)
        if not ins.at_end():
            ins.syntax_error(u'unexpected %s' % (ins.peek().value,))
        return expr

    def parse_statement(self, ins):
        """Parse a single atomic statement."""
        token = ins.peek()
        if token is None:
            ins.syntax_error(u'expected statement')
        if token.kind == tk.KEYWORD and token.value in self._simple:
            ins.read()
            statement = self._simple[token.value](ins)
        elif token.kind == tk.NAME:
            # implicit LET
            statement = self._parse_let(ins)
        else:
            ins.syntax_error(u'expected statement')
        ins.require_end()
        return statement

    def parse_expression(self, ins):
        """Parse an expression at the cursor."""
        return self.expression_parser.parse(ins)

    ###########################################################################
    # auxiliary functions

    def _parse_line_number(self, ins):
        """Parse a literal line number."""
        token = ins.require_kind(tk.NUMBER, u'expected line number')
        return int(token.value)

    def _parse_optional_expression(self, ins):
        """Parse an expression if not at end of statement."""
        if ins.at_statement_end():
            return None
        return self.parse_expression(ins)

    def _parse_semicolon_list(self, ins):
        """Parse expressions separated by semicolons."""
        items = []
        if ins.at_statement_end():
            return items
        while True:
            items.append(self.parse_expression(ins))
            if not ins.read_if((tk.SEMICOLON,)):
                return items

    def _parse_lvalue_list(self, ins):
        """Parse comma-separated variables."""
        targets = [self.expression_parser.parse_lvalue(ins)]
        while ins.read_if((tk.COMMA,)):
            targets.append(self.expression_parser.parse_lvalue(ins))
        return targets

    def _parse_branch(self, ins):
        """Parse the single statement of a THEN or ELSE branch."""
        token = ins.peek()
        if token is not None and token.kind == tk.NUMBER:
            # THEN 100 is short for THEN GOTO 100
            return nodes.Goto(self._parse_line_number(ins))
        if ins.peek_is((tk.DATA,)):
            ins.syntax_error(u'DATA must be a statement of its own')
        return self.parse_statement(ins)

    ###########################################################################
    # statements

    def _parse_rem(self, ins):
        """Parse REM."""
        comment = ins.read_kind(tk.COMMENT)
        return nodes.Rem(comment.value if comment else u'')

    def _parse_let(self, ins):
        """Parse LET or implicit assignment."""
        target = self.expression_parser.parse_lvalue(ins)
        ins.require_read((tk.O_EQ,))
        return nodes.Let(target, self.parse_expression(ins))

    def _parse_print(self, ins):
        """Parse PRINT."""
        return nodes.Print(self._parse_semicolon_list(ins))

    def _parse_pause(self, ins):
        """Parse PAUSE."""
        return nodes.Pause(self._parse_semicolon_list(ins))

    def _parse_input(self, ins):
        """Parse INPUT."""
        first = self.parse_expression(ins)
        if ins.read_if((tk.SEMICOLON,)):
            return nodes.Input(first, self.expression_parser.parse_lvalue(ins))
        if not isinstance(first, nodes.LVALUES):
            ins.syntax_error(u'expected variable name')
        return nodes.Input(None, first)

    def _parse_wait(self, ins):
        """Parse WAIT."""
        return nodes.Wait(self._parse_optional_expression(ins))

    def _parse_if(self, ins):
        """Parse IF: one statement after THEN, optionally one after ELSE."""
        condition = self.parse_expression(ins)
        ins.require_read((tk.THEN,))
        then_branch = self._parse_branch(ins)
        else_branch = None
        if ins.read_if((tk.ELSE,)):
            else_branch = self._parse_branch(ins)
        return nodes.If(condition, then_branch, else_branch)

    def _parse_for(self, ins):
        """Parse FOR."""
        token = ins.require_kind(tk.NAME, u'expected variable name')
        if token.value.endswith(tk.STR_SIGIL):
            raise error.BASICSyntaxError(
                ins.line_number, token.column, u'FOR variable must be numeric'
            )
        ins.require_read((tk.O_EQ,))
        start = self.parse_expression(ins)
        ins.require_read((tk.TO,))
        limit = self.parse_expression(ins)
        step = None
        if ins.read_if((tk.STEP,)):
            step = self.parse_expression(ins)
        return nodes.For(token.value, start, limit, step)

    def _parse_next(self, ins):
        """Parse NEXT."""
        if ins.at_statement_end():
            return nodes.Next(None)
        token = ins.require_kind(tk.NAME, u'expected variable name')
        return nodes.Next(token.value)

    def _parse_goto(self, ins):
        """Parse GOTO."""
        return nodes.Goto(self._parse_line_number(ins))

    def _parse_gosub(self, ins):
        """Parse GOSUB."""
        return nodes.Gosub(self._parse_line_number(ins))

    def _parse_return(self, ins):
        """Parse RETURN."""
        return nodes.Return()

    def _parse_end(self, ins):
        """Parse END."""
        return nodes.End()

    def _parse_data(self, ins):
        """Parse DATA: numbers and strings separated by commas."""
        items = []
        while True:
            negative = ins.read_if((tk.O_MINUS,))
            token = ins.peek()
            if token is not None and token.kind == tk.NUMBER:
                ins.read()
                items.append(-token.value if negative else token.value)
            elif token is not None and token.kind == tk.STRING and not negative:
                ins.read()
                items.append(token.value)
            else:
                ins.syntax_error(u'expected data item')
            if not ins.read_if((tk.COMMA,)):
                return nodes.Data(items)

    def _parse_read(self, ins):
        """Parse READ."""
        return nodes.Read(self._parse_lvalue_list(ins))

    def _parse_restore(self, ins):
        """Parse RESTORE."""
        if ins.at_statement_end():
            return nodes.Restore(None)
        return nodes.Restore(self._parse_line_number(ins))

    def _parse_poke(self, ins):
        """Parse POKE: address followed by one or more byte values."""
        address = self.parse_expression(ins)
        ins.require_read((tk.COMMA,))
        byte_values = [self.parse_expression(ins)]
        while ins.read_if((tk.COMMA,)):
            byte_values.append(self.parse_expression(ins))
        return nodes.Poke(address, byte_values)

    def _parse_call(self, ins):
        """Parse CALL."""
        return nodes.Call(self.parse_expression(ins))

    def _parse_dim(self, ins):
        """Parse DIM name(size) [* length]."""
        token = ins.require_kind(tk.NAME, u'expected array name')
        is_string = token.value.endswith(tk.STR_SIGIL)
        ins.require_read((tk.LPAREN,))
        size = int(ins.require_kind(tk.NUMBER, u'expected array size').value)
        ins.require_read((tk.RPAREN,))
        length = None
        if ins.peek_is((tk.O_TIMES,)):
            if not is_string:
                ins.syntax_error(u'string length given for numeric array')
            ins.read()
            length = int(ins.require_kind(tk.NUMBER, u'expected string length').value)
        return nodes.Dim(token.value, is_string, size, length)

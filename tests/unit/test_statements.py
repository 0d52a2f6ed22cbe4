"""
PocketBASIC tests.test_statements
Tests for the statement parser

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from pocketbasic.basic.tokeniser import Tokeniser
from pocketbasic.basic.parser import Parser
from pocketbasic.basic.parser import nodes
from pocketbasic.basic.parser.nodes import NumberLiteral, StringLiteral, Variable
from pocketbasic.basic.program import Program
from pocketbasic.basic.base import error

from tests.unit.utils import TestCase, run_tests


class StatementParserTest(TestCase):
    """Unit tests for the statement parser."""

    tag = u'statements'

    def _parse(self, text):
        """Parse a line of statements, without line number."""
        tokens = Tokeniser().tokenise_line(text, 10)
        return Parser().parse_line(tokens, 10)

    def test_implicit_let(self):
        """Assignment with and without LET."""
        expected = [nodes.Let(Variable(u'A', False), NumberLiteral(1.))]
        assert self._parse(u'A=1') == expected
        assert self._parse(u'LET A=1') == expected

    def test_if_branch_is_single_statement(self):
        """A colon after THEN ends the IF; the next statement is a sibling."""
        statements = self._parse(u'IF 1=0 THEN PRINT "A": PRINT "B"')
        assert len(statements) == 2
        assert isinstance(statements[0], nodes.If)
        assert statements[0].then_branch == nodes.Print([StringLiteral(u'A')])
        assert statements[0].else_branch is None
        assert statements[1] == nodes.Print([StringLiteral(u'B')])

    def test_if_else(self):
        """ELSE branch and THEN line-number shorthand."""
        statement, = self._parse(u'IF A THEN B=1 ELSE B=2')
        assert statement.then_branch == nodes.Let(Variable(u'B', False), NumberLiteral(1.))
        assert statement.else_branch == nodes.Let(Variable(u'B', False), NumberLiteral(2.))
        statement, = self._parse(u'IF A THEN 100 ELSE 200')
        assert statement.then_branch == nodes.Goto(100)
        assert statement.else_branch == nodes.Goto(200)

    def test_input(self):
        """INPUT with and without prompt."""
        assert self._parse(u'INPUT "N? ";N') == [
            nodes.Input(StringLiteral(u'N? '), Variable(u'N', False))
        ]
        assert self._parse(u'INPUT A$') == [nodes.Input(None, Variable(u'A$', True))]
        with self.assertRaises(error.BASICSyntaxError):
            self._parse(u'INPUT "X"')

    def test_for_next(self):
        """FOR with STEP, bare NEXT."""
        statement, = self._parse(u'FOR I=1 TO 10 STEP -2')
        assert statement.name == u'I'
        assert statement.step == nodes.UnaryOp(u'-', NumberLiteral(2.))
        assert self._parse(u'NEXT') == [nodes.Next(None)]
        assert self._parse(u'NEXT I') == [nodes.Next(u'I')]
        with self.assertRaises(error.BASICSyntaxError):
            self._parse(u'FOR A$=1 TO 2')

    def test_data(self):
        """DATA with negative numbers and strings."""
        assert self._parse(u'DATA 1,-2,"X"') == [nodes.Data([1., -2., u'X'])]
        with self.assertRaises(error.BASICSyntaxError):
            self._parse(u'DATA A')
        with self.assertRaises(error.BASICSyntaxError):
            self._parse(u'DATA -"X"')

    def test_dim(self):
        """DIM with string length."""
        assert self._parse(u'DIM B$(10)*8') == [nodes.Dim(u'B$', True, 10, 8)]
        assert self._parse(u'DIM A(5)') == [nodes.Dim(u'A', False, 5, None)]
        with self.assertRaises(error.BASICSyntaxError):
            self._parse(u'DIM A(5)*3')

    def test_poke_call(self):
        """POKE takes one or more values."""
        assert self._parse(u'POKE 100,1,2') == [
            nodes.Poke(NumberLiteral(100.), [NumberLiteral(1.), NumberLiteral(2.)])
        ]
        assert self._parse(u'CALL 4096') == [nodes.Call(NumberLiteral(4096.))]
        with self.assertRaises(error.BASICSyntaxError):
            self._parse(u'POKE 100')

    def test_misc(self):
        """Statements without arguments."""
        assert self._parse(u'RETURN:END:WAIT:RESTORE') == [
            nodes.Return(), nodes.End(), nodes.Wait(None), nodes.Restore(None)
        ]
        assert self._parse(u'REM HELLO') == [nodes.Rem(u'HELLO')]
        assert self._parse(u'RESTORE 50') == [nodes.Restore(50)]
        assert self._parse(u'READ A,B$(2)')[0].targets[1] == nodes.ArrayElement(
            u'B$', True, NumberLiteral(2.)
        )

    def test_syntax_errors(self):
        """Malformed statements."""
        for text in (u'GOTO', u'GOTO X', u'PRINT 1 2', u'A=1:', u'THEN', u'1=A', u'IF A PRINT'):
            with self.assertRaises(error.BASICSyntaxError):
                self._parse(text)

    def test_data_not_in_branch(self):
        """DATA cannot be the statement of a THEN or ELSE branch."""
        for text in (u'IF A THEN DATA 1', u'IF A THEN PRINT 1 ELSE DATA 2'):
            with self.assertRaises(error.BASICSyntaxError):
                self._parse(text)

    def test_line_number_out_of_range(self):
        """Out-of-range line numbers are reported by number, not by row."""
        program = Program(Tokeniser(), Parser())
        with self.assertRaises(error.BASICSyntaxError) as cm:
            program.parse_line(u'70000 PRINT 1', 3)
        assert cm.exception.line == 70000
        assert cm.exception.get_message(cm.exception.line).startswith(u'Syntax error in 70000:1')

    def test_error_location(self):
        """Syntax errors report line and column."""
        program = Program(Tokeniser(), Parser())
        with self.assertRaises(error.BASICSyntaxError) as cm:
            program.parse_line(u'10 GOTO X', 1)
        assert cm.exception.line == 10
        assert cm.exception.column == 9
        assert cm.exception.kind == u'SyntaxError'


if __name__ == '__main__':
    run_tests()

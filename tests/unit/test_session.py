"""
PocketBASIC tests.test_session
unit tests for session API

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import io

from pocketbasic.basic import Session
from pocketbasic.basic import interpreter
from pocketbasic.basic.base import error
from pocketbasic.basic.data.programs import PROGRAMS, read_program_file

from tests.unit.utils import TestCase, run_tests
from tests.unit.utils import RecordingTerminal, FakeClock


def istypeval(val, refval):
    """Check agreement in both type and value."""
    return isinstance(val, type(refval)) and val == refval


class SessionTest(TestCase):
    """Unit tests for Session."""

    tag = u'session'

    def test_fibonacci(self):
        """The bundled sample program."""
        assert u'FIB.BAS' in PROGRAMS
        terminal = RecordingTerminal([u'5'])
        with Session(terminal=terminal, clock=FakeClock()) as s:
            state = s.execute(read_program_file(u'FIB.BAS'))
            assert state == interpreter.HALTED
            assert s.halt_reason == interpreter.EXPLICIT_END
        assert terminal.text == u'N? F(5) = 5\n'

    def test_fibonacci_negative(self):
        """IF branch and sibling END."""
        terminal = RecordingTerminal([u'-1'])
        with Session(terminal=terminal) as s:
            s.execute(read_program_file(u'FIB.BAS'))
        assert terminal.text == u'N? N MUST BE >= 0\n'

    def test_if_sibling(self):
        """The statement after the THEN branch always runs."""
        terminal = RecordingTerminal()
        with Session(terminal=terminal) as s:
            s.execute(u'10 IF 1=0 THEN PRINT "A": PRINT "B"')
        assert terminal.text == u'B\n'

    def test_gosub(self):
        """Subroutine call and halt after END."""
        terminal = RecordingTerminal()
        with Session(terminal=terminal) as s:
            state = s.execute(u'10 GOSUB 100\n20 END\n100 PRINT "X"\n110 RETURN')
            assert state == interpreter.HALTED
            assert s.halt_reason == interpreter.EXPLICIT_END
            assert s.info.get_current_line() == 20
        assert terminal.text == u'X\n'

    def test_type_mismatch_fault(self):
        """A runtime fault stops the program and is reported on the terminal."""
        terminal = RecordingTerminal()
        with Session(terminal=terminal) as s:
            state = s.execute(u'10 PRINT "a" + 1\n20 PRINT "NOT REACHED"')
            assert state == interpreter.FAULTED
            assert s.error.kind == u'TypeMismatch'
            assert s.error.line == 10
        assert terminal.text == u'Type mismatch in 10\n'

    def test_data_exhausted(self):
        """Reading more items than there are."""
        with Session(terminal=RecordingTerminal()) as s:
            state = s.execute(u'10 DATA 1\n20 READ A\n30 READ B')
            assert state == interpreter.FAULTED
            assert s.error.kind == u'DataExhausted'
            assert s.error.line == 30
            assert s.get_variable(u'A') == 1.

    def test_load_syntax_error(self):
        """A bad line fails the whole load; the old program stays."""
        terminal = RecordingTerminal()
        with Session(terminal=terminal) as s:
            s.load(u'10 PRINT "OLD"')
            with self.assertRaises(error.BASICSyntaxError) as cm:
                s.load(u'10 PRINT "NEW"\n20 PRINT +')
            assert cm.exception.line == 20
            s.run()
            assert s.execute(u'10 GOTO') is None
        assert terminal.text == u'OLD\nSyntax error in 10:8: expected line number\n'

    def test_deep_nesting(self):
        """An over-nested expression fails the load as a syntax error."""
        terminal = RecordingTerminal()
        with Session(terminal=terminal) as s:
            assert s.execute(u'10 PRINT ' + u'(' * 150 + u'1' + u')' * 150) is None
        assert terminal.text.startswith(u'Syntax error in 10:')
        assert u'expression too complex' in terminal.text

    def test_hook_before_load(self):
        """A step hook set before loading stays installed."""
        seen = []
        with Session(terminal=RecordingTerminal()) as s:
            s.set_hook(lambda line_number, index: seen.append(line_number))
            s.execute(u'10 A=1\n20 A=2')
            assert seen == [10, 20]
            s.execute(u'30 A=3')
        assert seen == [10, 20, 30]

    def test_evaluate(self):
        """Evaluate expressions against the session's variables."""
        with Session() as s:
            s.set_variable(u'A', 2)
            assert istypeval(s.evaluate(u'A*3+1'), 7.)
            assert s.evaluate(u'"AB"+"C"') == u'ABC'
            assert s.evaluate(u'1<2 AND NOT 0') == 1.
            assert s.evaluate(u'(1+2)*3-4/2') == 7.
            with self.assertRaises(error.BASICError):
                s.evaluate(u'1/0')

    def test_variables(self):
        """Get and set scalars and arrays."""
        with Session() as s:
            assert istypeval(s.get_variable(u'X'), 0.)
            assert s.get_variable(u'X$') == u''
            s.set_variable(u'B$', u'abcd')
            assert s.get_variable(u'B$') == u'abcd'
            s.set_variable(u'C()', [1, 2, 3])
            assert s.get_variable(u'C()') == [1., 2., 3.]
            assert s.evaluate(u'C(2)') == 3.
            with self.assertRaises(error.BASICError):
                s.set_variable(u'N', u'text')

    def test_load_clears_variables(self):
        """Loading a program starts with fresh variables."""
        with Session(terminal=RecordingTerminal()) as s:
            s.execute(u'10 A=5')
            s.load(u'10 PRINT A')
            assert s.get_variable(u'A') == 0.

    def test_list_and_check(self):
        """Listing and diagnostics through the session."""
        with Session() as s:
            s.load(u'20 PRINT A$+1\n10 LET A = 1')
            assert s.list_program() == u'10 A=1\n20 PRINT A$+1'
            diagnostics = s.check()
            assert len(diagnostics) == 1
            assert diagnostics[0].line == 20

    def test_streams(self):
        """The default terminal uses the given streams."""
        output = io.StringIO()
        with Session(input_stream=io.StringIO(u'7\n'), output_stream=output, delay=False) as s:
            s.execute(u'10 INPUT "?";X\n20 PAUSE X*2\n30 WAIT 100')
        assert output.getvalue() == u'?14\n'

    def test_info(self):
        """Session info dumps."""
        with Session(terminal=RecordingTerminal()) as s:
            s.execute(u'10 A=1: B$="X"\n20 DATA 1')
            info = s.info
            assert u'A: 1' in info.repr_variables()
            assert u'B$: X' in info.repr_variables()
            assert u'00010' in info.repr_program()
            assert u'DataPool' in info.repr_data()
            assert info.get_current_code() == u'20 DATA 1'


if __name__ == '__main__':
    run_tests()

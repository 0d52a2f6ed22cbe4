"""
PocketBASIC tests.test_datapool
Tests for DATA, READ and RESTORE bookkeeping

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from pocketbasic.basic.tokeniser import Tokeniser
from pocketbasic.basic.parser import Parser
from pocketbasic.basic.program import Program
from pocketbasic.basic.datapool import DataPool
from pocketbasic.basic.values import Number, String
from pocketbasic.basic.base import error

from tests.unit.utils import TestCase, run_tests


PROGRAM = u"""\
10 DATA 1,2
20 READ A
30 DATA "X": DATA -3
50 END
60 DATA 4
"""


class DataPoolTest(TestCase):
    """Unit tests for DataPool."""

    tag = u'datapool'

    def setUp(self):
        TestCase.setUp(self)
        program = Program(Tokeniser(), Parser())
        program.load(PROGRAM)
        self.pool = DataPool(program)

    def test_read_in_line_order(self):
        """Items from all DATA statements, in order."""
        assert len(self.pool) == 5
        assert [self.pool.read() for _ in range(5)] == [
            Number(1), Number(2), String(u'X'), Number(-3), Number(4)
        ]

    def test_exhausted(self):
        """Reading past the last item."""
        for _ in range(5):
            self.pool.read()
        with self.assertRaises(error.BASICError) as cm:
            self.pool.read()
        assert cm.exception.err == error.OUT_OF_DATA
        assert cm.exception.kind == u'DataExhausted'

    def test_restore(self):
        """RESTORE to the start or to a line."""
        self.pool.read()
        self.pool.restore()
        assert self.pool.read() == Number(1)
        self.pool.restore(30)
        assert self.pool.read() == String(u'X')
        # first DATA at or after the line
        self.pool.restore(50)
        assert self.pool.read() == Number(4)
        self.pool.restore(20)
        assert self.pool.read() == String(u'X')

    def test_restore_past_data(self):
        """No DATA at or after the line."""
        pool = DataPool()
        pool.append(10, [1.])
        with self.assertRaises(error.BASICError) as cm:
            pool.restore(20)
        assert cm.exception.err == error.OUT_OF_DATA


if __name__ == '__main__':
    run_tests()

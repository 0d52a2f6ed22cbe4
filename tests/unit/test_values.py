"""
PocketBASIC tests.test_values
Tests for the value model

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from pocketbasic.basic import values
from pocketbasic.basic.values import Number, String
from pocketbasic.basic.base import error

from tests.unit.utils import TestCase, run_tests


class ValuesTest(TestCase):
    """Unit tests for values."""

    tag = u'values'

    def test_number_repr(self):
        """Integral values print without decimal point."""
        assert Number(5).to_str() == u'5'
        assert Number(-3).to_str() == u'-3'
        assert Number(2.5).to_str() == u'2.5'
        assert Number(1./3).to_str() == u'0.3333333333'
        assert Number(9999999999).to_str() == u'9999999999'
        assert Number(1e10).to_str() == u'1E+10'

    def test_arithmetic(self):
        """Arithmetic on Numbers."""
        assert values.add(Number(1), Number(2)) == Number(3)
        assert values.sub(Number(1), Number(2)) == Number(-1)
        assert values.mul(Number(3), Number(2)) == Number(6)
        assert values.div(Number(1), Number(4)) == Number(0.25)
        assert values.neg(Number(7)) == Number(-7)

    def test_concatenation(self):
        """Plus on two strings concatenates."""
        assert values.add(String(u'AB'), String(u'C')) == String(u'ABC')

    def test_type_mismatch(self):
        """Mixed or string operands."""
        for op in (values.add, values.sub, values.mul, values.div, values.eq, values.lt):
            with self.assertRaises(error.BASICError) as cm:
                op(String(u'A'), Number(1))
            assert cm.exception.err == error.TYPE_MISMATCH
        with self.assertRaises(error.BASICError):
            values.sub(String(u'A'), String(u'B'))
        with self.assertRaises(error.BASICError):
            values.neg(String(u'A'))

    def test_division_by_zero(self):
        """Division by zero."""
        with self.assertRaises(error.BASICError) as cm:
            values.div(Number(1), Number(0))
        assert cm.exception.err == error.DIVISION_BY_ZERO
        assert cm.exception.kind == u'DivisionByZero'

    def test_overflow(self):
        """Results that are not finite."""
        with self.assertRaises(error.BASICError) as cm:
            values.mul(Number(1e308), Number(10))
        assert cm.exception.err == error.OVERFLOW

    def test_comparisons(self):
        """Comparisons yield 1 or 0."""
        assert values.lt(Number(1), Number(2)) == Number(1)
        assert values.gte(Number(1), Number(2)) == Number(0)
        assert values.neq(Number(1), Number(2)) == Number(1)
        assert values.lte(Number(2), Number(2)) == Number(1)
        assert values.gt(String(u'B'), String(u'A')) == Number(1)
        assert values.eq(String(u'A'), String(u'A')) == Number(1)

    def test_logic(self):
        """AND, OR and NOT are logical."""
        assert values.and_(Number(2), Number(4)) == Number(1)
        assert values.and_(Number(2), Number(0)) == Number(0)
        assert values.or_(Number(0), Number(-1)) == Number(1)
        assert values.not_(Number(0)) == Number(1)
        assert values.not_(Number(3)) == Number(0)
        with self.assertRaises(error.BASICError):
            values.to_bool(String(u'X'))

    def test_conversions(self):
        """Python values and user input."""
        assert values.from_value(3) == Number(3)
        assert values.from_value(u'X') == String(u'X')
        assert values.from_value(True) == Number(1)
        assert values.from_repr(u' 12 ') == Number(12)
        assert values.from_repr(u'-1.5') == Number(-1.5)
        with self.assertRaises(error.BASICError) as cm:
            values.from_repr(u'ABC')
        assert cm.exception.err == error.TYPE_MISMATCH
        with self.assertRaises(TypeError):
            values.from_value(None)

    def test_string_truncate(self):
        """Truncate to maximum length."""
        assert String(u'ABCDEF').truncate(3) == String(u'ABC')
        assert String(u'AB').truncate(3) == String(u'AB')


if __name__ == '__main__':
    run_tests()

"""
PocketBASIC - numbers.py
Numeric values

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import math

from ..base import error


# integral values below this print without exponent
INTEGRAL_MAX = 1e10
# significant digits shown on the display
DIGITS_SHOWN = 10


##############################################################################
# value base class

class Value(object):
    """Abstract base class for value types."""

    sigil = None

    def __init__(self, value=None):
        """Initialise the value."""
        self._value = value

    def __repr__(self):
        """String representation for debugging."""
        return '%s[%r]' % (self.__class__.__name__, self._value)

    def __eq__(self, other):
        """Values are equal if type and content agree."""
        return type(self) == type(other) and self._value == other._value

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((type(self), self._value))

    def to_value(self):
        """Convert to Python value."""
        return self._value


##############################################################################
# numeric value

class Number(Value):
    """Floating-point numeric value."""

    sigil = u''

    def __init__(self, value=0.):
        """Initialise the number."""
        Value.__init__(self, float(value))

    def from_value(self, python_val):
        """Set to value of a Python number."""
        value = float(python_val)
        if math.isinf(value) or math.isnan(value):
            raise error.BASICError(error.OVERFLOW)
        self._value = value
        return self

    def to_int(self):
        """Truncate to Python int."""
        return int(self._value)

    def is_zero(self):
        """Value is zero."""
        return self._value == 0

    def sign(self):
        """Sign of value."""
        return (self._value > 0) - (self._value < 0)

    def to_str(self):
        """Convert to display representation."""
        value = self._value
        if value == int(value) and abs(value) < INTEGRAL_MAX:
            return u'%d' % (value,)
        return u'%.*G' % (DIGITS_SHOWN, value)

    def add(self, rhs):
        """Add another Number."""
        return Number().from_value(self._value + rhs._value)

    def sub(self, rhs):
        """Subtract another Number."""
        return Number().from_value(self._value - rhs._value)

    def mul(self, rhs):
        """Multiply by another Number."""
        return Number().from_value(self._value * rhs._value)

    def div(self, rhs):
        """Divide by another Number."""
        if rhs.is_zero():
            raise error.BASICError(error.DIVISION_BY_ZERO)
        return Number().from_value(self._value / rhs._value)

    def neg(self):
        """Negate."""
        return Number(-self._value)

    def gt(self, rhs):
        """Greater than."""
        return self._value > rhs._value

    def eq(self, rhs):
        """Equals."""
        return self._value == rhs._value

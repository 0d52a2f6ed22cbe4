"""
PocketBASIC - strings.py
String values

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from . import numbers


class String(numbers.Value):
    """String value."""

    sigil = u'$'

    def __init__(self, value=u''):
        """Initialise the string."""
        numbers.Value.__init__(self, value)

    def to_str(self):
        """Display representation."""
        return self._value

    def add(self, rhs):
        """Concatenate."""
        return String(self._value + rhs._value)

    def truncate(self, length):
        """Copy truncated to maximum length."""
        return String(self._value[:length])

    def gt(self, rhs):
        """Greater than, in character order."""
        return self._value > rhs._value

    def eq(self, rhs):
        """Equals."""
        return self._value == rhs._value

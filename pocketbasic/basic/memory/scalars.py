"""
PocketBASIC - scalars.py
Scalar variable management

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from .. import values


class Scalars(object):
    """Scalar variables of one type."""

    def __init__(self, sigil):
        """Initialise scalars."""
        self._sigil = sigil
        self.clear()

    def __repr__(self):
        """Debugging representation of variable dictionary."""
        return '\n'.join(
            '%s: %s' % (n, v.to_str()) for n, v in sorted(self._vars.items())
        )

    def clear(self):
        """Clear scalar variables."""
        self._vars = {}

    def set(self, name, value):
        """Assign a value to a variable."""
        self._vars[name] = values.pass_type(self._sigil, value)

    def get(self, name):
        """Retrieve the value of a scalar variable; unset variables read as zero or empty."""
        try:
            return self._vars[name]
        except KeyError:
            return values.new(self._sigil)

"""
PocketBASIC - arrays.py
Array variable management

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from ..base import error
from .. import values


# element length of string arrays dimensioned without *len
DEFAULT_STRING_LENGTH = 16
# maximum element length of string arrays
MAX_STRING_LENGTH = 80


class Arrays(object):
    """Array variables of one type."""

    def __init__(self, sigil):
        """Initialise arrays."""
        self._sigil = sigil
        self.clear()

    def __repr__(self):
        """Debugging representation of variable dictionary."""
        return '\n'.join(
            '%s(%d): %s' % (n, self._dims[n], [v.to_str() for v in self._buffers[n]])
            for n in sorted(self._dims)
        )

    def clear(self):
        """Clear arrays."""
        self._dims = {}
        self._lengths = {}
        self._buffers = {}

    def dim(self, name, size, length=None):
        """Allocate array space, indices 0 to size inclusive."""
        if name in self._dims:
            raise error.BASICError(error.DUPLICATE_DEFINITION)
        error.range_check(0, 65535, size)
        if self._sigil == values.STR:
            if length is None:
                length = DEFAULT_STRING_LENGTH
            error.range_check(1, MAX_STRING_LENGTH, length)
            self._lengths[name] = length
        self._dims[name] = size
        self._buffers[name] = [values.new(self._sigil) for _ in range(size + 1)]

    def _check_index(self, name, index):
        """Check that the array exists and the index is in range."""
        if name not in self._dims:
            raise error.BASICError(
                error.UNDECLARED_ARRAY, detail=u'%s%s' % (name, u'()')
            )
        error.range_check_err(0, self._dims[name], index, error.SUBSCRIPT_OUT_OF_RANGE)

    def get(self, name, index):
        """Retrieve the value of an array element."""
        self._check_index(name, index)
        return self._buffers[name][index]

    def set(self, name, index, value):
        """Assign a value to an array element."""
        self._check_index(name, index)
        value = values.pass_type(self._sigil, value)
        if self._sigil == values.STR:
            value = value.truncate(self._lengths[name])
        self._buffers[name][index] = value

    def to_list(self, name):
        """Retrieve the array as a list of Python values."""
        if name not in self._dims:
            raise error.BASICError(error.UNDECLARED_ARRAY)
        return [v.to_value() for v in self._buffers[name]]

    def from_list(self, name, python_list):
        """Set the array from a list of Python values, dimensioning it if needed."""
        if name not in self._dims:
            self.dim(name, max(len(python_list) - 1, 0))
        for index, item in enumerate(python_list):
            self.set(name, index, values.from_value(item))

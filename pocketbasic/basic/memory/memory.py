"""
PocketBASIC - memory.py
Variable store

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from .. import values
from .scalars import Scalars
from .arrays import Arrays


class Memory(object):
    """Numeric and string variables, kept in disjoint stores."""

    def __init__(self):
        """Initialise the variable store."""
        self.scalars = {
            values.NUM: Scalars(values.NUM),
            values.STR: Scalars(values.STR),
        }
        self.arrays = {
            values.NUM: Arrays(values.NUM),
            values.STR: Arrays(values.STR),
        }

    def __repr__(self):
        """Debugging representation of all variables."""
        return '\n'.join(
            repr(store) for store in (
                self.scalars[values.NUM], self.scalars[values.STR],
                self.arrays[values.NUM], self.arrays[values.STR],
            ) if repr(store)
        )

    def clear(self):
        """Clear all variables."""
        for store in list(self.scalars.values()) + list(self.arrays.values()):
            store.clear()

    def _scalars_for(self, name):
        return self.scalars[values.type_of(name)]

    def _arrays_for(self, name):
        return self.arrays[values.type_of(name)]

    def get_scalar(self, name):
        """Retrieve a scalar."""
        return self._scalars_for(name).get(name)

    def set_scalar(self, name, value):
        """Assign to a scalar."""
        self._scalars_for(name).set(name, value)

    def dim_array(self, name, size, length=None):
        """Dimension an array."""
        self._arrays_for(name).dim(name, size, length)

    def get_array(self, name, index):
        """Retrieve an array element."""
        return self._arrays_for(name).get(name, index)

    def set_array(self, name, index, value):
        """Assign to an array element."""
        self._arrays_for(name).set(name, index, value)

    def array_to_list(self, name):
        """Python list of array contents."""
        return self._arrays_for(name).to_list(name)

    def array_from_list(self, name, python_list):
        """Set array contents from a Python list."""
        self._arrays_for(name).from_list(name, python_list)

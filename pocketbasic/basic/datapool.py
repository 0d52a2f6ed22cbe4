"""
PocketBASIC - datapool.py
DATA items and the READ pointer

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import bisect

from .base import error
from . import values
from .parser import nodes


class DataPool(object):
    """All DATA literals of a program, in line order, with one read pointer."""

    def __init__(self, program=None):
        """Collect the DATA items of a program."""
        self._items = []
        # line numbers with DATA, and index of their first item
        self._lines = []
        self._starts = []
        self.data_pos = 0
        if program is not None:
            for line_number, statements in program:
                for statement in statements:
                    if isinstance(statement, nodes.Data):
                        self.append(line_number, statement.items)

    def __len__(self):
        """Number of DATA items."""
        return len(self._items)

    def __repr__(self):
        """Debugging representation."""
        return '<DataPool %d/%d %r>' % (self.data_pos, len(self._items), self._items)

    def append(self, line_number, items):
        """Add the items of a DATA statement at the given line."""
        if not self._lines or self._lines[-1] != line_number:
            self._lines.append(line_number)
            self._starts.append(len(self._items))
        self._items.extend(items)

    def read(self):
        """Read the next item as a BASIC value."""
        if self.data_pos >= len(self._items):
            raise error.BASICError(error.OUT_OF_DATA)
        item = self._items[self.data_pos]
        self.data_pos += 1
        return values.from_value(item)

    def restore(self, line_number=None):
        """Reset the pointer to the start, or to the first item at or after a line."""
        if line_number is None:
            self.data_pos = 0
            return
        index = bisect.bisect_left(self._lines, line_number)
        if index >= len(self._lines):
            raise error.BASICError(
                error.OUT_OF_DATA, detail=u'no DATA at or after line %d' % (line_number,)
            )
        self.data_pos = self._starts[index]

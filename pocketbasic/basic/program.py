"""
PocketBASIC - program.py
Program store

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import bisect
import logging

from .base import error


# PC-1500 line number range
MIN_LINE_NUMBER = 1
MAX_LINE_NUMBER = 65279


class Program(object):
    """BASIC program: statement lists keyed by line number, in numeric order."""

    def __init__(self, tokeniser, parser):
        """Initialise program."""
        self._tokeniser = tokeniser
        self._parser = parser
        self.erase()

    def __repr__(self):
        """Debugging representation: one line per program line."""
        return '\n'.join(
            '%05d %r' % (line_number, self._lines[line_number])
            for line_number in self.line_numbers
        )

    def __iter__(self):
        """Iterate over (line number, statements) in ascending order."""
        for line_number in self.line_numbers:
            yield line_number, self._lines[line_number]

    def __contains__(self, line_number):
        """Check if a line exists."""
        return line_number in self._lines

    def __len__(self):
        """Number of lines."""
        return len(self.line_numbers)

    def erase(self):
        """Erase the program from memory."""
        self._lines = {}
        self.line_numbers = []

    def load(self, source):
        """Parse complete program text; a bad line aborts the whole load."""
        if isinstance(source, bytes):
            source = source.decode('ascii', 'replace')
        if isinstance(source, str):
            source = source.splitlines()
        lines = {}
        for index, text in enumerate(source):
            text = text.rstrip(u'\r\n\x1a')
            if not text.strip():
                continue
            line_number, statements = self.parse_line(text, index + 1)
            if line_number in lines:
                logging.warning('Line %d defined more than once; keeping the last', line_number)
            lines[line_number] = statements
        self._lines = lines
        self.line_numbers = sorted(lines)
        logging.debug('Loaded program with %d lines', len(self.line_numbers))

    def parse_line(self, text, line_index=None):
        """Parse one numbered line into (line number, statements)."""
        line_number, rest, offset = self._tokeniser.split_line_number(text, line_index)
        if not MIN_LINE_NUMBER <= line_number <= MAX_LINE_NUMBER:
            raise error.BASICSyntaxError(
                line_number, 1, u'line number %d out of range' % (line_number,)
            )
        tokens = self._tokeniser.tokenise_line(rest, line_number, offset)
        statements = self._parser.parse_line(tokens, line_number, len(text) + 1)
        return line_number, statements

    def get_statements(self, line_number):
        """Statements of a line; raise Undefined line number if absent."""
        try:
            return self._lines[line_number]
        except KeyError:
            raise error.BASICError(error.UNDEFINED_LINE_NUMBER, detail=str(line_number))

    def check_line(self, line_number):
        """Raise Undefined line number if the line does not exist."""
        if line_number not in self._lines:
            raise error.BASICError(error.UNDEFINED_LINE_NUMBER, detail=str(line_number))

    def first_line(self):
        """Lowest line number, or None if the program is empty."""
        if not self.line_numbers:
            return None
        return self.line_numbers[0]

    def next_line(self, line_number):
        """Next-higher line number, or None."""
        index = bisect.bisect_right(self.line_numbers, line_number)
        if index >= len(self.line_numbers):
            return None
        return self.line_numbers[index]

    def following(self, line_number, index):
        """Position of the statement after (line, index), or None at end of program."""
        if index + 1 < len(self._lines[line_number]):
            return line_number, index + 1
        next_line = self.next_line(line_number)
        if next_line is None:
            return None
        return next_line, 0

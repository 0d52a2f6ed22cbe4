"""
PocketBASIC - codestream.py
Cursor over a tokenised program line

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from . import error
from . import tokens as tk


class TokenStream(object):
    """Read cursor over the tokens of one program line."""

    def __init__(self, tokens, line_number=None, end_column=None):
        """Initialise the stream."""
        self._tokens = list(tokens)
        self._pos = 0
        self.line_number = line_number
        # column reported for errors at end of line
        if end_column is None:
            end_column = self._tokens[-1].column + 1 if self._tokens else 1
        self._end_column = end_column

    def __repr__(self):
        """Debugging representation."""
        return '<TokenStream line %s at %d: %r>' % (
            self.line_number, self._pos, self._tokens[self._pos:]
        )

    def peek(self):
        """Token at the cursor, or None at end of line."""
        try:
            return self._tokens[self._pos]
        except IndexError:
            return None

    def read(self):
        """Token at the cursor, advancing; None at end of line."""
        token = self.peek()
        if token is not None:
            self._pos += 1
        return token

    def column(self):
        """Column of the token at the cursor."""
        token = self.peek()
        if token is None:
            return self._end_column
        return token.column

    def at_end(self):
        """Cursor is past the last token."""
        return self._pos >= len(self._tokens)

    def peek_is(self, values, kinds=None):
        """Check if the next token has one of the given values."""
        token = self.peek()
        if token is None or token.kind in (tk.STRING, tk.NUMBER, tk.COMMENT):
            return False
        if kinds is not None and token.kind not in kinds:
            return False
        return token.value in values

    def read_if(self, values):
        """Read the next token if it has one of the given values; return the value or None."""
        if self.peek_is(values):
            return self.read().value
        return None

    def read_kind(self, kind):
        """Read the next token if it has the given kind; return it or None."""
        token = self.peek()
        if token is not None and token.kind == kind:
            return self.read()
        return None

    def require_read(self, values, detail=None):
        """Skip the next token if it has one of the given values, raise syntax error otherwise."""
        value = self.read_if(values)
        if value is None:
            self.syntax_error(detail or u'expected %s' % u' or '.join(values))
        return value

    def require_kind(self, kind, detail=None):
        """Read a token of the given kind, raise syntax error otherwise."""
        token = self.read_kind(kind)
        if token is None:
            self.syntax_error(detail or u'expected %s' % kind)
        return token

    def at_statement_end(self):
        """Check for end of statement: end of line, colon or ELSE."""
        return self.at_end() or self.peek_is((tk.COLON, tk.ELSE))

    def require_end(self):
        """Raise syntax error if not at end of statement."""
        if not self.at_statement_end():
            self.syntax_error(u'unexpected %s' % (self.peek().value,))

    def syntax_error(self, detail=None):
        """Raise a syntax error at the cursor."""
        raise error.BASICSyntaxError(self.line_number, self.column(), detail)

"""
PocketBASIC - tokeniser.py
Convert plain-text BASIC lines to token sequences

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from .base import error
from .base import tokens as tk
from .base.tokens import DIGITS, LETTERS, NAME_CHARS, BLANKS, Token


class Tokeniser(object):
    """BASIC tokeniser."""

    def split_line_number(self, line, line_index=None):
        """
        Split a program line into line number and statement text.
        Returns (line_number, text, column_offset) where column_offset is the number of
        characters preceding the statement text.
        """
        pos = 0
        while pos < len(line) and line[pos] in BLANKS:
            pos += 1
        start = pos
        while pos < len(line) and line[pos] in DIGITS:
            pos += 1
        if pos == start:
            # no line number: report physical line index instead
            raise error.BASICSyntaxError(line_index, start + 1, u'expected line number')
        line_number = int(line[start:pos])
        return line_number, line[pos:], pos

    def tokenise_line(self, text, line_number=None, column_offset=0):
        """Convert a line's statement text to a list of tokens."""
        tokens = []
        pos = 0
        length = len(text)
        while pos < length:
            c = text[pos]
            column = column_offset + pos + 1
            if c in BLANKS:
                pos += 1
            elif c in DIGITS:
                start = pos
                while pos < length and text[pos] in DIGITS:
                    pos += 1
                tokens.append(Token(tk.NUMBER, float(int(text[start:pos])), column))
            elif c == tk.QUOTE:
                # unterminated string runs to end of line
                end = text.find(tk.QUOTE, pos + 1)
                if end == -1:
                    tokens.append(Token(tk.STRING, text[pos+1:], column))
                    pos = length
                else:
                    tokens.append(Token(tk.STRING, text[pos+1:end], column))
                    pos = end + 1
            elif c in LETTERS:
                start = pos
                while pos < length and text[pos] in NAME_CHARS:
                    pos += 1
                word = text[start:pos]
                if pos < length and text[pos] == tk.STR_SIGIL:
                    pos += 1
                    if word in tk.KEYWORDS:
                        raise error.BASICSyntaxError(
                            line_number, column, u'keyword %s used as variable name' % (word,)
                        )
                    tokens.append(Token(tk.NAME, word + tk.STR_SIGIL, column))
                elif word in tk.KEYWORDS:
                    tokens.append(Token(tk.KEYWORD, word, column))
                    if word == tk.REM:
                        # the rest of the line is an opaque comment
                        tokens.append(Token(tk.COMMENT, text[pos:].strip(), column_offset + pos + 1))
                        pos = length
                else:
                    tokens.append(Token(tk.NAME, word, column))
            elif c in tk.PUNCTUATION_CHARS:
                tokens.append(Token(tk.PUNCTUATION, c, column))
                pos += 1
            else:
                for op in tk.OPERATORS:
                    if text.startswith(op, pos):
                        tokens.append(Token(tk.OPERATOR, op, column))
                        pos += len(op)
                        break
                else:
                    raise error.BASICSyntaxError(
                        line_number, column, u'unexpected character %r' % (c,)
                    )
        return tokens

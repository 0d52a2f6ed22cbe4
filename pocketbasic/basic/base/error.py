"""
PocketBASIC - error.py
Error constants and exceptions

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

# error constants
NEXT_WITHOUT_FOR = 1
SYNTAX_ERROR = 2
RETURN_WITHOUT_GOSUB = 3
OUT_OF_DATA = 4
ILLEGAL_FUNCTION_CALL = 5
OVERFLOW = 6
UNDEFINED_LINE_NUMBER = 8
SUBSCRIPT_OUT_OF_RANGE = 9
DUPLICATE_DEFINITION = 10
DIVISION_BY_ZERO = 11
TYPE_MISMATCH = 13
INPUT_PAST_END = 62
UNDECLARED_ARRAY = 80

# shorthand
STX = SYNTAX_ERROR
IFC = ILLEGAL_FUNCTION_CALL


class Interrupt(Exception):
    """Base type for exceptions."""

    message = u''

    def __repr__(self):
        """String representation of exception."""
        return self.message

    def get_message(self, line_number=None):
        """Error message."""
        if line_number is not None:
            return u'%s in %i' % (self.message, line_number)
        else:
            return self.message


class Break(Interrupt):
    """Program interrupt."""

    message = u'Break'


class BASICError(Interrupt):
    """Runtime error."""

    default_message = u'Unprintable error'
    messages = {
        1: u'NEXT without FOR',
        2: u'Syntax error',
        3: u'RETURN without GOSUB',
        4: u'Out of DATA',
        5: u'Illegal function call',
        6: u'Overflow',
        8: u'Undefined line number',
        9: u'Subscript out of range',
        10: u'Duplicate Definition',
        11: u'Division by zero',
        13: u'Type mismatch',
        62: u'Input past end',
        80: u'Undeclared array',
    }
    # names used by hosts to classify faults
    kinds = {
        1: u'NextWithoutFor',
        2: u'SyntaxError',
        3: u'ReturnWithoutGosub',
        4: u'DataExhausted',
        5: u'IllegalFunctionCall',
        6: u'Overflow',
        8: u'UndefinedLine',
        9: u'ArraySubscriptOutOfRange',
        10: u'DuplicateDefinition',
        11: u'DivisionByZero',
        13: u'TypeMismatch',
        62: u'InputPastEnd',
        80: u'UndeclaredArray',
    }

    def __init__(self, value, line=None, detail=None):
        """Initialise error."""
        Interrupt.__init__(self)
        self.err = value
        self.line = line
        self.detail = detail
        try:
            self.message = self.messages[self.err]
        except KeyError:
            self.message = self.default_message

    def __str__(self):
        """Message including line number, if known."""
        return self.get_message(self.line)

    @property
    def kind(self):
        """Name of the error class."""
        return self.kinds.get(self.err, u'Error')

    def get_message(self, line_number=None):
        """Error message, with detail if we have it."""
        message = Interrupt.get_message(self, line_number)
        if self.detail:
            return u'%s: %s' % (message, self.detail)
        return message


class BASICSyntaxError(BASICError):
    """Parse-time error, located by line and column."""

    def __init__(self, line=None, column=None, detail=None):
        """Initialise syntax error."""
        BASICError.__init__(self, SYNTAX_ERROR, line, detail)
        self.column = column

    def get_message(self, line_number=None):
        """Error message with column."""
        if line_number is None:
            message = self.message
        elif self.column is None:
            message = u'%s in %i' % (self.message, line_number)
        else:
            message = u'%s in %i:%i' % (self.message, line_number, self.column)
        if self.detail:
            return u'%s: %s' % (message, self.detail)
        return message


def range_check(lower, upper, *allvars):
    """Check if all variables in list are within the given inclusive range."""
    for v in allvars:
        if v is not None and not (lower <= v <= upper):
            raise BASICError(IFC)

def throw_if(bool, err=IFC):
    """Raise IFC if condition is met."""
    if bool:
        raise BASICError(err)

def range_check_err(lower, upper, v, err=IFC):
    """Check if variable is within the given inclusive range."""
    if v is not None and not (lower <= v <= upper):
        raise BASICError(err)

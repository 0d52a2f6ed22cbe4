"""
PocketBASIC - values.py
Types, values and operators

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from ..base import error
from . import numbers
from . import strings


# BASIC type sigils:
# Number - no sigil, floating point
# String ($)
NUM = numbers.Number.sigil
STR = strings.String.sigil

TYPE_TO_CLASS = {
    NUM: numbers.Number,
    STR: strings.String,
}

TRUE = 1.
FALSE = 0.


def type_of(name):
    """Return the type sigil for a variable name."""
    return STR if name[-1:] == STR else NUM

def new(sigil):
    """Return a new zero value for the given type."""
    return TYPE_TO_CLASS[sigil]()

def from_value(python_val):
    """Convert a Python value to a BASIC value."""
    if isinstance(python_val, numbers.Value):
        return python_val
    elif isinstance(python_val, bytes):
        return strings.String(python_val.decode('ascii', 'replace'))
    elif isinstance(python_val, str):
        return strings.String(python_val)
    elif isinstance(python_val, bool):
        return from_bool(python_val)
    elif isinstance(python_val, (int, float)):
        return numbers.Number().from_value(python_val)
    raise TypeError('Cannot convert %s to a BASIC value' % type(python_val))

def from_bool(boo):
    """Convert Python boolean to Number."""
    return numbers.Number(TRUE if boo else FALSE)

def from_repr(word):
    """Convert user input to a Number; raise Type mismatch if not numeric."""
    word = word.strip()
    try:
        return numbers.Number().from_value(float(word))
    except ValueError:
        raise error.BASICError(error.TYPE_MISMATCH, detail=u'not a number: %r' % (word,))


###############################################################################
# type checks

def check_value(inp):
    """Check if value is of Value type."""
    if not isinstance(inp, numbers.Value):
        raise TypeError('%s is not of class Value' % type(inp))

def pass_string(inp, err=error.TYPE_MISMATCH):
    """Check if variable is String-valued."""
    if not isinstance(inp, strings.String):
        check_value(inp)
        raise error.BASICError(err)
    return inp

def pass_number(inp, err=error.TYPE_MISMATCH):
    """Check if variable is numeric."""
    if not isinstance(inp, numbers.Number):
        check_value(inp)
        raise error.BASICError(err)
    return inp

def pass_type(sigil, inp):
    """Check if value has the type indicated by the sigil."""
    if sigil == STR:
        return pass_string(inp)
    return pass_number(inp)

def match_types(left, right):
    """Check that both operands have the same type."""
    check_value(left)
    check_value(right)
    if type(left) != type(right):
        raise error.BASICError(error.TYPE_MISMATCH)
    return left, right

def to_bool(inp):
    """Truth value of a condition; strings are not valid conditions."""
    return not pass_number(inp).is_zero()

def to_int(inp):
    """Truncate a Number to a Python int."""
    return pass_number(inp).to_int()


###############################################################################
# arithmetic

def add(left, right):
    """Add two numbers or concatenate two strings."""
    left, right = match_types(left, right)
    return left.add(right)

def sub(left, right):
    """Subtract two numbers."""
    return pass_number(left).sub(pass_number(right))

def mul(left, right):
    """Multiply two numbers."""
    return pass_number(left).mul(pass_number(right))

def div(left, right):
    """Divide two numbers."""
    return pass_number(left).div(pass_number(right))

def neg(inp):
    """Negation (unary -)."""
    return pass_number(inp).neg()

def pos(inp):
    """Unary plus."""
    return pass_number(inp)


###############################################################################
# comparisons

def _bool_eq(left, right):
    """Return true if left == right, false otherwise."""
    left, right = match_types(left, right)
    return left.eq(right)

def _bool_gt(left, right):
    """Ordering: return true if left > right, false otherwise."""
    left, right = match_types(left, right)
    return left.gt(right)

def eq(left, right):
    """Return 1 if left == right, 0 otherwise."""
    return from_bool(_bool_eq(left, right))

def neq(left, right):
    """Return 1 if left != right, 0 otherwise."""
    return from_bool(not _bool_eq(left, right))

def gt(left, right):
    """Ordering: return 1 if left > right, 0 otherwise."""
    return from_bool(_bool_gt(left, right))

def gte(left, right):
    """Ordering: return 1 if left >= right, 0 otherwise."""
    return from_bool(not _bool_gt(right, left))

def lte(left, right):
    """Ordering: return 1 if left <= right, 0 otherwise."""
    return from_bool(not _bool_gt(left, right))

def lt(left, right):
    """Ordering: return 1 if left < right, 0 otherwise."""
    return from_bool(_bool_gt(right, left))


###############################################################################
# logical operators

def not_(num):
    """Logical NOT."""
    return from_bool(not to_bool(num))

def and_(left, right):
    """Logical AND."""
    left, right = to_bool(left), to_bool(right)
    return from_bool(left and right)

def or_(left, right):
    """Logical OR."""
    left, right = to_bool(left), to_bool(right)
    return from_bool(left or right)


###############################################################################
# representation

def to_repr(inp):
    """Convert a value to its display representation."""
    check_value(inp)
    return inp.to_str()

"""
PocketBASIC - nodes.py
Expression and statement trees

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from collections import namedtuple


###############################################################################
# expressions

NumberLiteral = namedtuple('NumberLiteral', ['value'])
StringLiteral = namedtuple('StringLiteral', ['value'])
# is_string is True for names with the $ sigil
Variable = namedtuple('Variable', ['name', 'is_string'])
ArrayElement = namedtuple('ArrayElement', ['name', 'is_string', 'index'])
# op is one of the operator tokens, or NOT
UnaryOp = namedtuple('UnaryOp', ['op', 'operand'])
BinaryOp = namedtuple('BinaryOp', ['op', 'left', 'right'])

LVALUES = (Variable, ArrayElement)


###############################################################################
# statements

# target is a Variable or ArrayElement
Let = namedtuple('Let', ['target', 'expression'])
Print = namedtuple('Print', ['items'])
Pause = namedtuple('Pause', ['items'])
# prompt may be None
Input = namedtuple('Input', ['prompt', 'target'])
# duration may be None
Wait = namedtuple('Wait', ['duration'])
# then_branch and else_branch are single statements; else_branch may be None
If = namedtuple('If', ['condition', 'then_branch', 'else_branch'])
# step may be None
For = namedtuple('For', ['name', 'start', 'limit', 'step'])
# name may be None
Next = namedtuple('Next', ['name'])
Goto = namedtuple('Goto', ['line'])
Gosub = namedtuple('Gosub', ['line'])
Return = namedtuple('Return', [])
End = namedtuple('End', [])
Rem = namedtuple('Rem', ['text'])
# items are python floats and strs
Data = namedtuple('Data', ['items'])
Read = namedtuple('Read', ['targets'])
# line may be None
Restore = namedtuple('Restore', ['line'])
Poke = namedtuple('Poke', ['address', 'values'])
Call = namedtuple('Call', ['address'])
# length is None for numeric arrays and undeclared string lengths
Dim = namedtuple('Dim', ['name', 'is_string', 'size', 'length'])

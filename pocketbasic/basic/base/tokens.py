"""
PocketBASIC - tokens.py
Token kinds, keywords and operator symbols

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import string
from collections import namedtuple


# allowable as chars in line number, name
DIGITS = string.digits
LETTERS = string.ascii_uppercase
NAME_CHARS = LETTERS + DIGITS
BLANKS = u' \t'

# string sigil
STR_SIGIL = u'$'
QUOTE = u'"'


# token kinds
NUMBER = u'number'
STRING = u'string'
NAME = u'identifier'
KEYWORD = u'keyword'
OPERATOR = u'operator'
PUNCTUATION = u'punctuation'
COMMENT = u'comment'

# one lexical unit; column is 1-based within the source line
Token = namedtuple('Token', ['kind', 'value', 'column'])


# keywords
REM = u'REM'
LET = u'LET'
PRINT = u'PRINT'
PAUSE = u'PAUSE'
INPUT = u'INPUT'
WAIT = u'WAIT'
IF = u'IF'
THEN = u'THEN'
ELSE = u'ELSE'
FOR = u'FOR'
TO = u'TO'
STEP = u'STEP'
NEXT = u'NEXT'
GOTO = u'GOTO'
GOSUB = u'GOSUB'
RETURN = u'RETURN'
END = u'END'
DATA = u'DATA'
READ = u'READ'
RESTORE = u'RESTORE'
POKE = u'POKE'
CALL = u'CALL'
DIM = u'DIM'
AND = u'AND'
OR = u'OR'
NOT = u'NOT'

KEYWORDS = frozenset((
    REM, LET, PRINT, PAUSE, INPUT, WAIT, IF, THEN, ELSE, FOR, TO, STEP, NEXT,
    GOTO, GOSUB, RETURN, END, DATA, READ, RESTORE, POKE, CALL, DIM, AND, OR, NOT,
))

# operators
O_EQ = u'='
O_NE = u'<>'
O_LT = u'<'
O_GT = u'>'
O_LE = u'<='
O_GE = u'>='
O_PLUS = u'+'
O_MINUS = u'-'
O_TIMES = u'*'
O_DIV = u'/'

# two-character operators must be tried before their one-character prefixes
OPERATORS = (O_NE, O_LE, O_GE, O_EQ, O_LT, O_GT, O_PLUS, O_MINUS, O_TIMES, O_DIV)

# punctuation
LPAREN = u'('
RPAREN = u')'
COMMA = u','
SEMICOLON = u';'
COLON = u':'

PUNCTUATION_CHARS = (LPAREN, RPAREN, COMMA, SEMICOLON, COLON)

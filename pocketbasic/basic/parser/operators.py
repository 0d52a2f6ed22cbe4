"""
PocketBASIC - operators.py
Numeric and string operators

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from ..base import tokens as tk
from .. import values


# binding levels, loosest first
OR_LEVEL = 1
AND_LEVEL = 2
NOT_LEVEL = 3
COMPARISON_LEVEL = 4
ADDITIVE_LEVEL = 5
MULTIPLICATIVE_LEVEL = 6
UNARY_LEVEL = 7
TERM_LEVEL = 8

COMPARISON = (tk.O_EQ, tk.O_NE, tk.O_LT, tk.O_GT, tk.O_LE, tk.O_GE)
ADDITIVE = (tk.O_PLUS, tk.O_MINUS)
MULTIPLICATIVE = (tk.O_TIMES, tk.O_DIV)

# operators and precedence
# key is tuple (token, nargs)
PRECEDENCE = {
    (tk.O_PLUS, 1): UNARY_LEVEL,
    (tk.O_MINUS, 1): UNARY_LEVEL,
    (tk.O_TIMES, 2): MULTIPLICATIVE_LEVEL,
    (tk.O_DIV, 2): MULTIPLICATIVE_LEVEL,
    (tk.O_PLUS, 2): ADDITIVE_LEVEL,
    (tk.O_MINUS, 2): ADDITIVE_LEVEL,
    (tk.O_EQ, 2): COMPARISON_LEVEL,
    (tk.O_NE, 2): COMPARISON_LEVEL,
    (tk.O_LT, 2): COMPARISON_LEVEL,
    (tk.O_GT, 2): COMPARISON_LEVEL,
    (tk.O_LE, 2): COMPARISON_LEVEL,
    (tk.O_GE, 2): COMPARISON_LEVEL,
    (tk.NOT, 1): NOT_LEVEL,
    (tk.AND, 2): AND_LEVEL,
    (tk.OR, 2): OR_LEVEL,
}

# unary operators
UNARY = {
    tk.O_MINUS: values.neg,
    tk.O_PLUS: values.pos,
    tk.NOT: values.not_,
}

# binary operators
BINARY = {
    tk.O_TIMES: values.mul,
    tk.O_DIV: values.div,
    tk.O_PLUS: values.add,
    tk.O_MINUS: values.sub,
    tk.O_GT: values.gt,
    tk.O_EQ: values.eq,
    tk.O_LT: values.lt,
    tk.O_GE: values.gte,
    tk.O_LE: values.lte,
    tk.O_NE: values.neq,
    tk.AND: values.and_,
    tk.OR: values.or_,
}

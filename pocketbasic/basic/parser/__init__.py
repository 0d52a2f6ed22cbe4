"""
PocketBASIC - parser package
Expression and statement parsers

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from .statements import Parser
from .expressions import ExpressionParser

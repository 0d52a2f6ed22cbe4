"""
PocketBASIC - values package
Types, values and operators

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from . import numbers
from . import strings
from . import values

from .numbers import *
from .strings import *
from .values import *

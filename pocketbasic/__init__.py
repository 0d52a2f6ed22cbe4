"""
PocketBASIC - Sharp PC-1500 / TRS-80 PC-2 BASIC interpreter

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from .basic import __version__
from .basic import NAME, VERSION, AUTHOR, COPYRIGHT
from .basic import Session
from .main import main

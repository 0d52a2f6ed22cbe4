"""
PocketBASIC - memory package
Variable storage

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from .memory import Memory

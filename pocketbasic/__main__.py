"""
PocketBASIC - Sharp PC-1500 / TRS-80 PC-2 BASIC interpreter

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import sys

from .main import main

sys.exit(main())

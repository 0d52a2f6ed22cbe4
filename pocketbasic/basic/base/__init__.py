"""
PocketBASIC - base
Error definitions, token constants and token streams

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

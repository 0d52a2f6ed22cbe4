"""
PocketBASIC - data
Application metadata, usage text and bundled programs

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import json
from importlib import resources

from .programs import PROGRAMS, read_program_file

# copyright metadata
_METADATA = json.loads(resources.files(__package__).joinpath('meta.json').read_bytes())
NAME, VERSION, AUTHOR, COPYRIGHT = (_METADATA[_key] for _key in (
    'name', 'version', 'author', 'copyright'
))


def read_usage():
    """Read the command-line usage text."""
    return resources.files(__package__).joinpath('USAGE.txt').read_text(
        encoding='utf-8', errors='replace'
    )

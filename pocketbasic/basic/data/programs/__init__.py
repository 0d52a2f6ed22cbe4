"""
PocketBASIC - bundled programs

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from importlib import resources


class ResourceFailed(Exception):
    """Failed to load resource"""

    def __init__(self, name=u''):
        Exception.__init__(self)
        self._message = u'Failed to load {0}'.format(name)

    def __repr__(self):
        return self._message

    __str__ = __repr__


def read_program_file(name):
    """Read a bundled BASIC program file as text."""
    try:
        return resources.files(__package__).joinpath(name).read_text(encoding='ascii')
    except EnvironmentError:
        raise ResourceFailed(name)


PROGRAMS = tuple(sorted(
    entry.name
    for entry in resources.files(__package__).iterdir()
    if entry.name.lower().endswith(u'.bas')
))

"""
PocketBASIC tests.utils
Shared testing utilities

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import unittest
import os
import shutil
from unittest import main as run_tests

from pocketbasic.basic import devices
from pocketbasic.basic.base import error


class TestCase(unittest.TestCase):
    """Base class for test cases."""

    tag = u'unit'

    def __init__(self, *args, **kwargs):
        """Define output dir name."""
        unittest.TestCase.__init__(self, *args, **kwargs)
        here = os.path.dirname(os.path.abspath(__file__))
        self._dir = os.path.join(here, u'output', self.tag)

    def setUp(self):
        """Ensure output directory exists and is empty."""
        try:
            shutil.rmtree(self._dir)
        except EnvironmentError:
            pass
        if not os.path.isdir(self._dir):
            os.makedirs(self._dir)

    def output_path(self, *names):
        """Output file name."""
        return os.path.join(self._dir, *names)


class RecordingTerminal(devices.Terminal):
    """Terminal that records output and replays scripted input lines."""

    def __init__(self, lines=(), on_read=None):
        self.output = []
        self.holds = 0
        self._lines = list(lines)
        self._on_read = on_read

    def write(self, text):
        self.output.append(text)

    def read_line(self):
        if self._on_read is not None:
            self._on_read()
        if not self._lines:
            raise error.BASICError(error.INPUT_PAST_END)
        return self._lines.pop(0)

    def hold(self):
        self.holds += 1

    @property
    def text(self):
        """All output joined."""
        return u''.join(self.output)


class FakeClock(object):
    """Clock that records waits instead of sleeping."""

    def __init__(self, on_wait=None):
        self.waits = []
        self._on_wait = on_wait

    def wait(self, duration):
        if self._on_wait is not None:
            self._on_wait()
        self.waits.append(duration)


class RecordingMachine(object):
    """Memory/call device that records POKE and CALL."""

    def __init__(self):
        self.pokes = []
        self.calls = []

    def poke(self, address, data):
        self.pokes.append((address, data))

    def call(self, address):
        self.calls.append(address)

"""
PocketBASIC - devices.py
Terminal, clock and machine devices used by the interpreter

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import sys
import time
import logging
import binascii

from .base import error


# seconds the display is held after PAUSE on the PC-1500
PAUSE_TIME = 0.85


class Terminal(object):
    """Display and keyboard interface."""

    def write(self, text):
        """Write text to the display."""
        raise NotImplementedError()

    def read_line(self):
        """Read one line of input, blocking."""
        raise NotImplementedError()

    def hold(self):
        """Hold the display after PAUSE."""


class StreamTerminal(Terminal):
    """Terminal on Python text streams."""

    def __init__(self, input_stream=None, output_stream=None, clock=None, pause_time=PAUSE_TIME):
        """Initialise the terminal; streams default to standard i/o."""
        self._input_stream = input_stream
        self._output_stream = output_stream
        self._clock = clock
        self._pause_time = pause_time

    def write(self, text):
        """Write text to the output stream."""
        stream = self._output_stream or sys.stdout
        stream.write(text)
        stream.flush()

    def read_line(self):
        """Read one line from the input stream."""
        stream = self._input_stream or sys.stdin
        line = stream.readline()
        if not line:
            raise error.BASICError(error.INPUT_PAST_END)
        return line.rstrip(u'\r\n')

    def hold(self):
        """Hold the display by waiting on the clock."""
        if self._clock is not None:
            self._clock.wait(self._pause_time)


class Clock(object):
    """Timer for WAIT and PAUSE."""

    def __init__(self, delay=True):
        """Initialise clock; with delay=False, waits return at once."""
        self._delay = delay

    def wait(self, duration):
        """Block for duration seconds; None means no fixed delay."""
        if duration is None or not self._delay:
            return
        time.sleep(duration)


class Machine(object):
    """Memory and machine-code call device. Accepts and ignores POKE and CALL."""

    def poke(self, address, data):
        """POKE: write bytes at an address."""
        logging.warning(
            'POKE statement not implemented: &%04X <- %s',
            address, binascii.hexlify(bytes(data)).decode('ascii')
        )

    def call(self, address):
        """CALL: run machine code at an address."""
        logging.warning('CALL statement not implemented: &%04X', address)

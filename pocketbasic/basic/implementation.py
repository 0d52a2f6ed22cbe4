"""
PocketBASIC - implementation.py
Top-level implementation and wiring of interpreter components

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import logging

from .base import error
from . import devices
from . import interpreter
from . import values
from .tokeniser import Tokeniser
from .parser import Parser
from .program import Program
from .memory import Memory
from .lister import Lister
from .semantics import SemanticChecker


class Implementation(object):
    """Interpreter session implementation."""

    def __init__(
            self, terminal=None, clock=None, machine=None,
            input_stream=None, output_stream=None,
            wait_unit=interpreter.WAIT_UNIT, pause_time=devices.PAUSE_TIME, delay=True
        ):
        """Initialise the interpreter session."""
        # device hooks
        self.clock = clock if clock is not None else devices.Clock(delay)
        if terminal is None:
            terminal = devices.StreamTerminal(input_stream, output_stream, self.clock, pause_time)
        self.terminal = terminal
        self.machine = machine if machine is not None else devices.Machine()
        self._wait_unit = wait_unit
        self._step_hook = None
        # syntax and listing
        self.tokeniser = Tokeniser()
        self.parser = Parser()
        self.lister = Lister()
        # empty program
        self._set_program(Program(self.tokeniser, self.parser))

    def _set_program(self, program):
        """Make a parsed program current, with fresh variables and stacks."""
        self.program = program
        self.memory = Memory()
        self.interpreter = interpreter.Interpreter(
            self.program, self.memory, self.terminal, self.clock, self.machine,
            wait_unit=self._wait_unit
        )
        if self._step_hook is not None:
            self.interpreter.step_hook = self._step_hook

    def set_hook(self, step_function):
        """Call a function on every step, also after a new program is loaded."""
        self._step_hook = step_function
        self.interpreter.step_hook = step_function

    def load(self, source):
        """Parse a complete program; on error the current program is kept."""
        program = Program(self.tokeniser, self.parser)
        program.load(source)
        self._set_program(program)

    def run(self):
        """Run the program from the start; report faults on the terminal."""
        self.interpreter.reset()
        try:
            self.interpreter.run()
        except error.BASICError as e:
            self.terminal.write(e.get_message(e.line) + u'\n')
        return self.interpreter.state

    def execute(self, source):
        """Load and run a program."""
        try:
            self.load(source)
        except error.BASICSyntaxError as e:
            logging.info('Program not loaded: %s', e)
            self.terminal.write(e.get_message(e.line) + u'\n')
            return None
        return self.run()

    def evaluate(self, expression):
        """Evaluate a BASIC expression to a Python value."""
        tokens = self.tokeniser.tokenise_line(expression)
        expr = self.parser.parse_expression_line(tokens)
        return self.interpreter.evaluate(expr).to_value()

    def get_variable(self, name):
        """Get the Python value of a variable, or a list for NAME()."""
        if name.endswith(u'()'):
            return self.memory.array_to_list(name[:-2])
        return self.memory.get_scalar(name).to_value()

    def set_variable(self, name, value):
        """Set a variable from a Python value, or an array from a list for NAME()."""
        if name.endswith(u'()'):
            self.memory.array_from_list(name[:-2], value)
        else:
            self.memory.set_scalar(name, values.from_value(value))

    def list_program(self):
        """Plain-text listing of the program."""
        return u'\n'.join(self.lister.list_program(self.program))

    def check(self):
        """Static diagnostics for the program."""
        return SemanticChecker(self.program).check()

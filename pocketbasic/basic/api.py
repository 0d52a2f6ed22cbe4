"""
PocketBASIC - api.py
Session API

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from .base import error
from . import implementation


class Session(object):
    """Public API to BASIC session."""

    def __init__(self, **kwargs):
        """Set up session object."""
        self._kwargs = kwargs
        self._impl = None

    def __enter__(self):
        """Context guard."""
        return self

    def __exit__(self, ex_type, ex_val, tb):
        """Context guard."""
        self.close()
        # catch Break events
        if ex_type is error.Break:
            return True

    def start(self):
        """Start the session."""
        if not self._impl:
            self._impl = implementation.Implementation(**self._kwargs)
            return True
        return False

    def load(self, source):
        """Load program text; raises BASICSyntaxError if any line is malformed."""
        self.start()
        self._impl.load(source)

    def run(self):
        """Run the loaded program; return the final engine state."""
        self.start()
        return self._impl.run()

    def execute(self, source):
        """Load and run program text; syntax errors are reported on the terminal."""
        self.start()
        return self._impl.execute(source)

    def evaluate(self, expression):
        """Evaluate a BASIC expression."""
        self.start()
        return self._impl.evaluate(expression)

    def set_variable(self, name, value):
        """Set a variable in memory."""
        self.start()
        self._impl.set_variable(name, value)

    def get_variable(self, name):
        """Get a variable in memory."""
        self.start()
        return self._impl.get_variable(name)

    def list_program(self):
        """Get a plain-text listing of the program."""
        self.start()
        return self._impl.list_program()

    def check(self):
        """Get static diagnostics for the program."""
        self.start()
        return self._impl.check()

    def stop(self):
        """Request the running program to halt before its next statement."""
        self.start()
        self._impl.interpreter.stop()

    def close(self):
        """Close the session."""
        self._impl = None

    @property
    def state(self):
        """Engine state."""
        self.start()
        return self._impl.interpreter.state

    @property
    def halt_reason(self):
        """Reason the engine halted, if it did."""
        self.start()
        return self._impl.interpreter.halt_reason

    @property
    def error(self):
        """Fault that stopped the engine, if any."""
        self.start()
        return self._impl.interpreter.error

    @property
    def info(self):
        """Get a session information object."""
        self.start()
        return SessionInfo(self)

    def set_hook(self, step_function):
        """Set function to be called on interpreter step."""
        self.start()
        self._impl.set_hook(step_function)


class SessionInfo(object):
    """Retrieve information about current session."""

    def __init__(self, session):
        """Initialise the SessionInfo object."""
        self._session = session
        self._impl = session._impl

    def repr_variables(self):
        """Get a representation of all variables."""
        return repr(self._impl.memory)

    def repr_program(self):
        """Get a representation of the parsed program."""
        return repr(self._impl.program)

    def repr_data(self):
        """Get a representation of the DATA pool."""
        return repr(self._impl.interpreter.data_pool)

    def get_current_line(self):
        """Line number of the statement being executed."""
        return self._impl.interpreter.current_line

    def get_current_code(self):
        """Listing of the line being executed."""
        line_number = self._impl.interpreter.current_line
        if line_number is None:
            return u''
        return self._impl.lister.list_line(
            line_number, self._impl.program.get_statements(line_number)
        )

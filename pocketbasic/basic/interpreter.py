"""
PocketBASIC - interpreter.py
BASIC interpreter

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import logging
from collections import namedtuple

from .base import error
from .parser import nodes
from .datapool import DataPool
from .evaluator import Evaluator
from . import values


# engine states
RUNNING = u'running'
INPUT_WAIT = u'suspended-on-input'
TIMER_WAIT = u'suspended-on-wait'
HALTED = u'halted'
FAULTED = u'faulted'

# reasons for halting
END_OF_PROGRAM = u'end of program'
EXPLICIT_END = u'explicit end'
BREAK = u'break'

# seconds per WAIT tick
WAIT_UNIT = 1. / 64

# loop state saved by FOR; resume is the position after the FOR statement
ForFrame = namedtuple('ForFrame', ['name', 'limit', 'step', 'resume'])


class Interpreter(object):
    """BASIC interpreter."""

    def __init__(
            self, program, memory, terminal, clock, machine, wait_unit=WAIT_UNIT
        ):
        """Initialise interpreter."""
        self._program = program
        self._memory = memory
        self._terminal = terminal
        self._clock = clock
        self._machine = machine
        self._wait_unit = wait_unit
        self._evaluator = Evaluator(memory)
        self._data = DataPool(program)
        self._init_statements()
        # additional operations on program step (debugging)
        self.step_hook = lambda line_number, index: None
        self.reset()

    def _init_statements(self):
        """Initialise statement callbacks."""
        self._callbacks = {
            nodes.Let: self.let_,
            nodes.Print: self.print_,
            nodes.Pause: self.pause_,
            nodes.Input: self.input_,
            nodes.Wait: self.wait_,
            nodes.If: self.if_,
            nodes.For: self.for_,
            nodes.Next: self.next_,
            nodes.Goto: self.goto_,
            nodes.Gosub: self.gosub_,
            nodes.Return: self.return_,
            nodes.End: self.end_,
            nodes.Rem: self.rem_,
            nodes.Data: self.data_,
            nodes.Read: self.read_,
            nodes.Restore: self.restore_,
            nodes.Poke: self.poke_,
            nodes.Call: self.call_,
            nodes.Dim: self.dim_,
        }

    def reset(self):
        """Initialise the stacks and pointers for a new run."""
        self.gosub_stack = []
        self.for_stack = []
        self._data.restore()
        self._next = None
        self._stop_requested = False
        self.current_line = None
        self.error = None
        self.halt_reason = None
        first_line = self._program.first_line()
        if first_line is None:
            self.pointer = None
            self._halt(END_OF_PROGRAM)
        else:
            self.pointer = (first_line, 0)
            self.state = RUNNING

    @property
    def data_pool(self):
        """The program's DATA items and read pointer."""
        return self._data

    ###########################################################################
    # main loop

    def stop(self):
        """Request a halt before the next statement."""
        self._stop_requested = True

    def run(self):
        """Execute statements until the program halts or faults."""
        logging.debug('Running from %s', self.pointer)
        while self.step():
            pass
        return self.state

    def step(self):
        """Execute one statement. Return True if the engine is still running."""
        if self.state != RUNNING:
            return False
        if self._stop_requested:
            self._halt(BREAK)
            return False
        line_number, index = self.pointer
        self.current_line = line_number
        statement = self._program.get_statements(line_number)[index]
        # default: continue with the next statement in line order
        self._next = self._program.following(line_number, index)
        self.step_hook(line_number, index)
        try:
            self.execute(statement)
        except error.Break:
            self._halt(BREAK)
            return False
        except error.BASICError as e:
            self._fault(e, line_number)
            raise
        if self.state == RUNNING:
            if self._next is None:
                self._halt(END_OF_PROGRAM)
            else:
                self.pointer = self._next
        return self.state == RUNNING

    def execute(self, statement):
        """Execute a single statement."""
        self._callbacks[type(statement)](statement)

    def evaluate(self, expr):
        """Evaluate an expression tree against the current variables."""
        return self._evaluator.evaluate(expr)

    def _halt(self, reason):
        """Enter the Halted state."""
        self.state = HALTED
        self.halt_reason = reason
        logging.debug('Program halted: %s', reason)

    def _fault(self, e, line_number):
        """Enter the Faulted state."""
        if e.line is None:
            e.line = line_number
        self.state = FAULTED
        self.error = e
        logging.info('Program faulted: %s', e.get_message(e.line))

    ###########################################################################
    # assignment and i/o

    def let_(self, statement):
        """LET: assign a value to a variable."""
        value = self.evaluate(statement.expression)
        self._evaluator.assign(statement.target, value)

    def _render(self, items):
        """Evaluate and join expressions for the display."""
        return u''.join(values.to_repr(self.evaluate(item)) for item in items)

    def print_(self, statement):
        """PRINT: write expressions to the terminal."""
        self._terminal.write(self._render(statement.items) + u'\n')

    def pause_(self, statement):
        """PAUSE: write expressions to the terminal and hold the display."""
        self._terminal.write(self._render(statement.items) + u'\n')
        self._terminal.hold()

    def input_(self, statement):
        """INPUT: read a value from the terminal."""
        if statement.prompt is not None:
            self._terminal.write(values.to_repr(self.evaluate(statement.prompt)))
        self.state = INPUT_WAIT
        try:
            text = self._terminal.read_line()
        finally:
            self.state = RUNNING
        if statement.target.is_string:
            value = values.String(text)
        else:
            value = values.from_repr(text)
        self._evaluator.assign(statement.target, value)

    def wait_(self, statement):
        """WAIT: pause execution."""
        duration = None
        if statement.duration is not None:
            ticks = values.pass_number(self.evaluate(statement.duration)).to_value()
            error.throw_if(ticks < 0)
            duration = ticks * self._wait_unit
        self.state = TIMER_WAIT
        try:
            self._clock.wait(duration)
        finally:
            self.state = RUNNING

    ###########################################################################
    # branches

    def if_(self, statement):
        """IF: execute one of the branch statements."""
        if values.to_bool(self.evaluate(statement.condition)):
            branch = statement.then_branch
        else:
            branch = statement.else_branch
        if branch is not None:
            self.execute(branch)

    def goto_(self, statement):
        """GOTO: jump to line number."""
        self._program.check_line(statement.line)
        self._next = (statement.line, 0)

    def gosub_(self, statement):
        """GOSUB: jump to subroutine."""
        self._program.check_line(statement.line)
        self.gosub_stack.append(self._next)
        self._next = (statement.line, 0)

    def return_(self, statement):
        """RETURN: resume after the last GOSUB."""
        try:
            self._next = self.gosub_stack.pop()
        except IndexError:
            raise error.BASICError(error.RETURN_WITHOUT_GOSUB)

    def end_(self, statement):
        """END: stop the program."""
        self._halt(EXPLICIT_END)

    ###########################################################################
    # loops

    def for_(self, statement):
        """FOR: initialise a loop."""
        start = values.pass_number(self.evaluate(statement.start))
        limit = values.pass_number(self.evaluate(statement.limit))
        if statement.step is None:
            step = values.Number(1)
        else:
            step = values.pass_number(self.evaluate(statement.step))
        # re-entering a loop drops its old frame and anything nested in it
        for depth in range(len(self.for_stack) - 1, -1, -1):
            if self.for_stack[depth].name == statement.name:
                del self.for_stack[depth:]
                break
        self._memory.set_scalar(statement.name, start)
        self.for_stack.append(ForFrame(statement.name, limit, step, self._next))

    def next_(self, statement):
        """NEXT: iterate the nearest loop for the variable."""
        depth = self._find_for_frame(statement.name)
        # drop inner loops we have jumped out of
        del self.for_stack[depth + 1:]
        frame = self.for_stack[-1]
        counter = self._memory.get_scalar(frame.name).add(frame.step)
        self._memory.set_scalar(frame.name, counter)
        if frame.step.sign() >= 0:
            loop_ends = counter.gt(frame.limit)
        else:
            loop_ends = frame.limit.gt(counter)
        if loop_ends:
            self.for_stack.pop()
        else:
            self._next = frame.resume

    def _find_for_frame(self, name):
        """Index of the nearest for-frame with the given variable."""
        for depth in range(len(self.for_stack) - 1, -1, -1):
            if name is None or self.for_stack[depth].name == name:
                return depth
        raise error.BASICError(error.NEXT_WITHOUT_FOR)

    ###########################################################################
    # DATA

    def rem_(self, statement):
        """REM: comment."""

    def data_(self, statement):
        """DATA: items were collected when the program was loaded."""

    def read_(self, statement):
        """READ: assign DATA items to variables."""
        for target in statement.targets:
            value = self._data.read()
            sigil = values.STR if target.is_string else values.NUM
            self._evaluator.assign(target, values.pass_type(sigil, value))

    def restore_(self, statement):
        """RESTORE: reset the DATA pointer."""
        if statement.line is not None:
            self._program.check_line(statement.line)
        self._data.restore(statement.line)

    ###########################################################################
    # arrays and machine

    def dim_(self, statement):
        """DIM: allocate an array."""
        self._memory.dim_array(statement.name, statement.size, statement.length)

    def poke_(self, statement):
        """POKE: pass bytes to the machine device."""
        address = values.to_int(self.evaluate(statement.address))
        error.range_check(0, 0xffff, address)
        data = [values.to_int(self.evaluate(value)) for value in statement.values]
        error.range_check(0, 0xff, *data)
        self._machine.poke(address, bytes(data))

    def call_(self, statement):
        """CALL: pass an address to the machine device."""
        address = values.to_int(self.evaluate(statement.address))
        error.range_check(0, 0xffff, address)
        self._machine.call(address)

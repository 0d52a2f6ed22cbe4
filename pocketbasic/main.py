"""
PocketBASIC - main.py
Command-line entry point

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import io
import sys
import logging
from contextlib import ExitStack

from . import config
from .basic import Session
from .basic import NAME, VERSION, COPYRIGHT
from .basic import interpreter
from .basic.base import error
from .basic.base import tokens as tk
from .basic.data import read_usage
from .basic.tokeniser import Tokeniser


def main(*arguments):
    """Initialise, parse arguments and perform requested operations; return exit status."""
    settings = config.Settings(arguments or None)
    if settings.version:
        # print version and exit
        _show_version(settings)
        return 0
    elif settings.help:
        # print usage and exit
        _show_usage()
        return 0
    if not settings.program:
        logging.error('No program file specified')
        _show_usage()
        return 2
    try:
        source = _read_program(settings.program)
    except EnvironmentError as e:
        logging.error('Could not read program file `%s`: %s', settings.program, e)
        return 2
    if settings.run_pass == u'lex':
        return _lex(source)
    return _run_session(settings, source)


def _show_usage():
    """Show usage description."""
    sys.stdout.write(read_usage())

def _show_version(settings):
    """Show version with optional debugging details."""
    if settings.debug:
        sys.stdout.write(u'%s %s\n%s\nPython %s\n' % (NAME, VERSION, COPYRIGHT, sys.version))
    else:
        sys.stdout.write(u'%s %s\n%s\n' % (NAME, VERSION, COPYRIGHT))

def _read_program(name):
    """Read program text from a file, or standard input if the name is `-`."""
    if name == u'-':
        return sys.stdin.read()
    with io.open(name, 'r', encoding='ascii', errors='replace') as f:
        return f.read()


def _lex(source):
    """Print the tokens of every program line."""
    tokeniser = Tokeniser()
    for index, text in enumerate(source.splitlines()):
        if not text.strip():
            continue
        try:
            line_number, rest, offset = tokeniser.split_line_number(text, index + 1)
            tokens = tokeniser.tokenise_line(rest, line_number, offset)
        except error.BASICSyntaxError as e:
            sys.stdout.write(e.get_message(e.line) + u'\n')
            return 1
        for token in tokens:
            sys.stdout.write(u'%d:%d %s %s\n' % (
                line_number, token.column, token.kind, _format_token_value(token)
            ))
    return 0

def _format_token_value(token):
    """Token value for the lexer listing."""
    if token.kind == tk.NUMBER:
        return u'%d' % (token.value,)
    elif token.kind in (tk.STRING, tk.COMMENT):
        return u'"%s"' % (token.value,)
    return token.value


def _run_session(settings, source):
    """Load the program and perform the requested pass."""
    input_name, output_name = settings.redirects
    with ExitStack() as stack:
        params = dict(settings.session_params)
        if input_name:
            params['input_stream'] = stack.enter_context(
                io.open(input_name, 'r', encoding='ascii', errors='replace')
            )
        if output_name:
            params['output_stream'] = stack.enter_context(
                io.open(output_name, 'w', encoding='ascii', errors='replace')
            )
        with Session(**params) as session:
            try:
                session.load(source)
            except error.BASICSyntaxError as e:
                sys.stdout.write(e.get_message(e.line) + u'\n')
                return 1
            if settings.run_pass == u'parse':
                listing = session.list_program()
                if listing:
                    sys.stdout.write(listing + u'\n')
                return 0
            elif settings.run_pass == u'check':
                diagnostics = session.check()
                for diagnostic in diagnostics:
                    sys.stdout.write(u'%d: %s\n' % diagnostic)
                return 1 if diagnostics else 0
            state = session.run()
            if state == interpreter.FAULTED:
                return 1
            return 0

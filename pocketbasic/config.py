"""
PocketBASIC - config.py
Configuration file and command-line options parser

(c) 2024 PocketBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import os
import io
import sys
import logging
import configparser
from collections import deque

from .basic import interpreter
from .basic import devices


# user configuration directory
USER_CONFIG_HOME = os.environ.get('XDG_CONFIG_HOME') or os.path.join(
    os.path.expanduser('~'), '.config'
)
USER_CONFIG_DIR = os.path.join(USER_CONFIG_HOME, u'pocketbasic')

# default config file name
CONFIG_NAME = u'pocketbasic.ini'
USER_CONFIG_PATH = os.path.join(USER_CONFIG_DIR, CONFIG_NAME)

# options section in config file
CONFIG_SECTION = u'pocketbasic'

# format for log files
LOGGING_FORMAT = u'[%(asctime)s.%(msecs)04d] %(levelname)s: %(message)s'
LOGGING_FORMATTER = logging.Formatter(fmt=LOGGING_FORMAT, datefmt=u'%H:%M:%S')

# bool strings
TRUES = (u'YES', u'TRUE', u'ON', u'1')
FALSES = (u'NO', u'FALSE', u'OFF', u'0')

# passes, in pipeline order
PASSES = (u'lex', u'parse', u'check', u'run')

# number of positional arguments
NUM_POSITIONAL = 1

ARGUMENTS = {
    u'pass': {u'type': u'string', u'default': u'run', u'choices': PASSES, },
    u'input': {u'type': u'string', u'default': u'', },
    u'output': {u'type': u'string', u'default': u'', },
    u'wait-unit': {u'type': u'float', u'default': interpreter.WAIT_UNIT, },
    u'pause-time': {u'type': u'float', u'default': devices.PAUSE_TIME, },
    u'no-delay': {u'type': u'bool', u'default': False, },
    u'config': {u'type': u'string', u'default': u'', },
    u'logfile': {u'type': u'string', u'default': u'', },
    u'debug': {u'type': u'bool', u'default': False, },
    u'version': {u'type': u'bool', u'default': False, },
    u'help': {u'type': u'bool', u'default': False, },
}

SHORT_ARGS = {
    u'd': u'debug',
    u'v': u'version',
    u'h': u'help',
}


class Lumberjack(object):
    """Logging manager."""

    def __init__(self):
        """Set up the global logger temporarily until we know the log stream."""
        # include messages from warnings module in the logs
        logging.captureWarnings(True)
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.INFO)
        # send to a buffer until we know where to log to
        self._logstream = io.StringIO()
        handler = logging.StreamHandler(self._logstream)
        handler.setFormatter(LOGGING_FORMATTER)
        root_logger.addHandler(handler)

    def reset(self):
        """Reset root logger."""
        root_logger = logging.getLogger()
        # remove all old handlers: temporary ones we set as well as any default ones
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
        return root_logger

    def prepare(self, logfile, debug):
        """Set up the global logger."""
        loglevel = logging.DEBUG if debug else logging.INFO
        root_logger = self.reset()
        root_logger.setLevel(loglevel)
        if logfile:
            logstream = io.open(logfile, 'w', encoding='utf_8', errors='replace')
        else:
            logstream = sys.stderr
        # write out cached logs
        logstream.write(self._logstream.getvalue())
        handler = logging.StreamHandler(logstream)
        handler.setFormatter(LOGGING_FORMATTER)
        root_logger.addHandler(handler)


class Settings(object):
    """Read and retrieve command-line settings and options."""

    def __init__(self, arguments=None):
        """Initialise settings."""
        if arguments is None:
            self._uargv = sys.argv[1:]
        else:
            self._uargv = list(arguments)
        lumberjack = Lumberjack()
        try:
            self._options = ArgumentParser().retrieve_options(self._uargv)
        except Exception:
            # avoid losing exception messages occuring while logging was disabled
            lumberjack.reset()
            raise
        # prepare global logger for use by main program
        lumberjack.prepare(self.get('logfile'), self.get('debug'))

    def get(self, name, get_default=True):
        """Get value of option; choose whether to get default or None (unspecified)."""
        try:
            value = self._options[name]
            if get_default and (value is None or value == u''):
                raise KeyError(name)
        except KeyError:
            if not get_default:
                return None
            if name in range(NUM_POSITIONAL):
                return u''
            value = ARGUMENTS[name][u'default']
        return value

    @property
    def program(self):
        """Program file to load."""
        return self.get(0)

    @property
    def run_pass(self):
        """Pass to stop after."""
        return self.get('pass')

    @property
    def version(self):
        """Version operating mode."""
        return self.get('version')

    @property
    def help(self):
        """Help operating mode."""
        return self.get('help')

    @property
    def debug(self):
        """Debugging mode."""
        return self.get('debug')

    @property
    def session_params(self):
        """Return a dictionary of parameters for the Session object."""
        params = {
            'wait_unit': self.get('wait-unit'),
            'pause_time': self.get('pause-time'),
            'delay': not self.get('no-delay'),
        }
        return params

    @property
    def redirects(self):
        """Names of the files replacing standard input and output."""
        return self.get('input', False), self.get('output', False)


class ArgumentParser(object):
    """Parse PocketBASIC config file and command-line arguments."""

    def retrieve_options(self, uargv):
        """Retrieve command line and option file options."""
        # convert command line arguments to string dictionary form
        remaining = self._get_arguments_dict(uargv)
        # config file settings are overridden by the command line
        args = self._parse_config_arg_and_process_config_file(remaining)
        unrecognised = [_k for _k in args if _k not in ARGUMENTS]
        for key in unrecognised:
            logging.warning(
                'Ignored unrecognised option `%s=%s` in configuration file', key, args.pop(key)
            )
        args.update(self._parse_args(remaining))
        self._convert_types(args)
        return args

    def _get_arguments_dict(self, argv):
        """Convert command-line arguments to dictionary."""
        args = {}
        arg_deque = deque(argv)
        # positional arguments
        pos = 0
        # use -- to end option parsing, everything is a positional argument afterwards
        options_ended = False
        while arg_deque:
            arg = arg_deque.popleft()
            if not arg.startswith(u'-') or arg == u'-' or options_ended:
                args[pos] = arg
                pos += 1
            elif arg == u'--':
                options_ended = True
            elif arg.startswith(u'--'):
                key, _, value = arg[2:].partition(u'=')
                if key:
                    args[key] = value
            else:
                for short_arg in arg[1:]:
                    try:
                        args[SHORT_ARGS[short_arg]] = u''
                    except KeyError:
                        logging.warning(u'Ignored unrecognised option `-%s`', short_arg)
        return args

    def _parse_config_arg_and_process_config_file(self, remaining):
        """Find the correct config file and read it."""
        try:
            config_file = remaining.pop(u'config')
        except KeyError:
            config_file = None
            if os.path.exists(USER_CONFIG_PATH):
                config_file = USER_CONFIG_PATH
        if not config_file:
            return {}
        return self._read_config_file(config_file)

    def _read_config_file(self, config_file):
        """Read the options section of a config file."""
        try:
            config = configparser.RawConfigParser(allow_no_value=True)
            # use utf_8_sig to ignore a BOM if it's at the start of the file
            with io.open(config_file, 'r', encoding='utf_8_sig', errors='replace') as f:
                config.read_file(f)
        except (configparser.Error, IOError):
            logging.warning(
                u'Error in configuration file `%s`. Configuration not loaded.', config_file
            )
            return {}
        if not config.has_section(CONFIG_SECTION):
            return {}
        # options given without a value count as specified
        return {
            _key: _value or u''
            for _key, _value in config.items(CONFIG_SECTION)
        }

    def _parse_args(self, remaining):
        """Process command line options."""
        known = list(ARGUMENTS.keys()) + list(range(NUM_POSITIONAL))
        args = {d: remaining[d] for d in remaining if d in known}
        not_recognised = {d: remaining[d] for d in remaining if d not in known}
        for d in not_recognised:
            if isinstance(d, int):
                logging.warning(
                    u'Ignored surplus positional command-line argument #%s: `%s`',
                    d, not_recognised[d]
                )
            else:
                logging.warning(u'Ignored unrecognised command-line argument `%s`', d)
        return args

    def _convert_types(self, args):
        """Convert arguments to required type."""
        for name in args:
            args[name] = self._parse_type(name, args[name])

    ##########################################################################
    # type conversions

    def _parse_type(self, d, arg):
        """Convert argument to required type."""
        if d not in ARGUMENTS:
            return arg
        if u'choices' in ARGUMENTS[d]:
            arg = arg.lower()
            if arg and arg not in ARGUMENTS[d][u'choices']:
                logging.warning(
                    u'Value `%s=%s` ignored; should be one of `%s`',
                    d, arg, u'`, `'.join(ARGUMENTS[d][u'choices'])
                )
                return u''
        if ARGUMENTS[d][u'type'] == u'float':
            return self._to_float(d, arg)
        elif ARGUMENTS[d][u'type'] == u'bool':
            return self._to_bool(d, arg)
        return arg

    def _to_float(self, d, s):
        """Convert float value to float; empty or invalid means default."""
        try:
            return float(s)
        except ValueError:
            if s:
                logging.warning(u'Value `%s=%s` ignored; should be a number', d, s)
            return None

    def _to_bool(self, d, s):
        """Convert bool value to bool; a bare option means true."""
        if s == u'':
            return True
        if s.upper() in TRUES:
            return True
        if s.upper() in FALSES:
            return False
        logging.warning(
            u'Value `%s=%s` ignored; should be a boolean (%s)', d, s, u'/'.join(TRUES + FALSES)
        )
        return None

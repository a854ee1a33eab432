# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

import argparse
import os
import sys
import traceback
from argparse import RawDescriptionHelpFormatter
from signal import SIGINT
from textwrap import dedent

import colorama

from ._argparse_color import add_color_to_formatter_class
from ._messenger import Messenger
from ._metadata import APP, DESCRIPTION, VERSION
from ._path import escape_path
from ._shell import DEFAULT_STYLE, STYLES


def _parse_command_line(colorize: bool, args=None):
    epilog = dedent(f"""\
        Each PATH is printed as one line "COMMAND PATH" with PATH escaped
        so that pasting the line into a shell passes the exact original bytes.

        Style "posix" always uses single quotes and works with any POSIX shell.
        Style "auto" leaves plain names bare and falls back to $'...' quoting
        (bash, ksh, zsh) for control characters and non-ASCII bytes.

        Software libre licensed under GPL v3 or later.
    """)

    if args is None:
        args = sys.argv[1:]

    formatter_class = RawDescriptionHelpFormatter
    if colorize:
        formatter_class = add_color_to_formatter_class(formatter_class)

    parser = argparse.ArgumentParser(prog=APP, add_help=False,
                                     description=DESCRIPTION, epilog=epilog,
                                     formatter_class=formatter_class)

    modes = parser.add_argument_group('modes').add_mutually_exclusive_group()
    modes.add_argument('--help', '-h', action='help', help='show this help message and exit')
    modes.add_argument('--version', action='version', version='%(prog)s ' + VERSION)

    output = parser.add_argument_group('output')
    output.add_argument('--command', '-c', metavar='WORD', dest='command',
                        type=os.fsencode, default='cat',
                        help='command word to print in front of each escaped path'
                             '; pass an empty string to print escaped paths only'
                             ' (default: %(default)s)')
    output.add_argument('--style', '-s', metavar='STYLE', dest='style',
                        default=DEFAULT_STYLE, choices=sorted(STYLES),
                        help='quoting style, one of: ' + ', '.join(sorted(STYLES))
                             + ' (default: %(default)s)')
    output.add_argument('--null', '-0', dest='terminator', default=b'\n',
                        action='store_const', const=b'\0',
                        help='terminate output lines with NUL rather than newline')

    switches = parser.add_argument_group('flags')
    switches.add_argument('--debug', dest='debug', action='store_true',
                          help='enable debugging output')

    parser.add_argument('paths', metavar='PATH', nargs='*', type=os.fsencode,
                        help='file name or other argument to escape')

    return parser.parse_args(args)


def _innermost_main(config, messenger):
    for path in config.paths:
        escaped = escape_path(path, style=config.style)
        if config.command:
            line = config.command + b' ' + escaped
        else:
            line = escaped
        messenger.emit(line, terminator=config.terminator)
    messenger.flush()


def _inner_main(args=None):
    colorize = 'NO_COLOR' not in os.environ
    if colorize:
        colorama.init()

    messenger = Messenger(colorize=colorize)

    config = _parse_command_line(colorize=colorize, args=args)
    try:
        _innermost_main(config, messenger)
    except BrokenPipeError:
        # Reader went away (e.g. "| head"); keep the interpreter from
        # complaining again when flushing stdout at exit
        try:
            stdout_fd = sys.stdout.fileno()
        except (AttributeError, OSError):
            pass
        else:
            devnull = os.open(os.devnull, os.O_WRONLY)
            try:
                os.dup2(devnull, stdout_fd)
            finally:
                os.close(devnull)
        sys.exit(1)
    except Exception as e:
        if config.debug:
            traceback.print_exc()
        messenger.tell_error(str(e))
        sys.exit(1)


def main(args=None):
    try:
        _inner_main(args)
    except KeyboardInterrupt:
        sys.exit(128 + SIGINT)

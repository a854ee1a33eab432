# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

import sys

import colorama

_ERROR_COLOR = colorama.Fore.RED + colorama.Style.BRIGHT
_RESET_COLOR = colorama.Style.RESET_ALL


class Messenger:

    def __init__(self, colorize):
        self._colorize = colorize

    def emit(self, line: bytes, terminator: bytes = b'\n'):
        # Escaped output is data meant for a shell, so it is never colorized
        sys.stdout.buffer.write(line + terminator)

    def flush(self):
        sys.stdout.buffer.flush()

    def tell_error(self, message):
        message = f'Error: {message}'
        if self._colorize:
            message = f'{_ERROR_COLOR}{message}{_RESET_COLOR}'
        print(message, file=sys.stderr)

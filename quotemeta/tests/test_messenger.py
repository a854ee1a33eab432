# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

import sys
from io import BytesIO, StringIO, TextIOWrapper
from unittest import TestCase
from unittest.mock import patch

import colorama

from .._messenger import Messenger


class TellErrorTest(TestCase):
    def test_plain(self):
        with patch.object(sys, 'stderr', StringIO()) as mock_stderr:
            Messenger(colorize=False).tell_error('no such style')
        self.assertEqual(mock_stderr.getvalue(), 'Error: no such style\n')

    def test_colorized(self):
        with patch.object(sys, 'stderr', StringIO()) as mock_stderr:
            Messenger(colorize=True).tell_error('no such style')
        self.assertTrue(mock_stderr.getvalue().startswith(colorama.Fore.RED))
        self.assertIn('Error: no such style', mock_stderr.getvalue())


class EmitTest(TestCase):
    def test_bytes_are_written_verbatim_even_when_colorizing(self):
        stdout = TextIOWrapper(BytesIO())
        with patch.object(sys, 'stdout', stdout):
            messenger = Messenger(colorize=True)
            messenger.emit(b"cat '\xff'")
            messenger.emit(b'x', terminator=b'\0')
            messenger.flush()
        self.assertEqual(stdout.buffer.getvalue(), b"cat '\xff'\nx\0")

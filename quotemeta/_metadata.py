# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

APP = 'quotemeta'
DESCRIPTION = 'Shell-quote file names and other raw bytes, safe to paste into a POSIX shell'
VERSION = '0.1.0'

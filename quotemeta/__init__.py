# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

from ._metadata import VERSION as __version__
from ._path import as_bytes, escape_args, escape_path
from ._shell import DEFAULT_STYLE, STYLES, escape, quotemeta

__all__ = [
    'DEFAULT_STYLE',
    'STYLES',
    '__version__',
    'as_bytes',
    'escape',
    'escape_args',
    'escape_path',
    'quotemeta',
]

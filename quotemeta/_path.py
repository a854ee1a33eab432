# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

import os
from typing import Iterable

from ._shell import DEFAULT_STYLE, STYLES, ensure_bytes


def as_bytes(value) -> bytes:
    """
    Extract the raw bytes of a path-like value.

    Strings and ``os.PathLike`` objects are encoded with ``os.fsencode``
    so that file names that Python had to decode using "surrogateescape"
    come back as the exact bytes found on disk.
    """
    if isinstance(value, (str, os.PathLike)):
        return os.fsencode(value)
    return ensure_bytes(value)


def _find_escaper(style: str):
    try:
        return STYLES[style]
    except KeyError:
        raise ValueError(f'Unknown style {style!r}, expected one of: '
                         + ', '.join(sorted(STYLES)))


def escape_path(value, style: str = DEFAULT_STYLE) -> bytes:
    escaper = _find_escaper(style)
    return escaper(as_bytes(value))


def escape_args(values: Iterable, style: str = DEFAULT_STYLE) -> bytes:
    escaper = _find_escaper(style)
    return b' '.join(escaper(as_bytes(value)) for value in values)

# Copyright (C) 2020 Sebastian Pipping <sebastian@pipping.org>
# Licensed under GPL v3 or later

_SINGLE_QUOTE = ord("'")
_BACKSLASH = ord('\\')

_SAFE_WITHOUT_QUOTES = frozenset(b'+,-./0123456789:=@'
                                 b'ABCDEFGHIJKLMNOPQRSTUVWXYZ_'
                                 b'abcdefghijklmnopqrstuvwxyz')
_NEED_ESCAPING_INSIDE_ANSI_C_QUOTES = frozenset((_SINGLE_QUOTE, _BACKSLASH))
_NEED_OCTAL_ESCAPING = frozenset(range(0, 32)) | frozenset(range(127, 256))


def ensure_bytes(data) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f'Expected bytes-like object, got {type(data).__name__}')


def escape(data: bytes) -> bytes:
    """
    Shell-escape arbitrary bytes for use as a single word
    on the command line of a POSIX shell.

    The output is always surrounded by single quotes,
    even when empty or free of metacharacters.
    Inside single quotes nothing is special but the single quote itself,
    so each of those is replaced by ``'\\''``:
    close the quotes, add a backslash-escaped quote, reopen the quotes.

    No decoding takes place, any byte sequence is accepted.
    """
    data = ensure_bytes(data)
    return b"'" + data.replace(b"'", b"'\\''") + b"'"


def _escape_for_ansi_c_quotes(data: bytes) -> bytes:
    escaped = bytearray()
    for c in data:
        if c in _NEED_OCTAL_ESCAPING:
            escaped += b'\\%03o' % c
        elif c in _NEED_ESCAPING_INSIDE_ANSI_C_QUOTES:
            escaped += b'\\' + bytes((c,))
        else:
            escaped.append(c)
    return bytes(escaped)


def quotemeta(data: bytes) -> bytes:
    """
    Shell-escape arbitrary bytes, picking the least noisy form
    that is still safe.

    In detail:
    1. Leave the input bare if it consists of nothing
       but letters, digits and ``+,-./:=@_``.
    2. Use single quotes if the input is printable ASCII
       without single quotes or backslashes.
    3. Otherwise use ANSI-C quotes (``$'...'``) with three-digit
       octal escapes for control and non-ASCII bytes.

    Note that ANSI-C quotes are understood by bash, ksh and zsh
    but not by every POSIX shell; use ``escape`` where that matters.
    """
    data = ensure_bytes(data)
    if not data:
        return b"''"

    needs_quotes = False
    for c in data:
        if c in _NEED_OCTAL_ESCAPING or c in _NEED_ESCAPING_INSIDE_ANSI_C_QUOTES:
            return b"$'" + _escape_for_ansi_c_quotes(data) + b"'"
        if c not in _SAFE_WITHOUT_QUOTES:
            needs_quotes = True

    if needs_quotes:
        return b"'" + data + b"'"
    return data


STYLES = {
    'posix': escape,
    'auto': quotemeta,
}

DEFAULT_STYLE = 'posix'

"""
Open flags accepted by ``Filer.open_file``.

These are the host's POSIX ``os.O_*`` values so callers can pass either.
"""

import os

O_RDONLY = os.O_RDONLY
O_WRONLY = os.O_WRONLY
O_RDWR = os.O_RDWR
O_ACCMODE = O_RDONLY | O_WRONLY | O_RDWR

O_CREAT = os.O_CREAT
O_EXCL = os.O_EXCL
O_TRUNC = os.O_TRUNC
O_APPEND = os.O_APPEND


def access_mode(flags: int) -> int:
    """Return the access part (O_RDONLY, O_WRONLY or O_RDWR) of flags."""
    return flags & O_ACCMODE


def is_readable(flags: int) -> bool:
    return access_mode(flags) in (O_RDONLY, O_RDWR)


def is_writable(flags: int) -> bool:
    return access_mode(flags) in (O_WRONLY, O_RDWR)


def describe(flags: int) -> str:
    """Render flags as ``O_RDWR|O_CREAT`` for log and error context."""
    names = {O_RDONLY: 'O_RDONLY', O_WRONLY: 'O_WRONLY', O_RDWR: 'O_RDWR'}
    parts = [names.get(access_mode(flags), hex(access_mode(flags)))]
    for flag, name in ((O_CREAT, 'O_CREAT'), (O_EXCL, 'O_EXCL'),
                       (O_TRUNC, 'O_TRUNC'), (O_APPEND, 'O_APPEND')):
        if flags & flag:
            parts.append(name)
    return '|'.join(parts)

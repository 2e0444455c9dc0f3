"""
Name: util
Description: input helpers shared by the tools
License: perl
"""

import sys
import contextlib


def open_input(path: str, binary: bool = False):
    """
    Opens a file for reading or returns the stdin stream for '-'.
    Raises OSError when the file cannot be opened.
    """
    if path == '-':
        return sys.stdin.buffer if binary else sys.stdin
    if binary:
        return open(path, 'rb')
    return open(path, 'r', encoding='utf-8', errors='replace', newline='')


@contextlib.contextmanager
def reading(stream):
    """
    Yields stream and closes it afterwards, unless it is stdin, which has to
    stay open for a later '-' argument.
    """
    try:
        yield stream
    finally:
        if stream is not sys.stdin and stream is not getattr(sys.stdin, 'buffer', None):
            stream.close()


def chomp(line):
    """Strips one trailing '\\n' or '\\r\\n' from a str or bytes line."""
    newline, carriage = ('\n', '\r') if isinstance(line, str) else (b'\n', b'\r')
    if line.endswith(newline):
        line = line[:-1]
        if line.endswith(carriage):
            line = line[:-1]
    return line

#!/usr/bin/env python3
"""
Name: tail
Description: display the last part of a file
License: perl
"""

import sys
import re
import argparse
from collections import namedtuple

from unixtools.util import open_input, reading

PROGRAM = 'tail'
NUM_RE = re.compile(r'([+-])?([0-9]+)')
VALUE_OPTIONS = ('-n', '-c', '--lines', '--bytes')

# from_start is True for "+N" (start at unit N), False for "N" or "-N"
# (the last N units).
TakeValue = namedtuple('TakeValue', ['from_start', 'count'])


def parse_num(value: str) -> TakeValue:
    """Parses a [+-]NUMBER location, raising ValueError with the raw value."""
    match = NUM_RE.fullmatch(value)
    if not match:
        raise ValueError(value)
    sign, digits = match.groups()
    return TakeValue(sign == '+', int(digits))


def get_start_index(take: TakeValue, total: int):
    """
    Returns the 0-based index of the first unit to print, or None when
    nothing should be printed.
    """
    if total <= 0:
        return None
    if take.from_start:
        if take.count == 0:
            return 0
        return take.count - 1 if take.count <= total else None
    if take.count == 0:
        return None
    return max(total - take.count, 0)


def new_argv(argv: list) -> list:
    """
    Translates historical command-line syntax (e.g., `-10` or `+5`) to
    `-n-10` / `-n+5`.
    """
    new_args = []
    previous = None
    for arg in argv:
        if arg == '--':
            new_args.append(arg)
            break
        if re.fullmatch(r'[+-][0-9]+', arg) and previous not in VALUE_OPTIONS:
            new_args.append(f'-n{arg}')
        else:
            new_args.append(arg)
        previous = arg
    return new_args + argv[len(new_args):]


def print_tail(stream, take: TakeValue, by_bytes: bool):
    """Prints the selected tail of a binary stream, decoded lossily."""
    # Binary readlines() splits on b'\n' only, so '\r' stays inside lines.
    units = stream.read() if by_bytes else stream.readlines()
    start = get_start_index(take, len(units))
    if start is None:
        return
    selected = units[start:] if by_bytes else b''.join(units[start:])
    sys.stdout.write(selected.decode('utf-8', errors='replace'))


def main(argv=None):
    """Parses arguments and prints the tail of each file."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="Display the last part of a file.",
        usage="%(prog)s [-q] [-n number | -c number | [-+]number] file ..."
    )
    unit = parser.add_mutually_exclusive_group()
    unit.add_argument('-n', '--lines', default='10',
                      help='Location is NUMBER lines (default: 10).')
    unit.add_argument('-c', '--bytes', help='Location is NUMBER bytes.')
    parser.add_argument('-q', '--quiet', action='store_true', help='Suppress headers.')
    parser.add_argument('files', nargs='+', help='Files to read.')

    args = parser.parse_args(new_argv(sys.argv[1:] if argv is None else argv))

    try:
        lines = parse_num(args.lines)
    except ValueError as e:
        print(f"{PROGRAM}: illegal line count -- {e}", file=sys.stderr)
        sys.exit(1)
    take, by_bytes = lines, False
    if args.bytes is not None:
        try:
            take, by_bytes = parse_num(args.bytes), True
        except ValueError as e:
            print(f"{PROGRAM}: illegal byte count -- {e}", file=sys.stderr)
            sys.exit(1)

    show_headers = not args.quiet and len(args.files) > 1
    exit_status = 0

    for file_num, filename in enumerate(args.files):
        try:
            stream = open_input(filename, binary=True)
        except OSError as e:
            print(f"{PROGRAM}: {filename}: {e.strerror}", file=sys.stderr)
            exit_status = 1
            continue

        if show_headers:
            if file_num > 0: print()
            print(f"==> {filename} <==")

        with reading(stream):
            print_tail(stream, take, by_bytes)

    sys.exit(exit_status)


if __name__ == "__main__":
    main()

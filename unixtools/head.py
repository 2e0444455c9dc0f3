#!/usr/bin/env python3
"""
Name: head
Description: print the first lines of a file
License: perl
"""

import sys
import argparse
import itertools

from unixtools.util import open_input, reading

PROGRAM = 'head'


def parse_positive_int(value: str) -> int:
    """Returns value as an int, or raises ValueError carrying the raw value."""
    if value.isascii() and value.isdigit() and int(value) > 0:
        return int(value)
    raise ValueError(value)


def head_lines(stream, count: int):
    """Writes the first `count` lines, keeping their terminators."""
    for line in itertools.islice(stream, count):
        sys.stdout.write(line)


def head_bytes(stream, count: int):
    """Writes the first `count` bytes, decoded lossily."""
    data = stream.read(count)
    sys.stdout.write(data.decode('utf-8', errors='replace'))


def main(argv=None):
    """Parses arguments and prints the first N lines or bytes of each file."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="Print the first lines of a file.",
        usage="%(prog)s [-n count | -c bytes] [file ...]"
    )
    unit = parser.add_mutually_exclusive_group()
    unit.add_argument('-n', '--lines', default='10',
                      help='The number of lines to print (default: 10).')
    unit.add_argument('-c', '--bytes',
                      help='The number of bytes to print.')
    parser.add_argument('files', nargs='*', default=['-'],
                        help='Files to process. Reads from stdin if none are given.')

    args = parser.parse_args(argv)

    # --- Validate arguments ---
    try:
        lines = parse_positive_int(args.lines)
    except ValueError as e:
        print(f"{PROGRAM}: illegal line count -- {e}", file=sys.stderr)
        sys.exit(1)
    byte_count = None
    if args.bytes is not None:
        try:
            byte_count = parse_positive_int(args.bytes)
        except ValueError as e:
            print(f"{PROGRAM}: illegal byte count -- {e}", file=sys.stderr)
            sys.exit(1)

    # --- Process Files or Stdin ---
    is_multi_file = len(args.files) > 1
    exit_status = 0

    for file_num, filename in enumerate(args.files):
        try:
            stream = open_input(filename, binary=byte_count is not None)
        except OSError as e:
            print(f"{PROGRAM}: {filename}: {e.strerror}", file=sys.stderr)
            exit_status = 1
            continue

        # On each new file, print a header if needed.
        if is_multi_file:
            if file_num > 0: print()
            print(f"==> {filename} <==")

        with reading(stream):
            if byte_count is not None:
                head_bytes(stream, byte_count)
            else:
                head_lines(stream, lines)

    sys.exit(exit_status)


if __name__ == "__main__":
    main()

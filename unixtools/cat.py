#!/usr/bin/env python3
"""
Name: cat
Description: concatenate and print files
License: perl
"""

import sys
import argparse

from unixtools.util import open_input, chomp, reading

PROGRAM = 'cat'


def number_lines(stream, nonblank_only: bool = False):
    """
    Yields the lines of a stream without terminators, prefixed with a
    right-aligned line number. With nonblank_only, empty lines are passed
    through unnumbered and do not advance the counter.
    """
    line_number = 0
    for line in stream:
        line = chomp(line)
        if nonblank_only and not line:
            yield line
            continue
        line_number += 1
        yield f"{line_number:6d}\t{line}"


def main(argv=None):
    """Parses arguments and runs the cat logic."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="Concatenate and print files.",
        usage="%(prog)s [-b | -n] [file ...]"
    )
    numbering = parser.add_mutually_exclusive_group()
    numbering.add_argument('-n', '--number', action='store_true',
                           help='Number all output lines.')
    numbering.add_argument('-b', '--number-nonblank', action='store_true',
                           help='Number non-empty output lines.')
    parser.add_argument('files', nargs='*', default=['-'],
                        help='Files to process. Reads from stdin if none are given.')

    args = parser.parse_args(argv)
    exit_status = 0

    for filename in args.files:
        try:
            stream = open_input(filename)
        except OSError as e:
            print(f"{PROGRAM}: {filename}: {e.strerror}", file=sys.stderr)
            exit_status = 1
            continue

        with reading(stream):
            if args.number or args.number_nonblank:
                for line in number_lines(stream, args.number_nonblank):
                    print(line)
            else:
                for line in stream:
                    print(line, end='')

    sys.exit(exit_status)


if __name__ == "__main__":
    main()

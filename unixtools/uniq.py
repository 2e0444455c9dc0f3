#!/usr/bin/env python3
"""
Name: uniq
Description: report or filter out repeated lines in a file
License: perl
"""

import sys
import argparse
import itertools

from unixtools.util import open_input, chomp, reading

PROGRAM = 'uniq'


def collapse(stream):
    """
    Groups adjacent lines that are equal once their line terminators are
    removed. Yields (count, first_line) for each run, with first_line
    exactly as read.
    """
    # itertools.groupby only groups consecutive items, which is what uniq wants.
    for _, group in itertools.groupby(stream, key=chomp):
        group_lines = list(group)
        yield len(group_lines), group_lines[0]


def format_run(count: int, line: str, show_count: bool) -> str:
    if show_count:
        return f"{count:>4} {line}"
    return line


def main(argv=None):
    """Parses arguments and runs the uniq logic."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="Report or filter out repeated adjacent lines in a file.",
        usage="%(prog)s [-c] [input_file [output_file]]"
    )
    parser.add_argument('-c', '--count', action='store_true',
                        help='Precede each line with its repetition count.')
    parser.add_argument('input_file', nargs='?', default='-', help="Input file (default: stdin).")
    parser.add_argument('output_file', nargs='?', help="Output file (default: stdout).")

    args = parser.parse_args(argv)

    try:
        input_stream = open_input(args.input_file)
    except OSError as e:
        print(f"{PROGRAM}: {args.input_file}: {e.strerror}", file=sys.stderr)
        sys.exit(1)

    try:
        output_stream = open(args.output_file, 'w') if args.output_file else sys.stdout
    except OSError as e:
        print(f"{PROGRAM}: {args.output_file}: {e.strerror}", file=sys.stderr)
        sys.exit(1)

    with reading(input_stream):
        for count, line in collapse(input_stream):
            output_stream.write(format_run(count, line, args.count))

    if output_stream is not sys.stdout:
        output_stream.close()


if __name__ == "__main__":
    main()

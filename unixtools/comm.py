#!/usr/bin/env python3
"""
Name: comm
Description: select or reject lines common to two files
License: public domain
"""

import sys
import argparse

from unixtools.util import open_input, chomp, reading

PROGRAM = 'comm'


def compare_lines(lines1, lines2, insensitive: bool = False):
    """
    Walks two sorted line sequences in step. Yields (column, line) pairs:
    column 1 for lines only in the first, 2 for lines only in the second,
    3 for lines in both.
    """
    key = str.lower if insensitive else (lambda s: s)
    it1, it2 = iter(lines1), iter(lines2)
    line1 = next(it1, None)
    line2 = next(it2, None)

    # This loop continues as long as either file has lines to be read.
    while line1 is not None or line2 is not None:
        if line2 is None or (line1 is not None and key(line1) < key(line2)):
            yield 1, line1
            line1 = next(it1, None)
        elif line1 is None or key(line2) < key(line1):
            yield 2, line2
            line2 = next(it2, None)
        else:
            yield 3, line1
            line1 = next(it1, None)
            line2 = next(it2, None)


def format_column(column: int, line: str, show_col: list, delimiter: str):
    """
    Indents a line by one delimiter per shown column to its left.
    Returns None when the column is suppressed.
    """
    if not show_col[column]:
        return None
    indent = sum(1 for c in range(1, column) if show_col[c])
    return delimiter * indent + line


def main(argv=None):
    """Parses arguments and runs the line comparison logic."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="Select or reject lines common to two sorted files.",
        usage="%(prog)s [-123i] [-d delim] file1 file2"
    )
    parser.add_argument('-1', dest='suppress1', action='store_true', help='Suppress column 1 (lines unique to file1)')
    parser.add_argument('-2', dest='suppress2', action='store_true', help='Suppress column 2 (lines unique to file2)')
    parser.add_argument('-3', dest='suppress3', action='store_true', help='Suppress column 3 (lines common to both files)')
    parser.add_argument('-i', dest='insensitive', action='store_true', help='Case-insensitive comparison of lines')
    parser.add_argument('-d', '--output-delimiter', dest='delimiter', default='\t', help='Output delimiter (default: TAB)')
    parser.add_argument('file1', help='First file to compare, or - for stdin.')
    parser.add_argument('file2', help='Second file to compare, or - for stdin.')

    args = parser.parse_args(argv)

    # show_col[i] is True if we should print column i.
    show_col = [None, not args.suppress1, not args.suppress2, not args.suppress3]

    if args.file1 == '-' and args.file2 == '-':
        print(f'{PROGRAM}: Both input files cannot be STDIN ("-")', file=sys.stderr)
        sys.exit(1)

    streams = []
    for filename in (args.file1, args.file2):
        try:
            streams.append(open_input(filename))
        except OSError as e:
            print(f"{PROGRAM}: {filename}: {e.strerror}", file=sys.stderr)
            sys.exit(1)

    f1, f2 = streams
    # The 'with' statement ensures files are automatically closed.
    with reading(f1), reading(f2):
        lines1 = (chomp(line) for line in f1)
        lines2 = (chomp(line) for line in f2)
        for column, line in compare_lines(lines1, lines2, args.insensitive):
            output = format_column(column, line, show_col, args.delimiter)
            if output is not None:
                print(output)

    sys.exit(0)


if __name__ == "__main__":
    main()

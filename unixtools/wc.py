#!/usr/bin/env python3
"""
Name: wc
Description: line, word, character, and byte counter
License: perl
"""

import sys
import argparse

from unixtools.util import open_input, reading

PROGRAM = 'wc'
COUNT_KEYS = ('lines', 'words', 'bytes', 'chars')


def count_in_stream(stream) -> dict:
    """
    Reads a binary stream and returns a dictionary of counts.
    Characters are counted after a lossy UTF-8 decode of each line.
    """
    counts = dict.fromkeys(COUNT_KEYS, 0)

    for byte_line in stream:
        line = byte_line.decode('utf-8', errors='replace')
        counts['lines'] += 1
        counts['words'] += len(line.split())
        counts['bytes'] += len(byte_line)
        counts['chars'] += len(line)

    return counts


def format_counts(counts: dict, args, filename: str = "") -> str:
    """
    Formats the selected counts into a single output line.
    """
    output_parts = [f"{counts[key]:>8}" for key in COUNT_KEYS if getattr(args, key)]
    output_parts.append(f" {filename}")
    return "".join(output_parts)


def main(argv=None):
    """Parses arguments and orchestrates the counting process."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="A line, word, character, and byte counter.",
        usage="%(prog)s [-l] [-w] [-c | -m] [file ...]"
    )
    parser.add_argument('-l', '--lines', action='store_true', help='Count lines.')
    parser.add_argument('-w', '--words', action='store_true', help='Count words.')
    size = parser.add_mutually_exclusive_group()
    size.add_argument('-c', '--bytes', action='store_true', help='Count bytes.')
    size.add_argument('-m', '--chars', action='store_true', help='Count characters.')
    parser.add_argument('files', nargs='*', default=['-'],
                        help='Files to process. Reads from stdin if none are given.')

    args = parser.parse_args(argv)

    # Default is -lwc if no flags are specified.
    if not any(getattr(args, key) for key in COUNT_KEYS):
        args.lines = args.words = args.bytes = True

    total_counts = dict.fromkeys(COUNT_KEYS, 0)
    exit_status = 0

    for filename in args.files:
        try:
            stream = open_input(filename, binary=True)
        except OSError as e:
            print(f"{PROGRAM}: {filename}: {e.strerror}", file=sys.stderr)
            exit_status = 1
            continue

        with reading(stream):
            file_counts = count_in_stream(stream)

        print(format_counts(file_counts, args, '' if filename == '-' else filename))

        # Add to totals for the final summary line.
        for key in total_counts:
            total_counts[key] += file_counts[key]

    if len(args.files) > 1:
        print(format_counts(total_counts, args, "total"))

    sys.exit(exit_status)


if __name__ == "__main__":
    main()

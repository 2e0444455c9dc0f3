#!/usr/bin/env python3
"""
Name: cut
Description: select portions of each line of a file
License: perl
"""

import sys
import argparse
import csv
import re
from collections import namedtuple

from unixtools.util import open_input, chomp, reading

PROGRAM = 'cut'

INDEX_RE = re.compile(r'[0-9]+')
RANGE_RE = re.compile(r'([0-9]+)-([0-9]+)')
# Largest list value accepted, an unsigned 64-bit index.
MAX_INDEX = 2 ** 64 - 1

Extract = namedtuple('Extract', ['mode', 'positions'])


def parse_index(value: str) -> int:
    """
    Converts a 1-based list value into a 0-based index.
    Signs, zero and anything that is not plain digits are rejected.
    """
    digits = value.lstrip('0') if INDEX_RE.fullmatch(value) else ''
    if not digits or len(digits) > len(str(MAX_INDEX)) or int(digits) > MAX_INDEX:
        raise ValueError(f'illegal list value: "{value}"')
    return int(digits) - 1


def parse_pos(ranges: str) -> list:
    """
    Parses a cut-style list string (e.g., "1,7,3-5") into a list of
    half-open ranges, in the order they were written.

    "3,1,3" gives [range(2, 3), range(0, 1), range(2, 3)]: the list is never
    sorted or merged, so columns can be reordered and repeated.
    """
    if not ranges:
        raise ValueError("Range cannot be empty!")

    positions = []
    for token in ranges.split(','):
        match = RANGE_RE.fullmatch(token)
        if match:
            start = parse_index(match.group(1))
            end = parse_index(match.group(2))
            if start >= end:
                raise ValueError(
                    f"First number in range ({start + 1}) "
                    f"must be lower than second number ({end + 1})"
                )
            positions.append(range(start, end + 1))
        else:
            index = parse_index(token)
            positions.append(range(index, index + 1))
    return positions


def extract_bytes(line, byte_pos: list) -> str:
    """
    Selects byte ranges from a line and decodes the result.
    A range that splits a multi-byte character comes out as U+FFFD.
    """
    if isinstance(line, str):
        line = line.encode('utf-8')
    selected = b''.join(line[r.start:r.stop] for r in byte_pos)
    return selected.decode('utf-8', errors='replace')


def extract_chars(line: str, char_pos: list) -> str:
    """Selects character ranges from a line."""
    return ''.join(line[r.start:r.stop] for r in char_pos)


def extract_fields(record, field_pos: list) -> list:
    """Selects fields from a parsed record, one pass per range."""
    record = list(record)
    return [field for r in field_pos for field in record[r.start:r.stop]]


EXTRACTORS = {
    'bytes': extract_bytes,
    'chars': extract_chars,
    'fields': extract_fields,
}


def parse_delimiter(delim: str) -> str:
    if len(delim.encode('utf-8')) != 1:
        raise ValueError(f'--delim "{delim}" must be a single byte')
    return delim


def cut_lines(stream, extract: Extract):
    """Applies a bytes or chars extraction to every line of a stream."""
    extractor = EXTRACTORS[extract.mode]
    for line in stream:
        print(extractor(chomp(line), extract.positions))


def cut_records(stream, positions: list, delimiter: str):
    """Applies a field extraction to every delimited record of a stream."""
    writer = csv.writer(sys.stdout, delimiter=delimiter, lineterminator='\n')
    for record in csv.reader(stream, delimiter=delimiter):
        # Blank lines hold no record.
        if not record:
            continue
        writer.writerow(extract_fields(record, positions))


def main(argv=None):
    """Parses arguments and dispatches to the extractor for the chosen mode."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="Select portions of each line of a file.",
        usage="%(prog)s [-b list | -c list | -f list] [-d delim] [file ...]"
    )
    # The main modes are mutually exclusive.
    mode_group = parser.add_mutually_exclusive_group(required=True)
    mode_group.add_argument('-b', '--bytes', dest='bytes', metavar='LIST',
                            help='The list specifies byte positions.')
    mode_group.add_argument('-c', '--chars', dest='chars', metavar='LIST',
                            help='The list specifies character positions.')
    mode_group.add_argument('-f', '--fields', dest='fields', metavar='LIST',
                            help='The list specifies fields.')
    parser.add_argument('-d', '--delim', dest='delimiter', default='\t',
                        help='Use DELIM instead of TAB for field delimiter.')
    parser.add_argument('files', nargs='*', default=['-'],
                        help='Files to process. Reads from stdin if none are given.')

    args = parser.parse_args(argv)

    try:
        delimiter = parse_delimiter(args.delimiter)
        if args.fields is not None:
            extract = Extract('fields', parse_pos(args.fields))
        elif args.bytes is not None:
            extract = Extract('bytes', parse_pos(args.bytes))
        else:
            extract = Extract('chars', parse_pos(args.chars))
    except ValueError as e:
        print(f"{PROGRAM}: {e}", file=sys.stderr)
        sys.exit(1)

    exit_status = 0
    for filename in args.files:
        try:
            stream = open_input(filename, binary=extract.mode == 'bytes')
        except OSError as e:
            print(f"{PROGRAM}: {filename}: {e.strerror}", file=sys.stderr)
            exit_status = 1
            continue

        with reading(stream):
            if extract.mode == 'fields':
                cut_records(stream, extract.positions, delimiter)
            else:
                cut_lines(stream, extract)

    sys.exit(exit_status)


if __name__ == "__main__":
    main()

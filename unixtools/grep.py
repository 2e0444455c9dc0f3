#!/usr/bin/env python3
"""
Name: grep
Description: search for regular expressions and print
License: perl
"""

import sys
import os
import re
import argparse

from unixtools.util import open_input, reading

PROGRAM = 'grep'


def compile_pattern(pattern: str, insensitive: bool = False):
    flags = re.IGNORECASE if insensitive else 0
    try:
        return re.compile(pattern, flags)
    except re.error:
        raise ValueError(f'Invalid pattern "{pattern}"')


def find_files(paths: list, recursive: bool) -> list:
    """
    Expands the command-line paths into the files to search.
    Returns (path, error) pairs in argument order; error is None for a
    searchable file and a message otherwise. '-' always stands for stdin.
    """
    results = []
    for path in paths:
        if path == '-':
            results.append((path, None))
        elif not os.path.exists(path):
            results.append((path, f"{path}: No such file or directory"))
        elif os.path.isdir(path):
            if not recursive:
                results.append((path, f"{path} is a directory"))
                continue
            for root, dirs, files in os.walk(path):
                dirs.sort()
                for name in sorted(files):
                    results.append((os.path.join(root, name), None))
        else:
            results.append((path, None))
    return results


def find_lines(stream, regex, invert_match: bool = False) -> list:
    """Returns the lines (terminators kept) that match, or don't with -v."""
    return [line for line in stream if bool(regex.search(line)) != invert_match]


def main(argv=None):
    """Parses arguments and searches each input file."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="Search for regular expressions and print matching lines.",
        usage="%(prog)s [-cirv] pattern [file ...]"
    )
    parser.add_argument('pattern', help='Search pattern.')
    parser.add_argument('files', nargs='*', default=['-'],
                        help='Files to search. Reads from stdin if none are given.')
    parser.add_argument('-c', '--count', action='store_true', help='Count matching lines.')
    parser.add_argument('-i', '--insensitive', action='store_true', help='Case-insensitive.')
    parser.add_argument('-v', '--invert-match', action='store_true', help='Invert match.')
    parser.add_argument('-r', '--recursive', action='store_true', help='Recursive search.')

    args = parser.parse_args(argv)

    try:
        regex = compile_pattern(args.pattern, args.insensitive)
    except ValueError as e:
        print(f"{PROGRAM}: {e}", file=sys.stderr)
        sys.exit(2)

    entries = find_files(args.files, args.recursive)
    show_names = len(entries) > 1
    exit_status = 0

    for filename, error in entries:
        if error:
            print(f"{PROGRAM}: {error}", file=sys.stderr)
            exit_status = 2
            continue
        try:
            stream = open_input(filename)
        except OSError as e:
            print(f"{PROGRAM}: {filename}: {e.strerror}", file=sys.stderr)
            exit_status = 2
            continue

        with reading(stream):
            matches = find_lines(stream, regex, args.invert_match)

        prefix = f"{filename}:" if show_names else ""
        if args.count:
            print(f"{prefix}{len(matches)}")
        else:
            for line in matches:
                sys.stdout.write(f"{prefix}{line}")

    sys.exit(exit_status)


if __name__ == "__main__":
    main()

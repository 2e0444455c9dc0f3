#!/usr/bin/env python3

"""
Name: fortune
Description: print a random, hopefully interesting, adage
License: gpl
"""

import sys
import os
import re
import random
import argparse
from collections import namedtuple

PROGRAM = 'fortune'
# Index files produced by strfile sit next to the fortune files.
IGNORED_SUFFIXES = ('.dat',)

Fortune = namedtuple('Fortune', ['source', 'text'])

# Globals
debug = False


def trace(message: str):
    if debug:
        sys.stderr.write(f"{message}\n")


def parse_seed(value: str) -> int:
    if not re.fullmatch(r'[0-9]+', value):
        raise ValueError(f'"{value}" not a valid integer')
    return int(value)


def compile_pattern(pattern: str, insensitive: bool = False):
    try:
        return re.compile(pattern, re.IGNORECASE if insensitive else 0)
    except re.error:
        raise ValueError(f'Invalid --pattern "{pattern}"')


def find_files(paths: list) -> list:
    """
    Expands files and directories (recursively) into a sorted list of
    unique fortune files. A missing path raises ValueError.
    """
    files = set()
    for path in paths:
        if not os.path.exists(path):
            raise ValueError(f"{path}: No such file or directory")
        if os.path.isfile(path):
            trace(f"adding file {path}")
            files.add(path)
            continue
        for root, dirs, names in os.walk(path):
            for name in names:
                if name.endswith(IGNORED_SUFFIXES):
                    trace(f"skipping {name} (illegal suffix)")
                    continue
                trace(f"adding file {os.path.join(root, name)}")
                files.add(os.path.join(root, name))
    return sorted(files)


def read_fortunes(paths: list) -> list:
    """
    Reads every fortune from the given files. Fortunes are separated by
    lines holding a single '%'; blank fortunes are dropped.
    """
    fortunes = []
    for path in paths:
        source = os.path.basename(path)
        buffer = []
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            # A trailing sentinel flushes the last fortune.
            for line in list(f) + ['%']:
                line = line.rstrip('\r\n')
                if line == '%':
                    text = '\n'.join(buffer).strip()
                    if text:
                        fortunes.append(Fortune(source, text))
                    buffer = []
                else:
                    buffer.append(line)
        trace(f"read {path}: {len(fortunes)} fortunes so far")
    return fortunes


def pick_fortune(fortunes: list, seed=None):
    """Returns the text of a random fortune, or None if there are none."""
    if not fortunes:
        return None
    return random.Random(seed).choice(fortunes).text


def print_matching_fortunes(fortunes: list, regex) -> bool:
    """
    Prints every fortune matching regex, each followed by '%'. The source
    file name goes to stderr whenever it changes. Returns True if any matched.
    """
    prev_source = None
    found = False
    for fortune in fortunes:
        if not regex.search(fortune.text):
            continue
        if fortune.source != prev_source:
            sys.stderr.write(f"({fortune.source})\n%\n")
            prev_source = fortune.source
        print(f"{fortune.text}\n%")
        found = True
    return found


def main(argv=None):
    """Main function to parse arguments and run the fortune program."""
    global debug

    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="Print a random, hopefully interesting, adage.",
        usage="%(prog)s [-di] [-m pattern] [-s seed] file/dir ..."
    )
    parser.add_argument('sources', nargs='+', metavar='file',
                        help='Fortune files or directories.')
    parser.add_argument('-m', '--pattern', help='Print all fortunes matching the pattern.')
    parser.add_argument('-i', '--insensitive', action='store_true',
                        help='Ignore case for -m patterns.')
    parser.add_argument('-s', '--seed', help='Random seed.')
    parser.add_argument('-d', '--debug', action='store_true', help='Enable debug messages.')

    args = parser.parse_args(argv)
    debug = args.debug

    try:
        regex = compile_pattern(args.pattern, args.insensitive) if args.pattern is not None else None
        seed = parse_seed(args.seed) if args.seed is not None else None
        fortunes = read_fortunes(find_files(args.sources))
    except (ValueError, OSError) as e:
        print(f"{PROGRAM}: {e}", file=sys.stderr)
        sys.exit(1)

    if regex is not None:
        found = print_matching_fortunes(fortunes, regex)
    else:
        text = pick_fortune(fortunes, seed)
        found = text is not None
        if found:
            print(text)

    if not found:
        print("No fortunes found", file=sys.stderr)

    sys.exit(0)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Name: find
Description: search for files in a directory hierarchy
License: perl
"""

import sys
import os
import re
import argparse

PROGRAM = 'find'

# -t letters to predicates on a path; links are never resolved.
ENTRY_TYPES = {
    'f': lambda path: os.path.isfile(path) and not os.path.islink(path),
    'd': lambda path: os.path.isdir(path) and not os.path.islink(path),
    'l': os.path.islink,
}


def compile_names(names: list) -> list:
    """Compiles the -n patterns, raising ValueError on the first bad one."""
    patterns = []
    for name in names:
        try:
            patterns.append(re.compile(name))
        except re.error:
            raise ValueError(f'Invalid --name "{name}"')
    return patterns


class Finder:
    """
    Walks each starting path depth-first, printing every entry that matches
    one of the requested types and one of the name patterns. Symbolic links
    are reported but never followed.
    """
    def __init__(self, names: list, entry_types: list):
        self.names = names
        self.entry_types = entry_types
        self.exit_status = 0

    def run(self, paths):
        for path in paths:
            if not os.path.lexists(path):
                print(f"{PROGRAM}: {path}: No such file or directory", file=sys.stderr)
                self.exit_status = 1
                continue
            self._traverse(path)
        return self.exit_status

    def matches(self, path: str) -> bool:
        if self.entry_types and not any(ENTRY_TYPES[t](path) for t in self.entry_types):
            return False
        name = os.path.basename(os.path.normpath(path))
        return not self.names or any(regex.search(name) for regex in self.names)

    def _traverse(self, path):
        if self.matches(path):
            print(path)

        if not os.path.isdir(path) or os.path.islink(path):
            return
        try:
            entries = sorted(os.listdir(path))
        except OSError as e:
            print(f"{PROGRAM}: {path}: {e.strerror}", file=sys.stderr)
            self.exit_status = 1
            return
        for entry in entries:
            self._traverse(os.path.join(path, entry))


def main(argv=None):
    """Parses arguments and starts the traversal."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="Search for files in a directory hierarchy.",
        usage="%(prog)s [path ...] [-n name ...] [-t type ...]"
    )
    parser.add_argument('paths', nargs='*', default=['.'], metavar='path',
                        help='Search paths (default: .).')
    parser.add_argument('-n', '--name', dest='names', nargs='+', action='extend', default=[],
                        help='Regular expression matched against entry names.')
    parser.add_argument('-t', '--type', dest='types', nargs='+', action='extend', default=[],
                        choices=sorted(ENTRY_TYPES),
                        help='Entry type: f (file), d (directory), l (link).')

    args = parser.parse_args(argv)

    try:
        names = compile_names(args.names)
    except ValueError as e:
        print(f"{PROGRAM}: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(Finder(names, args.types).run(args.paths))


if __name__ == "__main__":
    main()

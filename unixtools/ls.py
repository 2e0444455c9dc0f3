#!/usr/bin/env python3

"""
Name: ls
Description: list file/directory information
License: perl
"""

import sys
import os
import stat
import pwd
import grp
import argparse
from datetime import datetime

PROGRAM = 'ls'
TIME_FORMAT = '%b %d %y %H:%M'
# Columns of a long listing; True means right-aligned.
LONG_COLUMNS = (False, True, False, False, True, False, False)


def format_mode(mode: int) -> str:
    """
    Formats the permission bits of a mode as 'rwxr-xr-x'.
    """
    perms = ['---', '--x', '-w-', '-wx', 'r--', 'r-x', 'rw-', 'rwx']
    return perms[(mode & 0o700) >> 6] + perms[(mode & 0o070) >> 3] + perms[mode & 0o007]


def entry_type(mode: int) -> str:
    if stat.S_ISDIR(mode):
        return 'd'
    if stat.S_ISLNK(mode):
        return 'l'
    return '-'


def get_pwuid(uid):
    """Safely get username from uid."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def get_grgid(gid):
    """Safely get group name from gid."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def find_files(paths: list, show_hidden: bool):
    """
    Expands the command-line paths: directories list their immediate
    entries (dotfiles only with show_hidden), files are kept as given.
    Returns (files, errors); errors are messages for paths that do not exist.
    """
    files, errors = [], []
    for path in paths:
        if not os.path.lexists(path):
            errors.append(f"{path}: No such file or directory")
        elif os.path.isdir(path):
            try:
                names = sorted(os.listdir(path))
            except OSError as e:
                errors.append(f"{path}: {e.strerror}")
                continue
            files.extend(os.path.join(path, name) for name in names
                         if show_hidden or not name.startswith('.'))
        else:
            files.append(path)
    return files, errors


def long_row(path: str) -> list:
    s = os.lstat(path)
    return [
        entry_type(s.st_mode) + format_mode(s.st_mode),
        str(s.st_nlink),
        get_pwuid(s.st_uid),
        get_grgid(s.st_gid),
        str(s.st_size),
        datetime.fromtimestamp(s.st_mtime).strftime(TIME_FORMAT),
        path,
    ]


def format_output(paths: list) -> str:
    """Formats a long listing with every column aligned."""
    rows = [long_row(path) for path in paths]
    if not rows:
        return ""
    widths = [max(len(row[i]) for row in rows) for i in range(len(LONG_COLUMNS))]
    lines = []
    for row in rows:
        cells = [cell.rjust(width) if right else cell.ljust(width)
                 for cell, width, right in zip(row, widths, LONG_COLUMNS)]
        lines.append("  ".join(cells).rstrip())
    return "\n".join(lines) + "\n"


def main(argv=None):
    """Parses arguments and lists the requested paths."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="List file/directory information.",
        usage="%(prog)s [-al] [path ...]"
    )
    parser.add_argument('paths', nargs='*', default=['.'], metavar='path',
                        help='Files and/or directories (default: .).')
    parser.add_argument('-a', '--all', action='store_true', help='Show all files including dotfiles.')
    parser.add_argument('-l', '--long', action='store_true', help='Use long format.')

    args = parser.parse_args(argv)

    files, errors = find_files(args.paths, args.all)
    for error in errors:
        print(f"{PROGRAM}: {error}", file=sys.stderr)

    if args.long:
        sys.stdout.write(format_output(files))
    else:
        for path in files:
            print(path)

    sys.exit(1 if errors else 0)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Name: unixtools
Description: a program launcher for the unixtools family
License: artistic2
"""

import sys
import argparse
import subprocess

from unixtools import __version__

PROGRAM = 'unixtools'

# Using a set for fast 'in' lookups.
TOOLS = {
    'cal', 'cat', 'comm', 'cut', 'false', 'find', 'fortune', 'grep',
    'head', 'hello', 'ls', 'tail', 'true', 'uniq', 'wc',
}


def tool_command(tool: str, tool_args: list) -> list:
    """Builds the interpreter command line that runs one tool as a module."""
    return [sys.executable, '-m', f'unixtools.{tool}'] + list(tool_args)


def main(argv=None):
    """Parses arguments and launches the specified tool."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="A program launcher for unixtools.",
        usage="%(prog)s [-l | --list] [-V | --version] [-h | --help] tool [arg ...]"
    )
    parser.add_argument(
        '-V', '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    parser.add_argument(
        '-l', '--list',
        action='store_true',
        help='list available tools'
    )
    # This collects the tool name and all subsequent arguments.
    parser.add_argument(
        'command',
        nargs=argparse.REMAINDER,
        help='The tool to run followed by its arguments.'
    )

    args = parser.parse_args(argv)

    # If --list is used, print tools and exit.
    if args.list:
        # Print sorted list for consistent output.
        print("\n".join(sorted(TOOLS)))
        sys.exit(0)

    # If no tool is specified, show the help message.
    if not args.command:
        parser.print_help()
        sys.exit(1)

    tool, tool_args = args.command[0], args.command[1:]

    # Validate that the requested tool is in our list.
    if tool not in TOOLS:
        print(f"{PROGRAM}: unknown tool '{tool}' (try --list)", file=sys.stderr)
        sys.exit(1)

    try:
        completed = subprocess.run(tool_command(tool, tool_args))
    except OSError as e:
        print(f"{PROGRAM}: failed to run '{tool}': {e.strerror}", file=sys.stderr)
        sys.exit(1)
    sys.exit(completed.returncode)


if __name__ == "__main__":
    main()

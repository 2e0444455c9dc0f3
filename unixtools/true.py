#!/usr/bin/env python3
"""
Name: true
Description: exit successfully
License: perl

Arguments are accepted and ignored, as with the standard UNIX `true`.
"""

import sys


def main(argv=None):
    """Exits with a status code of 0."""
    sys.exit(0)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Name: false
Description: exit unsuccessfully
License: perl

Arguments are accepted and ignored, as with the standard UNIX `false`.
"""

import sys


def main(argv=None):
    """Exits with a status code of 1."""
    sys.exit(1)


if __name__ == "__main__":
    main()

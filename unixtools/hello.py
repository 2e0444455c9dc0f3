#!/usr/bin/env python3
"""
Name: hello
Description: print a greeting
License: perl
"""


def main(argv=None):
    """Prints the traditional greeting."""
    print("Hello, world!")


if __name__ == "__main__":
    main()

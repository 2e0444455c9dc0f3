"""
Name: unixtools
Description: a family of small Unix text utilities
License: perl
"""

__version__ = "0.1.0"

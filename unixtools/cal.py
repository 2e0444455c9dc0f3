#!/usr/bin/env python3
"""
Name: cal
Description: displays a calendar
License: gpl
"""

import sys
import re
import argparse
import calendar
from datetime import date

PROGRAM = 'cal'
MONTH_NAMES = ['January', 'February', 'March', 'April', 'May', 'June',
               'July', 'August', 'September', 'October', 'November', 'December']
DAY_HEADER = "Su Mo Tu We Th Fr Sa"
WEEKS_PER_MONTH = 6
REVERSE, RESET = '\x1b[7m', '\x1b[0m'

# --- Argument Parsing Helpers ---

def parse_int(value: str) -> int:
    if not re.fullmatch(r'[+-]?[0-9]+', value):
        raise ValueError(f'Invalid integer "{value}"')
    return int(value)


def parse_year(value: str) -> int:
    year = parse_int(value)
    if not 1 <= year <= 9999:
        raise ValueError(f'year "{value}" not in the range 1 through 9999')
    return year


def parse_month(value: str) -> int:
    """Accepts 1-12 or a unique, case-insensitive prefix of a month name."""
    try:
        month = parse_int(value)
    except ValueError:
        lower = value.lower()
        candidates = [i + 1 for i, name in enumerate(MONTH_NAMES)
                      if name.lower().startswith(lower)]
        if value and len(candidates) == 1:
            return candidates[0]
        raise ValueError(f'Invalid month "{value}"')
    if not 1 <= month <= 12:
        raise ValueError(f'month "{value}" not in the range 1 through 12')
    return month

# --- Formatting and Display Functions ---

def last_day_in_month(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def format_month(year: int, month: int, print_year: bool, today: date) -> list:
    """
    Generates the lines of a single month: a centered title, the day header
    and six week rows, each 20 columns wide plus two spaces of gutter.
    """
    title = MONTH_NAMES[month - 1]
    if print_year:
        title += f" {year}"
    lines = [f"{title:^20}", DAY_HEADER]

    # Sunday is the first column; date.weekday() has Monday as 0.
    first_weekday = (date(year, month, 1).weekday() + 1) % 7
    num_days = last_day_in_month(year, month).day

    cells = ['  '] * first_weekday
    for d in range(1, num_days + 1):
        cell = f"{d:>2}"
        if date(year, month, d) == today:
            cell = f"{REVERSE}{cell}{RESET}"
        cells.append(cell)
    cells.extend(['  '] * (WEEKS_PER_MONTH * 7 - len(cells)))

    for i in range(0, len(cells), 7):
        lines.append(f"{' '.join(cells[i:i + 7]):<20}")

    return [f"{line}  " for line in lines]


def format_year(year: int, today: date) -> list:
    """Formats an entire year, three months per row."""
    lines = [f"{year:>32}"]
    months = [format_month(year, m, False, today) for m in range(1, 13)]
    for m_row in range(0, 12, 3):
        if m_row > 0:
            lines.append("")
        lines.extend("".join(parts) for parts in zip(*months[m_row:m_row + 3]))
    return lines


def main(argv=None):
    """Parses arguments and displays the appropriate calendar."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="Displays a calendar.",
        usage="%(prog)s [-y] [-m month] [year]"
    )
    parser.add_argument('year', nargs='?', help='Year (1-9999).')
    parser.add_argument('-m', '--month', help='Month name or number (1-12).')
    parser.add_argument('-y', '--year', dest='show_current_year', action='store_true',
                        help='Show the whole current year.')

    args = parser.parse_args(argv)

    if args.show_current_year and (args.month or args.year):
        parser.error("-y cannot be used with a month or year")

    try:
        month = parse_month(args.month) if args.month is not None else None
        year = parse_year(args.year) if args.year is not None else None
    except ValueError as e:
        print(f"{PROGRAM}: {e}", file=sys.stderr)
        sys.exit(1)

    # --- Determine what to display ---
    today = date.today()
    if args.show_current_year:
        year = today.year
    elif month is None and year is None:
        month, year = today.month, today.year
    elif year is None:
        year = today.year

    if month is None:
        lines = format_year(year, today)
    else:
        lines = format_month(year, month, True, today)
    print("\n".join(lines))


if __name__ == "__main__":
    main()

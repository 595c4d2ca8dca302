"""Argument validation for the Wave Link CLI."""

import re

from wavelink_cli.exceptions import InvalidPercentError

_INTEGER = re.compile(r"[+-]?\d+")


def parse_percent(value: str, name: str) -> int:
    """Parse a whole-number percentage between 0 and 100 inclusive.

    Args:
        value: Raw command-line argument
        name: Label used in the error message, e.g. ``"Volume"``

    Raises:
        InvalidPercentError: If ``value`` is not a base-10 integer in range
    """
    text = value.strip()
    if not _INTEGER.fullmatch(text):
        raise InvalidPercentError(name, value)
    percent = int(text)
    if percent < 0 or percent > 100:
        raise InvalidPercentError(name, value)
    return percent


def percent_to_fraction(percent: int) -> float:
    return percent / 100

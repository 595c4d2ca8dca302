"""Formatting helpers for human-readable listings."""

import math


def format_percent(value: float) -> str:
    """Render a 0.0-1.0 fraction as a whole percentage, e.g. ``0.5`` -> ``50%``."""
    return f"{math.floor(value * 100 + 0.5)}%"


def format_flag(value: bool) -> str:
    return "Yes" if value else "No"


def format_optional_percent(value: float | None) -> str:
    return format_percent(value) if value is not None else "unknown"

"""Rounding and percentage formatting for display."""

import math


def round_to(value: float, digits: int) -> float:
    """Round half away from zero to ``digits`` decimal places.

    Python's built-in round() uses banker's rounding, which shows 0.125 as
    0.12; tables and notes expect 0.13.

    Examples:
        >>> round_to(0.125, 2)
        0.13
        >>> round_to(-2.5, 0)
        -3.0
    """
    factor = 10**digits
    return math.copysign(math.floor(abs(value) * factor + 0.5) / factor, value)


def format_number(value: float, digits: int) -> str:
    """Round ``value`` and drop trailing zeros.

    Examples:
        >>> format_number(97.6423, 2)
        '97.64'
        >>> format_number(50.0, 2)
        '50'
    """
    text = f"{round_to(value, digits):.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def format_percent_delta(value: float, digits: int = 2) -> str:
    """Format a percentage deviation with an explicit sign for increases.

    Examples:
        >>> format_percent_delta(12.3456)
        '+12.35%'
        >>> format_percent_delta(-3.0)
        '-3%'
        >>> format_percent_delta(0.0)
        '0%'
    """
    sign = "+" if value > 0 else ""
    return f"{sign}{format_number(value, digits)}%"

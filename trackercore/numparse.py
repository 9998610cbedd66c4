"""Strict parsing of plain decimal numbers."""

from __future__ import annotations

_DIGITS = "0123456789"


def parse_double(text: str) -> float:
    """Parse an optional leading '-', digits and at most one '.'.

    Raises ValueError on any other character. An empty string gives 0.0.
    """
    sign = 1.0
    number = 0.0
    factor = 1.0
    point_read = False

    for position, char in enumerate(text):
        if char == "-" and position == 0:
            sign = -1.0
        elif char in _DIGITS:
            digit = ord(char) - ord("0")
            if point_read:
                factor *= 0.1
                number += digit * factor
            else:
                number = number * 10 + digit
        elif char == ".":
            if point_read:
                raise ValueError(f"more than one decimal point in {text!r}")
            point_read = True
        else:
            raise ValueError(f"invalid character {char!r} in {text!r}")

    return number * sign


def parse_int(text: str) -> int:
    """Parse an optional leading '-' followed by digits.

    Raises ValueError on any other character. An empty string gives 0.
    """
    sign = 1
    number = 0

    for position, char in enumerate(text):
        if char == "-" and position == 0:
            sign = -1
        elif char in _DIGITS:
            number = number * 10 + (ord(char) - ord("0"))
        else:
            raise ValueError(f"invalid character {char!r} in {text!r}")

    return number * sign
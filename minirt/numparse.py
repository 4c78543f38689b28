"""Lenient decimal number reading used by the scene format."""

from __future__ import annotations

import re

_NUMBER = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)(\.([0-9]*))?")


def _accumulate(digits: str) -> float:
    value = 0.0
    for ch in digits:
        value = value * 10 + (ord(ch) - ord("0"))
    return value


def _settle(value: float, sign: float) -> float:
    if value == 0.0 and sign < 0.0:
        return -1.0
    if value < 0.0 and sign > 0.0:
        return -1.0
    if value > 0.0 and sign < 0.0:
        return 0.0
    return value


def parse_number(text: str) -> float:
    """Read a leading decimal number from ``text``; trailing text is ignored.

    The rules follow the scene reader exactly, including its quirks: a
    negative zero (or a bare ``-``) reads as ``-1.0`` and a negative number
    ending in a bare ``.`` reads as ``0.0``.
    """
    if not text:
        return 0.0
    match = _NUMBER.match(text)
    sign = -1.0 if match.group(1) == "-" else 1.0
    value = _accumulate(match.group(2))
    if match.group(3) is not None:
        fraction = match.group(4)
        if fraction:
            value += _accumulate(fraction) / 10.0 ** len(fraction)
        else:
            value = _settle(sign * value, sign)
    value = sign * value if value != 0.0 else 0.0
    return _settle(value, sign)
"""Lenient numeric parsing for raw form input.

Both parsers read the longest numeric prefix of the input and ignore
whatever follows it ("42px" -> 42). Input with no numeric prefix yields the
not-a-number sentinel (`NAN`) instead of raising; validation further up is
expected to reject it.
"""
from __future__ import annotations

import math
import re
from typing import Any, Union

NAN = float('nan')

_HEX_PREFIX = re.compile(r'([+-]?)0[xX]')
_HEX_DIGITS = re.compile(r'[0-9a-fA-F]+')
_INT_PREFIX = re.compile(r'([+-]?)([0-9]+)')
_FLOAT_PREFIX = re.compile(
    r'[+-]?(?:Infinity|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)'
)


def _normalize(raw: Any) -> str:
    if raw is None:
        return ''
    if isinstance(raw, bool):
        return 'true' if raw else 'false'
    return str(raw).lstrip()


def parse_int(raw: Any) -> Union[int, float]:
    """Parse the leading integer of `raw`; NAN when there is none.

    A `0x` prefix switches to hexadecimal.
    """
    text = _normalize(raw)

    hex_match = _HEX_PREFIX.match(text)
    if hex_match:
        digits = _HEX_DIGITS.match(text, hex_match.end())
        if digits is None:
            return NAN
        value = int(digits.group(0), 16)
        return -value if hex_match.group(1) == '-' else value

    match = _INT_PREFIX.match(text)
    if match is None:
        return NAN
    value = int(match.group(2))
    return -value if match.group(1) == '-' else value


def parse_float(raw: Any) -> float:
    """Parse the leading decimal literal of `raw`; NAN when there is none."""
    text = _normalize(raw)
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return NAN
    literal = match.group(0)
    if literal.lstrip('+-') == 'Infinity':
        return -math.inf if literal.startswith('-') else math.inf
    return float(literal)


def is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)

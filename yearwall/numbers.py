"""
Numeric helpers shared by parameter parsing and geometry

Query values are parsed the way browsers parse them: the longest numeric
prefix wins and trailing garbage is ignored. A value with no numeric prefix
yields None so callers can substitute their default.
"""

import math
import re

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int_prefix(value):
    """'50%' -> 50, '12.9' -> 12, 'abc' -> None"""
    if value is None:
        return None
    match = _INT_PREFIX.match(value)
    return int(match.group(1)) if match else None


def parse_float_prefix(value):
    """'3.5h' -> 3.5, '-2' -> -2.0, 'abc' -> None"""
    if value is None:
        return None
    match = _FLOAT_PREFIX.match(value)
    if not match:
        return None
    number = float(match.group(1))
    return number if math.isfinite(number) else None


def round_half_up(value):
    """Round .5 toward positive infinity instead of to the even neighbour"""
    return math.floor(value + 0.5)


def clamp(value, low, high):
    return max(low, min(high, value))

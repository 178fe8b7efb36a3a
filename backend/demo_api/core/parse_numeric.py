"""Lenient Number Parsing: query and path values to numbers.

Invariants:
    - Never raises: unparseable text yields NaN, callers decide what NaN means
    - Whitespace around the value is ignored; blank text is 0
    - Accepts decimal/exponent forms, signed Infinity and 0x/0o/0b integer literals
    - Rejects Python-only spellings ("inf", "nan", "1_000")

Design Decisions:
    - Regex whitelist over bare float(): float() accepts underscores and
      "inf"/"nan", which existing API-test suites expect to be rejected
"""

import math
import re

from demo_api.core.domain_types import Numeric


_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INFINITY = re.compile(r"[+-]?Infinity")
_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}


def parse_numeric(text: str) -> Numeric:
    """Parse text as a number, returning NaN when it is not one."""
    value = text.strip()
    if not value:
        return Numeric(0.0)
    if _DECIMAL.fullmatch(value):
        return Numeric(float(value))
    if _INFINITY.fullmatch(value):
        return Numeric(-math.inf if value.startswith("-") else math.inf)
    base = _RADIX_PREFIXES.get(value[:2].lower())
    if base is not None and len(value) > 2 and "_" not in value:
        try:
            return Numeric(float(int(value[2:], base)))
        except ValueError:
            return Numeric(math.nan)
    return Numeric(math.nan)


def as_json_number(value: float) -> int | float:
    """Integral floats render as ints (2, not 2.0)."""
    if math.isfinite(value) and value.is_integer():
        return int(value)
    return value

"""
Lenient parsing and display formatting for raw form values.

Form fields arrive as strings. A value is read the way a browser form reads a
number: leading whitespace is skipped and the longest leading numeric prefix
is used, so "72 kg" reads as 72 and "120.5" reads as 120 when an integer is
wanted. Anything without a numeric prefix, and non-finite results, read as
None.
"""

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal

# ASCII digits only; other Unicode decimal digits are not numbers on the form.
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")

NOT_AVAILABLE = "N/A"

# Wide enough to quantize any finite float without overflow.
_DECIMAL_CONTEXT = Context(prec=400)


def parse_number(raw: object) -> float | None:
    """Read a float from the leading numeric prefix of a raw value."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int | float):
        try:
            value = float(raw)
        except OverflowError:
            return None
    else:
        match = _FLOAT_PREFIX.match(str(raw))
        if match is None:
            return None
        value = float(match.group(1))
    return value if math.isfinite(value) else None


def parse_integer(raw: object) -> int | None:
    """Read a base-10 integer from the leading digits of a raw value."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return math.trunc(raw) if math.isfinite(raw) else None
    match = _INT_PREFIX.match(str(raw))
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # beyond the interpreter's integer string length limit
        return None


def _quantize(value: float, places: int) -> Decimal:
    quantum = Decimal(1).scaleb(-places)
    return Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT)


def round_half_away(value: float, places: int = 1) -> float:
    """Round using the exact binary value, with ties going away from zero."""
    return float(_quantize(value, places))


def format_fixed(value: float | None, places: int = 1) -> str:
    """Format to a fixed number of decimal places, or N/A."""
    if value is None:
        return NOT_AVAILABLE
    return str(_quantize(value, places))


def format_plain(value: float | None) -> str:
    """Shortest plain form of a number: 98.0 -> "98", 12.5 -> "12.5"."""
    if value is None:
        return NOT_AVAILABLE
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)

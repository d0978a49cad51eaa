"""Number Format — the single definition of display text <-> number conversion.

Invariants:
    - parse_number never raises: text without a numeric prefix yields NaN
    - round_to_precision rounds half away from zero on the exact binary value
    - format_number emits the shortest round-trip digits, no trailing zeros, no trailing "."
    - Negative zero renders as "0"; non-finite values render as NaN / Infinity / -Infinity
    - Plain notation for decimal exponents in (-7, 21), scientific (1.5e+21, 1e-7) otherwise

Design Decisions:
    - Pure functions, unit-tested independently of the engine state machine
    - decimal.Decimal for rounding: Decimal(float) is exact, so ties are decided on
      the value the double actually holds (1.005 is 1.00499..., rounds down)
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP

from calculator.core.domain_types import Precision


# Leading numeric prefix: sign, then Infinity or digits with optional fraction/exponent.
_NUMBER_PREFIX = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
)

# Magnitudes at or above this are left unrounded and rendered in exponent form.
PLAIN_NOTATION_LIMIT: float = 1e21


def parse_number(text: str) -> float:
    """Parse the longest numeric prefix of text. "3." -> 3.0, "Error" -> nan."""
    match = _NUMBER_PREFIX.match(text)
    if not match:
        return math.nan
    return float(match.group(1))


def round_to_precision(value: float, precision: Precision) -> float:
    """Round to `precision` decimal places, half away from zero."""
    if not math.isfinite(value) or abs(value) >= PLAIN_NOTATION_LIMIT:
        return value
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """Render a float as minimal display text."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k  # position of the decimal point relative to the digits

    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + body


def format_result(value: float, precision: Precision) -> str:
    """Round then format: the text an evaluation writes to display and history."""
    return format_number(round_to_precision(value, precision))

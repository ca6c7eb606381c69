"""
Number Formatting

Renders numbers for the formula string and display lines.

Inputs are shown the way they were typed: whole numbers without a trailing
".0", anything else in shortest round-trip form. Computed weights are shown
with exactly two decimals, rounding half away from zero on the exact binary
value, so 0.125 renders as "0.13".
"""

import math
from decimal import Decimal, ROUND_HALF_UP

_Q_CENTS = Decimal("0.01")


def format_input(value: float) -> str:
    """Render an entered value: 50.0 -> "50", 12.5 -> "12.5"."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if 1e-6 <= abs(value) < 1e-4:
        return format(Decimal(repr(value)), "f")  # repr goes exponential below 1e-4
    return repr(value)


def format_fixed(value: float, places: int = 2) -> str:
    """Render a computed value with a fixed number of decimals."""
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return format_input(value)
    if value == 0:
        value = 0.0  # -0.0 renders unsigned
    quantum = _Q_CENTS if places == 2 else Decimal(1).scaleb(-places)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:.{places}f}"


__all__ = [
    "format_input",
    "format_fixed",
]

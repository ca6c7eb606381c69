"""
Rate Engine Data

Reference configuration for the weight calculations.

Structure:
    - reference/: Static reference data (divisors, unit conversion factors)
"""

from .reference import (
    CARRIER_DIVISORS,
    DEFAULT_CUSTOM_DIVISOR,
    IMPERIAL_DIM_FACTOR,
    CM_PER_INCH,
    LB_PER_KG,
    DIMENSION_UNITS,
    WEIGHT_UNITS,
)

__all__ = [
    # Divisor config
    "CARRIER_DIVISORS",
    "DEFAULT_CUSTOM_DIVISOR",
    "IMPERIAL_DIM_FACTOR",
    # Unit config
    "CM_PER_INCH",
    "LB_PER_KG",
    "DIMENSION_UNITS",
    "WEIGHT_UNITS",
]

"""Rate engine reference data: divisors and unit conversion factors."""

from .divisors import (
    CARRIER_DIVISORS,
    DEFAULT_CUSTOM_DIVISOR,
    IMPERIAL_DIM_FACTOR,
)
from .units import (
    CM_PER_INCH,
    LB_PER_KG,
    DIMENSION_UNITS,
    WEIGHT_UNITS,
)


def validate_divisors() -> None:
    """
    Validate divisor configuration integrity.

    Raises ValueError if any carrier divisor is missing or not positive.
    Called at import time to fail fast on configuration errors.
    """
    errors = []

    for carrier, divisor in CARRIER_DIVISORS.items():
        if divisor is None or divisor <= 0:
            errors.append(f"{carrier}: divisor must be positive, got {divisor!r}")

    if DEFAULT_CUSTOM_DIVISOR <= 0:
        errors.append(f"DEFAULT_CUSTOM_DIVISOR must be positive, got {DEFAULT_CUSTOM_DIVISOR!r}")

    if IMPERIAL_DIM_FACTOR <= 0:
        errors.append(f"IMPERIAL_DIM_FACTOR must be positive, got {IMPERIAL_DIM_FACTOR!r}")

    if set(DIMENSION_UNITS) != set(WEIGHT_UNITS):
        errors.append("DIMENSION_UNITS and WEIGHT_UNITS must cover the same unit systems")

    if errors:
        raise ValueError("Divisor configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_divisors()

__all__ = [
    # Divisors
    "CARRIER_DIVISORS",
    "DEFAULT_CUSTOM_DIVISOR",
    "IMPERIAL_DIM_FACTOR",
    # Units
    "CM_PER_INCH",
    "LB_PER_KG",
    "DIMENSION_UNITS",
    "WEIGHT_UNITS",
    # Validation
    "validate_divisors",
]

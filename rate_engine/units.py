"""
Unit Conversion

Stateless conversion between metric (cm / kg) and imperial (in / lb).
Converting A -> B -> A returns the original value within float tolerance.
"""

from .data import CM_PER_INCH, LB_PER_KG, DIMENSION_UNITS, WEIGHT_UNITS
from .items import UnitSystem

DIMENSION = "dimension"
WEIGHT = "weight"


def convert_unit(value: float, from_system, to_system, kind: str) -> float:
    """
    Convert a dimension or weight between unit systems.

    Args:
        value: Value in from_system units
        from_system: UnitSystem (or its name) the value is expressed in
        to_system: UnitSystem (or its name) to convert to
        kind: "dimension" (cm <-> in) or "weight" (kg <-> lb)

    Returns:
        Value in to_system units (unchanged when the systems match)

    Raises:
        ValueError: If kind or a unit system name is unknown
    """
    if kind not in (DIMENSION, WEIGHT):
        raise ValueError(f"kind must be '{DIMENSION}' or '{WEIGHT}', got '{kind}'")

    from_system = UnitSystem.parse(from_system)
    to_system = UnitSystem.parse(to_system)

    if from_system == to_system:
        return value

    if kind == DIMENSION:
        if to_system == UnitSystem.IMPERIAL:
            return value / CM_PER_INCH   # cm -> in
        return value * CM_PER_INCH       # in -> cm

    if to_system == UnitSystem.IMPERIAL:
        return value * LB_PER_KG         # kg -> lb
    return value / LB_PER_KG             # lb -> kg


def unit_labels(unit_system) -> tuple[str, str]:
    """Return (dimension_unit, weight_unit), e.g. ("cm", "kg")."""
    system = UnitSystem.parse(unit_system).value
    return DIMENSION_UNITS[system], WEIGHT_UNITS[system]


__all__ = [
    "DIMENSION",
    "WEIGHT",
    "convert_unit",
    "unit_labels",
]

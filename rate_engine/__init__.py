"""
Rate Engine

Chargeable freight weight from shipment dimensions and gross weight, using
carrier volumetric divisors, with totals across shipment items.
"""

from .calculate_weights import (
    compute_volumetric_weight,
    resolve_divisor,
    get_calculation_result,
    aggregate,
    calculate_weights,
    summarize,
)
from .items import (
    Carrier,
    UnitSystem,
    ShipmentItem,
    CalculationResult,
    Totals,
    add_item,
    remove_item,
    update_item,
    reset_items,
)
from .units import convert_unit, unit_labels
from .version import VERSION

__all__ = [
    # Engine
    "compute_volumetric_weight",
    "resolve_divisor",
    "convert_unit",
    "get_calculation_result",
    "aggregate",
    # DataFrame pipeline
    "calculate_weights",
    "summarize",
    # Data structures
    "Carrier",
    "UnitSystem",
    "ShipmentItem",
    "CalculationResult",
    "Totals",
    # List helpers
    "add_item",
    "remove_item",
    "update_item",
    "reset_items",
    # Misc
    "unit_labels",
    "VERSION",
]

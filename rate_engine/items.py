"""
Shipment Items

Data structures passed into and returned from the rate engine, plus the
list helpers a form layer uses to add, edit, remove and reset items.

The engine only ever reads items. Every helper here returns a new list and
leaves its input untouched.
"""

import math
import uuid
from dataclasses import dataclass, fields, replace
from enum import Enum

from .data import DEFAULT_CUSTOM_DIVISOR


# =============================================================================
# ENUMS
# =============================================================================

class Carrier(str, Enum):
    """Carrier whose divisor applies to an item."""

    IATA = "IATA"
    DHL = "DHL"
    FEDEX = "FedEx"
    UPS = "UPS"
    CUSTOM = "Custom"

    @classmethod
    def parse(cls, value) -> "Carrier":
        """
        Coerce a carrier name (case-insensitive) or Carrier to a Carrier.

        Raises:
            ValueError: If the name matches no carrier
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for carrier in cls:
            if carrier.value.lower() == text:
                return carrier
        valid = ", ".join(c.value for c in cls)
        raise ValueError(f"Unknown carrier '{value}'. Expected one of: {valid}")


class UnitSystem(str, Enum):
    """Measurement system shared by every item in a calculation."""

    METRIC = "metric"
    IMPERIAL = "imperial"

    @classmethod
    def parse(cls, value) -> "UnitSystem":
        """
        Coerce a unit system name (case-insensitive) or UnitSystem.

        Raises:
            ValueError: If the name matches no unit system
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for system in cls:
            if system.value == text:
                return system
        valid = ", ".join(s.value for s in cls)
        raise ValueError(f"Unknown unit system '{value}'. Expected one of: {valid}")


# =============================================================================
# DATA STRUCTURES
# =============================================================================

@dataclass(frozen=True)
class ShipmentItem:
    """
    One line of a shipment.

    Attributes:
        item_id        - Opaque identifier, unique within a list
        length         - cm (metric) or in (imperial)
        width          - cm (metric) or in (imperial)
        height         - cm (metric) or in (imperial)
        gross_weight   - kg (metric) or lb (imperial)
        carrier        - Carrier whose divisor applies
        custom_divisor - Divisor used only when carrier is Custom
    """

    item_id: str
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0
    gross_weight: float = 0.0
    carrier: Carrier = Carrier.DHL
    custom_divisor: float | None = DEFAULT_CUSTOM_DIVISOR


@dataclass(frozen=True)
class CalculationResult:
    """Weights derived from one item. Recomputed on demand, never stored."""

    volumetric_weight: float
    chargeable_weight: float
    formula: str
    uses_volumetric_weight: bool = False


@dataclass(frozen=True)
class Totals:
    """Sums across every item in a list."""

    total_volumetric_weight: float = 0.0
    total_gross_weight: float = 0.0
    total_chargeable_weight: float = 0.0
    item_count: int = 0


# =============================================================================
# LIST HELPERS
# =============================================================================

def coerce_number(value) -> float:
    """Coerce form input to a float. Missing, invalid or NaN input becomes 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


def new_item(item_id: str | None = None) -> ShipmentItem:
    """Create a placeholder item with a fresh identifier unless one is given."""
    return ShipmentItem(item_id=item_id if item_id is not None else uuid.uuid4().hex)


def add_item(items: list[ShipmentItem]) -> list[ShipmentItem]:
    """Append a new default item."""
    return [*items, new_item()]


def remove_item(items: list[ShipmentItem], item_id: str) -> list[ShipmentItem]:
    """Drop the item with the given identifier. Unknown identifiers are ignored."""
    return [item for item in items if item.item_id != item_id]


def update_item(items: list[ShipmentItem], item_id: str, **changes) -> list[ShipmentItem]:
    """
    Replace fields on the item with the given identifier.

    Carrier names are coerced with Carrier.parse. Numeric fields go through
    coerce_number, except custom_divisor which may be None.

    Raises:
        TypeError: If a field name is not a ShipmentItem field
        ValueError: If a carrier name is unknown
    """
    valid_fields = {f.name for f in fields(ShipmentItem)}
    unknown = sorted(set(changes) - valid_fields)
    if unknown:
        raise TypeError(f"Unknown ShipmentItem field(s): {', '.join(unknown)}")

    if "carrier" in changes:
        changes["carrier"] = Carrier.parse(changes["carrier"])
    for name in ("length", "width", "height", "gross_weight"):
        if name in changes:
            changes[name] = coerce_number(changes[name])
    if changes.get("custom_divisor") is not None:
        changes["custom_divisor"] = coerce_number(changes["custom_divisor"])

    return [
        replace(item, **changes) if item.item_id == item_id else item
        for item in items
    ]


def reset_items() -> list[ShipmentItem]:
    """Replace the whole list with one default item."""
    return [new_item("1")]


__all__ = [
    "Carrier",
    "UnitSystem",
    "ShipmentItem",
    "CalculationResult",
    "Totals",
    "coerce_number",
    "new_item",
    "add_item",
    "remove_item",
    "update_item",
    "reset_items",
]

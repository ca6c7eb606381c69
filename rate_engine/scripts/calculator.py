"""
Chargeable Weight Calculator
============================

Interactive CLI tool to calculate volumetric and chargeable weight for one or
more shipment items.

Usage:
    python -m rate_engine.scripts.calculator
    python -m rate_engine.scripts.calculator --unit-system imperial
"""

import argparse

from rate_engine.calculate_weights import (
    aggregate,
    describe_result,
    describe_totals,
    get_calculation_result,
)
from rate_engine.data import CARRIER_DIVISORS, DEFAULT_CUSTOM_DIVISOR, IMPERIAL_DIM_FACTOR
from rate_engine.formatting import format_input
from rate_engine.items import Carrier, UnitSystem, add_item, coerce_number, update_item
from rate_engine.units import unit_labels
from rate_engine.version import VERSION


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line flags."""
    parser = argparse.ArgumentParser(description="Chargeable weight calculator")
    parser.add_argument(
        "--unit-system",
        choices=[s.value for s in UnitSystem],
        default=UnitSystem.METRIC.value,
        help="Unit system for every item (default: metric)",
    )
    return parser.parse_args(argv)


def prompt_carrier() -> Carrier:
    """Prompt until a known carrier is chosen."""
    carriers = list(Carrier)
    print("\nCarrier:")
    for i, carrier in enumerate(carriers, start=1):
        divisor = CARRIER_DIVISORS.get(carrier.value, "custom")
        print(f"  {i}. {carrier.value} ({divisor})")

    while True:
        choice = input(f"Select (1-{len(carriers)}) [default: 2]: ").strip()
        if not choice:
            return Carrier.DHL
        if choice.isdigit() and 1 <= int(choice) <= len(carriers):
            return carriers[int(choice) - 1]
        try:
            return Carrier.parse(choice)
        except ValueError as e:
            print(f"  {e}")


def get_user_input(unit_system: UnitSystem) -> list:
    """Prompt user for shipment items."""
    dimension_unit, weight_unit = unit_labels(unit_system)
    items = []

    while True:
        print(f"\n--- Item {len(items) + 1} ---")
        items = add_item(items)
        item_id = items[-1].item_id

        length = input(f"Length ({dimension_unit}): ")
        width = input(f"Width ({dimension_unit}): ")
        height = input(f"Height ({dimension_unit}): ")
        gross_weight = input(f"Gross weight ({weight_unit}): ")
        carrier = prompt_carrier()

        custom_divisor = DEFAULT_CUSTOM_DIVISOR
        if carrier == Carrier.CUSTOM:
            entered = input(f"Custom divisor [default: {DEFAULT_CUSTOM_DIVISOR}]: ").strip()
            custom_divisor = coerce_number(entered) if entered else DEFAULT_CUSTOM_DIVISOR

        items = update_item(
            items, item_id,
            length=length,
            width=width,
            height=height,
            gross_weight=gross_weight,
            carrier=carrier,
            custom_divisor=custom_divisor,
        )

        more = input("\nAdd another item? (y/N): ").strip().lower()
        if more != "y":
            return items


def print_results(items: list, unit_system: UnitSystem) -> None:
    """Print per-item results and totals."""
    print("\n" + "=" * 50)
    print("CALCULATION RESULTS")
    print("=" * 50)

    dimension_unit, weight_unit = unit_labels(unit_system)
    for i, item in enumerate(items, start=1):
        result = get_calculation_result(item, unit_system)
        dims = "x".join(format_input(v) for v in (item.length, item.width, item.height))
        print(f"\nItem {i}: {dims} {dimension_unit}, "
              f"{format_input(item.gross_weight)} {weight_unit}, {item.carrier.value}")
        for line in describe_result(item, result, unit_system):
            print(f"  {line}")
        print(f"  Billed on: {'volumetric' if result.uses_volumetric_weight else 'gross'} weight")

    print("\n--- Totals ---")
    for line in describe_totals(aggregate(items, unit_system), unit_system):
        print(line)
    print()


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    unit_system = UnitSystem.parse(args.unit_system)

    print("\n=== Chargeable Weight Calculator ===")
    print(f"Version: {VERSION}")
    print(f"Unit system: {unit_system.value}")
    if unit_system == UnitSystem.IMPERIAL:
        print(f"Note: imperial mode divides by {IMPERIAL_DIM_FACTOR} for every carrier")

    try:
        items = get_user_input(unit_system)
        print_results(items, unit_system)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()

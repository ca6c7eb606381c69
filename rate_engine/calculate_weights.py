"""
Chargeable Weight Calculator

Two entry points over the same arithmetic:

    Per item    get_calculation_result(item, unit_system) and
                aggregate(items, unit_system), for a form that recomputes on
                every input change.

    DataFrame   calculate_weights(df, unit_system), DataFrame in, DataFrame
                out, for batches of items from any source (CSV, manual
                creation) as long as the required columns are present.

Nothing here holds state between calls. The unit system is passed in on
every call and applies to every item of that call.

REQUIRED INPUT COLUMNS
----------------------
    item_id         - Opaque identifier
    length          - cm (metric) or in (imperial)
    width           - cm (metric) or in (imperial)
    height          - cm (metric) or in (imperial)
    gross_weight    - kg (metric) or lb (imperial)
    carrier         - IATA, DHL, FedEx, UPS or Custom
    custom_divisor  - Optional; used only for Custom (null -> 5000)

OUTPUT COLUMNS ADDED
--------------------
    supplement_items() adds:
        - volume, divisor

    calculate() adds:
        - volumetric_weight, uses_volumetric_weight, chargeable_weight
        - formula
        - unit_system, calculator_version

USAGE
-----
    from rate_engine.calculate_weights import get_calculation_result, aggregate
    result = get_calculation_result(item, UnitSystem.METRIC)
    totals = aggregate(items, UnitSystem.METRIC)

    from rate_engine.calculate_weights import calculate_weights, summarize
    df = calculate_weights(df, "metric")
    totals_df = summarize(df)
"""

import logging
import math
from typing import Iterable

import polars as pl

from .columns import INPUT_SCHEMA, REQUIRED_INPUT_COLS
from .data import CARRIER_DIVISORS, DEFAULT_CUSTOM_DIVISOR, IMPERIAL_DIM_FACTOR
from .formatting import format_fixed, format_input
from .items import Carrier, CalculationResult, ShipmentItem, Totals, UnitSystem
from .units import unit_labels
from .version import VERSION

logger = logging.getLogger(__name__)


# =============================================================================
# PER-ITEM ENGINE
# =============================================================================

def compute_volumetric_weight(
    length: float,
    width: float,
    height: float,
    divisor: float,
    unit_system
) -> float:
    """
    Volumetric weight from dimensions.

    Metric divides the volume by the carrier divisor. Imperial always divides
    by IMPERIAL_DIM_FACTOR (166) and ignores the divisor argument.

    Inputs are not validated: zero dimensions give zero, a negative dimension
    gives a negative weight, and a zero divisor gives infinity (NaN for a
    zero volume).
    """
    volume = length * width * height
    if UnitSystem.parse(unit_system) == UnitSystem.IMPERIAL:
        return volume / IMPERIAL_DIM_FACTOR
    if divisor == 0:
        return math.copysign(math.inf, volume) if volume != 0 else math.nan
    return volume / divisor


def resolve_divisor(item: ShipmentItem) -> float:
    """
    Divisor for an item's carrier.

    Custom uses item.custom_divisor when it is present and positive, and
    falls back to DEFAULT_CUSTOM_DIVISOR otherwise. Every other carrier uses
    its fixed value from CARRIER_DIVISORS.
    """
    carrier = Carrier.parse(item.carrier)

    if carrier == Carrier.CUSTOM:
        if item.custom_divisor is not None and item.custom_divisor > 0:
            return item.custom_divisor
        logger.debug(
            "Item %s: custom divisor %r not usable, defaulting to %s",
            item.item_id, item.custom_divisor, DEFAULT_CUSTOM_DIVISOR,
        )
        return DEFAULT_CUSTOM_DIVISOR

    return CARRIER_DIVISORS[carrier.value]


def build_formula(
    length: float,
    width: float,
    height: float,
    divisor: float,
    volumetric_weight: float,
    unit_system
) -> str:
    """
    Human-readable arithmetic behind a volumetric weight.

    Imperial always shows 166 as the divisor, whatever the carrier.

    Example:
        "(50 × 40 × 30) ÷ 5000 = 12.00 kg"
    """
    system = UnitSystem.parse(unit_system)
    _, weight_unit = unit_labels(system)
    shown_divisor = IMPERIAL_DIM_FACTOR if system == UnitSystem.IMPERIAL else divisor

    return (
        f"({format_input(length)} × {format_input(width)} × {format_input(height)})"
        f" ÷ {format_input(shown_divisor)}"
        f" = {format_fixed(volumetric_weight)} {weight_unit}"
    )


def get_calculation_result(item: ShipmentItem, unit_system) -> CalculationResult:
    """
    Calculate volumetric and chargeable weight for one item.

    Chargeable weight is max(volumetric_weight, gross_weight), so it is never
    below either of them.
    """
    divisor = resolve_divisor(item)
    volumetric_weight = compute_volumetric_weight(
        item.length, item.width, item.height, divisor, unit_system
    )
    chargeable_weight = max(volumetric_weight, item.gross_weight)

    return CalculationResult(
        volumetric_weight=volumetric_weight,
        chargeable_weight=chargeable_weight,
        formula=build_formula(
            item.length, item.width, item.height,
            divisor, volumetric_weight, unit_system,
        ),
        uses_volumetric_weight=volumetric_weight > item.gross_weight,
    )


def aggregate(items: Iterable[ShipmentItem], unit_system) -> Totals:
    """
    Sum volumetric, gross and chargeable weight across items.

    Each total is summed independently from the per-item results. An empty
    list gives all-zero totals.
    """
    total_volumetric = 0.0
    total_gross = 0.0
    total_chargeable = 0.0
    count = 0

    for item in items:
        result = get_calculation_result(item, unit_system)
        total_volumetric += result.volumetric_weight
        total_gross += item.gross_weight
        total_chargeable += result.chargeable_weight
        count += 1

    return Totals(
        total_volumetric_weight=total_volumetric,
        total_gross_weight=total_gross,
        total_chargeable_weight=total_chargeable,
        item_count=count,
    )


# =============================================================================
# DISPLAY
# =============================================================================

def describe_result(item: ShipmentItem, result: CalculationResult, unit_system) -> list[str]:
    """Read-only display lines for one item's result."""
    _, weight_unit = unit_labels(unit_system)
    return [
        f"Formula: {result.formula}",
        f"Volumetric Weight: {format_fixed(result.volumetric_weight)} {weight_unit}",
        f"Gross Weight: {format_fixed(item.gross_weight)} {weight_unit}",
        f"Chargeable Weight: {format_fixed(result.chargeable_weight)} {weight_unit}",
    ]


def describe_totals(totals: Totals, unit_system) -> list[str]:
    """Read-only display lines for a list's totals."""
    _, weight_unit = unit_labels(unit_system)
    return [
        f"Total Items: {totals.item_count}",
        f"Total Volumetric: {format_fixed(totals.total_volumetric_weight)} {weight_unit}",
        f"Total Gross: {format_fixed(totals.total_gross_weight)} {weight_unit}",
        f"Total Chargeable: {format_fixed(totals.total_chargeable_weight)} {weight_unit}",
    ]


# =============================================================================
# DATAFRAME PIPELINE
# =============================================================================

def calculate_weights(df: pl.DataFrame, unit_system) -> pl.DataFrame:
    """
    Calculate chargeable weights for an item DataFrame.

    This is the batch entry point. Takes raw item rows and returns the same
    DataFrame with all calculation columns appended.

    Args:
        df: Item DataFrame with required columns (see module docstring)
        unit_system: UnitSystem (or its name) applied to every row

    Returns:
        DataFrame with supplemented data, weights and formulas
    """
    df = supplement_items(df)
    df = calculate(df, unit_system)
    return df


def supplement_items(df: pl.DataFrame) -> pl.DataFrame:
    """
    Validate input and add volume and divisor columns.

    Raises:
        ValueError: If required columns are missing or a carrier is unknown
    """
    _validate_columns(df)
    df = _normalize_inputs(df)
    df = _add_volume(df)
    df = _add_divisor(df)
    return df


def _validate_columns(df: pl.DataFrame) -> None:
    """Raise ValueError listing any required input columns that are missing."""
    missing = [c for c in REQUIRED_INPUT_COLS if c not in df.columns]
    if missing:
        raise ValueError(
            f"{len(missing)} required column(s) missing: {', '.join(missing)}"
        )


def _normalize_inputs(df: pl.DataFrame) -> pl.DataFrame:
    """
    Cast numeric columns to Float64 and canonicalize carrier names.

    Carrier names are matched case-insensitively ("fedex" -> "FedEx").
    A missing custom_divisor column is added as nulls.
    """
    if "custom_divisor" not in df.columns:
        df = df.with_columns(pl.lit(None, dtype=pl.Float64).alias("custom_divisor"))

    carrier_names = {}
    unknown = []
    for raw in df["carrier"].cast(pl.Utf8).unique().to_list():
        try:
            carrier_names[raw] = Carrier.parse(raw).value
        except ValueError:
            unknown.append(str(raw))

    if unknown:
        carrier = pl.col("carrier").cast(pl.Utf8)
        unknown_count = df.filter(carrier.is_in(unknown) | carrier.is_null()).height
        raise ValueError(
            f"{unknown_count} item(s) have an unknown carrier: {', '.join(sorted(unknown))}. "
            f"Expected one of: {', '.join(c.value for c in Carrier)}"
        )

    df = df.with_columns([
        pl.col("item_id").cast(pl.Utf8),
        pl.col("length").cast(pl.Float64),
        pl.col("width").cast(pl.Float64),
        pl.col("height").cast(pl.Float64),
        pl.col("gross_weight").cast(pl.Float64),
        pl.col("custom_divisor").cast(pl.Float64),
        pl.col("carrier").cast(pl.Utf8),
    ])

    if carrier_names:
        df = df.with_columns(
            pl.col("carrier").replace_strict(carrier_names, return_dtype=pl.Utf8)
        )

    return df


def _add_volume(df: pl.DataFrame) -> pl.DataFrame:
    """Add volume = length * width * height (cm³ or in³)."""
    return df.with_columns(
        (pl.col("length") * pl.col("width") * pl.col("height")).alias("volume")
    )


def _add_divisor(df: pl.DataFrame) -> pl.DataFrame:
    """
    Add the resolved carrier divisor.

    Custom rows take custom_divisor when positive, DEFAULT_CUSTOM_DIVISOR
    otherwise. Other carriers map through CARRIER_DIVISORS.
    """
    fixed = pl.col("carrier").replace_strict(
        CARRIER_DIVISORS, default=None, return_dtype=pl.Float64
    )
    # NaN sorts above every number in polars, so "> 0" alone lets it through
    usable = (pl.col("custom_divisor") > 0) & pl.col("custom_divisor").is_not_nan()
    custom = (
        pl.when(usable)
        .then(pl.col("custom_divisor"))
        .otherwise(pl.lit(float(DEFAULT_CUSTOM_DIVISOR)))
    )

    df = df.with_columns(
        pl.when(pl.col("carrier") == Carrier.CUSTOM.value)
        .then(custom)
        .otherwise(fixed)
        .alias("divisor")
    )

    defaulted = df.filter(
        (pl.col("carrier") == Carrier.CUSTOM.value) &
        ~usable.fill_null(False)
    ).height
    if defaulted:
        logger.debug("%d Custom item(s) defaulted to divisor %s", defaulted, DEFAULT_CUSTOM_DIVISOR)

    return df


def calculate(df: pl.DataFrame, unit_system) -> pl.DataFrame:
    """
    Calculate weights for supplemented items.

    Args:
        df: Supplemented DataFrame from supplement_items
        unit_system: UnitSystem (or its name) applied to every row

    Returns:
        DataFrame with weight, formula and metadata columns

    Processing order:
        1. Volumetric weight  - volume / divisor (or / 166 imperial)
        2. Chargeable weight  - max of volumetric and gross
        3. Formula            - display string per row
        4. Stamp              - unit system and version
    """
    system = UnitSystem.parse(unit_system)

    df = _add_volumetric_weight(df, system)
    df = _add_chargeable_weight(df)
    df = _add_formula(df, system)
    df = _stamp(df, system)

    logger.debug("Calculated weights for %d item(s) (%s)", df.height, system.value)
    return df


def _add_volumetric_weight(df: pl.DataFrame, system: UnitSystem) -> pl.DataFrame:
    """Imperial ignores the carrier divisor entirely."""
    if system == UnitSystem.IMPERIAL:
        expr = pl.col("volume") / IMPERIAL_DIM_FACTOR
    else:
        expr = pl.col("volume") / pl.col("divisor")
    return df.with_columns(expr.alias("volumetric_weight"))


def _add_chargeable_weight(df: pl.DataFrame) -> pl.DataFrame:
    """Chargeable weight is always max(gross, volumetric) - no threshold."""
    return df.with_columns([
        (pl.col("volumetric_weight") > pl.col("gross_weight")).alias("uses_volumetric_weight"),
        pl.max_horizontal("volumetric_weight", "gross_weight").alias("chargeable_weight"),
    ])


def _add_formula(df: pl.DataFrame, system: UnitSystem) -> pl.DataFrame:
    """Add the per-row formula string, identical to the per-item API."""
    return df.with_columns(
        pl.struct(["length", "width", "height", "divisor", "volumetric_weight"])
        .map_elements(
            lambda row: build_formula(
                row["length"], row["width"], row["height"],
                row["divisor"], row["volumetric_weight"], system,
            ),
            return_dtype=pl.Utf8,
        )
        .alias("formula")
    )


def _stamp(df: pl.DataFrame, system: UnitSystem) -> pl.DataFrame:
    """Stamp unit system and calculator version on output."""
    return df.with_columns([
        pl.lit(system.value).alias("unit_system"),
        pl.lit(VERSION).alias("calculator_version"),
    ])


def summarize(df: pl.DataFrame) -> pl.DataFrame:
    """
    One-row totals for a calculated DataFrame.

    Returns:
        DataFrame with item_count, total_volumetric_weight,
        total_gross_weight, total_chargeable_weight (zeros when empty)
    """
    return df.select([
        pl.len().cast(pl.Int64).alias("item_count"),
        pl.col("volumetric_weight").sum().cast(pl.Float64).alias("total_volumetric_weight"),
        pl.col("gross_weight").sum().cast(pl.Float64).alias("total_gross_weight"),
        pl.col("chargeable_weight").sum().cast(pl.Float64).alias("total_chargeable_weight"),
    ])


# =============================================================================
# CONVERSION BETWEEN APIS
# =============================================================================

def items_to_frame(items: Iterable[ShipmentItem]) -> pl.DataFrame:
    """Build an input DataFrame from ShipmentItems."""
    rows = [
        {
            "item_id": item.item_id,
            "length": float(item.length),
            "width": float(item.width),
            "height": float(item.height),
            "gross_weight": float(item.gross_weight),
            "carrier": Carrier.parse(item.carrier).value,
            "custom_divisor": None if item.custom_divisor is None else float(item.custom_divisor),
        }
        for item in items
    ]
    return pl.DataFrame(rows, schema=INPUT_SCHEMA)


def frame_to_items(df: pl.DataFrame) -> list[ShipmentItem]:
    """
    Build ShipmentItems from an input DataFrame.

    Raises:
        ValueError: If required columns are missing or a carrier is unknown
    """
    _validate_columns(df)
    df = _normalize_inputs(df)
    return [
        ShipmentItem(
            item_id=str(row["item_id"]),
            length=row["length"],
            width=row["width"],
            height=row["height"],
            gross_weight=row["gross_weight"],
            carrier=Carrier.parse(row["carrier"]),
            custom_divisor=row["custom_divisor"],
        )
        for row in df.iter_rows(named=True)
    ]


__all__ = [
    # Per item
    "compute_volumetric_weight",
    "resolve_divisor",
    "build_formula",
    "get_calculation_result",
    "aggregate",
    "describe_result",
    "describe_totals",
    # DataFrame
    "calculate_weights",
    "supplement_items",
    "calculate",
    "summarize",
    "items_to_frame",
    "frame_to_items",
]

"""
Column Schema Definitions

Documents all columns at each pipeline stage of calculate_weights.
"""

import polars as pl


# =============================================================================
# INPUT COLUMNS
# =============================================================================

REQUIRED_INPUT_COLS = [
    "item_id",              # Opaque identifier, unique within a list
    "length",               # cm (metric) or in (imperial)
    "width",                # cm (metric) or in (imperial)
    "height",               # cm (metric) or in (imperial)
    "gross_weight",         # kg (metric) or lb (imperial)
    "carrier",              # IATA, DHL, FedEx, UPS or Custom
]

OPTIONAL_INPUT_COLS = [
    "custom_divisor",       # Used only when carrier is Custom (null -> default)
]

INPUT_SCHEMA = {
    "item_id": pl.Utf8,
    "length": pl.Float64,
    "width": pl.Float64,
    "height": pl.Float64,
    "gross_weight": pl.Float64,
    "carrier": pl.Utf8,
    "custom_divisor": pl.Float64,
}


# =============================================================================
# SUPPLEMENT COLUMNS (added by supplement_items)
# =============================================================================

SUPPLEMENT_COLS = [
    "volume",               # length x width x height
    "divisor",              # Resolved carrier divisor (metric)
]


# =============================================================================
# WEIGHT COLUMNS (added by calculate)
# =============================================================================

WEIGHT_COLS = [
    "volumetric_weight",        # volume / divisor (or / 166 imperial)
    "uses_volumetric_weight",   # True if volumetric weight > gross weight
    "chargeable_weight",        # Max of gross and volumetric weight
    "formula",                  # e.g. "(50 × 40 × 30) ÷ 5000 = 12.00 kg"
]


# =============================================================================
# METADATA COLUMNS
# =============================================================================

METADATA_COLS = [
    "unit_system",          # metric or imperial
    "calculator_version",   # Version stamp from rate_engine/version.py
]


# =============================================================================
# TOTALS COLUMNS (returned by summarize)
# =============================================================================

TOTALS_COLS = [
    "item_count",
    "total_volumetric_weight",
    "total_gross_weight",
    "total_chargeable_weight",
]


# =============================================================================
# COLUMN SETS
# =============================================================================

INPUT_COLS = REQUIRED_INPUT_COLS + OPTIONAL_INPUT_COLS

# All columns after supplement_items
AFTER_SUPPLEMENT = INPUT_COLS + SUPPLEMENT_COLS

# All columns after calculate
AFTER_CALCULATE = INPUT_COLS + SUPPLEMENT_COLS + WEIGHT_COLS + METADATA_COLS

"""
Volumetric Divisor Configuration

Carrier divisors (cubic centimetres per kilogram) used in metric mode.
Last updated: 2026-10-18

HOW VOLUMETRIC WEIGHT WORKS
---------------------------
volumetric_weight = (length x width x height) / divisor
chargeable_weight = max(gross_weight, volumetric_weight)

Metric mode divides by the carrier's divisor below. Imperial mode ignores the
carrier entirely and divides cubic inches by IMPERIAL_DIM_FACTOR.

Custom carrier takes the divisor supplied on the item. When that divisor is
missing or not positive, DEFAULT_CUSTOM_DIVISOR is used instead.
"""

CARRIER_DIVISORS = {
    "IATA": 6000,     # Air cargo standard
    "DHL": 5000,
    "FedEx": 5000,
    "UPS": 5000,
}

DEFAULT_CUSTOM_DIVISOR = 5000   # Fallback for Custom with no usable divisor

IMPERIAL_DIM_FACTOR = 166       # Cubic inches per pound

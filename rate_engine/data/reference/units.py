"""
Unit Systems

Conversion factors between the metric (cm / kg) and imperial (in / lb)
systems, plus the labels shown next to each value.
"""

CM_PER_INCH = 2.54            # Dimension: inches -> centimetres
LB_PER_KG = 2.20462           # Weight: kilograms -> pounds

DIMENSION_UNITS = {
    "metric": "cm",
    "imperial": "in",
}

WEIGHT_UNITS = {
    "metric": "kg",
    "imperial": "lb",
}

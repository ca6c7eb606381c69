"""
Unit Tests for unit conversion and number formatting

Run with: pytest rate_engine/tests/test_units.py -v
"""

import pytest

from rate_engine.formatting import format_fixed, format_input
from rate_engine.items import UnitSystem
from rate_engine.units import DIMENSION, WEIGHT, convert_unit, unit_labels


# =============================================================================
# CONVERSION TESTS
# =============================================================================

class TestConvertUnit:
    """Tests for convert_unit."""

    def test_same_system_is_identity(self):
        """Nothing changes when the systems match."""
        assert convert_unit(12.34, UnitSystem.METRIC, UnitSystem.METRIC, DIMENSION) == 12.34
        assert convert_unit(12.34, "imperial", "imperial", WEIGHT) == 12.34

    def test_cm_to_inches(self):
        """2.54 cm = 1 in."""
        assert convert_unit(2.54, UnitSystem.METRIC, UnitSystem.IMPERIAL, DIMENSION) == pytest.approx(1.0)

    def test_inches_to_cm(self):
        """10 in = 25.4 cm."""
        assert convert_unit(10, UnitSystem.IMPERIAL, UnitSystem.METRIC, DIMENSION) == pytest.approx(25.4)

    def test_kg_to_lb(self):
        """10 kg = 22.0462 lb."""
        assert convert_unit(10, UnitSystem.METRIC, UnitSystem.IMPERIAL, WEIGHT) == pytest.approx(22.0462)

    def test_lb_to_kg(self):
        """2.20462 lb = 1 kg."""
        assert convert_unit(2.20462, UnitSystem.IMPERIAL, UnitSystem.METRIC, WEIGHT) == pytest.approx(1.0)

    @pytest.mark.parametrize("kind", [DIMENSION, WEIGHT])
    @pytest.mark.parametrize("value", [0.0, 1.0, 33.3, 1234.5678, 1e-6])
    @pytest.mark.parametrize("start,other", [
        (UnitSystem.METRIC, UnitSystem.IMPERIAL),
        (UnitSystem.IMPERIAL, UnitSystem.METRIC),
    ])
    def test_round_trip(self, kind, value, start, other):
        """A -> B -> A returns the original value."""
        there = convert_unit(value, start, other, kind)
        back = convert_unit(there, other, start, kind)
        assert back == pytest.approx(value, rel=1e-9)

    def test_unknown_kind_raises(self):
        """Only dimension and weight are supported."""
        with pytest.raises(ValueError, match="kind must be"):
            convert_unit(1.0, UnitSystem.METRIC, UnitSystem.IMPERIAL, "volume")

    def test_unknown_system_raises(self):
        """Unit system names are validated."""
        with pytest.raises(ValueError, match="Unknown unit system"):
            convert_unit(1.0, "furlongs", UnitSystem.IMPERIAL, DIMENSION)


class TestUnitLabels:
    """Tests for unit_labels."""

    def test_metric(self):
        assert unit_labels(UnitSystem.METRIC) == ("cm", "kg")

    def test_imperial(self):
        assert unit_labels("imperial") == ("in", "lb")


# =============================================================================
# FORMATTING TESTS
# =============================================================================

class TestFormatInput:
    """Tests for rendering entered values."""

    @pytest.mark.parametrize("value,expected", [
        (50, "50"),
        (50.0, "50"),
        (12.5, "12.5"),
        (0.0, "0"),
        (-0.0, "0"),
        (-50.0, "-50"),
        (0.1 + 0.2, "0.30000000000000004"),
        (0.00005, "0.00005"),
        (0.000001, "0.000001"),
        (-0.0000123, "-0.0000123"),
        (0.0001, "0.0001"),
    ])
    def test_values(self, value, expected):
        assert format_input(value) == expected


class TestFormatFixed:
    """Tests for two-decimal rendering."""

    @pytest.mark.parametrize("value,expected", [
        (12.0, "12.00"),
        (60000 / 166, "361.45"),
        (0.125, "0.13"),      # exact tie rounds up
        (2.675, "2.67"),      # binary value sits just below the tie
        (-12.0, "-12.00"),
        (-0.0, "0.00"),
        (0.0, "0.00"),
    ])
    def test_values(self, value, expected):
        assert format_fixed(value) == expected

    def test_other_precision(self):
        """places controls the number of decimals."""
        assert format_fixed(1.23456, places=3) == "1.235"

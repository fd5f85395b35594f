"""
Unit conversion and display formatting tests.

Tests:
1-4.   Constants and one-way conversions (feet, square feet, cubic yards, gallons)
5-7.   Round trips user -> SI -> user for every quantity kind
8-9.   Coverage ft²/gal <-> m²/L
10-12. Result projection and field unit labels
13-16. Number formatting
"""

import pytest

from buildcalc.formatting import format_number, format_percent
from buildcalc.models import UnitSystem
from buildcalc.units import (
    CUBIC_M_TO_CUBIC_YARD,
    FEET_TO_M,
    LITERS_PER_GALLON,
    SQFT_TO_SQM,
    area_to_sqm,
    coverage_to_metric,
    coverage_to_user,
    cubic_meters_to_user_volume,
    get_unit_label,
    length_to_meters,
    liters_to_user_volume,
    meters_to_user_length,
    project_to_user_units,
    sqm_to_user_area,
    unit_kind_for_si_unit,
    user_liquid_to_liters,
    user_volume_to_cubic_meters,
)

IMPERIAL = UnitSystem.IMPERIAL
METRIC = UnitSystem.METRIC


# ============================================================
# One-way conversions
# ============================================================

def test_conversion_constants():
    """Exact constants the estimates depend on."""
    assert FEET_TO_M == 0.3048
    assert SQFT_TO_SQM == 0.092903
    assert CUBIC_M_TO_CUBIC_YARD == 1.30795062
    assert LITERS_PER_GALLON == 3.78541


def test_imperial_length_and_area_to_si():
    """10 ft -> 3.048 m, 100 ft² -> 9.2903 m²."""
    assert length_to_meters(10, IMPERIAL) == pytest.approx(3.048)
    assert area_to_sqm(100, IMPERIAL) == pytest.approx(9.2903)


def test_metric_is_identity():
    """Metric inputs pass through unchanged."""
    assert length_to_meters(7.5, METRIC) == 7.5
    assert area_to_sqm(7.5, METRIC) == 7.5
    assert cubic_meters_to_user_volume(7.5, METRIC) == 7.5
    assert liters_to_user_volume(7.5, METRIC) == 7.5


def test_volume_uses_cubic_yard_constant():
    """1 m³ is exactly the literal yd³ constant, and 10 L is 2.64172 gal."""
    assert cubic_meters_to_user_volume(1, IMPERIAL) == CUBIC_M_TO_CUBIC_YARD
    assert liters_to_user_volume(10, IMPERIAL) == pytest.approx(2.64172)


def test_unit_system_accepts_plain_strings():
    assert length_to_meters(10, "imperial") == pytest.approx(3.048)
    assert length_to_meters(10, "metric") == 10


# ============================================================
# Round trips
# ============================================================

@pytest.mark.parametrize("unit_system", [METRIC, IMPERIAL])
@pytest.mark.parametrize("value", [0, 0.37, 12.5, 4000])
def test_length_and_area_round_trip(unit_system, value):
    assert meters_to_user_length(length_to_meters(value, unit_system), unit_system) == pytest.approx(value)
    assert sqm_to_user_area(area_to_sqm(value, unit_system), unit_system) == pytest.approx(value)


@pytest.mark.parametrize("unit_system", [METRIC, IMPERIAL])
@pytest.mark.parametrize("value", [0, 1.2, 85])
def test_volume_round_trip(unit_system, value):
    assert cubic_meters_to_user_volume(
        user_volume_to_cubic_meters(value, unit_system), unit_system,
    ) == pytest.approx(value)
    assert liters_to_user_volume(
        user_liquid_to_liters(value, unit_system), unit_system,
    ) == pytest.approx(value)


def test_coverage_round_trip():
    """m²/L -> ft²/gal -> m²/L returns the original value."""
    for value in (9.3, 10, 12):
        assert coverage_to_metric(coverage_to_user(value, IMPERIAL), IMPERIAL) == pytest.approx(value)


# ============================================================
# Coverage
# ============================================================

def test_coverage_to_metric_uses_canonical_gallon():
    """400 ft²/gal -> (400 x 0.092903) / 3.78541 m²/L."""
    assert coverage_to_metric(400, IMPERIAL) == pytest.approx((400 * 0.092903) / 3.78541)
    assert coverage_to_metric(400, METRIC) == 400


def test_coverage_to_user_typical_paint():
    """9.3 m²/L is roughly 379 ft²/gal."""
    assert coverage_to_user(9.3, IMPERIAL) == pytest.approx(378.94, abs=0.05)


# ============================================================
# Projection and labels
# ============================================================

def test_project_to_user_units_by_kind():
    assert project_to_user_units(3.048, IMPERIAL, "length") == pytest.approx(10)
    assert project_to_user_units(9.2903, IMPERIAL, "area") == pytest.approx(100)
    assert project_to_user_units(1, IMPERIAL, "volume") == CUBIC_M_TO_CUBIC_YARD
    assert project_to_user_units(10, IMPERIAL, "liquid") == pytest.approx(2.64172)


def test_project_counts_pass_through():
    """Counts and kilograms are not converted."""
    assert project_to_user_units(17, IMPERIAL, None) == 17
    assert project_to_user_units(17, IMPERIAL, "count") == 17
    assert unit_kind_for_si_unit("pcs") is None
    assert unit_kind_for_si_unit("m³") == "volume"
    assert unit_kind_for_si_unit("L") == "liquid"


def test_unit_labels():
    """Length-like kinds share the length label; unknown kinds have none."""
    assert get_unit_label(IMPERIAL, "thickness") == "ft"
    assert get_unit_label(METRIC, "diameter") == "m"
    assert get_unit_label(IMPERIAL, "area") == "ft²"
    assert get_unit_label(METRIC, "coverage") == "m²/L"
    assert get_unit_label(IMPERIAL, "coverage") == "ft²/gal"
    assert get_unit_label(METRIC, "count") == ""
    assert get_unit_label(METRIC, None) == ""


# ============================================================
# Formatting
# ============================================================

def test_format_number_fraction_digits():
    """Two digits up to 100, one digit above, trailing zeros dropped."""
    assert format_number(3.888) == "3.89"
    assert format_number(15.3224) == "15.32"
    assert format_number(2.5) == "2.5"
    assert format_number(12) == "12"
    assert format_number(2100.04) == "2,100"
    assert format_number(1234.56) == "1,234.6"


def test_format_number_explicit_digits():
    assert format_number(1.23456, max_fraction_digits=3) == "1.235"
    assert format_number(2, max_fraction_digits=2, min_fraction_digits=2) == "2.00"
    assert format_number(2.5, min_fraction_digits=2) == "2.50"


def test_format_number_no_negative_zero():
    assert format_number(-0.001) == "0"


def test_format_percent():
    assert format_percent(0.075) == "7.5%"
    assert format_percent(0.08) == "8%"
    assert format_percent(0.35) == "35%"

"""
Engine properties — rules that hold across inputs, not single worked examples.

Tests:
1. More waste never means less material (area and volume results)
2. Pack counts are the smallest whole number that covers the requirement
3. Openings larger than the walls clamp to zero area
4. Steep roof pitches are capped by the cosine floor
5. The engine is stateless — same call, same answer
"""

import math

import pytest

from buildcalc.calculators import run_calculation
from buildcalc.calculators.roofing import MIN_PITCH_COSINE
from buildcalc.models import FormulaKey, UnitSystem

METRIC = UnitSystem.METRIC

# Plaster reports surface area as entered, without overage
WASTE_SCALED_KEYS = [
    (FormulaKey.CONCRETE, "volume"),
    (FormulaKey.PAINT, "area"),
    (FormulaKey.PAINT, "volume"),
    (FormulaKey.FLOORING, "area"),
    (FormulaKey.TILE, "area"),
    (FormulaKey.ROOFING, "area"),
    (FormulaKey.DRYWALL, "area"),
    (FormulaKey.BRICK, "mortar"),
    (FormulaKey.INSULATION, "volume"),
    (FormulaKey.PLASTER, "volume"),
    (FormulaKey.SCREED, "volume"),
    (FormulaKey.ELECTRICAL, "cableLength"),
]


@pytest.mark.parametrize("key,result_key", WASTE_SCALED_KEYS)
def test_waste_is_monotonic(key, result_key, metric_defaults):
    wastes = [0.0, 0.05, 0.12, 0.3]
    values = [
        run_calculation(key, {}, METRIC, metric_defaults, waste)[result_key]
        for waste in wastes
    ]
    assert values == sorted(values)
    assert values[-1] > values[0]


@pytest.mark.parametrize("length", [1, 3.3, 4.4, 5, 7.25, 12])
def test_flooring_packs_are_minimal_ceiling(length, metric_defaults):
    coverage = 2.2
    result = run_calculation("flooring", {"length": length, "width": 4, "packCoverage": coverage},
                             METRIC, metric_defaults, 0.08)
    packs = result["packs"]
    assert packs * coverage >= result["area"] - 1e-9
    assert (packs - 1) * coverage < result["area"]


@pytest.mark.parametrize("area", [1, 9.9, 10, 47, 120])
def test_insulation_rolls_are_minimal_ceiling(area, metric_defaults):
    result = run_calculation("insulation", {"area": area, "thickness": 0.1, "rollArea": 10},
                             METRIC, metric_defaults, 0)
    rolls = result["rolls"]
    assert rolls == math.ceil(area / 10)


@pytest.mark.parametrize("key", ["paint", "drywall"])
def test_wall_area_clamps_at_zero(key, metric_defaults):
    exact = run_calculation(key, {"perimeter": 10, "height": 2, "openings": 20}, METRIC,
                            metric_defaults, 0.1)
    over = run_calculation(key, {"perimeter": 10, "height": 2, "openings": 500}, METRIC,
                           metric_defaults, 0.1)
    assert exact["area"] == 0
    assert over["area"] == 0


@pytest.mark.parametrize("angle", [80, 89, 90, 135])
def test_roof_pitch_cosine_floor(angle, metric_defaults):
    """Anything steeper than cos = 0.2 is treated as cos = 0.2."""
    result = run_calculation("roofing", {"length": 10, "width": 8, "angle": angle,
                                         "bundleCoverage": 3.1}, METRIC, metric_defaults, 0)
    assert result["area"] == pytest.approx(80 / MIN_PITCH_COSINE)


def test_engine_is_stateless(metric_defaults, imperial_defaults):
    inputs = {"perimeter": 28, "height": 2.7, "openings": 4, "coats": 2, "coverage": 10}
    first = run_calculation("paint", inputs, METRIC, metric_defaults, 0.07)
    run_calculation("paint", {"coverage": 300}, UnitSystem.IMPERIAL, imperial_defaults, 0.2)
    second = run_calculation("paint", inputs, METRIC, metric_defaults, 0.07)
    assert first == second
    assert inputs == {"perimeter": 28, "height": 2.7, "openings": 4, "coats": 2, "coverage": 10}

"""
Wall paint calculator.

Net wall area (perimeter x height minus openings) with overage, then liters
from coats and coverage. Coverage is entered in m²/L or ft²/gal.
"""

from ..units import coverage_to_metric
from .base import BaseCalculator


class PaintCalculator(BaseCalculator):

    formula_key = "paint"

    def calculate(self, inputs: dict, unit_system, defaults, waste_factor: float) -> dict:
        perimeter = self.length(inputs, "perimeter", 20, unit_system)
        height = self.length(inputs, "height", 2.7, unit_system)
        openings = self.area(inputs, "openings", 2, unit_system)

        # Zero coats means "not set": use the country's coat count
        coats = self.number(inputs, "coats", defaults.paint.coats) or defaults.paint.coats
        # Profile coverage is already m²/L; only a user-entered value is converted
        raw_coverage = self.number(inputs, "coverage", None)
        coverage = (
            coverage_to_metric(raw_coverage, unit_system)
            if raw_coverage is not None else defaults.paint.coverage_sqm_per_liter
        )
        if coverage <= 0:
            coverage = defaults.paint.coverage_sqm_per_liter

        area = self.wall_area(perimeter, height, openings)
        total_area = self.with_waste(area, waste_factor)
        liters = total_area * coats / coverage
        return {
            "area": total_area,
            "volume": liters,
        }

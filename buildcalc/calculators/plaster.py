"""
Plaster calculator.

Bag coverage is a volume (m³ of applied plaster per bag). The reported
area is the measured surface, without overage.
"""

from .base import BaseCalculator

DEFAULT_BAG_COVERAGE = 0.1


class PlasterCalculator(BaseCalculator):

    formula_key = "plaster"

    def calculate(self, inputs: dict, unit_system, defaults, waste_factor: float) -> dict:
        area = self.area(inputs, "area", 40, unit_system)
        thickness = self.length(inputs, "thickness", 0.01, unit_system)
        bag_default = defaults.plaster.coverage_per_bag if defaults.plaster else DEFAULT_BAG_COVERAGE
        coverage_per_bag = self.number(inputs, "coveragePerBag", bag_default)

        total_volume = self.with_waste(area * thickness, waste_factor)
        return {
            "volume": total_volume,
            "bags": self.packs_needed(total_volume, coverage_per_bag),
            "area": area,
        }

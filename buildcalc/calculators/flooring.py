"""Flooring calculator — room area with overage, then whole packs."""

from .base import BaseCalculator


class FlooringCalculator(BaseCalculator):

    formula_key = "flooring"

    def calculate(self, inputs: dict, unit_system, defaults, waste_factor: float) -> dict:
        length = self.length(inputs, "length", 5, unit_system)
        width = self.length(inputs, "width", 4, unit_system)
        pack_coverage = self.area(inputs, "packCoverage", 2.2, unit_system)

        total_area = self.with_waste(length * width, waste_factor)
        return {
            "area": total_area,
            "packs": self.packs_needed(total_area, pack_coverage),
        }

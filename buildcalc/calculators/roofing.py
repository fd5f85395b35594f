"""
Roofing calculator.

Plan area divided by cos(pitch) gives the sloped area. The cosine is floored
at 0.2 so near-vertical pitches can't blow the area up.
"""

import math

from .base import BaseCalculator, deg_to_rad

MIN_PITCH_COSINE = 0.2


class RoofingCalculator(BaseCalculator):

    formula_key = "roofing"

    def calculate(self, inputs: dict, unit_system, defaults, waste_factor: float) -> dict:
        length = self.length(inputs, "length", 10, unit_system)
        width = self.length(inputs, "width", 8, unit_system)
        angle = self.number(inputs, "angle", 28)
        bundle_coverage = self.area(inputs, "bundleCoverage", 3.1, unit_system)

        slope_area = (length * width) / max(math.cos(deg_to_rad(angle)), MIN_PITCH_COSINE)
        total_area = self.with_waste(slope_area, waste_factor)
        return {
            "area": total_area,
            "bundles": self.packs_needed(total_area, bundle_coverage),
        }

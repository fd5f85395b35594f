"""
Floor screed calculator.

The mixed volume is split by cement:sand ratio parts. Cement is weighed at
a bulk density of 1500 kg/m³ and bought in 50 kg bags.
"""

from .base import BaseCalculator

CEMENT_DENSITY_KG_M3 = 1500
CEMENT_BAG_KG = 50


class ScreedCalculator(BaseCalculator):

    formula_key = "screed"

    def calculate(self, inputs: dict, unit_system, defaults, waste_factor: float) -> dict:
        area = self.area(inputs, "area", 30, unit_system)
        thickness = self.length(inputs, "thickness", 0.05, unit_system)
        cement_ratio = self.number(inputs, "cementRatio", 0.2)
        sand_ratio = self.number(inputs, "sandRatio", 3)

        total_volume = self.with_waste(area * thickness, waste_factor)
        total_parts = cement_ratio + sand_ratio
        if total_parts > 0:
            cement_volume = total_volume * (cement_ratio / total_parts)
            sand_volume = total_volume * (sand_ratio / total_parts)
        else:
            cement_volume = 0.0
            sand_volume = 0.0

        cement_weight = cement_volume * CEMENT_DENSITY_KG_M3
        return {
            "volume": total_volume,
            "cementWeight": cement_weight,
            "cementBags": self.packs_needed(cement_weight, CEMENT_BAG_KG),
            "sandVolume": sand_volume,
        }

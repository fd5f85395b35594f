"""Insulation calculator — insulation volume and whole rolls."""

from .base import BaseCalculator


class InsulationCalculator(BaseCalculator):

    formula_key = "insulation"

    def calculate(self, inputs: dict, unit_system, defaults, waste_factor: float) -> dict:
        area = self.area(inputs, "area", 50, unit_system)
        thickness = self.length(inputs, "thickness", 0.1, unit_system)
        roll_area = self.area(inputs, "rollArea", 10, unit_system)

        return {
            "volume": self.with_waste(area * thickness, waste_factor),
            "rolls": self.packs_needed(self.with_waste(area, waste_factor), roll_area),
        }

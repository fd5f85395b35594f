"""Drywall calculator — net wall area with overage, then whole sheets."""

from .base import BaseCalculator


class DrywallCalculator(BaseCalculator):

    formula_key = "drywall"

    def calculate(self, inputs: dict, unit_system, defaults, waste_factor: float) -> dict:
        perimeter = self.length(inputs, "perimeter", 20, unit_system)
        height = self.length(inputs, "height", 2.8, unit_system)
        openings = self.area(inputs, "openings", 4, unit_system)
        sheet_area = self.area(inputs, "sheetArea", 2.88, unit_system)

        area = self.wall_area(perimeter, height, openings)
        total_area = self.with_waste(area, waste_factor)
        return {
            "area": total_area,
            "sheets": self.packs_needed(total_area, sheet_area),
        }

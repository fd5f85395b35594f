"""Brick calculator — bricks and mortar volume per m² of wall."""

from .base import BaseCalculator


class BrickCalculator(BaseCalculator):

    formula_key = "brick"

    def calculate(self, inputs: dict, unit_system, defaults, waste_factor: float) -> dict:
        wall_area = self.area(inputs, "wallArea", 40, unit_system)
        bricks_per_sqm = self.number(inputs, "bricksPerSqm", defaults.brick.bricks_per_sqm)
        mortar_per_sqm = self.number(inputs, "mortarPerSqm", defaults.brick.mortar_per_sqm)

        return {
            "bricks": self.with_waste(wall_area * bricks_per_sqm, waste_factor),
            "mortar": self.with_waste(wall_area * mortar_per_sqm, waste_factor),
        }

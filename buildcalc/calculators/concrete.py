"""
Concrete calculator.

Two modes: a rectangular slab (length x width x thickness) or a round
column/pier (diameter x height). Result is the ordered volume in m³.
"""

import math

from .base import BaseCalculator


class ConcreteCalculator(BaseCalculator):

    formula_key = "concrete"

    def calculate(self, inputs: dict, unit_system, defaults, waste_factor: float) -> dict:
        mode = inputs.get("mode") or "slab"

        if mode == "cylinder":
            diameter = self.length(inputs, "diameter", 0.4, unit_system)
            height = self.length(inputs, "height", 3, unit_system)
            base_volume = math.pi * (diameter / 2) * (diameter / 2) * height
        else:
            length = self.length(inputs, "length", 6, unit_system)
            width = self.length(inputs, "width", 4, unit_system)
            thickness = self.length(inputs, "thickness", 0.15, unit_system)
            base_volume = length * width * thickness

        return {"volume": self.with_waste(base_volume, waste_factor)}

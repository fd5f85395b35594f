"""
Electrical wiring calculator.

Each socket and switch gets a vertical drop of one wall height; horizontal
runs follow the perimeter with a 1.5x routing overhead. Conduit comes in
3 m lengths.
"""

from .base import BaseCalculator

ROUTING_OVERHEAD = 1.5
CONDUIT_LENGTH_M = 3


class ElectricalCalculator(BaseCalculator):

    formula_key = "electrical"

    def calculate(self, inputs: dict, unit_system, defaults, waste_factor: float) -> dict:
        perimeter = self.length(inputs, "perimeter", 40, unit_system)
        height = self.length(inputs, "height", 2.7, unit_system)
        sockets = self.number(inputs, "sockets", 10)
        switches = self.number(inputs, "switches", 5)

        vertical_length = (sockets + switches) * height
        horizontal_length = perimeter * ROUTING_OVERHEAD
        total_length = self.with_waste(vertical_length + horizontal_length, waste_factor)
        return {
            "cableLength": total_length,
            "sockets": sockets,
            "switches": switches,
            "conduits": self.packs_needed(total_length, CONDUIT_LENGTH_M),
        }

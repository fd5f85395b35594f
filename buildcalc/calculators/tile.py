"""
Tile calculator.

Diagonal laying REPLACES the caller's waste factor with the country's
diagonal cutting waste; the two are never added together.
"""

from .base import BaseCalculator


class TileCalculator(BaseCalculator):

    formula_key = "tile"

    def calculate(self, inputs: dict, unit_system, defaults, waste_factor: float) -> dict:
        length = self.length(inputs, "length", 5, unit_system)
        width = self.length(inputs, "width", 3, unit_system)
        tile_length = self.length(inputs, "tileLength", 0.6, unit_system)
        tile_width = self.length(inputs, "tileWidth", 0.3, unit_system)
        diagonal = _is_on(inputs.get("diagonal"))

        waste = defaults.tile.diagonal_waste if diagonal else waste_factor
        total_area = self.with_waste(length * width, waste)
        tile_area = tile_length * tile_width
        return {
            "area": total_area,
            "tiles": self.packs_needed(total_area, tile_area),
        }


def _is_on(value) -> bool:
    """Toggle values arrive as bools, or as 'true'/'false' strings from query state."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)

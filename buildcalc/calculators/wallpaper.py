"""
Wallpaper calculator.

Strips are cut to wall height plus pattern allowance; each roll yields a
whole number of strips (at least one). Rolls are ordered by strip count.
"""

import math

from .base import BaseCalculator

# Shortest strip we ever cut, in meters
MIN_STRIP_LENGTH = 0.1


class WallpaperCalculator(BaseCalculator):

    formula_key = "wallpaper"

    def calculate(self, inputs: dict, unit_system, defaults, waste_factor: float) -> dict:
        roll = defaults.wallpaper
        perimeter = self.length(inputs, "perimeter", 25, unit_system)
        height = self.length(inputs, "height", 2.6, unit_system)
        # Profile roll sizes are stored in meters
        allowance = self.length_or_si(inputs, "allowance", roll.allowance_meters, unit_system)
        roll_length = self.length_or_si(inputs, "rollLength", roll.roll_length_meters, unit_system)
        roll_width = self.length_or_si(inputs, "rollWidth", roll.roll_width_meters, unit_system)
        if roll_width <= 0:
            roll_width = roll.roll_width_meters

        strips_fit = roll_length / max(height + allowance, MIN_STRIP_LENGTH)
        strips_per_roll = max(math.floor(strips_fit), 1) if math.isfinite(strips_fit) else 1
        total_strips = self.packs_needed(self.with_waste(perimeter, waste_factor), roll_width)
        return {
            "strips": total_strips,
            "rolls": self.packs_needed(total_strips, strips_per_roll),
        }

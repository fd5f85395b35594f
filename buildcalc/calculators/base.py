"""
Abstract base class for all material calculators.

Input: raw field values (numbers, option strings, toggles) in the user's unit system
Output: EngineResult dict — named quantities in SI units (m, m², m³, L) or counts
"""

import logging
import math
from abc import ABC, abstractmethod

from ..countries import CountryDefaults
from ..units import area_to_sqm, length_to_meters

logger = logging.getLogger(__name__)


def to_number(value, fallback: float = 0.0) -> float:
    """
    Parse a raw field value. Missing, empty, unparsable or non-finite -> fallback.
    Never lets NaN or infinity into a formula.
    """
    if value is None:
        return fallback
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return fallback
    try:
        parsed = float(value)
    except (ValueError, TypeError, OverflowError):
        logger.debug("Unparsable input %r, using fallback %s", value, fallback)
        return fallback
    if not math.isfinite(parsed):
        return fallback
    return parsed


def clamp_above_zero(value: float) -> float:
    return value if value > 0 else 0.0


def deg_to_rad(degrees: float) -> float:
    return degrees * math.pi / 180.0


class BaseCalculator(ABC):
    """All material calculators inherit from this."""

    formula_key: str = ""

    @abstractmethod
    def calculate(self, inputs: dict, unit_system, defaults: CountryDefaults,
                  waste_factor: float) -> dict:
        """
        Takes raw inputs in the caller's unit system.
        Returns an EngineResult dict in SI units.
        """
        pass

    # --- Helper methods for all calculators ---

    def number(self, inputs: dict, field_id: str, fallback: float) -> float:
        """Unitless numeric field (counts, ratios, degrees)."""
        return to_number(inputs.get(field_id), fallback)

    def length(self, inputs: dict, field_id: str, fallback: float, unit_system) -> float:
        """Length field in meters. Fallback is in the caller's unit system, like the raw value."""
        return length_to_meters(to_number(inputs.get(field_id), fallback), unit_system)

    def length_or_si(self, inputs: dict, field_id: str, si_fallback: float, unit_system) -> float:
        """Length field in meters; a missing value takes si_fallback (already meters) as is."""
        raw = to_number(inputs.get(field_id), None)
        if raw is None:
            return si_fallback
        return length_to_meters(raw, unit_system)

    def area(self, inputs: dict, field_id: str, fallback: float, unit_system) -> float:
        """Area field in square meters."""
        return area_to_sqm(to_number(inputs.get(field_id), fallback), unit_system)

    def with_waste(self, quantity: float, waste_factor: float) -> float:
        """Apply the overage factor to a base area or volume."""
        return quantity * (1 + waste_factor)

    def packs_needed(self, required: float, per_pack: float) -> int:
        """
        Number of whole packs (bags, tiles, sheets, rolls, bundles) to cover
        a required quantity. Always rounds UP.
        Non-positive pack coverage or a non-positive requirement yields 0.
        """
        if per_pack <= 0 or required <= 0:
            return 0
        packs = required / per_pack
        return math.ceil(packs) if math.isfinite(packs) else 0

    def wall_area(self, perimeter: float, height: float, openings: float) -> float:
        """Net wall area: perimeter x height minus openings, never negative."""
        return clamp_above_zero(perimeter * height - openings)

# Unit conversion — SI base units <-> the user's unit system.
# Imperial lengths are feet, areas square feet, bulk volume cubic yards,
# liquid volume US gallons.

from .models import UnitSystem

FEET_TO_M = 0.3048
SQFT_TO_SQM = 0.092903
CUBIC_M_TO_CUBIC_YARD = 1.30795062  # literal yd³ constant, not FEET_TO_M cubed
LITER_TO_GALLON = 0.264172
LITERS_PER_GALLON = 3.78541  # canonical gallon for coverage (m²/L <-> ft²/gal)

LENGTH_KINDS = ("length", "width", "height", "thickness", "diameter")

# Field unit labels keyed by unit kind: (metric, imperial)
UNIT_LABELS = {
    "length": ("m", "ft"),
    "area": ("m²", "ft²"),
    "coverage": ("m²/L", "ft²/gal"),
    "volume": ("m³", "yd³"),
    "percent": ("%", "%"),
    "angle": ("°", "°"),
}

# Result SI unit -> quantity kind used for projection
SI_UNIT_KINDS = {
    "m": "length",
    "m²": "area",
    "m³": "volume",
    "L": "liquid",
}


def _is_imperial(unit_system) -> bool:
    return unit_system == UnitSystem.IMPERIAL or unit_system == "imperial"


def length_to_meters(value: float, unit_system) -> float:
    """Feet -> meters for imperial; identity for metric."""
    return value * FEET_TO_M if _is_imperial(unit_system) else value


def area_to_sqm(value: float, unit_system) -> float:
    """Square feet -> square meters for imperial; identity for metric."""
    return value * SQFT_TO_SQM if _is_imperial(unit_system) else value


def meters_to_user_length(value: float, unit_system) -> float:
    return value / FEET_TO_M if _is_imperial(unit_system) else value


def sqm_to_user_area(value: float, unit_system) -> float:
    return value / SQFT_TO_SQM if _is_imperial(unit_system) else value


def cubic_meters_to_user_volume(value: float, unit_system) -> float:
    """m³ -> yd³ for imperial; identity for metric."""
    return value * CUBIC_M_TO_CUBIC_YARD if _is_imperial(unit_system) else value


def user_volume_to_cubic_meters(value: float, unit_system) -> float:
    return value / CUBIC_M_TO_CUBIC_YARD if _is_imperial(unit_system) else value


def liters_to_user_volume(value: float, unit_system) -> float:
    """Liters -> US gallons for imperial; identity for metric."""
    return value * LITER_TO_GALLON if _is_imperial(unit_system) else value


def user_liquid_to_liters(value: float, unit_system) -> float:
    return value / LITER_TO_GALLON if _is_imperial(unit_system) else value


def coverage_to_metric(value: float, unit_system) -> float:
    """Paint-style coverage ft²/gal -> m²/L for imperial; identity for metric."""
    if _is_imperial(unit_system):
        return (value * SQFT_TO_SQM) / LITERS_PER_GALLON
    return value


def coverage_to_user(value: float, unit_system) -> float:
    """Coverage m²/L -> ft²/gal for imperial. Exact inverse of coverage_to_metric."""
    if _is_imperial(unit_system):
        return (value / SQFT_TO_SQM) * LITERS_PER_GALLON
    return value


def project_to_user_units(si_value: float, unit_system, unit_kind: str) -> float:
    """
    Convert an SI engine result to display units.

    unit_kind is one of "length" | "area" | "volume" | "liquid".
    Anything else (counts, kg) passes through unchanged.
    """
    if unit_kind == "length":
        return meters_to_user_length(si_value, unit_system)
    if unit_kind == "area":
        return sqm_to_user_area(si_value, unit_system)
    if unit_kind == "volume":
        return cubic_meters_to_user_volume(si_value, unit_system)
    if unit_kind == "liquid":
        return liters_to_user_volume(si_value, unit_system)
    return si_value


def unit_kind_for_si_unit(si_unit: str) -> str | None:
    """Map a result label's SI unit ("m", "m²", "m³", "L") to its quantity kind."""
    return SI_UNIT_KINDS.get(si_unit)


def get_unit_label(unit_system, unit_kind: str | None) -> str:
    """Display label for an input field's unit kind, e.g. 'ft²' or 'm²/L'."""
    if not unit_kind:
        return ""
    if unit_kind in LENGTH_KINDS:
        unit_kind = "length"
    labels = UNIT_LABELS.get(unit_kind)
    if labels is None:
        return ""
    return labels[1] if _is_imperial(unit_system) else labels[0]

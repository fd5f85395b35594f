import enum


class UnitSystem(str, enum.Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class FormulaKey(str, enum.Enum):
    CONCRETE = "concrete"
    PAINT = "paint"
    FLOORING = "flooring"
    TILE = "tile"
    ROOFING = "roofing"
    DRYWALL = "drywall"
    WALLPAPER = "wallpaper"
    BRICK = "brick"
    INSULATION = "insulation"
    PLASTER = "plaster"
    SCREED = "screed"
    ELECTRICAL = "electrical"


# Supported UI locales. Every LocalizedString carries one entry per locale.
LOCALES = ["en", "ru"]


def parse_formula_key(value) -> FormulaKey | None:
    """Return the FormulaKey for a string (or member), or None if it isn't one."""
    if isinstance(value, FormulaKey):
        return value
    try:
        return FormulaKey(str(value).strip().lower())
    except ValueError:
        return None


def parse_unit_system(value, default: UnitSystem = UnitSystem.METRIC) -> UnitSystem:
    """Coerce 'metric' / 'imperial' (any case) to a UnitSystem; anything else -> default."""
    if isinstance(value, UnitSystem):
        return value
    try:
        return UnitSystem(str(value).strip().lower())
    except ValueError:
        return default

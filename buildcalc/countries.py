"""
Country default profiles — per-country material constants and unit system.

Profiles are seeded once at import and never mutated. The engine never
resolves country codes itself; callers resolve a profile here and pass its
defaults into every calculation.
"""

import logging
from typing import Optional

from pydantic import BaseModel, model_validator

from .models import FormulaKey, UnitSystem

logger = logging.getLogger(__name__)

# Used when a profile has neither the requested nor a concrete waste entry
FALLBACK_WASTE = 0.08


class CountryNotFoundError(LookupError):
    """Raised when a country code has no seeded profile."""


class PaintDefaults(BaseModel):
    coverage_sqm_per_liter: float
    coats: float

    class Config:
        frozen = True


class FlooringDefaults(BaseModel):
    pack_coverage_sqm: float

    class Config:
        frozen = True


class TileDefaults(BaseModel):
    tile_area_sqm: float
    diagonal_waste: float

    class Config:
        frozen = True


class DrywallDefaults(BaseModel):
    sheet_area_sqm: float

    class Config:
        frozen = True


class WallpaperDefaults(BaseModel):
    roll_length_meters: float
    roll_width_meters: float
    allowance_meters: float

    class Config:
        frozen = True


class RoofingDefaults(BaseModel):
    bundle_coverage_sqm: float
    default_angle_degrees: float

    class Config:
        frozen = True


class BrickDefaults(BaseModel):
    bricks_per_sqm: float
    mortar_per_sqm: float

    class Config:
        frozen = True


class InsulationDefaults(BaseModel):
    roll_area_sqm: float

    class Config:
        frozen = True


class PlasterDefaults(BaseModel):
    coverage_per_bag: float

    class Config:
        frozen = True


class CountryDefaults(BaseModel):
    waste: dict[str, float]
    paint: PaintDefaults
    flooring: FlooringDefaults
    tile: TileDefaults
    drywall: DrywallDefaults
    wallpaper: WallpaperDefaults
    roofing: RoofingDefaults
    brick: BrickDefaults
    insulation: Optional[InsulationDefaults] = None
    plaster: Optional[PlasterDefaults] = None

    class Config:
        frozen = True

    @model_validator(mode="after")
    def _waste_covers_every_formula(self):
        missing = [key.value for key in FormulaKey if key.value not in self.waste]
        if missing:
            raise ValueError(f"Waste defaults missing for formulas: {missing}")
        return self

    def waste_for(self, key) -> float:
        """Waste fraction for a formula key; falls back to concrete, then 0.08."""
        key = key.value if isinstance(key, FormulaKey) else str(key)
        if key in self.waste:
            return self.waste[key]
        return self.waste.get(FormulaKey.CONCRETE.value, FALLBACK_WASTE)


class CountryProfile(BaseModel):
    country_code: str
    name_en: str
    name_ru: str
    unit_system: UnitSystem
    currency: str
    defaults: CountryDefaults

    class Config:
        frozen = True

    def localized_name(self, locale: str = "en") -> str:
        return self.name_ru if locale == "ru" else self.name_en


# Baseline waste fractions; each country overrides a few
BASE_WASTE = {
    "concrete": 0.08,
    "paint": 0.07,
    "flooring": 0.08,
    "tile": 0.10,
    "roofing": 0.07,
    "drywall": 0.12,
    "wallpaper": 0.08,
    "brick": 0.05,
    "insulation": 0.08,
    "plaster": 0.10,
    "screed": 0.06,
    "electrical": 0.12,
}

COUNTRY_PROFILE_SEEDS = [
    {
        "country_code": "US",
        "name_en": "United States",
        "name_ru": "США",
        "unit_system": "imperial",
        "currency": "USD",
        "defaults": {
            "waste": {**BASE_WASTE, "concrete": 0.09, "drywall": 0.15},
            "paint": {"coverage_sqm_per_liter": 9.3, "coats": 2},
            "flooring": {"pack_coverage_sqm": 2.23},
            "tile": {"tile_area_sqm": 0.25, "diagonal_waste": 0.15},
            "drywall": {"sheet_area_sqm": 2.973},  # 4ft x 8ft
            "wallpaper": {"roll_length_meters": 10.06, "roll_width_meters": 0.527,
                          "allowance_meters": 0.1},
            "roofing": {"bundle_coverage_sqm": 3.06, "default_angle_degrees": 26},
            "brick": {"bricks_per_sqm": 50, "mortar_per_sqm": 0.036},
            "insulation": {"roll_area_sqm": 9.3},
            "plaster": {"coverage_per_bag": 0.1},
        },
    },
    {
        "country_code": "GB",
        "name_en": "United Kingdom",
        "name_ru": "Великобритания",
        "unit_system": "metric",
        "currency": "GBP",
        "defaults": {
            "waste": {**BASE_WASTE, "tile": 0.12},
            "paint": {"coverage_sqm_per_liter": 11, "coats": 2},
            "flooring": {"pack_coverage_sqm": 2.6},
            "tile": {"tile_area_sqm": 0.24, "diagonal_waste": 0.13},
            "drywall": {"sheet_area_sqm": 2.88},
            "wallpaper": {"roll_length_meters": 10.05, "roll_width_meters": 0.53,
                          "allowance_meters": 0.08},
            "roofing": {"bundle_coverage_sqm": 3.1, "default_angle_degrees": 30},
            "brick": {"bricks_per_sqm": 52, "mortar_per_sqm": 0.035},
            "insulation": {"roll_area_sqm": 10},
            "plaster": {"coverage_per_bag": 0.12},
        },
    },
    {
        "country_code": "DE",
        "name_en": "Germany",
        "name_ru": "Германия",
        "unit_system": "metric",
        "currency": "EUR",
        "defaults": {
            "waste": {**BASE_WASTE, "concrete": 0.07, "tile": 0.11},
            "paint": {"coverage_sqm_per_liter": 12, "coats": 2},
            "flooring": {"pack_coverage_sqm": 2.5},
            "tile": {"tile_area_sqm": 0.23, "diagonal_waste": 0.12},
            "drywall": {"sheet_area_sqm": 3.0},
            "wallpaper": {"roll_length_meters": 10, "roll_width_meters": 0.53,
                          "allowance_meters": 0.07},
            "roofing": {"bundle_coverage_sqm": 3.2, "default_angle_degrees": 32},
            "brick": {"bricks_per_sqm": 48, "mortar_per_sqm": 0.033},
            "insulation": {"roll_area_sqm": 10},
            "plaster": {"coverage_per_bag": 0.11},
        },
    },
    {
        "country_code": "RU",
        "name_en": "Russia",
        "name_ru": "Россия",
        "unit_system": "metric",
        "currency": "RUB",
        "defaults": {
            "waste": {**BASE_WASTE, "drywall": 0.13, "wallpaper": 0.09},
            "paint": {"coverage_sqm_per_liter": 10.5, "coats": 2},
            "flooring": {"pack_coverage_sqm": 2.4},
            "tile": {"tile_area_sqm": 0.25, "diagonal_waste": 0.12},
            "drywall": {"sheet_area_sqm": 3.0},
            "wallpaper": {"roll_length_meters": 10.05, "roll_width_meters": 0.53,
                          "allowance_meters": 0.1},
            "roofing": {"bundle_coverage_sqm": 3.15, "default_angle_degrees": 30},
            "brick": {"bricks_per_sqm": 51, "mortar_per_sqm": 0.035},
            "insulation": {"roll_area_sqm": 9.5},
            "plaster": {"coverage_per_bag": 0.1},
        },
    },
    {
        "country_code": "IN",
        "name_en": "India",
        "name_ru": "Индия",
        "unit_system": "metric",
        "currency": "INR",
        "defaults": {
            "waste": {**BASE_WASTE, "paint": 0.08, "brick": 0.08},
            "paint": {"coverage_sqm_per_liter": 9, "coats": 2},
            "flooring": {"pack_coverage_sqm": 2.1},
            "tile": {"tile_area_sqm": 0.22, "diagonal_waste": 0.12},
            "drywall": {"sheet_area_sqm": 2.88},
            "wallpaper": {"roll_length_meters": 10, "roll_width_meters": 0.52,
                          "allowance_meters": 0.08},
            "roofing": {"bundle_coverage_sqm": 3.0, "default_angle_degrees": 24},
            "brick": {"bricks_per_sqm": 54, "mortar_per_sqm": 0.04},
            "insulation": {"roll_area_sqm": 9},
            "plaster": {"coverage_per_bag": 0.1},
        },
    },
    {
        "country_code": "CA",
        "name_en": "Canada",
        "name_ru": "Канада",
        "unit_system": "metric",
        "currency": "CAD",
        "defaults": {
            "waste": {**BASE_WASTE, "roofing": 0.08},
            "paint": {"coverage_sqm_per_liter": 10, "coats": 2},
            "flooring": {"pack_coverage_sqm": 2.3},
            "tile": {"tile_area_sqm": 0.24, "diagonal_waste": 0.13},
            "drywall": {"sheet_area_sqm": 2.973},
            "wallpaper": {"roll_length_meters": 10.06, "roll_width_meters": 0.527,
                          "allowance_meters": 0.08},
            "roofing": {"bundle_coverage_sqm": 3.05, "default_angle_degrees": 27},
            "brick": {"bricks_per_sqm": 50, "mortar_per_sqm": 0.035},
            "insulation": {"roll_area_sqm": 9.3},
            "plaster": {"coverage_per_bag": 0.1},
        },
    },
]

# Validated once; a malformed seed fails at import, not mid-calculation
_PROFILES: tuple[CountryProfile, ...] = tuple(sorted(
    (CountryProfile.model_validate(seed) for seed in COUNTRY_PROFILE_SEEDS),
    key=lambda profile: profile.country_code,
))
_BY_CODE = {profile.country_code: profile for profile in _PROFILES}


def list_profiles() -> list[CountryProfile]:
    """All seeded profiles, sorted by country code ascending."""
    return list(_PROFILES)


def has_profile(country_code: str) -> bool:
    return bool(country_code) and country_code.strip().upper() in _BY_CODE


def get_profile(country_code: str) -> CountryProfile:
    """Profile for a country code (case-insensitive), or raises CountryNotFoundError."""
    code = (country_code or "").strip().upper()
    if code not in _BY_CODE:
        raise CountryNotFoundError(
            f"No country profile for code: {country_code!r}. "
            f"Available: {list(_BY_CODE.keys())}"
        )
    return _BY_CODE[code]


def resolve_defaults(country_code: str) -> CountryDefaults:
    """Material defaults for a country code, or raises CountryNotFoundError."""
    return get_profile(country_code).defaults


def resolve_profile_or_default(country_code: Optional[str],
                               default_code: Optional[str] = None) -> CountryProfile:
    """
    Caller-side fallback: the requested profile, else default_code's profile,
    else the first profile in sorted order. Never raises.
    """
    if country_code and has_profile(country_code):
        return get_profile(country_code)
    if country_code:
        logger.warning("Unknown country %r, falling back to default profile", country_code)
    if default_code and has_profile(default_code):
        return get_profile(default_code)
    return _PROFILES[0]

from fastapi import APIRouter, HTTPException
from typing import List

from .. import schemas
from ..config import settings
from ..countries import CountryNotFoundError, CountryProfile, get_profile, list_profiles
from ..formulas.catalog import normalize_locale

router = APIRouter(prefix="/countries", tags=["countries"])


def to_country_out(profile: CountryProfile, locale: str) -> dict:
    name = profile.localized_name(locale)
    return {
        "country_code": profile.country_code,
        "name": name,
        "name_localized": name,
        "unit_system": profile.unit_system,
        "currency": profile.currency,
        "defaults": profile.defaults.model_dump(),
    }


@router.get("/", response_model=List[schemas.Country])
def list_countries(locale: str = settings.DEFAULT_LOCALE):
    """Seeded country profiles, sorted by country code."""
    locale = normalize_locale(locale)
    return [to_country_out(profile, locale) for profile in list_profiles()]


@router.get("/{country_code}", response_model=schemas.Country)
def get_country(country_code: str, locale: str = settings.DEFAULT_LOCALE):
    try:
        profile = get_profile(country_code)
    except CountryNotFoundError:
        raise HTTPException(status_code=404, detail=f"Country not found: {country_code}")
    return to_country_out(profile, normalize_locale(locale))

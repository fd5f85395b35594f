"""
Country profile tests — seeded data, lookups and caller-side fallback.

Tests:
1-3.  Seeds — sorted order, every profile covers every formula's waste, US is imperial
4-7.  Lookups — case-insensitive, unknown codes raise, resolve_defaults, localized names
8-10. Fallback — default code, first profile, known code wins
11-13. waste_for fallback chain, seed validation, immutability
"""

import pytest
from pydantic import ValidationError

from buildcalc.countries import (
    BASE_WASTE,
    COUNTRY_PROFILE_SEEDS,
    FALLBACK_WASTE,
    CountryDefaults,
    CountryNotFoundError,
    get_profile,
    has_profile,
    list_profiles,
    resolve_defaults,
    resolve_profile_or_default,
)
from buildcalc.models import FormulaKey, UnitSystem


# ============================================================
# Seeds
# ============================================================

def test_profiles_sorted_by_country_code():
    codes = [profile.country_code for profile in list_profiles()]
    assert codes == ["CA", "DE", "GB", "IN", "RU", "US"]
    assert codes == sorted(codes)


def test_every_profile_has_waste_for_every_formula():
    for profile in list_profiles():
        for key in FormulaKey:
            assert key.value in profile.defaults.waste, \
                f"{profile.country_code} missing waste for {key.value}"
            assert 0 <= profile.defaults.waste[key.value] < 1


def test_us_profile_values():
    """US is the only imperial profile; its overrides sit on the base waste table."""
    us = get_profile("US")
    assert us.unit_system == UnitSystem.IMPERIAL
    assert us.currency == "USD"
    assert us.defaults.waste["concrete"] == 0.09
    assert us.defaults.waste["drywall"] == 0.15
    assert us.defaults.waste["paint"] == BASE_WASTE["paint"]
    assert us.defaults.paint.coverage_sqm_per_liter == 9.3
    assert us.defaults.tile.diagonal_waste == 0.15

    metric = [p.country_code for p in list_profiles() if p.unit_system == UnitSystem.METRIC]
    assert metric == ["CA", "DE", "GB", "IN", "RU"]


# ============================================================
# Lookups
# ============================================================

def test_get_profile_case_insensitive():
    assert get_profile("gb").country_code == "GB"
    assert get_profile(" de ").country_code == "DE"
    assert has_profile("ru")
    assert not has_profile("ZZ")
    assert not has_profile("")


def test_unknown_country_raises():
    with pytest.raises(CountryNotFoundError):
        get_profile("ZZ")
    with pytest.raises(CountryNotFoundError):
        resolve_defaults("ZZ")
    # Callers that treat it as a plain lookup failure still catch it
    with pytest.raises(LookupError):
        get_profile("")


def test_resolve_defaults():
    defaults = resolve_defaults("DE")
    assert defaults.paint.coverage_sqm_per_liter == 12
    assert defaults.waste["concrete"] == 0.07


def test_localized_name():
    us = get_profile("US")
    assert us.localized_name("en") == "United States"
    assert us.localized_name("ru") == "США"
    assert us.localized_name("fr") == "United States"


# ============================================================
# Caller-side fallback
# ============================================================

def test_fallback_to_default_code():
    assert resolve_profile_or_default("ZZ", "US").country_code == "US"
    assert resolve_profile_or_default(None, "GB").country_code == "GB"


def test_fallback_to_first_profile():
    """No usable code at all -> first profile in sorted order."""
    assert resolve_profile_or_default("ZZ").country_code == "CA"
    assert resolve_profile_or_default(None).country_code == "CA"
    assert resolve_profile_or_default("ZZ", "YY").country_code == "CA"


def test_known_code_wins_over_default():
    assert resolve_profile_or_default("in", "US").country_code == "IN"


# ============================================================
# Defaults model
# ============================================================

def test_waste_for_fallback_chain():
    """Specific key -> concrete -> 0.08."""
    defaults = get_profile("US").defaults
    assert defaults.waste_for("drywall") == 0.15
    assert defaults.waste_for(FormulaKey.DRYWALL) == 0.15
    assert defaults.waste_for("chimney") == 0.09

    sparse = defaults.model_copy(update={"waste": {}})
    assert sparse.waste_for("paint") == FALLBACK_WASTE


def test_seed_missing_waste_entry_rejected():
    """A malformed seed fails validation instead of surfacing mid-calculation."""
    seed = dict(COUNTRY_PROFILE_SEEDS[0]["defaults"])
    seed["waste"] = {k: v for k, v in seed["waste"].items() if k != "electrical"}
    with pytest.raises(ValidationError):
        CountryDefaults.model_validate(seed)


def test_profiles_are_immutable():
    profile = get_profile("GB")
    with pytest.raises(ValidationError):
        profile.currency = "EUR"
    with pytest.raises(ValidationError):
        profile.defaults.paint.coats = 3

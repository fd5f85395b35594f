"""
Formula registry tests — calculator definitions, localization and cross-links.

Tests:
1-3.  Definitions — one per formula key, unique slugs, waste keys resolvable
4-5.  Field ids match what each formula returns and reads
6-8.  Localization — English, Russian, unknown locale fallback
9.    Catalog copies do not share state with the cache
10-11. Lookups by slug and related calculators
"""

import pytest

from buildcalc.calculators import run_calculation
from buildcalc.countries import get_profile
from buildcalc.formulas import (
    CALCULATOR_DEFINITIONS,
    CALCULATOR_RELATIONS,
    POPULAR_CALCULATOR_SLUGS,
    get_calculator_by_slug,
    get_calculators,
    get_definition,
    list_slugs,
    related_calculators,
)
from buildcalc.models import FormulaKey, UnitSystem


# ============================================================
# Definitions
# ============================================================

def test_one_definition_per_formula_key():
    keys = [definition.formula_key for definition in CALCULATOR_DEFINITIONS]
    assert sorted(keys) == sorted(FormulaKey)
    assert len(set(keys)) == len(keys)


def test_slugs_unique_and_known():
    slugs = list_slugs()
    assert len(slugs) == 12
    assert len(set(slugs)) == len(slugs)
    for slug in POPULAR_CALCULATOR_SLUGS:
        assert slug in slugs


def test_waste_keys_exist_in_every_profile():
    profile = get_profile("US")
    for definition in CALCULATOR_DEFINITIONS:
        assert definition.waste_key in profile.defaults.waste


# ============================================================
# Field and result ids
# ============================================================

@pytest.mark.parametrize("definition", CALCULATOR_DEFINITIONS, ids=lambda d: d.slug)
def test_result_labels_match_engine_keys(definition):
    """Every labelled result is produced by the engine, and nothing is left unlabelled."""
    result = run_calculation(definition.formula_key, {}, UnitSystem.METRIC,
                             get_profile("GB").defaults, 0.1)
    assert {label.id for label in definition.result_labels} == set(result)


@pytest.mark.parametrize("definition", CALCULATOR_DEFINITIONS, ids=lambda d: d.slug)
def test_field_defaults_cover_both_unit_systems(definition):
    for field in definition.inputs:
        assert field.default_for(UnitSystem.METRIC) is not None, f"{definition.slug}.{field.id}"
        assert field.default_for(UnitSystem.IMPERIAL) is not None, f"{definition.slug}.{field.id}"
        if field.group:
            assert definition.field("mode") is not None


def test_concrete_mode_groups():
    concrete = get_definition("concrete")
    mode = concrete.field("mode")
    assert mode.kind == "select"
    assert [option.value for option in mode.options] == ["slab", "cylinder"]
    groups = {field.id: field.group for field in concrete.inputs if field.group}
    assert groups == {
        "length": "slab", "width": "slab", "thickness": "slab",
        "diameter": "cylinder", "height": "cylinder",
    }


def test_tile_has_diagonal_toggle():
    diagonal = get_definition("tile").field("diagonal")
    assert diagonal.kind == "toggle"
    assert diagonal.default_metric is False


# ============================================================
# Localization
# ============================================================

def test_catalog_english():
    catalog = get_calculators("en")
    assert [record["slug"] for record in catalog] == list_slugs()
    concrete = catalog[0]
    assert concrete["title"] == "Concrete Calculator"
    assert concrete["formula_key"] == "concrete"
    assert concrete["inputs"][0]["label"] == "Shape"
    assert concrete["result_labels"][0]["imperial_unit"] == "yd³"


def test_catalog_russian():
    concrete = get_calculator_by_slug("concrete", "ru")
    assert concrete["title"] == "Калькулятор бетона"
    assert concrete["inputs"][0]["options"][0]["label"] == "Плита"


def test_unknown_locale_falls_back_to_english():
    assert get_calculators("de") == get_calculators("en")


def test_every_string_localized():
    for locale in ("en", "ru"):
        for record in get_calculators(locale):
            assert record["title"] and record["description"] and record["how_it_works"]
            for field in record["inputs"]:
                assert field["label"], f"{record['slug']}.{field['id']} ({locale})"
            for item in record["faq"]:
                assert item["question"] and item["answer"]


def test_catalog_copies_are_independent():
    catalog = get_calculators("en")
    catalog[0]["inputs"].clear()
    catalog[0]["result_labels"][0]["imperial_unit"] = "gal"
    fresh = get_calculators("en")
    assert fresh[0]["inputs"]
    assert fresh[0]["result_labels"][0]["imperial_unit"] == "yd³"
    assert get_calculator_by_slug("concrete")["inputs"]


# ============================================================
# Lookups and relations
# ============================================================

def test_lookup_by_slug():
    assert get_calculator_by_slug("screed")["formula_key"] == "screed"
    assert get_calculator_by_slug("chimney") is None
    with pytest.raises(ValueError):
        get_definition("chimney")


def test_related_calculators():
    slugs = set(list_slugs())
    assert set(CALCULATOR_RELATIONS) == slugs
    for slug in slugs:
        related = related_calculators(slug)
        assert len(related) == 4
        assert slug not in related
        assert set(related) <= slugs
    assert related_calculators("chimney") == []

"""
Localized calculator catalog and cross-links between calculators.
"""

import copy
from functools import lru_cache

from ..models import LOCALES
from .definitions import CALCULATOR_DEFINITIONS
from .schema import CalculatorDefinition

DEFAULT_LOCALE = "en"

# Each calculator links to four related ones
CALCULATOR_RELATIONS = {
    "concrete": ["screed", "brick", "plaster", "flooring"],
    "paint": ["wallpaper", "plaster", "drywall", "tile"],
    "flooring": ["tile", "screed", "insulation", "electrical"],
    "tile": ["flooring", "paint", "plaster", "screed"],
    "roofing": ["insulation", "drywall", "electrical", "screed"],
    "drywall": ["paint", "wallpaper", "insulation", "electrical"],
    "wallpaper": ["paint", "drywall", "plaster", "tile"],
    "brick": ["concrete", "plaster", "screed", "flooring"],
    "insulation": ["roofing", "drywall", "electrical", "screed"],
    "plaster": ["paint", "wallpaper", "tile", "concrete"],
    "screed": ["concrete", "flooring", "tile", "brick"],
    "electrical": ["drywall", "insulation", "roofing", "flooring"],
}

POPULAR_CALCULATOR_SLUGS = [
    "concrete",
    "paint",
    "flooring",
    "tile",
    "roofing",
    "drywall",
    "wallpaper",
    "brick",
]

_BY_SLUG = {definition.slug: definition for definition in CALCULATOR_DEFINITIONS}


def normalize_locale(locale: str) -> str:
    return locale if locale in LOCALES else DEFAULT_LOCALE


def list_slugs() -> list[str]:
    return [definition.slug for definition in CALCULATOR_DEFINITIONS]


def get_definition(slug: str) -> CalculatorDefinition:
    """Raw (unlocalized) definition for a slug, or raises ValueError."""
    if slug not in _BY_SLUG:
        raise ValueError(f"No calculator definition for slug: {slug}. Available: {list_slugs()}")
    return _BY_SLUG[slug]


def localize_definition(definition: CalculatorDefinition, locale: str) -> dict:
    """Flatten every LocalizedString in a definition to the given locale."""
    locale = normalize_locale(locale)
    return {
        "id": definition.slug,
        "slug": definition.slug,
        "category": definition.category.value,
        "rating": definition.rating,
        "title": definition.title.pick(locale),
        "description": definition.description.pick(locale),
        "how_it_works": definition.how_it_works.pick(locale),
        "inputs": [
            {
                **field.model_dump(exclude={"label", "description", "options"}),
                "label": field.label.pick(locale),
                "description": field.description.pick(locale) if field.description else None,
                "options": [
                    {"value": option.value, "label": option.label.pick(locale)}
                    for option in field.options
                ] if field.options else None,
            }
            for field in definition.inputs
        ],
        "faq": [
            {"question": item.question.pick(locale), "answer": item.answer.pick(locale)}
            for item in definition.faq
        ],
        "guide": {
            "intro": definition.guide.intro.pick(locale),
            "sections": [section.model_dump() for section in definition.guide.sections],
        } if definition.guide else None,
        "formula_key": definition.formula_key.value,
        "result_labels": [
            {
                "id": label.id,
                "label": label.label.pick(locale),
                "si_unit": label.si_unit,
                "metric_unit": label.metric_unit,
                "imperial_unit": label.imperial_unit,
            }
            for label in definition.result_labels
        ],
        "waste_key": definition.waste_key,
    }


@lru_cache(maxsize=None)
def _localized_catalog(locale: str) -> tuple:
    return tuple(localize_definition(definition, locale) for definition in CALCULATOR_DEFINITIONS)


def get_calculators(locale: str = DEFAULT_LOCALE) -> list[dict]:
    """All calculators, localized. Unknown locales fall back to English."""
    return copy.deepcopy(list(_localized_catalog(normalize_locale(locale))))


def get_calculator_by_slug(slug: str, locale: str = DEFAULT_LOCALE):
    """Localized calculator record, or None if the slug is unknown."""
    for record in get_calculators(locale):
        if record["slug"] == slug:
            return record
    return None


def related_calculators(slug: str) -> list[str]:
    """Related calculator slugs for cross-linking; empty for unknown slugs."""
    return list(CALCULATOR_RELATIONS.get(slug, []))

"""
Calculator API — catalog, form state and calculation.

GET  /api/calculators                 — localized catalog
GET  /api/calculators/{slug}          — one calculator plus related slugs
GET  /api/calculators/{slug}/form     — pre-filled form for a country
POST /api/calculators/{slug}/calculate — run the engine, return SI + display rows
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Request

from .. import schemas
from ..calculators.registry import UnknownFormulaError
from ..config import settings
from ..countries import resolve_profile_or_default
from ..formulas.catalog import (
    get_calculator_by_slug,
    get_calculators,
    get_definition,
    normalize_locale,
    related_calculators,
)
from ..runner import CalculatorRunner, clamp_waste

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculators", tags=["calculators"])


def _get_definition_or_404(slug: str):
    try:
        return get_definition(slug)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Calculator not found: {slug}")


@router.get("/")
def list_calculator_catalog(locale: str = settings.DEFAULT_LOCALE):
    return get_calculators(normalize_locale(locale))


@router.get("/{slug}")
def get_calculator_detail(slug: str, locale: str = settings.DEFAULT_LOCALE):
    record = get_calculator_by_slug(slug, normalize_locale(locale))
    if record is None:
        raise HTTPException(status_code=404, detail=f"Calculator not found: {slug}")
    return {**record, "related": related_calculators(slug)}


@router.get("/{slug}/form", response_model=schemas.FormState)
def get_calculator_form(
    slug: str,
    request: Request,
    country: Optional[str] = None,
    unit_system: Optional[str] = None,
    locale: str = settings.DEFAULT_LOCALE,
):
    """
    Pre-filled form state. Any other query parameters are treated as a
    share link (field values plus `waste` as a percent).
    """
    definition = _get_definition_or_404(slug)
    profile = resolve_profile_or_default(country, settings.DEFAULT_COUNTRY)
    share = {
        key: value for key, value in request.query_params.items()
        if key not in ("country", "unit_system", "locale")
    }
    runner = CalculatorRunner(definition, profile, unit_system=unit_system, query=share)
    values = runner.initial_values()
    return {
        "slug": slug,
        "country_code": profile.country_code,
        "unit_system": runner.unit_system,
        "waste_factor": runner.initial_waste(),
        "values": values,
        "fields": runner.form_fields(values, normalize_locale(locale)),
        "completion": runner.completion(values),
    }


@router.post("/{slug}/calculate", response_model=schemas.CalculateResponse)
def calculate(slug: str, request: schemas.CalculateRequest):
    """
    Run one calculator.

    1. Resolve the country profile (unknown codes fall back to the default country)
    2. Start from the pre-filled form, overlay the submitted inputs, apply any preset
    3. Run the engine and project results to the active unit system
    """
    definition = _get_definition_or_404(slug)
    locale = normalize_locale(request.locale)
    profile = resolve_profile_or_default(request.country_code, settings.DEFAULT_COUNTRY)
    runner = CalculatorRunner(definition, profile, unit_system=request.unit_system)

    values = {**runner.initial_values(), **request.inputs}
    waste = runner.initial_waste()
    if request.preset:
        try:
            values, waste = runner.apply_preset(request.preset, values)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
    if request.waste_factor is not None:
        waste = clamp_waste(request.waste_factor)

    try:
        result = runner.run(values, waste)
    except UnknownFormulaError as e:
        raise HTTPException(status_code=400, detail=str(e))

    rows = runner.result_rows(result, locale)
    logger.info("Calculated %s for %s (%s)", slug, profile.country_code, runner.unit_system.value)
    return {
        "slug": slug,
        "formula_key": definition.formula_key.value,
        "country_code": profile.country_code,
        "unit_system": runner.unit_system,
        "waste_factor": waste,
        "inputs": runner.engine_inputs(values),
        "result": result,
        "rows": rows,
        "headline": runner.headline(rows, waste),
        "share_query": runner.share_query(values, waste),
    }

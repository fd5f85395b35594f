"""
Calculation engine entry point.

run_calculation dispatches a formula key to its calculator and returns a
flat mapping of SI quantities. Stateless and side-effect free: the country
defaults and unit system arrive as arguments on every call.
"""

import logging

from ..units import project_to_user_units
from .registry import UnknownFormulaError, get_calculator, has_calculator

logger = logging.getLogger(__name__)


def run_calculation(formula_key, inputs: dict, unit_system, defaults,
                    waste_factor: float, strict: bool = False) -> dict:
    """
    Run one material formula.

    Args:
        formula_key: FormulaKey member or its string value
        inputs: {field_id: number | str | bool | None} in the user's unit system
        unit_system: UnitSystem the raw inputs are expressed in
        defaults: CountryDefaults of the active profile
        waste_factor: overage fraction, applied as (1 + waste_factor)
        strict: raise UnknownFormulaError instead of returning {} for unknown keys

    Returns:
        EngineResult dict — keys depend on the formula; absent keys mean
        "not applicable", never zero.
    """
    if not has_calculator(formula_key):
        if strict:
            raise UnknownFormulaError(f"Unknown formula key: {formula_key}")
        logger.warning("Unknown formula key %r, returning empty result", formula_key)
        return {}

    calculator = get_calculator(formula_key)
    return calculator.calculate(inputs or {}, unit_system, defaults, waste_factor)


def project_result_to_user_units(si_value: float, unit_system, unit_kind: str) -> float:
    """SI result -> display units ("length" | "area" | "volume" | "liquid")."""
    return project_to_user_units(si_value, unit_system, unit_kind)

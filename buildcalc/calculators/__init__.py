"""
Calculation engine — deterministic material estimation.

Pure Python math. No I/O, no shared state.
Given raw field values, a unit system, a country profile and a waste factor,
produce a flat mapping of required quantities in SI units.
"""

from .base import BaseCalculator, to_number
from .engine import project_result_to_user_units, run_calculation
from .registry import (
    CALCULATOR_REGISTRY,
    UnknownFormulaError,
    get_calculator,
    has_calculator,
    list_calculators,
)

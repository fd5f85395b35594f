"""
Formula registry — declarative metadata for every calculator.

No computation lives here. Field ids match the keys each formula reads.
"""

from .catalog import (
    CALCULATOR_RELATIONS,
    POPULAR_CALCULATOR_SLUGS,
    get_calculator_by_slug,
    get_calculators,
    get_definition,
    list_slugs,
    related_calculators,
)
from .definitions import CALCULATOR_DEFINITIONS
from .schema import CalculatorDefinition, InputField, LocalizedString, ResultLabel

"""
Calculator registry — maps each FormulaKey to its calculator class.

Every FormulaKey member must have an entry; the test suite checks the
mapping is exhaustive.
"""

from ..models import FormulaKey, parse_formula_key
from .base import BaseCalculator
from .brick import BrickCalculator
from .concrete import ConcreteCalculator
from .drywall import DrywallCalculator
from .electrical import ElectricalCalculator
from .flooring import FlooringCalculator
from .insulation import InsulationCalculator
from .paint import PaintCalculator
from .plaster import PlasterCalculator
from .roofing import RoofingCalculator
from .screed import ScreedCalculator
from .tile import TileCalculator
from .wallpaper import WallpaperCalculator

CALCULATOR_REGISTRY: dict[FormulaKey, type] = {
    FormulaKey.CONCRETE: ConcreteCalculator,
    FormulaKey.PAINT: PaintCalculator,
    FormulaKey.FLOORING: FlooringCalculator,
    FormulaKey.TILE: TileCalculator,
    FormulaKey.ROOFING: RoofingCalculator,
    FormulaKey.DRYWALL: DrywallCalculator,
    FormulaKey.WALLPAPER: WallpaperCalculator,
    FormulaKey.BRICK: BrickCalculator,
    FormulaKey.INSULATION: InsulationCalculator,
    FormulaKey.PLASTER: PlasterCalculator,
    FormulaKey.SCREED: ScreedCalculator,
    FormulaKey.ELECTRICAL: ElectricalCalculator,
}


class UnknownFormulaError(ValueError):
    """Raised in strict mode when a formula key has no calculator."""


def get_calculator(formula_key) -> BaseCalculator:
    """Returns an instance of the calculator for a formula key, or raises UnknownFormulaError."""
    key = parse_formula_key(formula_key)
    if key is None or key not in CALCULATOR_REGISTRY:
        raise UnknownFormulaError(
            f"No calculator registered for formula: {formula_key}. "
            f"Available: {list_calculators()}"
        )
    return CALCULATOR_REGISTRY[key]()


def has_calculator(formula_key) -> bool:
    """Check if a calculator exists for a formula key."""
    key = parse_formula_key(formula_key)
    return key is not None and key in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered formula keys."""
    return [key.value for key in CALCULATOR_REGISTRY]

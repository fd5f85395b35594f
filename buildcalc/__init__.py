"""BuildCalc — construction material estimation calculators."""

__version__ = "1.0.0"

"""
Display formatting for engine results.

Always en-US style (dot decimal, comma grouping) so server-rendered and
client-rendered numbers match.
"""


def format_number(value: float, max_fraction_digits: int = None,
                  min_fraction_digits: int = 0) -> str:
    """
    Format a number for display.

    Values above 100 default to 1 fraction digit, smaller values to 2.
    Trailing zeros beyond min_fraction_digits are dropped.
    """
    if max_fraction_digits is None:
        max_fraction_digits = 1 if value > 100 else 2
    max_fraction_digits = max(max_fraction_digits, min_fraction_digits)

    text = f"{value:,.{max_fraction_digits}f}"
    if max_fraction_digits > min_fraction_digits and "." in text:
        whole, fraction = text.split(".")
        fraction = fraction.rstrip("0")
        if len(fraction) < min_fraction_digits:
            fraction = fraction.ljust(min_fraction_digits, "0")
        text = f"{whole}.{fraction}" if fraction else whole
    if text in ("-0", "-0.0", "-0.00"):
        text = text[1:]
    return text


def format_percent(value: float, decimals: int = 1) -> str:
    """0.075 -> '7.5%'."""
    return f"{format_number(value * 100, max_fraction_digits=decimals)}%"

"""Number formatting used in result strings and step text."""
from decimal import Decimal

from config import DECIMALS


def fmt4(value: float, decimals: int = DECIMALS) -> str:
    """Fixed-point text, e.g. 53.13010235 -> '53.1301'. Never renders '-0.0000'."""
    text = f"{value:.{decimals}f}"
    if text.startswith("-") and float(text) == 0:
        return text[1:]
    return text

def fmt_plain(value: float) -> str:
    """Echo of a user value: 3.0 -> '3', -1.5 -> '-1.5', 1e-09 -> '0.000000001'."""
    if value == 0:
        return "0"
    if value.is_integer():
        return str(int(value))
    # shortest round-trip digits, written positionally
    return format(Decimal(repr(value)), 'f')

def format_polar_form(magnitude: float, argument_deg: float) -> str:
    deg = fmt4(argument_deg)
    return f"{fmt4(magnitude)}(cos {deg}° + i sin {deg}°)"

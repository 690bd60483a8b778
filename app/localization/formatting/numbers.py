"""Number rendering helpers: rounding, separators, compact form, digit scripts."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

Number = Union[int, float, Decimal]

ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
LATIN_DIGITS = "0123456789"

_LATIN_TO_ARABIC = str.maketrans(LATIN_DIGITS, ARABIC_INDIC_DIGITS)
_ARABIC_TO_LATIN = str.maketrans(ARABIC_INDIC_DIGITS, LATIN_DIGITS)


def round_half_up(value: Number, decimals: int) -> Decimal:
    """Round on the decimal string of the value, halves away from zero.

    Example:
        >>> round_half_up(2.675, 2)
        Decimal('2.68')
    """
    quantum = Decimal(1).scaleb(-decimals)
    return Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)


def group_digits(value: Number, decimals: int, thousands: str, decimal: str) -> str:
    """Render a number with fixed decimals and the given separators.

    Args:
        value: Number to render.
        decimals: Digits after the decimal separator.
        thousands: Group separator.
        decimal: Decimal separator.

    Returns:
        e.g. "1 234,56" for (1234.56, 2, " ", ",").
    """
    rounded = round_half_up(value, decimals)
    text = f"{rounded:,.{decimals}f}"
    # "\0" keeps group commas apart from the decimal point during the swap
    return text.replace(",", "\0").replace(".", decimal).replace("\0", thousands)


def compact(value: Number) -> str:
    """Compact ASCII form: "1.2M" from 1,000,000 up, "1.5K" from 1,000 up.

    Smaller values are returned as str(value).
    """
    if value >= 1_000_000:
        return f"{float(value) / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{float(value) / 1_000:.1f}K"
    return str(value)


def is_compactable(value: Number) -> bool:
    return value >= 1_000


def convert_numbers(text: str, source: str = "latin", target: str = "arabic") -> str:
    """Convert digits between Latin and Arabic-Indic scripts.

    Args:
        text: Text containing digits.
        source: "latin" or "arabic".
        target: "latin" or "arabic".

    Returns:
        The text with digits converted; unchanged for any other combination.
    """
    if source == target:
        return text
    if source == "latin" and target == "arabic":
        return text.translate(_LATIN_TO_ARABIC)
    if source == "arabic" and target == "latin":
        return text.translate(_ARABIC_TO_LATIN)
    return text

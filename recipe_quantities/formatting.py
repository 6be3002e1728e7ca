"""
Display formatting for recipe quantities.

Numbers are rendered for humans: decimals lose trailing zeros, mixed numbers
use vulgar fraction glyphs, and approximate fractions carry their error so the
page can reveal how far the fraction is from the real value.

All functions are pure and never raise for well-formed models; validation is
the job of :mod:`recipe_quantities.models`.
"""

from __future__ import annotations

import math
from typing import Final, NamedTuple, assert_never

from recipe_quantities.glyphs import format_fraction, is_glyph
from recipe_quantities.models import (
    FloatNumber,
    FractionNumber,
    NumberValue,
    Quantity,
    RangeValue,
    TextValue,
)

# Errors at or below this magnitude are not worth showing.
ERROR_DISPLAY_THRESHOLD: Final[float] = 1e-3

DECIMAL_PLACES: Final[int] = 3

# Significant digits kept in error annotations.
ERROR_SIGNIFICANT_DIGITS: Final[int] = 3

RANGE_SEPARATOR: Final[str] = "-"


class NumberParts(NamedTuple):
    """Display pieces of a number; ``None`` means the piece is not shown."""

    whole: str | None
    fraction: str | None
    error: str | None


def format_float(value: float, places: int = DECIMAL_PLACES) -> str:
    """
    Format a decimal without trailing zeros or a dangling decimal point.

    Example:
        >>> format_float(3.0)
        '3'
        >>> format_float(3.50)
        '3.5'
        >>> format_float(0.3333333)
        '0.333'
    """
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def format_error(err: float) -> str | None:
    """Signed error annotation, or None when the error is negligible."""
    if abs(err) <= ERROR_DISPLAY_THRESHOLD:
        return None
    places = DECIMAL_PLACES
    if math.isfinite(err):
        magnitude = math.floor(math.log10(abs(err)))
        places = max(places, ERROR_SIGNIFICANT_DIGITS - 1 - magnitude)
    text = format_float(err, places)
    if err >= 0:
        return f"+{text}"
    return text


def number_parts(number: FractionNumber | FloatNumber) -> NumberParts:
    """Split a number into the pieces the templates render separately."""
    if isinstance(number, FractionNumber):
        whole = None
        if number.whole > 0 or number.num == 0:
            whole = str(number.whole)
        fraction = None
        if number.num > 0:
            fraction = format_fraction(number.num, number.den)
        return NumberParts(whole, fraction, format_error(number.err))
    if isinstance(number, FloatNumber):
        return NumberParts(format_float(number.value), None, None)
    assert_never(number)


def format_number(
    number: FractionNumber | FloatNumber,
    *,
    show_error: bool = True,
) -> str:
    """
    Format a number as plain text.

    A glyph follows the whole part directly ("2½"); a slash fraction is
    separated by a space ("2 3⁄7") so the digits do not run together. The
    error, when shown, follows in parentheses ("⅓ (+0.002)").
    """
    parts = number_parts(number)
    text = parts.whole or ""
    if parts.fraction is not None:
        if text and not is_glyph(parts.fraction):
            text += " "
        text += parts.fraction
    if show_error and parts.error is not None:
        text += f" ({parts.error})"
    return text


def format_value(
    value: NumberValue | RangeValue | TextValue,
    *,
    show_error: bool = True,
) -> str:
    """Format any quantity value; text values are returned unchanged."""
    if isinstance(value, RangeValue):
        start = format_number(value.start, show_error=show_error)
        end = format_number(value.end, show_error=show_error)
        return f"{start}{RANGE_SEPARATOR}{end}"
    if isinstance(value, NumberValue):
        return format_number(value.value, show_error=show_error)
    if isinstance(value, TextValue):
        return value.value
    assert_never(value)


def format_quantity(quantity: Quantity, *, show_error: bool = True) -> str:
    text = format_value(quantity.value, show_error=show_error)
    if quantity.unit:
        return f"{text} {quantity.unit}"
    return text

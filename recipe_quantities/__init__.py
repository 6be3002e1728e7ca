"""
Recipe quantity models and display formatting.

The package is organized into:
- models.py: tagged-union models parsed from the recipe parser's JSON
- glyphs.py: vulgar fraction lookup table
- formatting.py: plain text formatting used by filters and fragments
"""

from recipe_quantities.formatting import (
    NumberParts,
    format_error,
    format_float,
    format_number,
    format_quantity,
    format_value,
    number_parts,
)
from recipe_quantities.glyphs import format_fraction, fraction_glyph
from recipe_quantities.models import (
    FloatNumber,
    FractionNumber,
    Number,
    NumberValue,
    Quantity,
    RangeValue,
    TextValue,
    Value,
)

__all__ = [
    "FloatNumber",
    "FractionNumber",
    "Number",
    "NumberParts",
    "NumberValue",
    "Quantity",
    "RangeValue",
    "TextValue",
    "Value",
    "format_error",
    "format_float",
    "format_fraction",
    "format_number",
    "format_quantity",
    "format_value",
    "fraction_glyph",
    "number_parts",
]

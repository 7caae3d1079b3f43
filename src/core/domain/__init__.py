"""
Domain models and value objects.

Contains the Numeral value object, symbol tables and valuation helpers.
"""

from src.core.domain.numeral import InvalidNumeral, Numeral, format_numeral, parse
from src.core.domain.symbols import (
    DUPLICATE_COLLAPSES,
    MAGNITUDES,
    SUBTRACTIVE_CONTRACTIONS,
    SUBTRACTIVE_EXPANSIONS,
)
from src.core.domain.valuation import int_to_roman, numeral_value

__all__ = [
    # Symbol tables
    "MAGNITUDES",
    "SUBTRACTIVE_EXPANSIONS",
    "SUBTRACTIVE_CONTRACTIONS",
    "DUPLICATE_COLLAPSES",
    # Valuation
    "numeral_value",
    "int_to_roman",
    # Numeral model
    "Numeral",
    "InvalidNumeral",
    "parse",
    "format_numeral",
]

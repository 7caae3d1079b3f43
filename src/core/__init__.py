"""
Core Roman numeral engine: domain values, symbolic arithmetic, contracts.

This package is independent of the console layer and performs no I/O.
Public boundary: parse, add, format_numeral and the two error kinds.
"""

from src.core.domain import InvalidNumeral, Numeral, format_numeral, parse
from src.core.math import NumeralOverflow, add

__all__ = [
    "Numeral",
    "InvalidNumeral",
    "NumeralOverflow",
    "parse",
    "add",
    "format_numeral",
]

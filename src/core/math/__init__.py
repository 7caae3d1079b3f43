"""
Core math modules

Символьная арифметика римских чисел: развёртывание, слияние,
свёртка повторов и обратная свёртка subtractive pairs.
"""

# Subtractive notation
from src.core.math.subtractive_notation import (
    expand_subtractives,
    recollapse_subtractives,
)

# Merge
from src.core.math.symbol_merge import merge_by_magnitude

# Duplicate collapse
from src.core.math.duplicate_collapse import (
    collapse_duplicates,
    collapse_duplicates_once,
)

# Addition
from src.core.math.addition import (
    OVERFLOW_MESSAGE,
    NumeralOverflow,
    add,
    add_symbols,
)

__all__ = [
    # Subtractive notation
    "expand_subtractives",
    "recollapse_subtractives",
    # Merge
    "merge_by_magnitude",
    # Duplicate collapse
    "collapse_duplicates",
    "collapse_duplicates_once",
    # Addition: Constants
    "OVERFLOW_MESSAGE",
    # Addition: Exceptions
    "NumeralOverflow",
    # Addition: Functions
    "add",
    "add_symbols",
]

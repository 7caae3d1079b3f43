"""
Contract Validation Module

Каноническая грамматика римских чисел и JSON Schema контракты
консольного JSON-режима.
"""

from .grammar import (
    MAX_NUMERAL_VALUE,
    MIN_NUMERAL_VALUE,
    ROMAN_NUMERAL_PATTERN,
    is_roman_numeral,
)
from .validators import (
    AdditionRequestValidator,
    AdditionResultValidator,
    ContractValidator,
    SchemaLoader,
    validate_addition_request,
    validate_addition_result,
)

__all__ = [
    # Grammar
    "MIN_NUMERAL_VALUE",
    "MAX_NUMERAL_VALUE",
    "ROMAN_NUMERAL_PATTERN",
    "is_roman_numeral",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "AdditionRequestValidator",
    "AdditionResultValidator",
    # Functions
    "validate_addition_request",
    "validate_addition_result",
]

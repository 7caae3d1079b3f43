"""
Symbols: Статические таблицы римских символов

Единственный источник истины для:
- величины (magnitude) каждого символа
- эквивалентности subtractive pair ↔ развёрнутый additive run
- эквивалентности run одинаковых символов ↔ свёрнутый символ старшего разряда

Все таблицы создаются один раз при импорте и доступны только на чтение
(MappingProxyType). Ни один компонент не строит таблицы на экземпляр.
"""

from types import MappingProxyType
from typing import Final, Mapping


# =============================================================================
# MAGNITUDES
# =============================================================================

MAGNITUDES: Final[Mapping[str, int]] = MappingProxyType(
    {
        "I": 1,
        "V": 5,
        "X": 10,
        "L": 50,
        "C": 100,
        "D": 500,
        "M": 1000,
    }
)


# =============================================================================
# SUBTRACTIVE PAIRS
# =============================================================================

# pair → развёрнутый run (IV → IIII, IX → VIIII, ...)
SUBTRACTIVE_EXPANSIONS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "IV": "IIII",
        "IX": "VIIII",
        "XL": "XXXX",
        "XC": "LXXXX",
        "CD": "CCCC",
        "CM": "DCCCC",
    }
)

# run → pair (обратное направление)
SUBTRACTIVE_CONTRACTIONS: Final[Mapping[str, str]] = MappingProxyType(
    {run: pair for pair, run in SUBTRACTIVE_EXPANSIONS.items()}
)


# =============================================================================
# DUPLICATE COLLAPSE
# =============================================================================

# 5 одинаковых I/X/C или 2 одинаковых V/L/D → следующий символ.
# M не сворачивается: MMMMM выходит за допустимый диапазон.
DUPLICATE_COLLAPSES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "IIIII": "V",
        "VV": "X",
        "XXXXX": "L",
        "LL": "C",
        "CCCCC": "D",
        "DD": "M",
    }
)

# Длины окон, в порядке приоритета проверки
LONG_WINDOW: Final[int] = 5
SHORT_WINDOW: Final[int] = 4
PAIR_WINDOW: Final[int] = 2

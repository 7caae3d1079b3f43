"""
Addition: Символьное сложение римских чисел

Четыре шага без перевода в целые числа:
1. expand_subtractives      IV → IIII (для обоих операндов)
2. merge_by_magnitude       слияние по невозрастанию величины
3. collapse_duplicates      IIIII → V, VV → X, ... до неподвижной точки
4. recollapse_subtractives  IIII → IV, VIIII → IX, ...

Результат валидируется канонической грамматикой. Для суммы ≤ 4999 шаги
всегда дают каноническую запись; провал валидации означает ровно одно:
сумма больше 4999 (пять и более M). Это единственное место, где одна
ошибка (InvalidNumeral) переводится в другую (NumeralOverflow).
"""

from typing import Final

from src.core.contracts.grammar import MAX_NUMERAL_VALUE
from src.core.domain.numeral import InvalidNumeral, Numeral, parse
from src.core.math.duplicate_collapse import collapse_duplicates
from src.core.math.subtractive_notation import (
    expand_subtractives,
    recollapse_subtractives,
)
from src.core.math.symbol_merge import merge_by_magnitude


OVERFLOW_MESSAGE: Final[str] = f"Resulting Roman numeral larger than {MAX_NUMERAL_VALUE}"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumeralOverflow(OverflowError):
    """Сумма двух чисел больше MAX_NUMERAL_VALUE."""

    def __init__(self, message: str = OVERFLOW_MESSAGE):
        super().__init__(message)


# =============================================================================
# ADDITION
# =============================================================================


def add_symbols(first: str, second: str) -> str:
    """
    Сумма двух канонических записей как строка (шаги 1–4, без валидации).

    Args:
        first: Каноническая запись левого операнда
        second: Каноническая запись правого операнда

    Returns:
        Результат свёртки; каноничен, если сумма ≤ MAX_NUMERAL_VALUE
    """
    merged = merge_by_magnitude(
        expand_subtractives(first),
        expand_subtractives(second),
    )
    return recollapse_subtractives(collapse_duplicates(merged))


def add(augend: Numeral, addend: Numeral) -> Numeral:
    """
    Сложение двух римских чисел.

    Args:
        augend: Левый операнд
        addend: Правый операнд

    Returns:
        Новый Numeral с канонической записью суммы

    Raises:
        NumeralOverflow: Если сумма больше MAX_NUMERAL_VALUE

    Examples:
        >>> str(add(parse("XLIX"), parse("I")))
        'L'
    """
    result = add_symbols(augend.text, addend.text)
    try:
        return parse(result)
    except InvalidNumeral as e:
        raise NumeralOverflow() from e

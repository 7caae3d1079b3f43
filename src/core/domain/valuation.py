"""
Valuation: Конверсия римская запись ↔ целое число

Стандартная оценка римского числа (меньший символ перед большим вычитается)
и обратное каноническое форматирование жадным алгоритмом.

Сложение в src.core.math.addition работает символьно и целые числа
не использует; этот модуль нужен для Numeral.value, вывода консоли
и как независимый oracle в тестах.
"""

from typing import Final, Tuple

from src.core.contracts.grammar import MAX_NUMERAL_VALUE, MIN_NUMERAL_VALUE
from src.core.domain.symbols import MAGNITUDES, SUBTRACTIVE_EXPANSIONS


def numeral_value(text: str) -> int:
    """
    Целое значение римской записи.

    Args:
        text: Римская запись (ожидается валидированная)

    Returns:
        Целое значение

    Raises:
        KeyError: Если встречен неизвестный символ (ошибка программы,
                  вход должен быть валидирован заранее)

    Examples:
        >>> numeral_value("MCMXCIV")
        1994
        >>> numeral_value("MMMMCMXCIX")
        4999
    """
    total = 0
    for i, symbol in enumerate(text):
        current = MAGNITUDES[symbol]
        following = MAGNITUDES[text[i + 1]] if i + 1 < len(text) else 0
        if current < following:
            total -= current
        else:
            total += current
    return total


# Шаги жадного форматирования: одиночные символы и subtractive pairs,
# по убыванию значения (M, CM, D, CD, ..., IV, I)
_GREEDY_STEPS: Final[Tuple[Tuple[str, int], ...]] = tuple(
    sorted(
        [(symbol, value) for symbol, value in MAGNITUDES.items()]
        + [(pair, numeral_value(pair)) for pair in SUBTRACTIVE_EXPANSIONS],
        key=lambda step: step[1],
        reverse=True,
    )
)


def int_to_roman(value: int) -> str:
    """
    Каноническая римская запись целого числа.

    Args:
        value: Целое в диапазоне [MIN_NUMERAL_VALUE, MAX_NUMERAL_VALUE]

    Returns:
        Каноническая строка (например, 14 → 'XIV')

    Raises:
        ValueError: Если value не int или вне диапазона
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Value must be an integer, got {type(value).__name__}")
    if not MIN_NUMERAL_VALUE <= value <= MAX_NUMERAL_VALUE:
        raise ValueError(
            f"Value {value} outside representable range "
            f"[{MIN_NUMERAL_VALUE}, {MAX_NUMERAL_VALUE}]"
        )

    parts = []
    remaining = value
    for symbols, step in _GREEDY_STEPS:
        while remaining >= step:
            parts.append(symbols)
            remaining -= step
    return "".join(parts)

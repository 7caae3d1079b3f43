"""
Grammar: Каноническая грамматика римских чисел (1–4999)

Грамматика:
    M{0,4}                 тысячи: от 0 до 4 M
    (CM|CD|D?C{0,3})       сотни
    (XC|XL|L?X{0,3})       десятки
    (IX|IV|V?I{0,3})       единицы

Грамматика принимает только канонические формы, поэтому единственная
граница значений: верхняя (4999). Пустая строка формально соответствует
регулярному выражению и отклоняется отдельно.
"""

import re
from typing import Final


# =============================================================================
# RANGE
# =============================================================================

MIN_NUMERAL_VALUE: Final[int] = 1
MAX_NUMERAL_VALUE: Final[int] = 4999


# =============================================================================
# GRAMMAR
# =============================================================================

ROMAN_NUMERAL_PATTERN: Final[str] = (
    r"M{0,4}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})"
)

_ROMAN_NUMERAL_RE: Final[re.Pattern[str]] = re.compile(ROMAN_NUMERAL_PATTERN)


def is_roman_numeral(text: str) -> bool:
    """
    Проверка принадлежности строки канонической грамматике.

    Сопоставление по всей строке (fullmatch): пробелы, перевод строки
    и символы в нижнем регистре отклоняются.

    Args:
        text: Проверяемая строка

    Returns:
        True если text: каноническое римское число в диапазоне 1–4999

    Examples:
        >>> is_roman_numeral("MCMXCIV")
        True
        >>> is_roman_numeral("IIII")
        False
        >>> is_roman_numeral("")
        False
    """
    if not text:
        return False
    return _ROMAN_NUMERAL_RE.fullmatch(text) is not None

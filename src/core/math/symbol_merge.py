"""
Symbol Merge: Слияние двух развёрнутых последовательностей символов

Каждая каноническая (и развёрнутая) запись уже упорядочена по
невозрастанию величины, поэтому достаточно классического слияния
двумя указателями за линейное время.
"""

from src.core.domain.symbols import MAGNITUDES


def merge_by_magnitude(first: str, second: str) -> str:
    """
    Слияние двух последовательностей по невозрастанию величины.

    При равной величине первым идёт символ из first (стабильно).

    Args:
        first: Развёрнутая последовательность левого операнда
        second: Развёрнутая последовательность правого операнда

    Returns:
        Все символы обоих операндов, по невозрастанию величины

    Raises:
        KeyError: Неизвестный символ (нарушение инварианта, не ошибка ввода)

    Examples:
        >>> merge_by_magnitude("XVII", "XIIII")
        'XXVIIIIII'
    """
    merged = []
    i, j = 0, 0

    while i < len(first) and j < len(second):
        if MAGNITUDES[first[i]] >= MAGNITUDES[second[j]]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1

    merged.append(first[i:])
    merged.append(second[j:])
    return "".join(merged)

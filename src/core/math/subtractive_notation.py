"""
Subtractive Notation: Развёртывание и обратная свёртка subtractive pairs

expand_subtractives:     IV → IIII, IX → VIIII, ... (вход сложения)
recollapse_subtractives: IIII → IV, VIIII → IX, ... (выход сложения)

Обе функции чистые и работают по таблицам из src.core.domain.symbols.
"""

from src.core.domain.symbols import (
    LONG_WINDOW,
    PAIR_WINDOW,
    SHORT_WINDOW,
    SUBTRACTIVE_CONTRACTIONS,
    SUBTRACTIVE_EXPANSIONS,
)


def expand_subtractives(text: str) -> str:
    """
    Замена каждой subtractive pair на развёрнутый additive run.

    Проход слева направо, без перекрытий: при совпадении пары
    потребляются два символа, иначе один.

    Args:
        text: Каноническая римская запись

    Returns:
        Запись без subtractive pairs, по невозрастанию величины

    Examples:
        >>> expand_subtractives("XIV")
        'XIIII'
        >>> expand_subtractives("XCIX")
        'LXXXXVIIII'
    """
    parts = []
    i = 0
    while i < len(text):
        pair = text[i : i + PAIR_WINDOW]
        if pair in SUBTRACTIVE_EXPANSIONS:
            parts.append(SUBTRACTIVE_EXPANSIONS[pair])
            i += PAIR_WINDOW
        else:
            parts.append(text[i])
            i += 1
    return "".join(parts)


def recollapse_subtractives(sequence: str) -> str:
    """
    Обратная замена additive runs на канонические subtractive pairs.

    На каждой позиции окно из 5 символов (VIIII, LXXXX, DCCCC) проверяется
    раньше окна из 4 (IIII, XXXX, CCCC), иначе VIIII превратилось бы в VIV.

    Args:
        sequence: Последовательность без сворачиваемых дубликатов

    Returns:
        Каноническая римская запись

    Examples:
        >>> recollapse_subtractives("MDCCCCLXXXXVIIII")
        'MCMXCIX'
    """
    parts = []
    i = 0
    while i < len(sequence):
        long_run = sequence[i : i + LONG_WINDOW]
        short_run = sequence[i : i + SHORT_WINDOW]
        if len(long_run) == LONG_WINDOW and long_run in SUBTRACTIVE_CONTRACTIONS:
            parts.append(SUBTRACTIVE_CONTRACTIONS[long_run])
            i += LONG_WINDOW
        elif len(short_run) == SHORT_WINDOW and short_run in SUBTRACTIVE_CONTRACTIONS:
            parts.append(SUBTRACTIVE_CONTRACTIONS[short_run])
            i += SHORT_WINDOW
        else:
            parts.append(sequence[i])
            i += 1
    return "".join(parts)

"""
Duplicate Collapse: Свёртка повторов в символ старшего разряда с переносом

IIIII → V, VV → X, XXXXX → L, LL → C, CCCCC → D, DD → M

Один проход идёт справа налево. Свёртка может создать новый повтор
на разряд выше (перенос), например VIIIII → VV → X. Поэтому проходы
повторяются, пока очередной проход не выполнит ни одной свёртки.

ИНВАРИАНТЫ:
1. Вход и выход упорядочены по невозрастанию величины
2. Сумма величин символов сохраняется
3. Каждая свёртка укорачивает последовательность → процесс конечен
4. На выходе нет 5 подряд I/X/C и 2 подряд V/L/D
"""

from typing import Tuple

from src.core.domain.symbols import DUPLICATE_COLLAPSES, LONG_WINDOW, PAIR_WINDOW


def _leftover_start(sequence: str, run_start: int) -> int:
    """Начало блока таких же символов, стоящих сразу перед run."""
    symbol = sequence[run_start]
    start = run_start
    while start > 0 and sequence[start - 1] == symbol:
        start -= 1
    return start


def collapse_duplicates_once(sequence: str) -> Tuple[str, bool]:
    """
    Один проход свёртки справа налево.

    На каждой позиции сначала проверяется run из 5 символов (I/X/C),
    затем из 2 (V/L/D). Оставшиеся перед run такие же символы
    переносятся за новый символ: новый символ старше их, и порядок
    по величине сохраняется. Их свёртка (и свёртка нового символа
    с соседями слева) остаётся следующему проходу.

    Args:
        sequence: Последовательность по невозрастанию величины

    Returns:
        (новая последовательность, была ли хотя бы одна свёртка)

    Examples:
        >>> collapse_duplicates_once("VIIIIIIII")
        ('VVIII', True)
    """
    pieces = []  # в обратном порядке
    collapsed = False
    end = len(sequence)

    while end > 0:
        run = None
        for window in (LONG_WINDOW, PAIR_WINDOW):
            candidate = sequence[end - window : end] if end >= window else ""
            if candidate in DUPLICATE_COLLAPSES:
                run = candidate
                break

        if run is None:
            pieces.append(sequence[end - 1])
            end -= 1
            continue

        run_start = end - len(run)
        leftover_start = _leftover_start(sequence, run_start)
        pieces.append(DUPLICATE_COLLAPSES[run] + sequence[leftover_start:run_start])
        collapsed = True
        end = leftover_start

    return "".join(reversed(pieces)), collapsed


def collapse_duplicates(sequence: str) -> str:
    """
    Свёртка повторов до неподвижной точки.

    Args:
        sequence: Слитая развёрнутая последовательность

    Returns:
        Последовательность без сворачиваемых повторов

    Examples:
        >>> collapse_duplicates("VIIIIIIII")
        'XIII'
        >>> collapse_duplicates("CCCCLXXXXXX")
        'DX'
    """
    changed = True
    while changed:
        sequence, changed = collapse_duplicates_once(sequence)
    return sequence

"""
core/enumeration.py

Перечисление всех конфигураций в заданных границах.

Позиции выдаются слоями по возрастанию числа клеток: всем ходам из позиции
с n клетками соответствуют позиции с меньшим числом клеток, поэтому при
ретроградном анализе они уже решены. Каждая невозрастающая
последовательность выдаётся ровно один раз.
"""

from math import comb
from typing import Iterator, List, Optional, Tuple

from .position import Position
from utils.error_handling import InvalidBoundsError

Rows = Tuple[int, ...]


def check_bounds(max_width: int, max_height: int) -> None:
    """Проверяет, что границы — положительные целые числа."""
    for name, value in (('max_width', max_width), ('max_height', max_height)):
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            raise InvalidBoundsError(f"{name} должно быть положительным целым, получено {value!r}")


def _fill_rows(rows: List[int], index: int, remaining: int, cap: int) -> Iterator[Rows]:
    """
    Рекурсивно назначает значение строке index.

    Если осталось x строк и remaining клеток, то текущей строке нужно не
    меньше ceil(remaining / x) клеток (иначе остаток не поместится в
    невозрастающие строки) и не больше min(remaining, cap).
    """
    rows_left = len(rows) - index
    d_min = -(-remaining // rows_left)
    d_max = min(remaining, cap)

    for d in range(d_min, d_max + 1):
        rows[index] = d
        if rows_left == 1 or d == remaining:
            # Дальше только нули
            yield tuple(rows)
        else:
            yield from _fill_rows(rows, index + 1, remaining - d, d)

    rows[index] = 0


def rows_with_n_cells(n: int, max_width: int, max_height: int) -> Iterator[Rows]:
    """Кортежи строк всех конфигураций ровно с n клетками."""
    if n < 0:
        return
    if n == 0:
        yield (0,) * max_height
        return
    yield from _fill_rows([0] * max_height, 0, n, max_width)


def positions_with_n_cells(n: int, max_width: int, max_height: int) -> Iterator[Position]:
    """Все конфигурации ровно с n клетками."""
    for rows in rows_with_n_cells(n, max_width, max_height):
        yield Position(rows)


def enumerate_positions(max_width: int, max_height: int,
                        min_cells: int = 1, max_cells: Optional[int] = None) -> Iterator[Position]:
    """
    Перечисляет конфигурации по возрастанию числа клеток.

    Генератор ленивый и конечный; каждый вызов начинает обход заново.
    Терминальная позиция не выдаётся (если только min_cells не равно 0).

    Args:
        max_width: максимальная ширина
        max_height: число строк
        min_cells: минимальное число клеток
        max_cells: максимальное число клеток (по умолчанию max_width * max_height)
    """
    check_bounds(max_width, max_height)
    total = max_width * max_height
    if max_cells is None or max_cells > total:
        max_cells = total

    for n in range(max(min_cells, 0), max_cells + 1):
        yield from positions_with_n_cells(n, max_width, max_height)


def count_positions(max_width: int, max_height: int, include_empty: bool = False) -> int:
    """
    Число конфигураций в границах.

    Невозрастающие последовательности длины H со значениями <= W — это
    монотонные пути в решётке W × H, их C(W + H, H).
    """
    check_bounds(max_width, max_height)
    total = comb(max_width + max_height, max_height)
    return total if include_empty else total - 1

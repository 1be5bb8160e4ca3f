"""
core/cuts.py

Генератор разрезов (ходов) для конфигураций Chomp.

Разрез (row, col) съедает клетку и все клетки правее неё в этой строке и во
всех строках выше. Порядок перечисления: по строкам, внутри строки — по
возрастанию столбца. От этого порядка зависит выбор при равенстве оценок.
"""

from typing import Iterator, List, Tuple

Cut = Tuple[int, int]
Rows = Tuple[int, ...]


def legal_moves(rows: Rows) -> List[Cut]:
    """Все допустимые разрезы конфигурации."""
    return [(row, col) for row, count in enumerate(rows) for col in range(count)]


def is_legal_move(rows: Rows, row: int, col: int) -> bool:
    """Разрез допустим, если 0 <= row < высоты и 0 <= col < rows[row]."""
    return 0 <= row < len(rows) and 0 <= col < rows[row]


def apply_move(rows: Rows, row: int, col: int) -> Rows:
    """
    Применяет разрез.

    Строки с индексом >= row обрезаются до min(значение, col),
    строки ниже row не меняются. Результат остаётся невозрастающим,
    а число клеток строго уменьшается.

    Args:
        rows: исходная конфигурация
        row, col: координаты разреза (без проверки допустимости)

    Returns:
        Новая конфигурация той же длины
    """
    return rows[:row] + tuple(value if value < col else col for value in rows[row:])


def iter_moves(rows: Rows) -> Iterator[Tuple[Cut, Rows]]:
    """Пары (разрез, результат) в порядке legal_moves()."""
    for row, count in enumerate(rows):
        head = rows[:row]
        tail = rows[row:]
        for col in range(count):
            yield (row, col), head + tuple(value if value < col else col for value in tail)

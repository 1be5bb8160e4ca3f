"""
core/utils.py

Общие утилиты и константы для Chomp.
"""

from typing import Tuple

# Символы для отображения
TILE = '■'      # Клетка шоколадки
POISON = '☒'    # Отравленная клетка (строка 0, столбец 0)
BLANK = '·'     # Съеденная клетка

# Границы по умолчанию для CLI
DEFAULT_WIDTH = 5
DEFAULT_HEIGHT = 5


def index_to_label(row: int, col: int) -> str:
    """Индекс (row, col) → нотация с единицы: (1, 1), (2, 3), ..."""
    return f"({row + 1}, {col + 1})"


def pad_rows(rows: Tuple[int, ...], height: int) -> Tuple[int, ...]:
    """Дополняет конфигурацию нулевыми строками до нужной высоты."""
    rows = tuple(rows)
    if len(rows) >= height:
        return rows
    return rows + (0,) * (height - len(rows))

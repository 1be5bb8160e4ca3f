"""
chomp_io/parser.py

Парсинг входных данных.
"""

import re
from typing import Optional

from core.cuts import Cut
from core.position import Position
from utils.error_handling import InvalidMoveError, InvalidPositionError, validate_position


def parse_position(text: str, height: Optional[int] = None, max_width: Optional[int] = None) -> Position:
    """
    Парсит позицию.

    Формат: "4,4,3", "4 4 3" или "[4, 4, 3]" — строки начиная с нижней.

    Args:
        text: строка с описанием
        height: высота доски (недостающие строки заполняются нулями)
        max_width: максимальная ширина

    Returns:
        Position
    """
    if text is None or not re.fullmatch(r'[\s\[\]\(\),;\d-]*', text):
        raise InvalidPositionError(f"Неверный формат позиции: {text!r}. Ожидается: 4,4,3")

    values = [int(v) for v in re.findall(r'-?\d+', text)]
    if not values:
        raise InvalidPositionError("Позиция должна содержать хотя бы одну строку")

    rows = validate_position(values, max_width=max_width, max_height=height)
    return Position.from_rows(rows, height)


def parse_cut(text: str) -> Cut:
    """
    Парсит разрез в нотации с единицы: "2 3" или "(2, 3)".

    Returns:
        (row, col) с нуля
    """
    values = re.findall(r'\d+', text or '')
    if len(values) != 2:
        raise InvalidMoveError(f"Неверный формат разреза: {text!r}. Ожидается: <строка> <столбец>")

    row, col = int(values[0]), int(values[1])
    if row < 1 or col < 1:
        raise InvalidMoveError(f"Строка и столбец нумеруются с 1: {text!r}")
    return row - 1, col - 1

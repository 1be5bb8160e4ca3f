"""
utils/error_handling.py

Иерархия исключений решателя и проверка инвариантов позиции.
"""

from typing import Iterable, Optional, Tuple


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class InvalidPositionError(SolverError):
    """Позиция нарушает инварианты (невозрастание, ширина, высота)."""
    pass


class InvalidMoveError(SolverError):
    """Недопустимый разрез для данной позиции."""
    pass


class InvalidBoundsError(SolverError):
    """Недопустимые границы доски для решателя."""
    pass


class UninitializedPositionError(SolverError):
    """Позиция отсутствует в кэше (границы не решены или позиция вне их)."""

    def __init__(self, rows: Tuple[int, ...], key: int):
        self.rows = rows
        self.key = key
        super().__init__(f"Uninitialized: позиция {list(rows)} (hash={key:#x}) не найдена в кэше")


class SolverInvariantError(SolverError):
    """Нарушен инвариант решателя — дефект перечислителя или генератора ходов."""
    pass


class CacheError(SolverError):
    """Ошибка кэширования."""
    pass


def validate_position(rows: Iterable[int], max_width: Optional[int] = None,
                      max_height: Optional[int] = None) -> Tuple[int, ...]:
    """
    Валидирует конфигурацию доски.

    Args:
        rows: заполненность строк, начиная со строки 0 (с отравленной клеткой)
        max_width: максимальная ширина (None — без ограничения)
        max_height: максимальная высота (None — без ограничения)

    Returns:
        Кортеж строк

    Raises:
        InvalidPositionError: если конфигурация невалидна
    """
    if rows is None:
        raise InvalidPositionError("Позиция не может быть None")

    rows = tuple(rows)
    if not rows:
        raise InvalidPositionError("Позиция должна содержать хотя бы одну строку")

    if max_height is not None and len(rows) > max_height:
        raise InvalidPositionError(
            f"Слишком много строк: {len(rows)} (максимум {max_height})"
        )

    prev = None
    for index, value in enumerate(rows):
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidPositionError(f"Строка {index}: ожидается целое число, получено {value!r}")
        if value < 0:
            raise InvalidPositionError(f"Строка {index}: отрицательное значение {value}")
        if max_width is not None and value > max_width:
            raise InvalidPositionError(
                f"Строка {index}: {value} клеток превышает ширину {max_width}"
            )
        if prev is not None and value > prev:
            raise InvalidPositionError(
                f"Строки должны не возрастать: строка {index} ({value}) > строка {index - 1} ({prev})"
            )
        prev = value

    return rows

"""
core/position.py

Конфигурация доски Chomp.

Позиция хранится как кортеж фиксированной длины (высота доски): число
заполненных клеток в каждой строке. Строка 0 содержит отравленную клетку,
значения не возрастают с ростом индекса строки. Пустая доска (все нули) —
терминальная позиция.

    rows = (3, 2, 0)

    ·  ·  ·     строка 2
    ■  ■  ·     строка 1
    ☒  ■  ■     строка 0
"""

from typing import Iterable, List, Optional, Tuple

from .cuts import Cut, apply_move, is_legal_move, iter_moves, legal_moves
from .fast import fast_hash_position
from .utils import pad_rows
from utils.error_handling import InvalidPositionError


class Position:
    """Неизменяемая конфигурация доски."""
    __slots__ = ('rows', '_cells', '_key')

    def __init__(self, rows: Iterable[int]):
        self.rows: Tuple[int, ...] = tuple(rows)
        self._cells = sum(self.rows)
        self._key: Optional[int] = None

    @classmethod
    def empty(cls, height: int) -> 'Position':
        """Терминальная позиция (пустая доска) заданной высоты."""
        return cls((0,) * height)

    @classmethod
    def starting_rectangle(cls, width: int, height: int) -> 'Position':
        """Полный прямоугольник width × height."""
        return cls((width,) * height)

    @classmethod
    def from_rows(cls, rows: Iterable[int], height: Optional[int] = None) -> 'Position':
        """Создаёт позицию, дополняя её нулевыми строками до height."""
        rows = tuple(rows)
        if height is not None:
            rows = pad_rows(rows, height)
        return cls(rows)

    def cell_count(self) -> int:
        return self._cells

    def height(self) -> int:
        """Число непустых строк."""
        return sum(1 for value in self.rows if value)

    def width(self) -> int:
        """Длина строки 0."""
        return self.rows[0] if self.rows else 0

    def is_empty(self) -> bool:
        return self._cells == 0

    def square_at(self, row: int, col: int) -> bool:
        if row < 0 or row >= len(self.rows) or col < 0:
            return False
        return self.rows[row] > col

    def col_height(self, col: int) -> int:
        """Число клеток в столбце col."""
        return sum(1 for value in self.rows if value > col)

    def hash_key(self) -> int:
        """53-битный ключ кэша (вычисляется один раз)."""
        if self._key is None:
            self._key = fast_hash_position(self.rows)
        return self._key

    def get_cuts(self) -> List[Cut]:
        return legal_moves(self.rows)

    def get_moves(self) -> List[Tuple[Cut, 'Position']]:
        """Все ходы: (разрез, новая позиция)."""
        return [(cut, Position(rows)) for cut, rows in iter_moves(self.rows)]

    def is_legal_move(self, row: int, col: int) -> bool:
        return is_legal_move(self.rows, row, col)

    def apply_move(self, row: int, col: int) -> 'Position':
        """Применяет разрез (row, col) без проверки допустимости."""
        return Position(apply_move(self.rows, row, col))

    def transposed(self, height: Optional[int] = None) -> 'Position':
        """
        Отражение относительно главной диагонали.

        Args:
            height: длина результата (по умолчанию — max(длина позиции, ширина))

        Raises:
            InvalidPositionError: если height меньше ширины позиции
        """
        if height is None:
            height = max(len(self.rows), self.width())
        elif height < self.width():
            raise InvalidPositionError(
                f"Ширина {self.width()} не помещается в {height} строк при отражении {list(self.rows)}")
        return Position(self.col_height(col) for col in range(height))

    def is_symmetric(self) -> bool:
        return self.transposed() == self

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def __hash__(self) -> int:
        return hash(self.rows)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Position):
            return False
        return self.rows == other.rows

    def __repr__(self) -> str:
        return f"Position({list(self.rows)})"

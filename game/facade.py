"""
game/facade.py

Фасад для чтения и навигации по решённому кэшу.

Game — неизменяемая пара (кэш, позиция). Ходы возвращают новый Game,
классификация берётся только из кэша.
"""

from typing import Iterable, List, Optional, Tuple, Union

from core.cuts import Cut
from core.position import Position
from solvers.cache import PositionCache, PositionInfo, query_classification
from utils.error_handling import InvalidMoveError, validate_position


class Game:
    """Позиция в решённом пространстве."""
    __slots__ = ('cache', 'position')

    def __init__(self, cache: PositionCache, position: Union[Position, Iterable[int]]):
        """
        Args:
            cache: решённый кэш
            position: позиция; короткая конфигурация дополняется нулевыми строками

        Raises:
            InvalidPositionError: если позиция нарушает инварианты или не помещается в границы кэша

        Строка шире max_width кэша считается нарушением инварианта ширины
        (InvalidPositionError), а не запросом нерешённой позиции
        (UninitializedPositionError).
        """
        rows = validate_position(position, cache.max_width, cache.max_height)
        self.cache = cache
        self.position = Position.from_rows(rows, cache.max_height)

    @classmethod
    def start(cls, cache: PositionCache) -> 'Game':
        """Полный прямоугольник в границах кэша."""
        return cls(cache, Position.starting_rectangle(cache.max_width, cache.max_height))

    def info(self) -> PositionInfo:
        return query_classification(self.cache, self.position)

    def is_winning(self) -> bool:
        return self.info().is_winning

    def distance_to_end(self) -> int:
        return self.info().distance_to_end

    def winning_move_count(self) -> int:
        return self.info().winning_move_count

    def losing_move_count(self) -> int:
        return self.info().losing_move_count

    def is_over(self) -> bool:
        """Терминальная позиция: ходов больше нет."""
        return self.position.is_empty()

    def moves(self) -> List[Tuple[Cut, 'Game']]:
        """Все ходы в порядке перечисления разрезов."""
        return [(cut, Game._wrap(self.cache, successor)) for cut, successor in self.position.get_moves()]

    def _successor_infos(self) -> List[Tuple[Cut, PositionInfo]]:
        return [(cut, query_classification(self.cache, successor))
                for cut, successor in self.position.get_moves()]

    def winning_moves(self) -> List[Cut]:
        """Разрезы, после которых соперник проигрывает."""
        return [cut for cut, info in self._successor_infos() if not info.is_winning]

    def losing_moves(self) -> List[Cut]:
        """Разрезы, после которых соперник выигрывает."""
        return [cut for cut, info in self._successor_infos() if info.is_winning]

    def best_winning_move(self) -> Optional[Cut]:
        """
        Самая быстрая победа: ход в проигрышную позицию с минимальным DTE.

        При равенстве выбирается первый ход в порядке перечисления.
        None, если выигрывающих ходов нет.
        """
        best_cut = None
        best_dte = None
        for cut, info in self._successor_infos():
            if info.is_winning:
                continue
            if best_dte is None or info.distance_to_end < best_dte:
                best_cut, best_dte = cut, info.distance_to_end
        return best_cut

    def longest_delaying_move(self) -> Optional[Cut]:
        """
        Самая долгая оттяжка: ход в выигрышную позицию с максимальным DTE.

        При равенстве выбирается первый ход в порядке перечисления.
        None, если таких ходов нет.
        """
        best_cut = None
        best_dte = None
        for cut, info in self._successor_infos():
            if not info.is_winning:
                continue
            if best_dte is None or info.distance_to_end > best_dte:
                best_cut, best_dte = cut, info.distance_to_end
        return best_cut

    def best_move(self) -> Optional[Cut]:
        """Быстрейшая победа, а если её нет — самая долгая оттяжка."""
        cut = self.best_winning_move()
        if cut is None:
            cut = self.longest_delaying_move()
        return cut

    def apply_move(self, row: int, col: int) -> 'Game':
        """
        Применяет разрез и возвращает новый Game.

        Raises:
            InvalidMoveError: если разрез недопустим
        """
        if not self.position.is_legal_move(row, col):
            raise InvalidMoveError(f"Недопустимый разрез ({row}, {col}) для позиции {list(self.position.rows)}")
        return Game._wrap(self.cache, self.position.apply_move(row, col))

    @classmethod
    def _wrap(cls, cache: PositionCache, position: Position) -> 'Game':
        # Преемник допустимой позиции уже валиден
        game = cls.__new__(cls)
        game.cache = cache
        game.position = position
        return game

    def __eq__(self, other) -> bool:
        if not isinstance(other, Game):
            return False
        return self.cache is other.cache and self.position == other.position

    def __hash__(self) -> int:
        return hash(self.position)

    def __repr__(self) -> str:
        return f"Game({list(self.position.rows)})"

"""
solvers/cache.py

Кэш решённых позиций: 53-битный ключ → PositionInfo.

Каждый ключ записывается один раз при решении и дальше только читается.
Коллизии ключей в пределах решаемых границ считаются пренебрежимо
маловероятными и не отслеживаются.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Sequence, Tuple, Union

from core.fast import fast_hash_position
from core.position import Position
from utils.error_handling import CacheError, UninitializedPositionError

PositionLike = Union[Position, Sequence[int]]


@dataclass(frozen=True)
class PositionInfo:
    """Классификация позиции."""
    is_winning: bool          # Выигрывает ли игрок, который ходит
    distance_to_end: int      # Сколько ходов до конца при оптимальной игре обеих сторон
    winning_move_count: int = 0  # Ходы в проигрышные для соперника позиции
    losing_move_count: int = 0   # Ходы в выигрышные для соперника позиции
    position_id: int = 0      # Порядковый номер решения (0 — терминальная позиция)

    @property
    def total_move_count(self) -> int:
        return self.winning_move_count + self.losing_move_count

    def __str__(self) -> str:
        winning = "yes" if self.is_winning else "no"
        return f"{{ winning: {winning}, dte: {self.distance_to_end} }}"


# Пустая доска: предыдущий игрок съел отравленную клетку
TERMINAL_INFO = PositionInfo(is_winning=True, distance_to_end=0)


def _as_rows(position: PositionLike) -> Tuple[int, ...]:
    if isinstance(position, Position):
        return position.rows
    return tuple(position)


def _key_of(position: PositionLike) -> int:
    if isinstance(position, Position):
        return position.hash_key()
    return fast_hash_position(tuple(position))


class PositionCache:
    """
    Решённое пространство позиций для границ max_width × max_height.

    Кэш — обычный объект, его возвращает решатель; несколько кэшей с
    разными границами могут существовать одновременно.
    """

    def __init__(self, max_width: int, max_height: int):
        self.max_width = max_width
        self.max_height = max_height
        self._entries: Dict[int, PositionInfo] = {}
        self.winning_count = 0
        self.losing_count = 0

    @property
    def solved_count(self) -> int:
        """Решённые позиции без терминальной."""
        return self.winning_count + self.losing_count

    def seed_terminal(self) -> None:
        """Записывает терминальную позицию (пустую доску)."""
        self.store_key(fast_hash_position((0,) * self.max_height), TERMINAL_INFO, count=False)

    def store_key(self, key: int, info: PositionInfo, count: bool = True) -> None:
        """
        Записывает классификацию по ключу.

        Raises:
            CacheError: если ключ уже записан
        """
        if key in self._entries:
            raise CacheError(f"Ключ {key:#x} уже записан в кэш")
        self._entries[key] = info
        if count:
            if info.is_winning:
                self.winning_count += 1
            else:
                self.losing_count += 1

    def store(self, position: PositionLike, info: PositionInfo) -> None:
        self.store_key(_key_of(position), info)

    def get_by_key(self, key: int) -> Optional[PositionInfo]:
        return self._entries.get(key)

    def get(self, position: PositionLike) -> Optional[PositionInfo]:
        """Классификация или None, если позиция не решена."""
        return self._entries.get(_key_of(position))

    def lookup(self, position: PositionLike) -> PositionInfo:
        """
        Классификация позиции.

        Raises:
            UninitializedPositionError: если позиции нет в кэше
        """
        key = _key_of(position)
        info = self._entries.get(key)
        if info is None:
            raise UninitializedPositionError(_as_rows(position), key)
        return info

    def infos(self) -> Iterator[PositionInfo]:
        """Все записанные классификации (включая терминальную)."""
        return iter(self._entries.values())

    def __contains__(self, position: PositionLike) -> bool:
        return _key_of(position) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (f"PositionCache({self.max_width}x{self.max_height}, "
                f"solved={self.solved_count}, winning={self.winning_count}, losing={self.losing_count})")


def query_classification(cache: PositionCache, position: PositionLike) -> PositionInfo:
    """Классификация позиции из решённого кэша (UninitializedPositionError, если её нет)."""
    return cache.lookup(position)

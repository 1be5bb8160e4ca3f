"""
solvers/base.py

Базовый класс для решателей.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from utils.logging import get_logger


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    positions_solved: int = 0
    winning_positions: int = 0
    losing_positions: int = 0
    moves_examined: int = 0
    max_distance_to_end: int = 0
    time_elapsed: float = 0.0

    def __str__(self) -> str:
        return (
            f"Positions: {self.positions_solved}, "
            f"Winning: {self.winning_positions}, "
            f"Losing: {self.losing_positions}, "
            f"Moves: {self.moves_examined}, "
            f"Max DTE: {self.max_distance_to_end}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Решатель строит кэш классификаций для всех позиций в заданных границах.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()
        self.logger = get_logger()

    @abstractmethod
    def solve(self, max_width: int, max_height: int):
        """
        Решает все позиции в границах max_width × max_height.

        Returns:
            Заполненный PositionCache
        """
        pass

    def _log(self, message: str) -> None:
        """INFO при verbose=True, иначе DEBUG."""
        text = f"[{self.__class__.__name__}] {message}"
        if self.verbose:
            self.logger.info(text)
        else:
            self.logger.debug(text)

"""
game/replay.py

Воспроизведение оптимальной партии по решённому кэшу.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from core.cuts import Cut
from core.position import Position
from solvers.cache import PositionInfo
from utils.error_handling import SolverInvariantError

from .facade import Game


@dataclass(frozen=True)
class ReplayStep:
    """Шаг партии: позиция, разрез, который к ней привёл, и её классификация."""
    position: Position
    cut: Optional[Cut]
    info: PositionInfo


def iter_optimal_play(game: Game) -> Iterator[ReplayStep]:
    """
    Играет за обе стороны до пустой доски.

    Выигрывающая сторона выбирает самую быструю победу, проигрывающая —
    самую долгую оттяжку. Число ходов равно DTE стартовой позиции.
    """
    yield ReplayStep(game.position, None, game.info())

    while not game.is_over():
        cut = game.best_move()
        if cut is None:
            raise SolverInvariantError(f"Нетерминальная позиция {list(game.position.rows)} не имеет ходов")
        game = game.apply_move(*cut)
        yield ReplayStep(game.position, cut, game.info())


def play_optimal(game: Game) -> List[ReplayStep]:
    """Список шагов оптимальной партии (первый шаг — стартовая позиция)."""
    return list(iter_optimal_play(game))

"""
solvers/retrograde.py

Ретроградный анализ Chomp.

Позиции обрабатываются по возрастанию числа клеток. Любой разрез уменьшает
число клеток, поэтому все преемники текущей позиции уже лежат в кэше, и
классификация вычисляется без рекурсии:

- позиция выигрышная, если хотя бы один ход ведёт в проигрышную;
- DTE выигрышной = 1 + минимум DTE среди проигрышных преемников
  (самая быстрая победа);
- DTE проигрышной = 1 + максимум DTE среди всех преемников
  (самая долгая оттяжка поражения).
"""

import time

from .base import BaseSolver, SolverStats
from .cache import PositionCache, PositionInfo
from core.cuts import iter_moves
from core.enumeration import check_bounds, count_positions, rows_with_n_cells
from core.fast import fast_hash_position
from utils.error_handling import SolverInvariantError
from utils.monitoring import get_monitor, monitor_time


class RetrogradeSolver(BaseSolver):
    """
    Восходящий решатель с кэшем.

    Особенности:
    - каждая позиция перечисляется ровно один раз
    - преемники берутся из кэша, а не пересчитываются
    - кэш возвращается вызывающему, глобального состояния нет
    """

    def __init__(self, verbose: bool = False):
        super().__init__(verbose=verbose)

    @monitor_time('retrograde_solve')
    def solve(self, max_width: int, max_height: int) -> PositionCache:
        """
        Решает все позиции в границах.

        Args:
            max_width: максимальная ширина доски
            max_height: число строк

        Returns:
            PositionCache со всеми позициями, включая терминальную
        """
        check_bounds(max_width, max_height)

        self.stats = SolverStats()
        start_time = time.time()

        cache = PositionCache(max_width, max_height)
        cache.seed_terminal()

        total = count_positions(max_width, max_height)
        self._log(f"Starting retrograde analysis ({max_width}x{max_height}, positions={total})")

        for n in range(1, max_width * max_height + 1):
            layer_size = 0
            for rows in rows_with_n_cells(n, max_width, max_height):
                info = self._classify(cache, rows, cache.solved_count + 1)
                cache.store_key(fast_hash_position(rows), info)
                layer_size += 1
            self._log(f"Cells={n}: {layer_size} positions, solved {cache.solved_count}/{total}")

        self.stats.positions_solved = cache.solved_count
        self.stats.winning_positions = cache.winning_count
        self.stats.losing_positions = cache.losing_count
        self.stats.time_elapsed = time.time() - start_time

        get_monitor().increment_counter('positions_solved', cache.solved_count)
        self._log(f"Done: {self.stats}")
        return cache

    def _classify(self, cache: PositionCache, rows, position_id: int) -> PositionInfo:
        """Классифицирует позицию по уже решённым преемникам."""
        winning_move_count = 0
        losing_move_count = 0
        min_losing_dte = None
        max_dte = -1

        for cut, successor in iter_moves(rows):
            info = cache.get_by_key(fast_hash_position(successor))
            if info is None:
                raise SolverInvariantError(
                    f"Преемник {list(successor)} позиции {list(rows)} (разрез {cut}) ещё не решён"
                )

            dte = info.distance_to_end
            if info.is_winning:
                losing_move_count += 1
            else:
                winning_move_count += 1
                if min_losing_dte is None or dte < min_losing_dte:
                    min_losing_dte = dte
            if dte > max_dte:
                max_dte = dte

        if winning_move_count + losing_move_count == 0:
            raise SolverInvariantError(f"Нетерминальная позиция {list(rows)} не имеет ходов")

        self.stats.moves_examined += winning_move_count + losing_move_count

        is_winning = winning_move_count > 0
        distance_to_end = 1 + (min_losing_dte if is_winning else max_dte)
        if distance_to_end > self.stats.max_distance_to_end:
            self.stats.max_distance_to_end = distance_to_end

        return PositionInfo(
            is_winning=is_winning,
            distance_to_end=distance_to_end,
            winning_move_count=winning_move_count,
            losing_move_count=losing_move_count,
            position_id=position_id,
        )


def solve(max_width: int, max_height: int, verbose: bool = False) -> PositionCache:
    """Решает все позиции в границах max_width × max_height и возвращает кэш."""
    return RetrogradeSolver(verbose=verbose).solve(max_width, max_height)

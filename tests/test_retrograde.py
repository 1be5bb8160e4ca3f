"""
tests/test_retrograde.py

Тесты для ретроградного решателя.
"""

import logging

import pytest

from core.cuts import iter_moves
from core.enumeration import count_positions, enumerate_positions
from core.position import Position
from solvers import RetrogradeSolver, PositionCache, solve
from utils.error_handling import InvalidBoundsError, SolverInvariantError
from utils.monitoring import get_monitor


def _successor_infos(cache, position):
    return [cache.lookup(rows) for _, rows in iter_moves(position.rows)]


def test_terminal_position(cache_4x4):
    """Тест: пустая доска — выигрышная, DTE = 0."""
    info = cache_4x4.lookup((0, 0, 0, 0))
    assert info.is_winning is True
    assert info.distance_to_end == 0
    assert info.position_id == 0


def test_single_cell_board():
    """Тест: [1] — единственный ход съедает яд, позиция проигрышная, DTE = 1."""
    cache = solve(1, 1)
    info = cache.lookup((1,))
    assert info.is_winning is False
    assert info.distance_to_end == 1
    assert info.winning_move_count == 0
    assert info.losing_move_count == 1


def test_single_row_of_two():
    """Тест: [2] — ход (0, 1) оставляет сопернику [1], DTE = 1 + 1 = 2."""
    cache = solve(2, 1)
    info = cache.lookup((2,))
    assert info.is_winning is True
    assert info.distance_to_end == 2
    assert info.winning_move_count == 1
    assert info.losing_move_count == 1


@pytest.mark.parametrize("rows,winning,dte,wmc,lmc", [
    ((1, 0), False, 1, 0, 1),
    ((1, 1), True, 2, 1, 1),
    ((2, 0), True, 2, 1, 1),
    ((2, 1), False, 3, 0, 3),
    ((2, 2), True, 4, 1, 3),
])
def test_2x2_classification(cache_2x2, rows, winning, dte, wmc, lmc):
    info = cache_2x2.lookup(rows)
    assert info.is_winning is winning
    assert info.distance_to_end == dte
    assert info.winning_move_count == wmc
    assert info.losing_move_count == lmc


@pytest.mark.parametrize("bounds", [(3, 3), (4, 4), (5, 3), (2, 6)])
def test_win_loss_and_dte_recurrence(bounds):
    """Тест: классификация и DTE каждой позиции согласованы с преемниками."""
    cache = solve(*bounds)
    for position in enumerate_positions(*bounds):
        info = cache.lookup(position)
        successors = _successor_infos(cache, position)
        losing = [s for s in successors if not s.is_winning]

        assert info.is_winning == bool(losing)
        if info.is_winning:
            assert info.distance_to_end == 1 + min(s.distance_to_end for s in losing)
        else:
            assert all(s.is_winning for s in successors)
            assert info.distance_to_end == 1 + max(s.distance_to_end for s in successors)
        assert info.winning_move_count == len(losing)
        assert info.losing_move_count == len(successors) - len(losing)


def test_cache_covers_whole_space(cache_5x5):
    assert cache_5x5.solved_count == count_positions(5, 5)
    assert len(cache_5x5) == count_positions(5, 5) + 1
    assert cache_5x5.winning_count + cache_5x5.losing_count == cache_5x5.solved_count
    ids = sorted(cache_5x5.lookup(p).position_id for p in enumerate_positions(5, 5))
    assert ids == list(range(1, cache_5x5.solved_count + 1))


def test_rectangles_are_winning(cache_5x5):
    """Тест: любой прямоугольник, кроме 1x1, выигрышный (аргумент кражи стратегии)."""
    for width in range(1, 6):
        for height in range(1, 6):
            rows = (width,) * height + (0,) * (5 - height)
            info = cache_5x5.lookup(rows)
            assert info.is_winning is not (width == 1 and height == 1), f"{width}x{height}"


def test_two_row_positions():
    """Тест: (a, b) проигрышная тогда и только тогда, когда b = a - 1."""
    cache = solve(6, 2)
    for position in enumerate_positions(6, 2):
        a, b = position.rows
        assert cache.lookup(position).is_winning is not (b == a - 1), f"{position}"


@pytest.mark.parametrize("rows,winning", [
    ((4, 1, 1, 1), False),
    ((3, 1, 1, 0), False),
    ((2, 1, 0, 0), False),
    ((3, 1, 0, 0), True),
    ((4, 1, 1, 0), True),
])
def test_l_shapes(cache_4x4, rows, winning):
    """Тест: симметричный уголок проигрышный, несимметричный — выигрышный."""
    assert cache_4x4.lookup(rows).is_winning is winning


def test_transpose_symmetry(cache_5x5):
    """Тест: отражение по диагонали не меняет классификацию и DTE."""
    for position in enumerate_positions(5, 5):
        info = cache_5x5.lookup(position)
        mirrored = cache_5x5.lookup(position.transposed())
        assert info.is_winning == mirrored.is_winning
        assert info.distance_to_end == mirrored.distance_to_end


def test_solver_stats():
    solver = RetrogradeSolver()
    cache = solver.solve(4, 3)
    assert solver.stats.positions_solved == cache.solved_count
    assert solver.stats.winning_positions == cache.winning_count
    assert solver.stats.losing_positions == cache.losing_count
    # Из позиции с n клетками ровно n ходов
    assert solver.stats.moves_examined == sum(p.cell_count() for p in enumerate_positions(4, 3))
    assert solver.stats.max_distance_to_end == max(info.distance_to_end for info in cache.infos())
    assert solver.stats.time_elapsed >= 0
    assert "Positions:" in str(solver.stats)


def test_independent_caches():
    small = solve(2, 2)
    large = solve(3, 3)
    assert small is not large
    assert (2, 2) in small
    assert (2, 2) not in large, "Позиции разной длины — разные ключи"
    assert (2, 2, 0) in large


@pytest.mark.parametrize("bounds", [(0, 2), (2, 0), (-3, 1), ("4", 4)])
def test_invalid_bounds(bounds):
    with pytest.raises(InvalidBoundsError):
        solve(*bounds)


def test_missing_successor_is_invariant_violation():
    """Тест: преемник, которого нет в кэше, — фатальная ошибка."""
    solver = RetrogradeSolver()
    cache = PositionCache(2, 2)
    with pytest.raises(SolverInvariantError):
        solver._classify(cache, (1, 0), 1)


def test_position_without_moves_is_invariant_violation():
    solver = RetrogradeSolver()
    cache = PositionCache(2, 2)
    cache.seed_terminal()
    with pytest.raises(SolverInvariantError):
        solver._classify(cache, (0, 0), 1)


def test_monitor_records_solve():
    monitor = get_monitor()
    before = monitor.get_stats('retrograde_solve').get('count', 0)
    solve(2, 3)
    assert monitor.get_stats('retrograde_solve')['count'] == before + 1
    assert monitor.counters['positions_solved'] > 0


def test_verbose_logging(caplog):
    with caplog.at_level(logging.INFO, logger="chomp_solver"):
        RetrogradeSolver(verbose=True).solve(2, 2)
    assert "Starting retrograde analysis" in caplog.text
    assert "Cells=4" in caplog.text


def test_accepts_position_objects(cache_2x2):
    assert cache_2x2.lookup(Position((2, 1))) == cache_2x2.lookup((2, 1))

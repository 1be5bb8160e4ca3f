"""
tests/test_facade.py

Тесты для фасада Game и воспроизведения оптимальной партии.
"""

import pytest

from core.enumeration import enumerate_positions
from core.position import Position
from game import Game, play_optimal, iter_optimal_play
from solvers import PositionCache
from utils.error_handling import (
    InvalidMoveError, InvalidPositionError, UninitializedPositionError
)


def test_square_2x2(cache_2x2):
    game = Game(cache_2x2, (2, 2))
    assert game.is_winning()
    assert game.distance_to_end() == 4
    assert game.winning_move_count() == 1
    assert game.losing_move_count() == 3
    assert game.winning_moves() == [(1, 1)]
    assert game.losing_moves() == [(0, 0), (0, 1), (1, 0)]
    assert game.best_winning_move() == (1, 1)
    # (0, 1) и (1, 0) ведут в позиции с DTE = 2 — выбирается первая
    assert game.longest_delaying_move() == (0, 1)
    assert game.best_move() == (1, 1)


def test_losing_position_delays(cache_2x2):
    game = Game(cache_2x2, (2, 1))
    assert not game.is_winning()
    assert game.best_winning_move() is None
    assert game.longest_delaying_move() == (0, 1)
    assert game.best_move() == (0, 1)


def test_terminal_game(cache_2x2):
    game = Game(cache_2x2, (0, 0))
    assert game.is_over()
    assert game.is_winning()
    assert game.distance_to_end() == 0
    assert game.moves() == []
    assert game.best_move() is None


def test_apply_move_returns_new_game(cache_2x2):
    game = Game(cache_2x2, (2, 2))
    after = game.apply_move(1, 1)
    assert after.position == Position((2, 1))
    assert game.position == Position((2, 2)), "Исходный Game не меняется"
    assert after == Game(cache_2x2, (2, 1))
    assert after.cache is cache_2x2


@pytest.mark.parametrize("cut", [(1, 2), (2, 0), (-1, 0), (0, 5)])
def test_apply_illegal_move(cache_2x2, cut):
    with pytest.raises(InvalidMoveError):
        Game(cache_2x2, (2, 2)).apply_move(*cut)


def test_short_position_is_padded(cache_2x2):
    game = Game(cache_2x2, [2])
    assert game.position == Position((2, 0))
    assert game.is_winning()


@pytest.mark.parametrize("rows", [(1, 2), (3, 0), (1, 1, 1), (-1, 0)])
def test_invalid_positions(cache_2x2, rows):
    with pytest.raises(InvalidPositionError):
        Game(cache_2x2, rows)


def test_unsolved_cache_is_uninitialized():
    game = Game(PositionCache(2, 2), (1, 0))
    with pytest.raises(UninitializedPositionError):
        game.is_winning()
    with pytest.raises(UninitializedPositionError):
        game.distance_to_end()


def test_start(cache_4x4):
    game = Game.start(cache_4x4)
    assert game.position == Position((4, 4, 4, 4))
    assert game.is_winning()


def test_best_moves_follow_dte(cache_4x4):
    """Тест: выбранный ход ведёт в позицию с DTE на единицу меньше."""
    for position in enumerate_positions(4, 4):
        game = Game(cache_4x4, position)
        info = game.info()
        if info.is_winning:
            cut = game.best_winning_move()
            successor = game.apply_move(*cut)
            assert not successor.is_winning()
        else:
            assert game.best_winning_move() is None
            cut = game.longest_delaying_move()
            successor = game.apply_move(*cut)
            assert successor.is_winning()
        assert successor.distance_to_end() == info.distance_to_end - 1
        assert len(game.winning_moves()) == info.winning_move_count
        assert len(game.losing_moves()) == info.losing_move_count


def test_replay_from_2x2(cache_2x2):
    """Тест: оптимальная партия из [2, 2] заканчивается пустой доской."""
    steps = play_optimal(Game(cache_2x2, (2, 2)))

    assert [step.cut for step in steps] == [None, (1, 1), (0, 1), (1, 0), (0, 0)]
    assert [step.position.rows for step in steps] == [(2, 2), (2, 1), (1, 1), (1, 0), (0, 0)]
    for step in steps:
        assert step.info == cache_2x2.lookup(step.position)
    assert steps[-1].position.is_empty()


def test_replay_length_equals_dte(cache_5x5):
    for rows in [(5, 5, 5, 5, 5), (4, 3, 3, 1, 0), (3, 1, 1, 0, 0), (1, 0, 0, 0, 0)]:
        game = Game(cache_5x5, rows)
        steps = list(iter_optimal_play(game))
        assert len(steps) - 1 == game.distance_to_end()
        assert steps[-1].position.is_empty()
        # Стороны чередуются: выигрышная позиция сменяется проигрышной
        for prev, step in zip(steps, steps[1:-1]):
            assert prev.info.is_winning != step.info.is_winning


def test_moves_wrap_successors(cache_2x2):
    moves = Game(cache_2x2, (2, 1)).moves()
    assert [cut for cut, _ in moves] == [(0, 0), (0, 1), (1, 0)]
    assert [g.position.rows for _, g in moves] == [(0, 0), (1, 1), (2, 0)]
    assert repr(moves[1][1]) == "Game([1, 1])"

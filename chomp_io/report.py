"""
chomp_io/report.py

Сводка по решённому пространству и описание позиции.
"""

from typing import Any, Dict

from game.facade import Game
from solvers.cache import PositionCache

from .visualizer import format_cut


def summarize(cache: PositionCache) -> Dict[str, Any]:
    """Сводная статистика кэша."""
    return {
        'bounds': (cache.max_width, cache.max_height),
        'positions': cache.solved_count,
        'winning': cache.winning_count,
        'losing': cache.losing_count,
        'max_distance_to_end': max((info.distance_to_end for info in cache.infos()), default=0),
    }


def format_summary(summary: Dict[str, Any]) -> str:
    width, height = summary['bounds']
    return "\n".join([
        f"📊 Пространство {width}x{height}: {summary['positions']} позиций",
        f"  Выигрышных: {summary['winning']}",
        f"  Проигрышных: {summary['losing']}",
        f"  Максимальный DTE: {summary['max_distance_to_end']}",
    ])


def describe_position(game: Game, show_next_moves: bool = True) -> str:
    """
    Описание позиции: статус, DTE, число выигрывающих и проигрывающих ходов.

    Args:
        game: позиция в решённом кэше
        show_next_moves: перечислить выигрывающие ходы
    """
    info = game.info()
    status = "выигрышная" if info.is_winning else "проигрышная"

    lines = [
        f"Позиция {info.position_id} (из {game.cache.solved_count}) — {status}.",
        f"До конца партии при оптимальной игре: {info.distance_to_end}",
        f"Выигрывающих разрезов: {info.winning_move_count}",
        f"Проигрывающих разрезов: {info.losing_move_count}",
        f"Всего разрезов: {info.total_move_count}",
    ]

    if show_next_moves and info.is_winning:
        lines.append("")
        lines.append("Выигрывающие ходы:")
        for cut, successor in game.moves():
            successor_info = successor.info()
            if not successor_info.is_winning:
                lines.append(
                    f"  Разрез {format_cut(cut)}: соперник проигрывает, до конца "
                    f"{successor_info.distance_to_end} ходов."
                )

    return "\n".join(lines)

"""
game - Навигация по решённому пространству

Экспортирует:
- Game: фасад над PositionCache
- play_optimal / iter_optimal_play: оптимальная партия
"""

from .facade import Game
from .replay import ReplayStep, iter_optimal_play, play_optimal

__all__ = [
    'Game',
    'ReplayStep',
    'iter_optimal_play',
    'play_optimal',
]

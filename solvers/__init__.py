"""
solvers - Решатели Chomp

Экспортирует:
- RetrogradeSolver: восходящий ретроградный анализ с кэшем
- solve: построение кэша для заданных границ
- PositionCache / PositionInfo: кэш и классификация позиций
"""

from .base import BaseSolver, SolverStats
from .cache import PositionCache, PositionInfo, TERMINAL_INFO, query_classification
from .retrograde import RetrogradeSolver, solve

__all__ = [
    'BaseSolver',
    'SolverStats',
    'PositionCache',
    'PositionInfo',
    'TERMINAL_INFO',
    'query_classification',
    'RetrogradeSolver',
    'solve',
]

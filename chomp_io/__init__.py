"""
chomp_io - Ввод/вывод для Chomp

Экспортирует:
- Парсинг позиций и разрезов
- Визуализация доски и партий
- Сводки по решённому пространству
"""

from .parser import parse_position, parse_cut
from .visualizer import display_position, format_cut, format_replay
from .report import summarize, format_summary, describe_position

__all__ = [
    'parse_position',
    'parse_cut',
    'display_position',
    'format_cut',
    'format_replay',
    'summarize',
    'format_summary',
    'describe_position',
]

"""
core - Ядро Chomp

Конфигурации, хеширование, генерация ходов и перечисление позиций.
"""

from .position import Position
from .cuts import Cut, legal_moves, is_legal_move, apply_move, iter_moves
from .hashing import hash_position, HASH_BITS
from .fast import fast_hash_position, USING_CYTHON, get_implementation_info
from .enumeration import (
    enumerate_positions, positions_with_n_cells, rows_with_n_cells,
    count_positions, check_bounds
)
from .utils import TILE, POISON, BLANK, DEFAULT_WIDTH, DEFAULT_HEIGHT, index_to_label

__all__ = [
    'Position', 'Cut',
    'legal_moves', 'is_legal_move', 'apply_move', 'iter_moves',
    'hash_position', 'fast_hash_position', 'HASH_BITS',
    'USING_CYTHON', 'get_implementation_info',
    'enumerate_positions', 'positions_with_n_cells', 'rows_with_n_cells',
    'count_positions', 'check_bounds',
    'TILE', 'POISON', 'BLANK', 'DEFAULT_WIDTH', 'DEFAULT_HEIGHT', 'index_to_label',
]

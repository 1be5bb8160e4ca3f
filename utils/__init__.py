"""
utils - Логирование, ошибки и мониторинг
"""

from .logging import SolverLogger, get_logger, setup_file_logging
from .error_handling import (
    SolverError, InvalidPositionError, InvalidMoveError, InvalidBoundsError,
    UninitializedPositionError, SolverInvariantError, CacheError,
    validate_position
)
from .monitoring import PerformanceMonitor, get_monitor, monitor_time

__all__ = [
    'SolverLogger', 'get_logger', 'setup_file_logging',
    'SolverError', 'InvalidPositionError', 'InvalidMoveError', 'InvalidBoundsError',
    'UninitializedPositionError', 'SolverInvariantError', 'CacheError',
    'validate_position',
    'PerformanceMonitor', 'get_monitor', 'monitor_time',
]

"""
core/fast.py

Автоматический выбор быстрой реализации хеша.

Если Cython скомпилирован — использует его.
Иначе — fallback на чистый Python.
"""

try:
    # Пробуем импортировать Cython версию
    from .fast_hash import fast_hash_position
    USING_CYTHON = True
except ImportError:
    # Fallback на чистый Python
    from .hashing import hash_position as fast_hash_position
    USING_CYTHON = False


def get_implementation_info() -> str:
    """Возвращает информацию о текущей реализации."""
    if USING_CYTHON:
        return "Cython (compiled)"
    return "Pure Python (fallback)"


__all__ = [
    'fast_hash_position',
    'USING_CYTHON',
    'get_implementation_info'
]

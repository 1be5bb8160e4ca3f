"""
core/hashing.py

Детерминированный 53-битный хеш конфигурации.

Два 32-битных аккумулятора, мультипликативное перемешивание каждой строки
и двухраундовая финализация с перекрёстным смешиванием. Сид зафиксирован,
поэтому ключ одинаков во всех процессах и запусках.
"""

from typing import Iterable

MASK32 = 0xFFFFFFFF
HASH_BITS = 53
HASH_LIMIT = 1 << HASH_BITS

# Начальные значения аккумуляторов (сид = 0)
SEED_1 = 0xDEADBEEF
SEED_2 = 0x41C6CE57

# Множители для каждой строки
ROW_MULT_1 = 2654435761
ROW_MULT_2 = 1597334677

# Множители финализации
FINAL_MULT_1 = 2246822507
FINAL_MULT_2 = 3266489909

HIGH_MASK = (1 << (HASH_BITS - 32)) - 1  # младшие 21 бит второго аккумулятора


def hash_position(rows: Iterable[int]) -> int:
    """
    Вычисляет 53-битный хеш конфигурации.

    Сканируются все строки, включая нулевые в конце: [1] и [1, 0] —
    разные позиции и дают разные ключи.

    Args:
        rows: заполненность строк

    Returns:
        Целое число в диапазоне [0, 2**53)
    """
    h1 = SEED_1
    h2 = SEED_2

    for value in rows:
        h1 = ((h1 ^ value) * ROW_MULT_1) & MASK32
        h2 = ((h2 ^ value) * ROW_MULT_2) & MASK32

    h1 = (((h1 ^ (h1 >> 16)) * FINAL_MULT_1) ^ ((h2 ^ (h2 >> 13)) * FINAL_MULT_2)) & MASK32
    # Второй аккумулятор смешивается с уже обновлённым первым
    h2 = (((h2 ^ (h2 >> 16)) * FINAL_MULT_1) ^ ((h1 ^ (h1 >> 13)) * FINAL_MULT_2)) & MASK32

    return ((h2 & HIGH_MASK) << 32) | h1


def benchmark_hashing(iterations: int = 100000):
    """Сравнивает скорость чистого Python и активной реализации."""
    import time
    from .fast import fast_hash_position, get_implementation_info

    rows = (9, 9, 7, 7, 4, 2, 1, 0, 0)

    start = time.time()
    for _ in range(iterations):
        hash_position(rows)
    python_time = time.time() - start

    start = time.time()
    for _ in range(iterations):
        fast_hash_position(rows)
    fast_time = time.time() - start

    print(f"Pure Python: {python_time:.3f}s ({iterations} iterations)")
    print(f"{get_implementation_info()}: {fast_time:.3f}s ({iterations} iterations)")
    if fast_time > 0:
        print(f"Speedup: {python_time / fast_time:.2f}x")


if __name__ == "__main__":
    print("Position Hashing Test")
    print("=" * 40)
    for sample in [(0,), (1,), (1, 0), (2, 2), (4, 4, 3)]:
        print(f"{list(sample)!s:<12} -> {hash_position(sample):014x}")
    print()
    benchmark_hashing()

"""
utils/monitoring.py

Мониторинг производительности решателя.
"""

import time
from typing import Dict, List, Any, Optional
from collections import defaultdict
from functools import wraps


class PerformanceMonitor:
    """Монитор производительности."""

    def __init__(self):
        self.metrics: Dict[str, List[float]] = defaultdict(list)
        self.counters: Dict[str, int] = defaultdict(int)

    def record_time(self, operation: str, elapsed: float):
        """
        Записывает время выполнения операции.

        Args:
            operation: имя операции
            elapsed: время в секундах
        """
        self.metrics[operation].append(elapsed)

    def increment_counter(self, counter: str, value: int = 1):
        self.counters[counter] += value

    def get_stats(self, operation: Optional[str] = None) -> Dict[str, Any]:
        """
        Возвращает статистику.

        Args:
            operation: имя операции (если None, возвращает общую статистику)

        Returns:
            Словарь со статистикой
        """
        if operation:
            if operation not in self.metrics:
                return {}

            times = self.metrics[operation]
            return {
                'operation': operation,
                'count': len(times),
                'total': sum(times),
                'average': sum(times) / len(times) if times else 0.0,
                'min': min(times) if times else 0.0,
                'max': max(times) if times else 0.0,
                'last': times[-1] if times else 0.0
            }

        stats = {
            'operations': {},
            'counters': dict(self.counters),
            'total_operations': sum(len(times) for times in self.metrics.values())
        }
        for op in self.metrics:
            stats['operations'][op] = self.get_stats(op)
        return stats

    def format_stats(self) -> str:
        """Форматирует общую статистику для вывода в консоль."""
        stats = self.get_stats()
        lines = ["Общая статистика:", f"  Всего операций: {stats['total_operations']}", "Операции:"]
        for op, op_stats in stats['operations'].items():
            lines.append(f"  {op}: {op_stats['count']} раз, среднее {op_stats['average']:.3f}s")
        lines.append("Счётчики:")
        for counter, value in stats['counters'].items():
            lines.append(f"  {counter}: {value}")
        return "\n".join(lines)


# Глобальный монитор
_monitor: Optional[PerformanceMonitor] = None


def get_monitor() -> PerformanceMonitor:
    """Возвращает глобальный монитор."""
    global _monitor
    if _monitor is None:
        _monitor = PerformanceMonitor()
    return _monitor


def monitor_time(operation: str):
    """
    Декоратор для мониторинга времени выполнения.

    Usage:
        @monitor_time('retrograde_solve')
        def solve(...):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            monitor = get_monitor()
            start = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception:
                monitor.record_time(f"{operation}_error", time.time() - start)
                raise
            monitor.record_time(operation, time.time() - start)
            return result
        return wrapper
    return decorator

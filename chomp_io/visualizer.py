"""
chomp_io/visualizer.py

Визуализация позиций и партий.
"""

from typing import List, Optional

from core.cuts import Cut
from core.position import Position
from core.utils import TILE, POISON, BLANK, index_to_label


def display_position(position: Position, width: Optional[int] = None) -> str:
    """
    Форматирует позицию: строка 0 внизу, подписи с единицы.

    Args:
        position: позиция
        width: ширина сетки (по умолчанию — ширина позиции)

    Returns:
        Строка для вывода
    """
    rows = position.rows
    if width is None:
        width = max(position.width(), 1)

    lines = []
    for r in range(len(rows) - 1, -1, -1):
        cells = []
        for c in range(width):
            if c < rows[r]:
                cells.append(POISON if r == 0 and c == 0 else TILE)
            else:
                cells.append(BLANK)
        lines.append(f"{r + 1:<2} " + " ".join(cells))

    lines.append("   " + " ".join(str((c + 1) % 10) for c in range(width)))
    return "\n".join(lines)


def format_cut(cut: Optional[Cut]) -> str:
    """Разрез в нотации с единицы."""
    if cut is None:
        return "—"
    return index_to_label(*cut)


def format_replay(steps) -> str:
    """
    Форматирует оптимальную партию.

    Args:
        steps: список ReplayStep

    Returns:
        Форматированная строка
    """
    if not steps:
        return "❌ Партия пуста"

    lines: List[str] = [f"✅ Оптимальная партия за {len(steps) - 1} ходов:"]
    for i, step in enumerate(steps[1:], 1):
        status = "выигрышная" if step.info.is_winning else "проигрышная"
        lines.append(
            f"  {i:2}. {format_cut(step.cut)} → {list(step.position.rows)} "
            f"({status}, DTE={step.info.distance_to_end})"
        )
    return "\n".join(lines)

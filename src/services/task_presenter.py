"""Task Presenter для Confidence Tracker.

Чистые функции над снимком задач: порядок отображения и агрегаты.
Никогда не изменяет переданные задачи.
"""

from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal
from functools import cmp_to_key
from typing import Any

from src.core.constants import DEFAULT_SEVERITY_WEIGHT, MAX_CONFIDENCE, SEVERITY_WEIGHTS
from src.core.enums import Severity
from src.core.models import Task


def severity_weight(severity: Any) -> int:
    """Вес приоритета: High=3, Medium=2, Low=1, всё остальное как Medium."""
    value = severity.value if isinstance(severity, Severity) else severity
    return SEVERITY_WEIGHTS.get(value, DEFAULT_SEVERITY_WEIGHT)


def _confidence(task: Task) -> int:
    return task.confidence if task.confidence is not None else 0


def compare_tasks(a: Task, b: Task) -> int:
    """Композитный компаратор.

    Уровни по порядку, каждый следующий решает только ничьи предыдущего:
    1. High раньше всех остальных
    2. перенесённые (confidence < 100) раньше неперенесённых
    3. больший вес приоритета раньше
    4. меньший confidence раньше
    """
    a_high = severity_weight(a.severity) == SEVERITY_WEIGHTS["High"]
    b_high = severity_weight(b.severity) == SEVERITY_WEIGHTS["High"]
    if a_high != b_high:
        return -1 if a_high else 1

    a_postponed = _confidence(a) < MAX_CONFIDENCE
    b_postponed = _confidence(b) < MAX_CONFIDENCE
    if a_postponed != b_postponed:
        return -1 if a_postponed else 1

    weight_diff = severity_weight(b.severity) - severity_weight(a.severity)
    if weight_diff:
        return weight_diff

    return _confidence(a) - _confidence(b)


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Отсортировать задачи для отображения.

    sorted() стабилен, поэтому полные ничьи сохраняют исходный порядок.
    """
    return sorted(tasks, key=cmp_to_key(compare_tasks))


def average_confidence(tasks: Sequence[Task]) -> int:
    """Средний confidence, округлённый half-away-from-zero; 0 для пустого списка."""
    if not tasks:
        return 0
    total = sum(_confidence(task) for task in tasks)
    mean = Decimal(total) / Decimal(len(tasks))
    return int(mean.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def build_board(tasks: Sequence[Task]) -> dict[str, Any]:
    """Собрать представление доски: упорядоченные задачи и агрегаты."""
    ordered = sort_tasks(tasks)
    return {
        "tasks": ordered,
        "average_confidence": average_confidence(ordered),
        "total": len(ordered),
        "completed": sum(1 for task in ordered if task.completed),
        "postponed": sum(1 for task in ordered if task.is_postponed),
    }

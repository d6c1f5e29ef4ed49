"""Доменная модель трекера задач.

Task: единственная сущность. TaskPatch: частичное обновление,
поле применяется только если оно было передано (значение не None).
"""

from dataclasses import asdict, dataclass, fields, replace
from typing import Any

from src.core.constants import MAX_CONFIDENCE, MIN_CONFIDENCE
from src.core.enums import Severity


def clamp_confidence(value: int) -> int:
    """Ограничить confidence диапазоном [0, 100]."""
    return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, int(value)))


@dataclass
class Task:
    """Задача с производной оценкой уверенности."""

    id: int
    title: str
    completed: bool = False
    confidence: int = MAX_CONFIDENCE
    severity: Severity = Severity.MEDIUM

    def __post_init__(self) -> None:
        self.severity = Severity.parse(self.severity)
        self.confidence = clamp_confidence(self.confidence)

    @property
    def is_postponed(self) -> bool:
        """Задача хотя бы раз переносилась и не восстановила confidence."""
        return self.confidence < MAX_CONFIDENCE

    def copy(self) -> "Task":
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        """JSON-представление задачи."""
        data = asdict(self)
        data["severity"] = self.severity.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        return cls(
            id=int(data["id"]),
            title=str(data["title"]),
            completed=bool(data.get("completed", False)),
            confidence=data.get("confidence", MAX_CONFIDENCE),
            severity=Severity.parse(data.get("severity")),
        )


@dataclass(frozen=True)
class TaskPatch:
    """Частичное обновление задачи (patch-семантика).

    None означает «поле не передано». ``completed=False`` это переданное
    значение и применяется как есть.
    """

    title: str | None = None
    completed: bool | None = None
    severity: Severity | None = None

    @property
    def fields_set(self) -> frozenset[str]:
        """Имена переданных полей."""
        return frozenset(f.name for f in fields(self) if getattr(self, f.name) is not None)

    def is_empty(self) -> bool:
        return not self.fields_set

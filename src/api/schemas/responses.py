"""Response Schemas для Confidence Tracker API.

Pydantic models для API responses.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.core.enums import Severity
from src.core.models import Task
from src.shared.errors.schemas import ErrorResponse


class TaskResponse(BaseModel):
    """Задача в JSON-форме.

    Используется во всех endpoints /api/tasks, возвращающих задачу.
    """

    model_config = ConfigDict(use_enum_values=True)

    id: int = Field(description="Уникальный ID задачи")
    title: str = Field(description="Заголовок")
    completed: bool = Field(description="Завершена ли задача")
    confidence: int = Field(ge=0, le=100, description="Уверенность в своевременном выполнении")
    severity: Severity = Field(description="Приоритет")

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(**task.to_dict())


class MessageResponse(BaseModel):
    """Ответ с текстовым сообщением."""

    message: str = Field(description="Сообщение", examples=["Task 3 deleted"])


class TaskBoardResponse(BaseModel):
    """Упорядоченная доска задач с агрегатами."""

    tasks: list[TaskResponse] = Field(description="Задачи в порядке отображения")
    average_confidence: int = Field(ge=0, le=100, description="Средний confidence (округлённый)")
    total: int = Field(ge=0, description="Всего задач")
    completed: int = Field(ge=0, description="Завершённых задач")
    postponed: int = Field(ge=0, description="Задач с confidence < 100")


class HealthCheckResponse(BaseModel):
    """Ответ health check."""

    status: str = Field(description="Статус сервиса")
    service: str = Field(description="Название сервиса")
    version: str = Field(description="Версия")
    tasks: int = Field(ge=0, description="Количество задач в хранилище")


__all__ = [
    "ErrorResponse",
    "HealthCheckResponse",
    "MessageResponse",
    "TaskBoardResponse",
    "TaskResponse",
]

"""Request Schemas для Confidence Tracker API.

Pydantic models для валидации входящих запросов.
Лишние поля (например, confidence или completed при создании) игнорируются.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.core.enums import Severity
from src.core.models import TaskPatch


class CreateTaskRequest(BaseModel):
    """Запрос на создание задачи.

    POST /api/tasks
    """

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "examples": [
                {"title": "Write onboarding checklist", "severity": "High"},
                {"title": "Build the REST API"},
            ]
        },
    )

    title: str = Field(description="Заголовок задачи", examples=["Write onboarding checklist"])

    severity: Severity | str | None = Field(
        default=None,
        description="Приоритет (Low/Medium/High); нераспознанное значение становится Medium",
        examples=["High"],
    )

    def severity_or_default(self) -> Severity:
        return Severity.parse(self.severity)


class UpdateTaskRequest(BaseModel):
    """Запрос на частичное обновление задачи.

    PUT /api/tasks/{task_id}

    Применяются только переданные поля.
    """

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "examples": [
                {"completed": True},
                {"title": "Ship v2", "severity": "Low"},
            ]
        },
    )

    title: str | None = Field(default=None, description="Новый заголовок")
    completed: bool | None = Field(default=None, description="Флаг завершения")
    severity: Severity | None = Field(default=None, description="Новый приоритет")

    @field_validator("completed", mode="before")
    @classmethod
    def reject_string_flags(cls, v: Any) -> Any:
        """completed принимается только как JSON boolean."""
        if v is not None and not isinstance(v, bool):
            msg = "completed must be a boolean"
            raise ValueError(msg)
        return v

    def to_patch(self) -> TaskPatch:
        """Преобразовать в доменный TaskPatch (только переданные поля)."""
        return TaskPatch(
            title=self.title if "title" in self.model_fields_set else None,
            completed=self.completed if "completed" in self.model_fields_set else None,
            severity=self.severity if "severity" in self.model_fields_set else None,
        )

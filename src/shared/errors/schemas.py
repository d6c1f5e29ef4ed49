"""Error schemas.

Pydantic схемы для ошибок.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Стандартный ответ с ошибкой.

    Поле ``message`` совместимо с клиентом, который читает ``{message}``.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "INVALID_STATE",
                "message": "Cannot postpone a completed task",
                "details": {"task_id": 1},
                "trace_id": "5f1c0b8e6a7d4c2b9e3f1a0d7c6b5a49",
            }
        }
    )

    error: str = Field(..., description="Код ошибки")
    message: str = Field(..., description="Человекочитаемое сообщение")
    details: dict[str, Any] = Field(default_factory=dict, description="Дополнительные детали")
    trace_id: str = Field(default="", description="ID трассировки для отладки")

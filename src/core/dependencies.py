"""Confidence Tracker - Dependencies.

Dependency Injection для FastAPI.
"""

from typing import Annotated

from fastapi import Depends, Request

from src.services.task_store import TaskStore


def get_task_store(request: Request) -> TaskStore:
    """Получить TaskStore из состояния приложения.

    Хранилище создаётся в lifespan и кладётся в ``app.state.task_store``;
    в тестах его можно подменить через ``app.dependency_overrides``.

    Args:
        request: HTTP запрос FastAPI.

    Returns:
        Экземпляр TaskStore.

    """
    return request.app.state.task_store


TaskStoreDep = Annotated[TaskStore, Depends(get_task_store)]

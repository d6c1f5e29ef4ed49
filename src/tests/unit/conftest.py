"""Pytest configuration для unit тестов."""

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from src.app import app
from src.core.dependencies import get_task_store
from src.core.enums import Severity
from src.services.task_store import TaskStore


@pytest.fixture
def task_store() -> TaskStore:
    """Пустое хранилище задач, отдельное для каждого теста."""
    return TaskStore()


@pytest.fixture
def seeded_store(task_store: TaskStore) -> TaskStore:
    """Хранилище с тремя задачами разного приоритета."""
    task_store.create("Write release notes", Severity.LOW)
    task_store.create("Fix login outage", Severity.HIGH)
    task_store.create("Review pull requests", Severity.MEDIUM)
    return task_store


@pytest.fixture
async def client(task_store: TaskStore) -> AsyncIterator[AsyncClient]:
    """Test client для FastAPI приложения с изолированным TaskStore.

    Lifespan не запускается, хранилище подставляется через dependency_overrides.
    """
    app.dependency_overrides[get_task_store] = lambda: task_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()

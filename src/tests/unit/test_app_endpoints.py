"""Unit тесты для основных endpoints приложения."""

import pytest
from httpx import AsyncClient

from src.services.task_store import TaskStore


class TestRootEndpoint:
    """Тесты для корневого endpoint /."""

    @pytest.mark.asyncio
    async def test_root_endpoint(self, client: AsyncClient) -> None:
        """Тест корневого endpoint."""
        response = await client.get("/")

        assert response.status_code == 200
        data = response.json()

        assert data["service"] == "Confidence Tracker"
        assert data["version"] == "1.0.0"
        assert data["status"] == "running"


class TestHealthEndpoint:
    """Тесты для /health endpoint."""

    @pytest.mark.asyncio
    async def test_health_endpoint_ok(self, client: AsyncClient, seeded_store: TaskStore) -> None:
        """Health check сообщает количество задач."""
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "ok",
            "service": "Confidence Tracker",
            "version": "1.0.0",
            "tasks": 3,
        }


class TestMetricsEndpoint:
    """Тесты для /metrics endpoint."""

    @pytest.mark.asyncio
    async def test_metrics_endpoint_returns_prometheus_format(self, client: AsyncClient) -> None:
        """Тест что /metrics возвращает Prometheus формат."""
        await client.get("/api/tasks")
        response = await client.get("/metrics")

        assert response.status_code == 200
        assert "text/plain" in response.headers["content-type"]
        assert "http_request" in response.text


class TestTraceHeaders:
    """Тесты trace_id и timing заголовков."""

    @pytest.mark.asyncio
    async def test_trace_id_propagated(self, client: AsyncClient) -> None:
        """Переданный X-Trace-Id возвращается в ответе."""
        response = await client.get("/api/tasks", headers={"X-Trace-Id": "trace-abc"})

        assert response.headers["X-Trace-Id"] == "trace-abc"
        assert "X-Duration-Ms" in response.headers

    @pytest.mark.asyncio
    async def test_trace_id_in_error_body(self, client: AsyncClient) -> None:
        """trace_id попадает в тело ошибки."""
        response = await client.get("/api/tasks/1", headers={"X-Trace-Id": "trace-404"})

        assert response.status_code == 404
        assert response.json()["trace_id"] == "trace-404"

    @pytest.mark.asyncio
    async def test_trace_id_generated(self, client: AsyncClient) -> None:
        """Без заголовка trace_id генерируется."""
        response = await client.get("/api/tasks")

        assert len(response.headers["X-Trace-Id"]) == 32


class TestPathsWithBraces:
    """Пути с фигурными скобками логируются без падения middleware."""

    @pytest.mark.asyncio
    async def test_non_numeric_task_id_with_braces(self, client: AsyncClient) -> None:
        response = await client.get("/api/tasks/%7Bx%7D")

        assert response.status_code == 422
        assert response.json()["error"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_unknown_route_with_braces(self, client: AsyncClient) -> None:
        response = await client.get("/nope/%7Bid%7D")

        assert response.status_code == 404

"""Confidence Tracker - FastAPI Application.

Главное приложение с инициализацией всех компонентов.
"""

import time
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import Scope

from config.settings import settings
from src.api import router as api_router
from src.api.schemas.responses import HealthCheckResponse
from src.core.constants import API_PREFIX, APP_VERSION, DEMO_TASKS
from src.core.dependencies import TaskStoreDep
from src.core.enums import HealthStatus
from src.services.task_store import create_task_store
from src.shared.errors import get_trace_id, new_trace_id, set_trace_id, setup_exception_handlers
from src.utils.logging import get_logger, setup_logging

# Setup logging
setup_logging()
logger = get_logger()


class TraceContextMiddleware:
    """Middleware для установки trace_id в контекст запроса."""

    def __init__(self, app: Any) -> None:
        """Инициализация middleware.

        Args:
            app: ASGI приложение.

        """
        self.app = app

    async def __call__(self, scope: dict, receive: Any, send: Any) -> None:
        """Установить trace_id из заголовка X-Trace-Id или сгенерировать новый.

        Args:
            scope: ASGI scope.
            receive: ASGI receive callable.
            send: ASGI send callable.

        """
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers", []))
        trace_id = headers.get(b"x-trace-id", b"").decode() or new_trace_id()
        set_trace_id(trace_id)

        await self.app(scope, receive, send)


class ClientStaticFiles(StaticFiles):
    """StaticFiles со сборкой клиента: неизвестный путь отдаёт index.html.

    Пути под /api не подменяются, там остаётся обычный 404.
    """

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404 or path.split("/", 1)[0] == API_PREFIX.strip("/"):
                raise
            return await super().get_response("index.html", scope)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager для startup/shutdown.

    Args:
        app: FastAPI application

    Yields:
        None

    """
    logger.info(
        "Confidence Tracker запускается",
        env=settings.app_env,
        debug=settings.debug,
        log_level=settings.log_level,
    )

    # Хранилище может быть подложено заранее (тесты)
    if getattr(app.state, "task_store", None) is None:
        app.state.task_store = create_task_store(DEMO_TASKS if settings.seed_demo_tasks else None)
    logger.info("TaskStore инициализирован", total=app.state.task_store.count())

    logger.info(
        "Confidence Tracker готов",
        server_host=settings.server_host,
        server_port=settings.server_port,
    )

    yield

    logger.info("Confidence Tracker остановлен")


def create_app() -> FastAPI:
    """Собрать FastAPI приложение.

    Returns:
        Настроенный экземпляр FastAPI

    """
    app = FastAPI(
        title=settings.app_name,
        description="Трекер задач с оценкой уверенности, падающей при переносе",
        version=APP_VERSION,
        lifespan=lifespan,
        debug=settings.debug,
    )

    # =================================================================
    # Middleware
    # =================================================================

    @app.middleware("http")
    async def timing_middleware(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Измерить время запроса и залогировать его.

        Args:
            request: Входящий HTTP запрос.
            call_next: Следующий обработчик в цепочке.

        Returns:
            HTTP ответ с добавленными заголовками.

        """
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)

        response.headers["X-Trace-Id"] = get_trace_id()
        response.headers["X-Duration-Ms"] = str(duration_ms)

        logger.info(
            "{} {} - {}",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms=duration_ms,
            status_code=response.status_code,
        )
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # trace_id должен выставляться раньше всех остальных middleware
    app.add_middleware(TraceContextMiddleware)

    setup_exception_handlers(app)

    # Prometheus metrics
    if settings.metrics_enabled:
        Instrumentator().instrument(app).expose(app, include_in_schema=False)
        logger.info("Prometheus metrics enabled на /metrics")

    # =================================================================
    # Routes
    # =================================================================

    app.include_router(api_router, prefix=API_PREFIX)

    @app.get("/", tags=["root"])
    async def root() -> dict[str, str]:
        """Root endpoint.

        Returns:
            Информация о сервисе

        """
        return {
            "service": settings.app_name,
            "version": APP_VERSION,
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health", tags=["root"])
    async def health(store: TaskStoreDep) -> HealthCheckResponse:
        """Health check."""
        return HealthCheckResponse(
            status=HealthStatus.OK.value,
            service=settings.app_name,
            version=APP_VERSION,
            tasks=store.count(),
        )

    # Сборка клиента монтируется последней, чтобы не перекрывать API
    if settings.static_dir:
        static_path = Path(settings.static_dir)
        if static_path.is_dir():
            app.mount("/", ClientStaticFiles(directory=static_path, html=True), name="client")
            logger.info("Клиент подключен", static_dir=str(static_path))
        else:
            logger.warning("Директория клиента не найдена", static_dir=str(static_path))

    return app


app = create_app()

"""Tasks API Routes для Confidence Tracker.

Endpoints для управления задачами и их confidence.
Доменные ошибки (TaskNotFoundError, CompletedTaskPostponeError) пробрасываются
как есть и превращаются в ответы обработчиками из src.shared.errors.
"""

from fastapi import APIRouter, status

from src.api.schemas.requests import CreateTaskRequest, UpdateTaskRequest
from src.api.schemas.responses import MessageResponse, TaskBoardResponse, TaskResponse
from src.core.dependencies import TaskStoreDep
from src.services.task_presenter import build_board
from src.shared.errors import CompletedTaskPostponeError, EmptyTitleError, TaskNotFoundError

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get(
    "",
    summary="Список задач",
    description="Возвращает все задачи (порядок отображения задаёт клиент или /board)",
)
async def list_tasks(store: TaskStoreDep) -> list[TaskResponse]:
    """Список всех задач."""
    return [TaskResponse.from_task(task) for task in store.list_tasks()]


@router.get(
    "/board",
    summary="Доска задач",
    description="Задачи в порядке приоритета и средний confidence",
)
async def get_board(store: TaskStoreDep) -> TaskBoardResponse:
    """Упорядоченная доска задач.

    Returns:
        TaskBoardResponse с отсортированными задачами и агрегатами

    """
    board = build_board(store.list_tasks())
    return TaskBoardResponse(
        tasks=[TaskResponse.from_task(task) for task in board["tasks"]],
        average_confidence=board["average_confidence"],
        total=board["total"],
        completed=board["completed"],
        postponed=board["postponed"],
    )


@router.get(
    "/{task_id}",
    summary="Получить задачу",
    responses={404: TaskNotFoundError.openapi_response()},
)
async def get_task(task_id: int, store: TaskStoreDep) -> TaskResponse:
    """Получить задачу по ID.

    Raises:
        TaskNotFoundError: 404 если задача не найдена

    """
    return TaskResponse.from_task(store.get(task_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Создать задачу",
    description=(
        "Создаёт задачу с confidence=100. Заголовки, содержащие 'rest api', "
        "переписываются в конкретную формулировку."
    ),
    responses={422: EmptyTitleError.openapi_response()},
)
async def create_task(request: CreateTaskRequest, store: TaskStoreDep) -> TaskResponse:
    """Создать задачу.

    Args:
        request: Заголовок и приоритет
        store: Хранилище задач

    Returns:
        TaskResponse созданной задачи

    """
    task = store.create(request.title, request.severity_or_default())
    return TaskResponse.from_task(task)


@router.put(
    "/{task_id}",
    summary="Обновить задачу",
    description="Частичное обновление: применяются только переданные поля",
    responses={
        404: TaskNotFoundError.openapi_response(),
        422: EmptyTitleError.openapi_response(),
    },
)
async def update_task(task_id: int, request: UpdateTaskRequest, store: TaskStoreDep) -> TaskResponse:
    """Обновить задачу.

    Raises:
        TaskNotFoundError: 404 если задача не найдена

    """
    return TaskResponse.from_task(store.update(task_id, request.to_patch()))


@router.post(
    "/{task_id}/postpone",
    summary="Перенести задачу",
    description="Снижает confidence на 20 (не ниже 0). Завершённую задачу перенести нельзя.",
    responses={
        400: CompletedTaskPostponeError.openapi_response(),
        404: TaskNotFoundError.openapi_response(),
    },
)
async def postpone_task(task_id: int, store: TaskStoreDep) -> TaskResponse:
    """Перенести задачу.

    Raises:
        TaskNotFoundError: 404 если задача не найдена
        CompletedTaskPostponeError: 400 если задача завершена

    """
    return TaskResponse.from_task(store.postpone(task_id))


@router.delete(
    "/{task_id}",
    summary="Удалить задачу",
    description="Удаляет задачу. Отсутствующий id не считается ошибкой.",
)
async def delete_task(task_id: int, store: TaskStoreDep) -> MessageResponse:
    """Удалить задачу (идемпотентно)."""
    store.delete(task_id)
    return MessageResponse(message=f"Task {task_id} deleted")

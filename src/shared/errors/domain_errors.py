"""Domain errors.

Доменные исключения трекера задач. Сообщения на английском:
клиент показывает поле ``message`` пользователю как есть.
"""

from src.shared.errors.base import AppException


class NotFoundError(AppException):
    """Resource not found."""

    status_code = 404


class InvalidStateError(AppException):
    """Operation is not allowed in the current state."""

    status_code = 400


class InvalidArgumentError(AppException):
    """Invalid argument."""

    status_code = 422


class TaskNotFoundError(NotFoundError):
    """Task not found."""

    code = "TASK_NOT_FOUND"
    default_message = "Task not found"

    def __init__(self, task_id: int) -> None:
        """Инициализация исключения.

        Args:
            task_id: Идентификатор задачи.

        """
        super().__init__(details={"task_id": task_id})
        self.task_id = task_id


class CompletedTaskPostponeError(InvalidStateError):
    """Cannot postpone a completed task."""

    code = "INVALID_STATE"
    default_message = "Cannot postpone a completed task"

    def __init__(self, task_id: int) -> None:
        """Инициализация исключения.

        Args:
            task_id: Идентификатор задачи.

        """
        super().__init__(details={"task_id": task_id})
        self.task_id = task_id


class EmptyTitleError(InvalidArgumentError):
    """Task title must not be empty."""

    code = "INVALID_ARGUMENT"
    default_message = "Title must not be empty"

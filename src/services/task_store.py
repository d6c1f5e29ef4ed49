"""Task Store для Confidence Tracker.

In-memory хранилище задач. Единственный владелец записей и счётчика id.

Правила confidence:
    create                   -> confidence=100, completed=False
    update(completed=True)   -> confidence=100 (по новому значению, не по переходу)
    update(completed=False)  -> confidence не меняется
    postpone                 -> confidence = max(0, confidence - 20), только для незавершённых
"""

import threading
from collections.abc import Iterable
from typing import Any

from src.core.constants import (
    MAX_CONFIDENCE,
    MIN_CONFIDENCE,
    POSTPONE_PENALTY,
    REST_API_CANONICAL_TITLE,
    REST_API_MARKER,
)
from src.core.enums import Severity
from src.core.models import Task, TaskPatch
from src.shared.errors import CompletedTaskPostponeError, EmptyTitleError, TaskNotFoundError
from src.utils.logging import get_logger

logger = get_logger()


def rewrite_title(title: str) -> str:
    """Auto-rewrite: расплывчатые задачи про REST API сводятся к конкретной формулировке."""
    if REST_API_MARKER in title.lower():
        return REST_API_CANONICAL_TITLE
    return title


def _require_title(title: str | None) -> str:
    if title is None or not title.strip():
        raise EmptyTitleError
    return title


class TaskStore:
    """Хранилище задач с правилами confidence/severity.

    Все мутации сериализуются через lock, наружу отдаются копии записей.
    Id не переиспользуются: счётчик растёт от максимального когда-либо выданного id.
    """

    def __init__(self) -> None:
        """Инициализировать пустое хранилище."""
        self._tasks: dict[int, Task] = {}
        self._last_id = 0
        self._lock = threading.RLock()

    # ---- чтение ----

    def list_tasks(self) -> list[Task]:
        """Снимок всех задач в порядке вставки."""
        with self._lock:
            return [task.copy() for task in self._tasks.values()]

    def get(self, task_id: int) -> Task:
        """Получить задачу по id.

        Raises:
            TaskNotFoundError: задачи с таким id нет

        """
        with self._lock:
            return self._get(task_id).copy()

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    # ---- мутации ----

    def seed(self, records: Iterable[dict[str, Any]]) -> None:
        """Загрузить начальные записи как есть, без auto-rewrite.

        Args:
            records: Словари в JSON-форме задачи (с id)

        """
        with self._lock:
            for record in records:
                task = Task.from_dict(record)
                self._tasks[task.id] = task
                self._last_id = max(self._last_id, task.id)

        logger.info("Хранилище задач заполнено", total=self.count(), last_id=self._last_id)

    def create(self, title: str, severity: Severity | str | None = None) -> Task:
        """Создать задачу.

        confidence и completed всегда стартовые, severity по умолчанию Medium.

        Args:
            title: Заголовок задачи (непустой)
            severity: Приоритет; отсутствующий или нераспознанный становится Medium

        Returns:
            Созданная задача с присвоенным id

        Raises:
            EmptyTitleError: пустой заголовок

        """
        original_title = _require_title(title)
        stored_title = rewrite_title(original_title)

        with self._lock:
            self._last_id += 1
            task = Task(
                id=self._last_id,
                title=stored_title,
                completed=False,
                confidence=MAX_CONFIDENCE,
                severity=Severity.parse(severity),
            )
            self._tasks[task.id] = task

        logger.info(
            "Задача создана",
            task_id=task.id,
            severity=task.severity.value,
            rewritten=stored_title != original_title,
        )
        return task.copy()

    def update(self, task_id: int, patch: TaskPatch) -> Task:
        """Применить частичное обновление.

        Поля, не переданные в patch, не трогаются. Если в patch передан
        ``completed=True``, confidence принудительно становится 100.

        Raises:
            TaskNotFoundError: задачи с таким id нет
            EmptyTitleError: передан пустой заголовок

        """
        if patch.title is not None:
            _require_title(patch.title)

        with self._lock:
            task = self._get(task_id)

            if patch.title is not None:
                task.title = patch.title
            if patch.completed is not None:
                task.completed = patch.completed
            if patch.severity is not None:
                task.severity = Severity.parse(patch.severity)

            if patch.completed is True:
                task.confidence = MAX_CONFIDENCE

            result = task.copy()

        logger.info(
            "Задача обновлена",
            task_id=task_id,
            fields=sorted(patch.fields_set),
            empty=patch.is_empty(),
            completed=result.completed,
            confidence=result.confidence,
        )
        return result

    def postpone(self, task_id: int) -> Task:
        """Перенести задачу: confidence падает на 20, но не ниже 0.

        Raises:
            TaskNotFoundError: задачи с таким id нет
            CompletedTaskPostponeError: задача уже завершена

        """
        with self._lock:
            task = self._get(task_id)

            if task.completed:
                raise CompletedTaskPostponeError(task_id)

            previous = task.confidence
            task.confidence = max(MIN_CONFIDENCE, task.confidence - POSTPONE_PENALTY)
            result = task.copy()

        logger.info(
            "Задача перенесена",
            task_id=task_id,
            confidence_before=previous,
            confidence_after=result.confidence,
        )
        return result

    def delete(self, task_id: int) -> bool:
        """Удалить задачу. Идемпотентно: отсутствующий id не ошибка.

        Returns:
            True если задача существовала

        """
        with self._lock:
            existed = self._tasks.pop(task_id, None) is not None

        logger.info("Задача удалена", task_id=task_id, existed=existed)
        return existed

    # ---- helpers ----

    def _get(self, task_id: int) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task


def create_task_store(seed: Iterable[dict[str, Any]] | None = None) -> TaskStore:
    """Создать и инициализировать TaskStore.

    Args:
        seed: Начальные записи (опционально)

    Returns:
        TaskStore instance

    """
    store = TaskStore()
    if seed:
        store.seed(seed)
    return store

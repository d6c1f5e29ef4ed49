"""Confidence Tracker - Core module.

Ядро приложения: доменная модель, константы, зависимости.
"""

from src.core.constants import API_PREFIX, APP_VERSION
from src.core.enums import Severity
from src.core.models import Task, TaskPatch

__all__ = [
    "API_PREFIX",
    "APP_VERSION",
    "Severity",
    "Task",
    "TaskPatch",
]

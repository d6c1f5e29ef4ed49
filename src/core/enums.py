"""Enums для Confidence Tracker."""

from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Приоритет задачи."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def parse(cls, value: Any) -> "Severity":
        """Привести произвольное значение к Severity.

        Отсутствующее или нераспознанное значение становится Medium.
        Сравнение регистрозависимое, как и хранимые значения.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.MEDIUM


class HealthStatus(str, Enum):
    """Статус здоровья сервиса."""

    OK = "ok"

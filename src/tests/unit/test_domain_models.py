"""Unit тесты для core/models.py и core/enums.py."""

import pytest

from src.core.enums import Severity
from src.core.models import Task, TaskPatch, clamp_confidence


class TestSeverity:
    """Тесты для Severity."""

    @pytest.mark.parametrize("value", ["Low", "Medium", "High"])
    def test_parse_known(self, value: str) -> None:
        assert Severity.parse(value).value == value

    @pytest.mark.parametrize("value", [None, "", "low", "Critical", 2])
    def test_parse_unknown_defaults_to_medium(self, value: object) -> None:
        assert Severity.parse(value) is Severity.MEDIUM

    def test_serializes_as_string(self) -> None:
        assert Severity.HIGH == "High"


class TestTask:
    """Тесты для Task."""

    @pytest.mark.parametrize(("value", "expected"), [(-20, 0), (0, 0), (55, 55), (100, 100), (140, 100)])
    def test_confidence_clamped(self, value: int, expected: int) -> None:
        assert clamp_confidence(value) == expected
        assert Task(id=1, title="t", confidence=value).confidence == expected

    def test_defaults(self) -> None:
        task = Task(id=1, title="Plan sprint")
        assert task.completed is False
        assert task.confidence == 100
        assert task.severity is Severity.MEDIUM
        assert task.is_postponed is False

    def test_to_dict(self) -> None:
        task = Task(id=3, title="Plan sprint", confidence=60, severity=Severity.HIGH)
        assert task.to_dict() == {
            "id": 3,
            "title": "Plan sprint",
            "completed": False,
            "confidence": 60,
            "severity": "High",
        }

    def test_from_dict_fills_defaults(self) -> None:
        task = Task.from_dict({"id": "4", "title": "Plan sprint", "severity": "Unknown"})
        assert task.id == 4
        assert task.confidence == 100
        assert task.severity is Severity.MEDIUM


class TestTaskPatch:
    """Тесты для TaskPatch."""

    def test_empty(self) -> None:
        assert TaskPatch().is_empty()
        assert TaskPatch().fields_set == frozenset()

    def test_false_counts_as_present(self) -> None:
        """completed=False передан явно и отличается от «не передан»."""
        patch = TaskPatch(completed=False)
        assert patch.fields_set == frozenset({"completed"})
        assert not patch.is_empty()

    def test_multiple_fields(self) -> None:
        patch = TaskPatch(title="New", severity=Severity.LOW)
        assert patch.fields_set == frozenset({"title", "severity"})

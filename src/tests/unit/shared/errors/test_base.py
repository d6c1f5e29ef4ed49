"""Тесты для базового класса исключений AppException.

Покрывает:
- Автоматическую генерацию code из имени класса
- Извлечение сообщения из docstring
- Преобразование в ErrorResponse
"""

from src.shared.errors.base import AppException
from src.shared.errors.context import set_trace_id
from src.shared.errors.schemas import ErrorResponse


class TestAppException:
    """Тесты для базового класса AppException."""

    def test_code_generation_simple(self) -> None:
        """Генерация code из простого имени класса."""

        class SimpleError(AppException):
            """Простая ошибка."""

        assert SimpleError().code == "SIMPLE"

    def test_code_generation_complex(self) -> None:
        """Генерация code из CamelCase имени."""

        class VeryComplexCustomError(AppException):
            """Очень сложная ошибка."""

        assert VeryComplexCustomError().code == "VERY_COMPLEX_CUSTOM"

    def test_explicit_code_kept(self) -> None:
        """Явно заданный code не перезаписывается."""

        class CustomError(AppException):
            """Ошибка."""

            code = "MY_CODE"

        assert CustomError().code == "MY_CODE"

    def test_default_message_from_multiline_docstring(self) -> None:
        """Берётся первая строка docstring."""

        class CustomError(AppException):
            """Something went wrong.

            Это дополнительное описание ошибки.
            """

        assert CustomError().message == "Something went wrong."

    def test_custom_message_and_status(self) -> None:
        """Сообщение и статус можно переопределить в конструкторе."""

        class CustomError(AppException):
            """Ошибка."""

        error = CustomError(message="Кастомное сообщение", status_code=418)
        assert error.message == "Кастомное сообщение"
        assert error.status_code == 418
        assert str(error) == "Кастомное сообщение"

    def test_details(self) -> None:
        """details пустой по умолчанию и копируется из конструктора."""

        class CustomError(AppException):
            """Ошибка."""

        details = {"task_id": 3}
        error = CustomError(details=details)
        details["task_id"] = 4

        assert CustomError().details == {}
        assert error.details == {"task_id": 3}

    def test_to_response(self) -> None:
        """Сериализация в ErrorResponse с текущим trace_id."""

        class CustomError(AppException):
            """Ошибка."""

            status_code = 400

        set_trace_id("trace-1")
        response = CustomError(details={"task_id": 1}).to_response()

        assert isinstance(response, ErrorResponse)
        assert response.model_dump() == {
            "error": "CUSTOM",
            "message": "Ошибка.",
            "details": {"task_id": 1},
            "trace_id": "trace-1",
        }

    def test_openapi_response(self) -> None:
        """OpenAPI схема содержит пример с code."""

        class CustomError(AppException):
            """Ошибка."""

        schema = CustomError.openapi_response()
        assert schema["model"] is ErrorResponse
        assert schema["content"]["application/json"]["example"]["error"] == "CUSTOM"

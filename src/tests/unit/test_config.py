"""Unit тесты для config/settings.py."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from config.settings import Settings


class TestSettings:
    """Тесты для Settings."""

    def test_default_values(self) -> None:
        """Тест значений по умолчанию."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.app_name == "Confidence Tracker"
        assert settings.app_env == "development"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.server_host == "0.0.0.0"
        assert settings.server_port == 5000
        assert settings.cors_origins == ["*"]
        assert settings.seed_demo_tasks is True
        assert settings.static_dir is None
        assert settings.metrics_enabled is True

    def test_environment_variable_override(self) -> None:
        """Тест переопределения через переменные окружения."""
        with patch.dict(
            os.environ,
            {
                "APP_ENV": "production",
                "LOG_LEVEL": "ERROR",
                "SERVER_PORT": "9000",
                "SEED_DEMO_TASKS": "false",
                "STATIC_DIR": "/srv/client/build",
            },
        ):
            settings = Settings(_env_file=None)

        assert settings.app_env == "production"
        assert settings.log_level == "ERROR"
        assert settings.server_port == 9000
        assert settings.seed_demo_tasks is False
        assert settings.static_dir == "/srv/client/build"

    @pytest.mark.parametrize("port", ["0", "70000"])
    def test_invalid_port(self, port: str) -> None:
        """Порт вне диапазона отклоняется."""
        with patch.dict(os.environ, {"SERVER_PORT": port}), pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_invalid_env(self) -> None:
        """Неизвестное окружение отклоняется."""
        with patch.dict(os.environ, {"APP_ENV": "qa"}), pytest.raises(ValidationError):
            Settings(_env_file=None)

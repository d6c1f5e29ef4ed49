"""Confidence Tracker - Configuration Settings.

Pydantic Settings для управления конфигурацией через env vars.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Главные настройки приложения."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =================================================================
    # Application
    # =================================================================
    app_name: str = Field(default="Confidence Tracker", description="Название приложения")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Окружение"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Уровень логирования"
    )
    debug: bool = Field(default=False, description="Режим отладки")

    # =================================================================
    # Server
    # =================================================================
    server_host: str = Field(default="0.0.0.0", description="Хост сервера")
    server_port: int = Field(default=5000, ge=1, le=65535, description="Порт сервера")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Разрешённые CORS origins"
    )

    @field_validator("server_port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Валидация порта."""
        if not 1 <= v <= 65535:
            msg = f"Порт должен быть в диапазоне 1-65535, получено: {v}"
            raise ValueError(msg)
        return v

    # =================================================================
    # Tasks
    # =================================================================
    seed_demo_tasks: bool = Field(
        default=True,
        description="Загрузить демонстрационные задачи при старте"
    )

    # =================================================================
    # Static client
    # =================================================================
    static_dir: str | None = Field(
        default=None,
        description="Директория со сборкой клиента (index.html + assets)"
    )

    # =================================================================
    # Monitoring
    # =================================================================
    metrics_enabled: bool = Field(default=True, description="Публиковать /metrics для Prometheus")


# Singleton instance
settings = Settings()

"""Confidence Tracker - API Module.

Главный роутер API.
"""

from fastapi import APIRouter

from src.api.routes import tasks
from src.core.constants import API_PREFIX

# Создаем главный API роутер
router = APIRouter()

router.include_router(tasks.router)

__all__ = ["router", "API_PREFIX"]

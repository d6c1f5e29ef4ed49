"""Константы для Confidence Tracker.

Централизованное хранилище всех магических чисел и строк.
"""

# === HTTP и API ===
API_PREFIX = "/api"
APP_VERSION = "1.0.0"

# === Confidence ===
MAX_CONFIDENCE = 100
MIN_CONFIDENCE = 0
POSTPONE_PENALTY = 20  # Сколько confidence теряет задача за один перенос

# === Auto-rewrite ===
REST_API_MARKER = "rest api"
REST_API_CANONICAL_TITLE = "Define 3 endpoints for REST API (15 min)"

# === Severity ===
SEVERITY_WEIGHTS = {"High": 3, "Medium": 2, "Low": 1}
DEFAULT_SEVERITY_WEIGHT = 2

# === Демо-данные, с которыми стартует in-memory хранилище ===
DEMO_TASKS = (
    {"id": 1, "title": "Initialize Project", "completed": True, "confidence": 100, "severity": "High"},
    {"id": 2, "title": "Build REST API", "completed": False, "confidence": 50, "severity": "Medium"},
)

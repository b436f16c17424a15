from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Task Timer API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./time_records.db"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Time record storage: "memory" (lost on restart) or "database"
    time_record_store: Literal["memory", "database"] = "memory"
    scope_records_by_user: bool = True

    # Auth backend: "local" (in-process anonymous sessions) or "supabase"
    auth_backend: Literal["local", "supabase"] = "local"
    supabase_url: str = ""
    supabase_anon_key: str = ""
    auth_timeout_seconds: float = 10.0
    anonymous_session_max_age_minutes: int = 60

    # Session cookie carrying the access token
    session_cookie_name: str = "timer_session"
    session_cookie_secure: bool = False
    session_cookie_max_age: int = 60 * 60 * 24 * 30

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_auth: str = "INFO"             # Auth providers and AuthService
    log_level_storage: str = "INFO"          # Time record repositories

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()

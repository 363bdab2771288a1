"""
Application configuration loaded from environment variables.
Uses pydantic-settings for typed, validated config.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """All environment variables read by the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Remote API ────────────────────────────────────────────
    jobs_api_url: str = "http://localhost:5000/api/jobs"
    jobs_api_timeout: float = 10.0   # seconds

    # ── Local cache ───────────────────────────────────────────
    cache_backend: Literal["file", "memory"] = "file"
    cache_path: str = ".cache/jobboard.json"
    cache_key: str = "wfc_jobs"

    # ── Background refresh ────────────────────────────────────
    refresh_interval_minutes: int = 0   # 0 disables the scheduler

    # ── Notifications ─────────────────────────────────────────
    notification_history: int = 50

    # ── App ───────────────────────────────────────────────────
    app_name: str = "jobboard"
    debug: bool = False
    log_level: str = "INFO"

    @property
    def effective_log_level(self) -> str:
        """`debug` forces DEBUG regardless of `log_level`."""
        return "DEBUG" if self.debug else self.log_level.upper()


# Singleton — import this wherever config is needed
settings = Settings()

"""Detector configuration — loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # --- Remote analysis service ----------------------------------------
    analysis_base_url: str = "http://localhost:3000"
    analysis_path: str = "/api/analyze-text"
    request_timeout: float | None = None  # seconds; None waits indefinitely

    # --- Server ---------------------------------------------------------
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"
    allowed_origins: str = "*"  # comma-separated origins, e.g. "http://localhost:3000,https://app.example.com"


settings = Settings()

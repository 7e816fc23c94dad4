"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Local storage file holding the notes key
    notes_storage_path: Path = Path("notes_data.json")

    # Viewport width (px) below which the notes panel collapses
    sidebar_collapse_width: int = 600

    log_level: str = "INFO"


settings = Settings()

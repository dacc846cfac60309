"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # Gemini
    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("API_KEY", "GEMINI_API_KEY"),
    )
    gemini_model: str = "gemini-2.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    ai_timeout: float = 30.0  # seconds

    # Storage
    notes_storage_path: Path = Path.home() / ".nebula" / "storage.json"
    notes_storage_key: str = "nebula-notes-data"

    log_level: str = "INFO"

    @field_validator("notes_storage_path")
    @classmethod
    def _expand_home(cls, value: Path) -> Path:
        return value.expanduser()

    @property
    def ai_enabled(self) -> bool:
        """Whether an API key is configured for the text-generation service."""
        return bool(self.api_key and self.api_key.strip())


settings = Settings()

"""Application settings loaded from environment."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings. Loaded from .env and environment, read-only after startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Listener
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = Field(default=8080, ge=0, le=65535)  # 0 = ephemeral

    # Prefix for every route, e.g. "/api". Empty means routes live at the root.
    CONTEXT_PATH: str = ""

    # Logging (optional). LOG_DIR empty = console only.
    LOG_DIR: str = ""
    LOG_LEVEL: str = "INFO"

    @field_validator("CONTEXT_PATH")
    @classmethod
    def normalize_context_path(cls, value: str) -> str:
        """Return the prefix with one leading slash and no trailing slash ("" for root)."""
        value = value.strip().rstrip("/")
        if not value:
            return ""
        if not value.startswith("/"):
            value = "/" + value
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()

"""Settings for the remote-first summary flow, loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

KNOWN_PROVIDERS = ("groq", "gemini")


class Settings(BaseSettings):
    """Remote endpoint and logging settings (read from .env when present)."""

    api_url: str = Field(default="http://localhost:3000/api/summarize", alias="SUMMARY_API_URL")
    provider: str = Field(default="groq", alias="SUMMARY_PROVIDER")
    # abort timer for the remote call; the local summarizer has none
    timeout_seconds: float = Field(default=30.0, alias="SUMMARY_TIMEOUT_SECONDS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

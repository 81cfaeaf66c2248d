"""Application configuration using Pydantic settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # API Keys
    openai_api_key: str = Field(..., min_length=1)

    # Server Configuration
    api_host: str = "0.0.0.0"
    api_port: int = Field(3000, validation_alias=AliasChoices("PORT", "API_PORT"))

    # Realtime session defaults
    realtime_sessions_url: str = "https://api.openai.com/v1/realtime/sessions"
    realtime_model: str = "gpt-4o-realtime-preview"
    realtime_voice: str = "alloy"
    realtime_request_timeout: float = 30.0

    # Server VAD only signals speech start/stop, turns are driven client-side
    vad_threshold: float = 0.6
    vad_silence_duration_ms: int = 900

    # Tool declarations and instructions, defaults to the packaged contract
    intake_contract_dir: Path | None = None


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()

"""Environment-based application settings. Read-only; no business logic."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="rsvp-segmenter", description="Service name")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Runtime environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Log level name")

    # Server
    host: str = Field(default="0.0.0.0", description="Listen host")
    port: int = Field(default=8000, ge=1, le=65535, description="Listen port")

    # Tokenizer (see services/tokenizer/strategies)
    tokenizer_strategy: Literal["mecab", "mock"] = Field(
        default="mecab", description="Morphological tokenizer backend"
    )
    mecab_args: str = Field(default="", description="Extra MeCab arguments appended to the IPADIC ones")

    # Uploads
    max_upload_bytes: int = Field(
        default=5 * 1024 * 1024, ge=1, description="Maximum accepted upload size (bytes)"
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance. Use for app lifetime."""
    return Settings()

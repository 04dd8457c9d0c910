"""Configuration management using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FEEDLENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Validation
    strict: bool = False
    relaxng_schema_path: str | None = None

    # Parsing
    recover_malformed: bool = False

    # Fetching
    fetch_timeout_seconds: float = 20.0
    fetch_max_bytes: int = 5 * 1024 * 1024


settings = Settings()

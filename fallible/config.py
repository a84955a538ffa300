"""Settings for fallible, read from ``FALLIBLE_*`` environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or a local .env file."""

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # Emit a debug event whenever attempt()/attempt_sync() catch an exception
    log_attempt_failures: bool = True

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()

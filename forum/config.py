"""Forum settings, read from the environment and an optional .env file."""

from typing import Literal

from pydantic import BaseModel, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

IN_MEMORY_SQLITE_URLS = ("sqlite://", "sqlite:///:memory:")


class DatabaseSettings(BaseModel):
    """Where records are stored and how connections are pooled."""

    url: str = "sqlite:///forum.db"
    echo: bool = False
    # Pool sizing applies to server databases only
    pool_size: int = 5
    max_overflow: int = 10

    @computed_field
    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @computed_field
    @property
    def is_in_memory(self) -> bool:
        """SQLite database that lives only as long as its connection."""
        return self.url in IN_MEMORY_SQLITE_URLS


class ObservabilitySettings(BaseModel):
    """Logfire telemetry options."""

    logfire_token: str | None = None
    # None means: send when a token is configured
    send_to_logfire: bool | None = None
    console: bool = True

    @computed_field
    @property
    def sends_to_logfire(self) -> bool:
        if self.send_to_logfire is not None:
            return self.send_to_logfire
        return bool(self.logfire_token)


class Settings(BaseSettings):
    """Forum settings.

    Nested values use ``__`` in variable names::

        ENVIRONMENT=production
        DATABASE__URL=postgresql+psycopg://forum:forum@db/forum
        DATABASE__ECHO=true
        OBSERVABILITY__LOGFIRE_TOKEN=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    database: DatabaseSettings = DatabaseSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

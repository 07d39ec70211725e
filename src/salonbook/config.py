"""Runtime configuration read from environment variables."""

from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Every field has a default so the application runs against a local SQLite
    file with no configuration at all. Variables use the SALONBOOK_ prefix;
    DATABASE_URL and PORT are also read unprefixed.
    """

    model_config = SettingsConfigDict(
        env_prefix="SALONBOOK_",
        env_ignore_empty=True,
        populate_by_name=True,
        frozen=True,
    )

    database_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("SALONBOOK_DATABASE_URL", "DATABASE_URL"),
    )
    database_path: Optional[str] = Field(
        default=None,
        validation_alias="SALONBOOK_DB_PATH",
    )
    environment: str = Field(
        default="development",
        validation_alias="SALONBOOK_ENV",
    )

    # Connection pool
    pool_min: int = 2
    pool_max: int = 10
    pool_idle_timeout: int = 30
    connect_timeout: int = 5
    statement_timeout_ms: int = 30000
    slow_query_ms: int = 1000

    # HTTP server
    host: str = "0.0.0.0"
    port: int = Field(default=3000, validation_alias=AliasChoices("SALONBOOK_PORT", "PORT"))
    shutdown_timeout: int = 10

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment.

        Raises:
            pydantic.ValidationError: If a numeric variable is malformed
        """
        return cls()

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def with_overrides(self, **changes) -> "Settings":
        """Return a copy with the non-None values in changes applied."""
        return self.model_copy(update={k: v for k, v in changes.items() if v is not None})


def default_database_path() -> str:
    """Return ~/.salonbook/salonbook.db, creating the directory if needed."""
    db_dir = Path.home() / ".salonbook"
    db_dir.mkdir(exist_ok=True)
    return str(db_dir / "salonbook.db")

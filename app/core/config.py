"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, with no scattered magic strings.
"""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        database_url: Full SQLAlchemy URL (``DATABASE_URL``). When unset the
            URL is built from the postgres_* values.
        max_connections: Upper bound on open database connections.
        storage_backend: ``postgres`` for the relational stores, ``memory``
            for the in-process stores used in development.
        init_schema: Create the questions/answers tables at startup.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        rate_limit_enabled: Apply the default rate limit to every route.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "QA Service"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "qa_service"
    max_connections: int = 5

    storage_backend: Literal["postgres", "memory"] = "postgres"
    init_schema: bool = False

    host: str = "127.0.0.1"
    port: int = 8000

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    def get_database_url(self) -> str:
        """Return the effective database URL.

        Priority:
        1. Explicit ``DATABASE_URL``
        2. Built from postgres_* values (useful for Docker Compose or local setups)
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()

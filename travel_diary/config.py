"""
Travel Diary Backend — Application Configuration
=================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the application factory and the `python -m travel_diary`
       entry point. Tests build their own `Settings` instance and pass it
       to `create_app()`.
When:  Loaded once at module import time.

Every setting has a working default, so the service starts with no
environment at all: a `travel_diary.db` file in the working directory,
listening on port 5002.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Format: sqlite+aiosqlite:///<path to file>
    # Three slashes = relative path, four slashes = absolute path
    database_url: str = Field(
        default="sqlite+aiosqlite:///./travel_diary.db",
        description="Async SQLAlchemy URL of the diary database file"
    )

    # SQLite ignores FOREIGN KEY clauses unless each connection opts in
    sqlite_foreign_keys: bool = Field(
        default=True,
        description="Issue PRAGMA foreign_keys=ON on every new SQLite connection"
    )

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=5002, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    # DEBUG also echoes every SQL statement
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @property
    def sql_echo(self) -> bool:
        return self.log_level == "DEBUG"

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATABASE_URL and database_url both work
    }


# Singleton instance used by the module-level app and the CLI entry point
settings = Settings()

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv
from sqlalchemy import Engine, create_engine
from sqlalchemy.pool import StaticPool

load_dotenv()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = os.getenv(
        "DATABASE_URL",
        os.getenv("ConnectionString", "sqlite:///./products.db"),
    )
    db_echo: bool = os.getenv("DB_ECHO", "false").lower() == "true"

    # Function key guarding the product routes. None disables the gate.
    api_key: str | None = os.getenv("API_KEY") or None

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_json: bool = os.getenv("LOG_JSON", "false").lower() == "true"

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    @property
    def is_in_memory_sqlite(self) -> bool:
        """Check if the database URL points at an in-memory SQLite database."""
        url = self.database_url
        return url.startswith("sqlite") and (url.rstrip("/").endswith(":") or ":memory:" in url)

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not self.database_url:
            raise ValueError("DATABASE_URL must not be empty")

        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {list(_LOG_LEVELS)}, got {self.log_level}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def create_db_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine for the configured database.

    In-memory SQLite gets a single shared connection so every request sees
    the same database.
    """
    if settings.is_in_memory_sqlite:
        return create_engine(
            settings.database_url,
            echo=settings.db_echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_engine(
        settings.database_url,
        echo=settings.db_echo,
        pool_pre_ping=True,
    )

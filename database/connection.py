"""Database connection utilities for the product catalog."""

import os
from typing import Optional
from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, Session
from pydantic_settings import BaseSettings


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_db: str = "storefront_db"

    # Full SQLAlchemy URL; takes precedence over the postgres_* fields (e.g. sqlite:///shop.db)
    database_url: Optional[str] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra fields from .env that are not database-related

    @property
    def connection_string(self) -> str:
        if self.database_url:
            return self.database_url
        return (
            f"postgresql://{self.postgres_user}:"
            f"{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/"
            f"{self.postgres_db}"
        )


class DatabaseManager:
    """Manages the SQL connection used by the catalog."""

    def __init__(self, settings: Optional[DatabaseSettings] = None):
        """Initialize database manager.

        Args:
            settings: Database settings, defaults to loading from environment
        """
        self.settings = settings or DatabaseSettings()
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    def connect(self) -> Engine:
        """Connect to the database.

        Returns:
            SQLAlchemy engine
        """
        if self._engine is None:
            # Enable SQL query logging if DEBUG is enabled
            echo = os.getenv("DEBUG", "false").lower() in ("true", "1", "yes")
            self._engine = create_engine(self.settings.connection_string, echo=echo)
        return self._engine

    def get_session(self) -> Session:
        """Open a new session bound to the managed engine.

        Returns:
            SQLAlchemy session
        """
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                autocommit=False, autoflush=False, bind=self.connect()
            )
        return self._session_factory()

    def close_all(self) -> None:
        """Dispose of the engine and its pooled connections."""
        if self._engine:
            self._engine.dispose()
        self._engine = None
        self._session_factory = None


# Global database manager instance
db_manager = DatabaseManager()

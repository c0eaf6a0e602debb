"""Catalog schema initialization and utilities."""

from typing import Optional
from sqlalchemy import Engine, inspect
from database.postgres.models import Base
from database.postgres.client import get_default_postgres_engine


def create_all_tables(engine: Optional[Engine] = None) -> None:
    """Create the catalog tables that do not exist yet.

    Args:
        engine: SQLAlchemy engine (uses default if not provided)

    Example:
        ```python
        from database.postgres import create_all_tables

        create_all_tables()
        ```
    """
    Base.metadata.create_all(bind=engine or get_default_postgres_engine())


def drop_all_tables(engine: Optional[Engine] = None) -> None:
    """Drop the catalog tables.

    Warning: This will delete all products!

    Args:
        engine: SQLAlchemy engine (uses default if not provided)
    """
    Base.metadata.drop_all(bind=engine or get_default_postgres_engine())


def recreate_all_tables(engine: Optional[Engine] = None) -> None:
    """Drop and recreate the catalog tables.

    Warning: This will delete all products!

    Args:
        engine: SQLAlchemy engine (uses default if not provided)
    """
    engine = engine or get_default_postgres_engine()
    drop_all_tables(engine)
    create_all_tables(engine)


def list_tables(engine: Optional[Engine] = None) -> list[str]:
    """Return the table names present in the database."""
    return sorted(inspect(engine or get_default_postgres_engine()).get_table_names())

"""SQL client utilities."""

from typing import Optional
from sqlalchemy import Engine
from sqlalchemy.orm import sessionmaker, Session
from database.connection import db_manager


def get_postgres_session(
    engine: Optional[Engine] = None,
) -> Session:
    """Get a database session.

    Args:
        engine: SQLAlchemy engine (uses default if not provided)

    Returns:
        SQLAlchemy Session instance

    Example:
        ```python
        session = get_postgres_session()
        products = session.query(ProductRecord).all()
        ```
    """
    if engine is None:
        return db_manager.get_session()

    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    return SessionLocal()


def get_default_postgres_engine() -> Engine:
    """Get the default engine from database manager.

    Returns:
        Default SQLAlchemy engine
    """
    return db_manager.connect()

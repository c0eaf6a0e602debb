"""SQL schema for the product catalog."""

from database.postgres.models import Base, ProductRecord
from database.postgres.client import (
    get_postgres_session,
    get_default_postgres_engine,
)
from database.postgres.schema import create_all_tables, drop_all_tables, recreate_all_tables

__all__ = [
    "Base",
    "ProductRecord",
    "get_postgres_session",
    "get_default_postgres_engine",
    "create_all_tables",
    "drop_all_tables",
    "recreate_all_tables",
]

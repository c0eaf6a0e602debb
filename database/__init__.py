"""Database package: connection, schema and product sources."""

from database.connection import DatabaseManager, DatabaseSettings, db_manager
from database.catalog_adapter import (
    ProductSource,
    InMemoryProductStore,
    SqlProductSource,
    record_to_product,
    product_to_record,
)

__all__ = [
    "DatabaseManager",
    "DatabaseSettings",
    "db_manager",
    "ProductSource",
    "InMemoryProductStore",
    "SqlProductSource",
    "record_to_product",
    "product_to_record",
]

"""Product sources for the catalog.

A source only fetches raw products. Filtering and sorting happen once, in
catalog.engine, whatever the backing store is.

- InMemoryProductStore: owned in-memory collection (mock data, tests)
- SqlProductSource: SQLAlchemy-backed products table
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Protocol, runtime_checkable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.errors import ProductSourceError
from catalog.models import Product
from database.postgres.client import get_postgres_session
from database.postgres.models import ProductRecord

logger = logging.getLogger(__name__)


@runtime_checkable
class ProductSource(Protocol):
    """Anything that can hand the catalog its full product collection."""

    def fetch_all(self) -> List[Product]: ...

    def fetch_by_id(self, product_id: int) -> Optional[Product]: ...


class InMemoryProductStore:
    """Products held in memory, in insertion order.

    The store keeps its own list: later changes to the iterable passed in do
    not leak into it, and fetch_all hands out a copy.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: List[Product] = list(products or [])

    def fetch_all(self) -> List[Product]:
        return list(self._products)

    def fetch_by_id(self, product_id: int) -> Optional[Product]:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def add(self, product: Product) -> None:
        """Append a product, replacing any existing one with the same id in place."""
        for i, existing in enumerate(self._products):
            if existing.id == product.id:
                self._products[i] = product
                return
        self._products.append(product)

    def remove(self, product_id: int) -> bool:
        """Remove a product. Returns False if it was not there."""
        before = len(self._products)
        self._products = [p for p in self._products if p.id != product_id]
        return len(self._products) < before

    def clear(self) -> None:
        self._products = []

    def __len__(self) -> int:
        return len(self._products)


def record_to_product(row: ProductRecord) -> Product:
    """Map a products table row to the catalog model."""
    return Product(
        id=row.id,
        name=row.name,
        brand=row.brand or "",
        category=row.category or "",
        sub_category=row.sub_category,
        description=row.description,
        price=row.price,
        discounted_price=row.discounted_price,
        sizes=row.sizes,
        colors=row.colors,
        stock=row.stock or 0,
        is_new=bool(row.is_new),
        is_featured=bool(row.is_featured),
        rating=row.rating or 0.0,
        review_count=row.review_count or 0,
        popularity_score=row.popularity_score or 0.0,
        images=row.images,
    )


def product_to_record(product: Product) -> ProductRecord:
    """Map a catalog product to a new products table row."""
    return ProductRecord(
        id=product.id,
        name=product.name,
        brand=product.brand,
        category=product.category,
        sub_category=product.sub_category,
        description=product.description,
        price=product.price,
        discounted_price=product.discounted_price,
        sizes=list(product.sizes),
        colors=list(product.colors),
        stock=product.stock,
        is_new=product.is_new,
        is_featured=product.is_featured,
        rating=product.rating,
        review_count=product.review_count,
        popularity_score=product.popularity_score,
        images=list(product.images),
    )


class SqlProductSource:
    """Products read from the SQL products table, ordered by id."""

    def __init__(self, session_factory: Callable[[], Session] = get_postgres_session):
        """Initialize the source.

        Args:
            session_factory: Callable returning a new SQLAlchemy session
        """
        self._session_factory = session_factory

    def fetch_all(self) -> List[Product]:
        db = self._session_factory()
        try:
            rows = db.query(ProductRecord).order_by(ProductRecord.id.asc()).all()
            return [record_to_product(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error("Error fetching products: %s", e)
            raise ProductSourceError(f"Error fetching products: {e}") from e
        finally:
            db.close()

    def fetch_by_id(self, product_id: int) -> Optional[Product]:
        db = self._session_factory()
        try:
            row = db.get(ProductRecord, product_id)
            return record_to_product(row) if row is not None else None
        except SQLAlchemyError as e:
            logger.error("Error fetching product with ID %s: %s", product_id, e)
            raise ProductSourceError(f"Error fetching product with ID {product_id}: {e}") from e
        finally:
            db.close()

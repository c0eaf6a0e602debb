"""Shared fixtures for catalog tests."""

from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from catalog.models import Product
from database.postgres.schema import create_all_tables


def make_product(id: int, price, discounted_price=None, **kwargs) -> Product:
    """Build a product with sensible defaults for whatever the test does not care about."""
    data = {
        "name": f"Product {id}",
        "brand": "Acme",
        "category": "Clothing",
    }
    data.update(kwargs)
    return Product(
        id=id,
        price=Decimal(str(price)),
        discounted_price=Decimal(str(discounted_price)) if discounted_price is not None else None,
        **data,
    )


@pytest.fixture
def products():
    return [
        make_product(1, 100, 80, name="Cotton Tee", brand="Urban", category="Clothing",
                     sizes=["S", "M"], colors=["White"], popularity_score=10, review_count=5),
        make_product(2, 30, name="Wool Socks", brand="Warmfeet", category="Accessories",
                     sizes=["M", "L"], colors=["Grey", "Black"], popularity_score=50),
        make_product(3, 200, 150, name="Runner Shoes", brand="Stride", category="Footwear",
                     sizes=["9", "10"], colors=["Black"], popularity_score=50, review_count=40),
        make_product(4, 60, name="Canvas Tote", brand="Urban", category="Accessories",
                     popularity_score=5),
        make_product(5, 100, 75, name="Denim Jacket", brand="DenimCo", category="Clothing",
                     sizes=["L"], colors=["Blue"], popularity_score=20),
    ]


@pytest.fixture
def sqlite_session_factory(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'catalog.db'}")
    create_all_tables(engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    engine.dispose()


@pytest.fixture
def product_factory():
    return make_product

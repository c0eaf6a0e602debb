"""Mock product dataset and database seeding for local development.

The same dataset backs the in-memory catalog (CATALOG_BACKEND=memory) and can
be written to the SQL products table:

Run (using uv):
    uv run python seed_mock_data.py

Prereqs:
- Database reachable (DATABASE_URL or POSTGRES_* settings)
- Tables created (uv run python init_db.py)
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.models import Product
from database.catalog_adapter import InMemoryProductStore, product_to_record
from database.postgres.client import get_postgres_session
from database.postgres.models import ProductRecord


MOCK_PRODUCTS: List[dict] = [
    {
        "id": 1,
        "name": "Classic Cotton Crew T-Shirt",
        "brand": "Urban Basics",
        "category": "Clothing",
        "sub_category": "T-Shirts",
        "price": Decimal("799"),
        "discounted_price": Decimal("599"),
        "sizes": ["S", "M", "L", "XL"],
        "colors": ["White", "Black", "Navy"],
        "stock": 120,
        "is_featured": True,
        "rating": 4.3,
        "review_count": 214,
        "popularity_score": 87.5,
        "description": "Soft combed cotton tee with a regular fit.",
    },
    {
        "id": 2,
        "name": "Slim Fit Stretch Jeans",
        "brand": "DenimCo",
        "category": "Clothing",
        "sub_category": "Jeans",
        "price": Decimal("2499"),
        "discounted_price": Decimal("1874"),
        "sizes": ["30", "32", "34", "36"],
        "colors": ["Blue", "Black"],
        "stock": 64,
        "is_featured": True,
        "rating": 4.1,
        "review_count": 158,
        "popularity_score": 76.0,
        "description": "Mid-rise slim jeans with a touch of stretch.",
    },
    {
        "id": 3,
        "name": "Everyday Running Shoes",
        "brand": "StrideMax",
        "category": "Footwear",
        "sub_category": "Sneakers",
        "price": Decimal("3999"),
        "discounted_price": None,
        "sizes": ["7", "8", "9", "10", "11"],
        "colors": ["Grey", "Black"],
        "stock": 40,
        "is_featured": True,
        "rating": 4.6,
        "review_count": 342,
        "popularity_score": 94.2,
        "description": "Lightweight cushioned trainers for daily runs.",
    },
    {
        "id": 4,
        "name": "Leather Chelsea Boots",
        "brand": "Heritage & Co",
        "category": "Footwear",
        "sub_category": "Boots",
        "price": Decimal("6499"),
        "discounted_price": Decimal("4549"),
        "sizes": ["7", "8", "9", "10"],
        "colors": ["Brown", "Black"],
        "stock": 18,
        "rating": 4.4,
        "review_count": 87,
        "popularity_score": 61.3,
        "description": "Full-grain leather boots with elastic side panels.",
    },
    {
        "id": 5,
        "name": "Canvas Tote Bag",
        "brand": "Urban Basics",
        "category": "Accessories",
        "sub_category": "Bags",
        "price": Decimal("999"),
        "discounted_price": None,
        "sizes": [],
        "colors": ["Beige", "Olive"],
        "stock": 75,
        "rating": 4.0,
        "review_count": 46,
        "popularity_score": 38.9,
        "description": "Roomy tote with inner zip pocket.",
    },
    {
        "id": 6,
        "name": "Oversized Hoodie",
        "brand": "Northline",
        "category": "Clothing",
        "sub_category": "Sweatshirts",
        "price": Decimal("1999"),
        "discounted_price": Decimal("1499"),
        "sizes": ["M", "L", "XL"],
        "colors": ["Grey", "Olive", "Black"],
        "stock": 52,
        "is_new": True,
        "rating": 4.5,
        "review_count": 129,
        "popularity_score": 82.1,
        "description": "Brushed fleece hoodie with a relaxed silhouette.",
    },
    {
        "id": 7,
        "name": "Aviator Sunglasses",
        "brand": "Solaris",
        "category": "Accessories",
        "sub_category": "Eyewear",
        "price": Decimal("2999"),
        "discounted_price": Decimal("1499"),
        "sizes": [],
        "colors": ["Gold", "Silver"],
        "stock": 33,
        "rating": 4.2,
        "review_count": 64,
        "popularity_score": 55.0,
        "description": "Polarised lenses with a metal frame.",
    },
    {
        "id": 8,
        "name": "Linen Button-Down Shirt",
        "brand": "Northline",
        "category": "Clothing",
        "sub_category": "Shirts",
        "price": Decimal("1799"),
        "discounted_price": None,
        "sizes": ["S", "M", "L"],
        "colors": ["White", "Sky Blue"],
        "stock": 27,
        "is_new": True,
        "rating": 3.9,
        "review_count": 31,
        "popularity_score": 29.4,
        "description": "Breathable linen shirt for warm days.",
    },
    {
        "id": 9,
        "name": "Trail Hiking Sandals",
        "brand": "StrideMax",
        "category": "Footwear",
        "sub_category": "Sandals",
        "price": Decimal("2299"),
        "discounted_price": Decimal("1839"),
        "sizes": ["6", "7", "8", "9", "10"],
        "colors": ["Olive", "Black"],
        "stock": 22,
        "is_new": True,
        "rating": 4.0,
        "review_count": 19,
        "popularity_score": 33.7,
        "description": "Adjustable straps and a grippy outsole.",
    },
    {
        "id": 10,
        "name": "Minimalist Leather Wallet",
        "brand": "Heritage & Co",
        "category": "Accessories",
        "sub_category": "Wallets",
        "price": Decimal("1299"),
        "discounted_price": None,
        "sizes": [],
        "colors": ["Brown", "Black", "Tan"],
        "stock": 90,
        "is_new": True,
        "rating": 4.7,
        "review_count": 203,
        "popularity_score": 71.8,
        "description": "Slim bifold wallet with RFID lining.",
    },
]


def load_mock_products() -> List[Product]:
    """Return fresh Product objects for the mock dataset."""
    return [Product(**data) for data in MOCK_PRODUCTS]


def build_mock_store() -> InMemoryProductStore:
    """Create an in-memory store holding the mock dataset."""
    return InMemoryProductStore(load_mock_products())


def seed_products(db: Session, products: Iterable[Product]) -> int:
    """Replace the products table contents with the given products.

    Returns:
        Number of products written
    """
    # Delete and inserts commit together
    try:
        db.query(ProductRecord).delete(synchronize_session=False)
        db.expunge_all()
        count = 0
        for product in products:
            db.add(product_to_record(product))
            count += 1
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    return count


def main() -> None:
    db = get_postgres_session()
    try:
        count = seed_products(db, load_mock_products())
        print(f"✅ Seeded {count} mock products")
    finally:
        db.close()


if __name__ == "__main__":
    main()

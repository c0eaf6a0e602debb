"""SQLAlchemy models for the catalog schema."""

from datetime import datetime
from sqlalchemy import (
    Boolean,
    Column,
    Float,
    Integer,
    Numeric,
    Text,
    DateTime,
    JSON,
)
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class ProductRecord(Base):
    """Product model - stores the products offered by the storefront."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True, comment="Product ID")
    name = Column(Text, nullable=False, comment="Product name")
    brand = Column(Text, nullable=False, default="", comment="Brand name")
    category = Column(Text, nullable=False, default="", index=True, comment="Top-level category")
    sub_category = Column(Text, nullable=True, comment="Sub category")
    description = Column(Text, nullable=True, comment="Product description")
    price = Column(Numeric(10, 2), nullable=False, comment="List price")
    discounted_price = Column(Numeric(10, 2), nullable=True, comment="Sale price if discounted")
    sizes = Column(JSON, nullable=True, comment="Available sizes")
    colors = Column(JSON, nullable=True, comment="Available colors")
    stock = Column(Integer, nullable=False, default=0, comment="Stock quantity")
    is_new = Column(Boolean, nullable=False, default=False, comment="New arrival flag")
    is_featured = Column(Boolean, nullable=False, default=False, comment="Featured flag")
    rating = Column(Float, nullable=False, default=0.0, comment="Average rating (0-5)")
    review_count = Column(Integer, nullable=False, default=0, comment="Number of reviews")
    popularity_score = Column(Float, nullable=False, default=0.0, comment="Popularity metric")
    images = Column(JSON, nullable=True, comment="Image URLs")
    date_added = Column(
        DateTime, nullable=False, default=datetime.utcnow, comment="Creation timestamp"
    )

    def __repr__(self):
        return f"<ProductRecord(id={self.id}, name={self.name}, category={self.category})>"

"""Pydantic models for catalog products and queries."""

from decimal import Decimal
from enum import Enum
from typing import Optional, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from config import DEFAULT_PRICE_MAX, DEFAULT_PRICE_MIN


class Product(BaseModel):
    """A product as held in the catalog. Read-only once loaded."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(description="Unique product identifier")
    name: str = Field(description="Product name")
    brand: str = Field(default="", description="Brand name")
    category: str = Field(default="", description="Top-level category")
    sub_category: Optional[str] = Field(None, alias="subCategory", description="Sub category")
    description: Optional[str] = Field(None, description="Product description")
    price: Decimal = Field(gt=0, description="List price")
    discounted_price: Optional[Decimal] = Field(
        None, alias="discountedPrice", description="Selling price when on sale"
    )
    sizes: List[str] = Field(default_factory=list, description="Available sizes")
    colors: List[str] = Field(default_factory=list, description="Available colors")
    stock: int = Field(default=0, ge=0, description="Units in stock")
    is_new: bool = Field(default=False, alias="isNew", description="New arrival flag")
    is_featured: bool = Field(default=False, alias="isFeatured", description="Featured flag")
    rating: float = Field(default=0.0, ge=0.0, le=5.0, description="Average rating (0-5)")
    review_count: int = Field(default=0, ge=0, alias="reviewCount", description="Number of reviews")
    popularity_score: float = Field(
        default=0.0, ge=0.0, alias="popularityScore", description="Popularity metric used for sorting"
    )
    images: List[str] = Field(default_factory=list, description="Image URLs")

    @field_validator("sizes", "colors", "images", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return [] if value is None else value

    @model_validator(mode="after")
    def check_discounted_price(self) -> "Product":
        if self.discounted_price is not None and self.discounted_price > self.price:
            raise ValueError("discounted_price must not exceed price")
        return self


class PriceRange(BaseModel):
    """Inclusive price bounds. ``min > max`` is accepted and matches nothing."""

    model_config = ConfigDict(frozen=True)

    min: Decimal = Field(default=Decimal(DEFAULT_PRICE_MIN), description="Lower bound")
    max: Decimal = Field(default=Decimal(DEFAULT_PRICE_MAX), description="Upper bound")


class CatalogQuery(BaseModel):
    """Filter criteria. Empty or missing criteria impose no restriction."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    search: Optional[str] = Field(None, description="Free-text search")
    categories: List[str] = Field(default_factory=list, description="Allowed categories")
    brands: List[str] = Field(default_factory=list, description="Allowed brands")
    sizes: List[str] = Field(default_factory=list, description="Allowed sizes (any match)")
    colors: List[str] = Field(default_factory=list, description="Allowed colors (any match)")
    price_range: Optional[PriceRange] = Field(
        None, alias="priceRange", description="Effective price bounds"
    )
    discount: Optional[float] = Field(None, description="Minimum discount percentage")

    @field_validator("categories", "brands", "sizes", "colors", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return [] if value is None else value


class SortKey(str, Enum):
    """Result orderings offered by the storefront."""

    FEATURED = "featured"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    NEWEST = "newest"
    DISCOUNT = "discount"
    POPULARITY = "popularity"

    @classmethod
    def parse(cls, value) -> "SortKey":
        """Return the matching key, falling back to FEATURED for anything unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.FEATURED


class Facets(BaseModel):
    """Values available for the filter UI."""

    categories: List[str] = Field(default_factory=list)
    brands: List[str] = Field(default_factory=list)
    sizes: List[str] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list)
    min_price: Optional[Decimal] = Field(None, description="Lowest effective price")
    max_price: Optional[Decimal] = Field(None, description="Highest effective price")


class CartTotals(BaseModel):
    """Totals shown on the cart page."""

    subtotal: Decimal = Field(description="Sum of effective price times quantity")
    savings: Decimal = Field(description="Amount saved through discounts")
    item_count: int = Field(description="Total number of units")

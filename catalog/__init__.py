"""Storefront product catalog: models, pricing and the query engine."""

from catalog.models import (
    Product,
    PriceRange,
    CatalogQuery,
    SortKey,
    Facets,
    CartTotals,
)
from catalog.pricing import effective_price, discount_percentage, cart_totals
from catalog.engine import query_products, matches, sort_products
from catalog.facets import collect_facets
from catalog.errors import (
    CatalogError,
    ValidationError,
    ProductNotFoundError,
    ProductSourceError,
)

__all__ = [
    "Product",
    "PriceRange",
    "CatalogQuery",
    "SortKey",
    "Facets",
    "CartTotals",
    "effective_price",
    "discount_percentage",
    "cart_totals",
    "query_products",
    "matches",
    "sort_products",
    "collect_facets",
    "CatalogError",
    "ValidationError",
    "ProductNotFoundError",
    "ProductSourceError",
]

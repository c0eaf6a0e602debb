"""Catalog query engine: filter, sort and truncate an in-memory product collection.

The engine is a pure function of its inputs. It never mutates the products it
is given and always returns a new list.
"""

from typing import Iterable, List, Optional, Union

from catalog.models import CatalogQuery, Product, SortKey
from catalog.pricing import discount_percentage, effective_price


def _matches_search(product: Product, needle: str) -> bool:
    return any(needle in (value or "").lower() for value in (product.name, product.brand, product.category))


def _overlaps(values: List[str], allowed: List[str]) -> bool:
    return bool(values) and not set(values).isdisjoint(allowed)


def matches(product: Product, filters: CatalogQuery) -> bool:
    """Return True if the product satisfies every active criterion.

    Criteria combine with AND. Within the size and color facets any single
    shared value is enough.
    """
    needle = (filters.search or "").lower()
    if needle.strip() and not _matches_search(product, needle):
        return False

    if filters.categories and product.category not in filters.categories:
        return False
    if filters.brands and product.brand not in filters.brands:
        return False
    if filters.sizes and not _overlaps(product.sizes, filters.sizes):
        return False
    if filters.colors and not _overlaps(product.colors, filters.colors):
        return False

    if filters.price_range is not None:
        price = effective_price(product)
        if price < filters.price_range.min or price > filters.price_range.max:
            return False

    if filters.discount:
        percent = discount_percentage(product)
        if percent is None or percent < filters.discount:
            return False

    return True


def sort_products(products: Iterable[Product], sort_by: Union[SortKey, str, None]) -> List[Product]:
    """Return a new list ordered by ``sort_by``. Ties keep their input order."""
    key = SortKey.parse(sort_by)
    items = list(products)

    if key is SortKey.PRICE_LOW:
        return sorted(items, key=effective_price)
    if key is SortKey.PRICE_HIGH:
        return sorted(items, key=effective_price, reverse=True)
    if key is SortKey.NEWEST:
        return sorted(items, key=lambda p: p.id, reverse=True)
    if key is SortKey.DISCOUNT:
        return sorted(items, key=lambda p: discount_percentage(p) or 0, reverse=True)
    if key is SortKey.POPULARITY:
        return sorted(
            items,
            key=lambda p: (p.popularity_score, p.review_count, p.rating),
            reverse=True,
        )
    # featured: keep catalog order
    return items


def query_products(
    products: Optional[Iterable[Product]],
    filters: Optional[CatalogQuery] = None,
    sort_by: Union[SortKey, str, None] = SortKey.FEATURED,
    limit: Optional[int] = None,
) -> List[Product]:
    """Filter, sort and truncate a product collection.

    Args:
        products: Full product collection (None is treated as empty)
        filters: Filter criteria, defaults to no restriction
        sort_by: Sort key; unknown keys leave the order unchanged
        limit: Maximum number of results; None or non-positive means unlimited

    Returns:
        New list of matching products in display order
    """
    if not products:
        return []

    filters = filters or CatalogQuery()
    filtered = [p for p in products if matches(p, filters)]
    ordered = sort_products(filtered, sort_by)

    if limit is not None and limit > 0:
        ordered = ordered[:limit]
    return ordered

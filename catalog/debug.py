"""Debug utilities for catalog queries."""

import os
from typing import List, Optional

from catalog.models import CatalogQuery, Facets, Product
from catalog.pricing import discount_percentage, effective_price


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled.

    Returns:
        True if DEBUG environment variable is set to 'true' or '1'
    """
    debug = os.getenv("DEBUG", "false").lower()
    return debug in ("true", "1", "yes")


def print_query_summary(
    filters: Optional[CatalogQuery],
    sort_by: str,
    limit: Optional[int],
    total: int,
    results: List[Product],
) -> None:
    """Print a catalog query and its results in a formatted way.

    Args:
        filters: Query that was applied
        sort_by: Sort key that was applied
        limit: Result limit (None for unlimited)
        total: Size of the collection before filtering
        results: Products returned by the engine
    """
    if not is_debug_enabled():
        return

    print("\n" + "=" * 80)
    print("🛍️  CATALOG QUERY")
    print("=" * 80)
    active = filters.model_dump(exclude_defaults=True) if filters else {}
    print(f"Filters:   {active or '(none)'}")
    print(f"Sort by:   {sort_by}")
    print(f"Limit:     {limit if limit else 'unlimited'}")
    print(f"Matched:   {len(results)} / {total}")

    for product in results[:10]:
        percent = discount_percentage(product)
        badge = f" (-{percent}%)" if percent else ""
        print(f"  #{product.id:<5} {product.name[:40]:40s} {effective_price(product):>10}{badge}")
    if len(results) > 10:
        print(f"  ... {len(results) - 10} more")

    print("=" * 80 + "\n")


def print_facets(facets: Facets) -> None:
    """Print available facet values.

    Args:
        facets: Facets to print
    """
    if not is_debug_enabled():
        return

    print("\n" + "=" * 80)
    print("🔎 CATALOG FACETS")
    print("=" * 80)
    print(f"Categories:  {', '.join(facets.categories) or '(none)'}")
    print(f"Brands:      {', '.join(facets.brands) or '(none)'}")
    print(f"Sizes:       {', '.join(facets.sizes) or '(none)'}")
    print(f"Colors:      {', '.join(facets.colors) or '(none)'}")
    print(f"Price range: {facets.min_price} - {facets.max_price}")
    print("=" * 80 + "\n")

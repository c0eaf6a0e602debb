"""Facet discovery for the filter sidebar."""

from typing import Iterable

from catalog.models import Facets, Product
from catalog.pricing import effective_price


def collect_facets(products: Iterable[Product]) -> Facets:
    """Collect the distinct facet values and the effective price bounds of a collection."""
    categories, brands, sizes, colors = set(), set(), set(), set()
    prices = []

    for product in products:
        if product.category:
            categories.add(product.category)
        if product.brand:
            brands.add(product.brand)
        sizes.update(product.sizes)
        colors.update(product.colors)
        prices.append(effective_price(product))

    return Facets(
        categories=sorted(categories),
        brands=sorted(brands),
        sizes=sorted(sizes),
        colors=sorted(colors),
        min_price=min(prices) if prices else None,
        max_price=max(prices) if prices else None,
    )

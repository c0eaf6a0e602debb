"""Product service - serves catalog listings from a product source."""

import asyncio
import logging
from typing import List, Optional, Union

from catalog.debug import print_facets, print_query_summary
from catalog.engine import query_products
from catalog.errors import ProductNotFoundError, ProductSourceError
from catalog.facets import collect_facets
from catalog.models import CatalogQuery, Facets, Product, SortKey
from config import SIMULATED_DELAY_MS, USE_DB_CATALOG
from database.catalog_adapter import ProductSource, SqlProductSource
from seed_mock_data import build_mock_store

logger = logging.getLogger(__name__)


class ProductService:
    """Combines a product source with the query engine."""

    def __init__(self, source: ProductSource, simulated_delay: Optional[float] = None):
        """Initialize the service.

        Args:
            source: Where products come from (in-memory store or SQL table)
            simulated_delay: Seconds to wait before each call, emulating a network
                round trip (defaults to SIMULATED_DELAY_MS)
        """
        self.source = source
        self.simulated_delay = (
            SIMULATED_DELAY_MS / 1000 if simulated_delay is None else simulated_delay
        )

    async def _delay(self) -> None:
        if self.simulated_delay > 0:
            await asyncio.sleep(self.simulated_delay)

    async def get_products(
        self,
        filters: Optional[CatalogQuery] = None,
        sort_by: Union[SortKey, str] = SortKey.FEATURED,
        limit: Optional[int] = None,
    ) -> List[Product]:
        """List products matching the filters, in display order.

        A failing source yields an empty list so the storefront can render its
        empty state instead of an error page.
        """
        await self._delay()
        try:
            products = self.source.fetch_all()
        except ProductSourceError as e:
            logger.error("Error fetching products: %s", e)
            return []

        results = query_products(products, filters, sort_by, limit)
        logger.debug("Catalog query matched %d of %d products", len(results), len(products))
        print_query_summary(filters, SortKey.parse(sort_by).value, limit, len(products), results)
        return results

    async def get_product_by_id(self, product_id: int) -> Product:
        """Return a single product.

        Raises:
            ProductNotFoundError: if no product has this id
            ProductSourceError: if the source could not be read
        """
        await self._delay()
        product = self.source.fetch_by_id(product_id)
        if product is None:
            logger.warning("Product not found: %s", product_id)
            raise ProductNotFoundError(product_id)
        return product

    async def get_facets(self) -> Facets:
        """Facet values for the whole collection. Empty facets if the source fails."""
        await self._delay()
        try:
            products = self.source.fetch_all()
        except ProductSourceError as e:
            logger.error("Error fetching facets: %s", e)
            return Facets()

        facets = collect_facets(products)
        print_facets(facets)
        return facets


def build_product_service(
    use_db_catalog: bool = USE_DB_CATALOG,
    simulated_delay: Optional[float] = None,
) -> ProductService:
    """Create a ProductService backed by the configured source.

    Args:
        use_db_catalog: Read from the SQL products table instead of the mock dataset
        simulated_delay: Override for the artificial latency, in seconds
    """
    if use_db_catalog:
        source: ProductSource = SqlProductSource()
    else:
        source = build_mock_store()
    return ProductService(source, simulated_delay=simulated_delay)

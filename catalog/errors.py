"""Custom errors for the catalog.

Raised by services and adapters. The query engine itself raises none of them.
"""


class CatalogError(Exception):
    """Generic catalog error."""

    pass


class ValidationError(CatalogError):
    """Missing or invalid caller input (e.g. a cart line with zero quantity)."""

    pass


class ProductNotFoundError(CatalogError):
    """No product with the requested id."""

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product not found: {product_id}")


class ProductSourceError(CatalogError):
    """The backing product store could not be read."""

    pass

"""Storefront services."""

from services.product_service import ProductService, build_product_service

__all__ = ["ProductService", "build_product_service"]

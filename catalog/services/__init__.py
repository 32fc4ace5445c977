"""Catalog services."""

from .product_service import ProductService

__all__ = ['ProductService']

"""Catalog record types."""

from .product import Product, ProductField, ProductStatus

__all__ = [
    'Product',
    'ProductField',
    'ProductStatus'
]

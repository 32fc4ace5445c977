"""Catalog product validation and persistence package."""

from .models import Product, ProductField, ProductStatus
from .processors import Violation, is_valid, validate_product
from .services import ProductService
from .db.repository import InMemoryProductRepository, ProductRepository, SqlProductRepository

__all__ = [
    'Product',
    'ProductField',
    'ProductStatus',
    'Violation',
    'is_valid',
    'validate_product',
    'ProductService',
    'ProductRepository',
    'InMemoryProductRepository',
    'SqlProductRepository'
]

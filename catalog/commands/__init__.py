"""Commands available from the catalog CLI."""

from .validate import ValidateProductsCommand
from .import_products import ImportProductsCommand
from .utils import TestConnectionCommand

__all__ = [
    'ValidateProductsCommand',
    'ImportProductsCommand',
    'TestConnectionCommand'
]

"""Save façade for catalog products."""

import logging

from ..db.repository import ProductRepository
from ..models import Product

class ProductService:
    """Hand products to the storage collaborator.

    The service does not validate. Callers run
    ``processors.validator.validate_product`` first and only save records
    that come back without violations.
    """

    def __init__(self, repository: ProductRepository):
        self.repository = repository
        self.logger = logging.getLogger(self.__class__.__name__)

    def save(self, product: Product) -> Product:
        """Store a product.

        Args:
            product: Product that already passed validation

        Returns:
            Whatever the repository returned, unchanged

        Raises:
            Any error raised by the repository
        """
        self.logger.debug(f"Saving product: {product.title}")
        return self.repository.save(product)

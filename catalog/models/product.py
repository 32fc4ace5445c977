"""Product record definition."""

import enum
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

class ProductStatus(enum.Enum):
    """Product status enum."""
    IN_STOCK = 'IN_STOCK'
    OUT_OF_STOCK = 'OUT_OF_STOCK'
    PREORDER = 'PREORDER'
    DISCONTINUED = 'DISCONTINUED'

class ProductField(str, enum.Enum):
    """Field names as reported in violations and CSV headers."""
    ID = 'id'
    TITLE = 'title'
    KEYWORDS = 'keywords'
    DESCRIPTION = 'description'
    RATING = 'rating'
    QUANTITY_IN_STOCK = 'quantityInStock'
    DIMENSIONS = 'dimensions'
    PRICE = 'price'
    STATUS = 'status'
    WEIGHT = 'weight'
    DATE_ADDED = 'dateAdded'

    def __str__(self) -> str:
        return self.value

    @property
    def attribute(self) -> str:
        """Name of the matching attribute on Product."""
        return _ATTRIBUTES[self]

_ATTRIBUTES = {
    ProductField.ID: 'id',
    ProductField.TITLE: 'title',
    ProductField.KEYWORDS: 'keywords',
    ProductField.DESCRIPTION: 'description',
    ProductField.RATING: 'rating',
    ProductField.QUANTITY_IN_STOCK: 'quantity_in_stock',
    ProductField.DIMENSIONS: 'dimensions',
    ProductField.PRICE: 'price',
    ProductField.STATUS: 'status',
    ProductField.WEIGHT: 'weight',
    ProductField.DATE_ADDED: 'date_added',
}

@dataclass(frozen=True)
class Product:
    """Catalog product candidate or stored record.

    Every field defaults to None so that incomplete candidates can be
    built and handed to the validator. Equality covers all fields,
    including the storage id.
    """

    id: Optional[int] = None
    title: Optional[str] = None
    keywords: Optional[str] = None
    description: Optional[str] = None
    rating: Optional[int] = None
    quantity_in_stock: Optional[int] = None
    dimensions: Optional[str] = None
    price: Optional[Decimal] = None
    status: Optional[ProductStatus] = None
    weight: Optional[Union[Decimal, float]] = None
    date_added: Optional[datetime] = None

    def __repr__(self):
        """Return string representation."""
        return f'<Product(id={self.id}, title="{self.title}", status={self.status})>'

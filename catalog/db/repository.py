"""Product storage backends."""

from abc import ABC, abstractmethod
from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal
from itertools import count
from typing import Dict, List, Optional
import logging

from ..models import Product
from .models import ProductRecord
from .session import SessionManager

class ProductRepository(ABC):
    """Storage collaborator used by ProductService."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Store a product and return the stored record.

        Products without an id are inserted and come back with the id
        assigned by storage. Products with an id replace the stored row.
        """

    @abstractmethod
    def get(self, product_id: int) -> Optional[Product]:
        """Return the stored product with this id, or None."""

class InMemoryProductRepository(ProductRepository):
    """Dict-backed repository, mainly for tests and dry runs."""

    def __init__(self):
        self._products: Dict[int, Product] = {}
        self._ids = count(1)

    def save(self, product: Product) -> Product:
        if product.id is None:
            product = replace(product, id=next(self._ids))
        self._products[product.id] = product
        return product

    def get(self, product_id: int) -> Optional[Product]:
        return self._products.get(product_id)

    def all(self) -> List[Product]:
        return [self._products[key] for key in sorted(self._products)]

    def __len__(self) -> int:
        return len(self._products)

class SqlProductRepository(ProductRepository):
    """Repository backed by the Product table."""

    def __init__(self, session_manager: SessionManager, create_schema: bool = False):
        """Initialize repository.

        Args:
            session_manager: Database session manager
            create_schema: Create the Product table if it does not exist
        """
        self.session_manager = session_manager
        self.logger = logging.getLogger(self.__class__.__name__)
        if create_schema:
            self.create_schema()

    def create_schema(self) -> None:
        self.session_manager.create_tables()

    def save(self, product: Product) -> Product:
        """Insert or update a product in its own transaction.

        Price and weight come back rounded to the scale of their columns,
        so the returned record matches what get() reads back.

        Database errors are not caught here; the session is rolled back
        and the error reaches the caller.
        """
        with self.session_manager.session_scope() as session:
            record = _to_record(product)
            if product.id is None:
                session.add(record)
            else:
                record = session.merge(record)
            session.flush()
            product_id = record.id
        self.logger.debug(f"Saved product {product_id}: {product.title}")
        return replace(product, id=product_id, price=record.price, weight=record.weight)

    def get(self, product_id: int) -> Optional[Product]:
        with self.session_manager.session_scope() as session:
            record = session.get(ProductRecord, product_id)
            return _from_record(record) if record is not None else None

def _to_scale(value, column):
    """Round an amount to the scale of its Numeric column."""
    if value is None:
        return None
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    if not value.is_finite():
        return value
    return value.quantize(Decimal(1).scaleb(-column.type.scale), rounding=ROUND_HALF_UP)

def _to_record(product: Product) -> ProductRecord:
    return ProductRecord(
        id=product.id,
        title=product.title,
        keywords=product.keywords,
        description=product.description,
        rating=product.rating,
        quantityInStock=product.quantity_in_stock,
        dimensions=product.dimensions,
        price=_to_scale(product.price, ProductRecord.__table__.c.price),
        status=product.status,
        weight=_to_scale(product.weight, ProductRecord.__table__.c.weight),
        dateAdded=product.date_added
    )

def _from_record(record: ProductRecord) -> Product:
    return Product(
        id=record.id,
        title=record.title,
        keywords=record.keywords,
        description=record.description,
        rating=record.rating,
        quantity_in_stock=record.quantityInStock,
        dimensions=record.dimensions,
        price=record.price,
        status=record.status,
        weight=record.weight,
        date_added=record.dateAdded
    )

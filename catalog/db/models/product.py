"""Product table definition."""

from sqlalchemy import Column, DateTime, Enum, Integer, Numeric, String, Text

from ...models import ProductStatus
from .base import Base

class ProductRecord(Base):
    """Stored product row."""

    __tablename__ = 'Product'  # SQLAlchemy will handle proper quoting

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(100), nullable=False)
    keywords = Column(String(200))
    description = Column(Text)
    rating = Column(Integer)
    quantityInStock = Column(Integer, nullable=False)
    dimensions = Column(String(50))
    price = Column(Numeric(6, 2), nullable=False)
    status = Column(Enum(ProductStatus), nullable=False)
    weight = Column(Numeric(10, 2))
    dateAdded = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        """Return string representation."""
        return f'<ProductRecord(id={self.id}, title="{self.title}", status={self.status})>'

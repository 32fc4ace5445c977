"""Conversion between CSV rows and Product records."""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Mapping

import pandas as pd

from ..models import Product, ProductField, ProductStatus
from ..processors.validator import Violation
from .csv_normalization import normalize_cell

# Accepted CSV headers per field, matched after column normalization
FIELD_ALIASES: Dict[ProductField, List[str]] = {
    ProductField.ID: ['id', 'ID'],
    ProductField.TITLE: ['title', 'Title'],
    ProductField.KEYWORDS: ['keywords', 'Keywords'],
    ProductField.DESCRIPTION: ['description', 'Description'],
    ProductField.RATING: ['rating', 'Rating'],
    ProductField.QUANTITY_IN_STOCK: ['quantityInStock', 'quantity_in_stock', 'Quantity In Stock'],
    ProductField.DIMENSIONS: ['dimensions', 'Dimensions'],
    ProductField.PRICE: ['price', 'Price'],
    ProductField.STATUS: ['status', 'Status'],
    ProductField.WEIGHT: ['weight', 'Weight'],
    ProductField.DATE_ADDED: ['dateAdded', 'date_added', 'Date Added'],
}

REQUIRED_FIELDS = [
    ProductField.TITLE,
    ProductField.QUANTITY_IN_STOCK,
    ProductField.PRICE,
    ProductField.STATUS,
    ProductField.DATE_ADDED,
]

class RecordParseError(ValueError):
    """Raised when a row cannot be converted into a well-typed Product."""

    def __init__(self, violations: List[Violation]):
        self.violations = violations
        details = '; '.join(f"{v.field}: {v.message}" for v in violations)
        super().__init__(f"Could not parse product row ({details})")

def resolve_columns(columns: Iterable[str]) -> Dict[ProductField, str]:
    """Map each known field to the first matching column header."""
    available = set(columns)
    mapping = {}
    for field, aliases in FIELD_ALIASES.items():
        for alias in aliases:
            if alias in available:
                mapping[field] = alias
                break
    return mapping

def _parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"not an integer: {text!r}")

def _parse_decimal(text: str) -> Decimal:
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"not a decimal number: {text!r}")
    if not value.is_finite():
        raise ValueError(f"not a finite number: {text!r}")
    return value

def _parse_status(text: str) -> ProductStatus:
    try:
        return ProductStatus[text.upper()]
    except KeyError:
        raise ValueError(
            f"unknown status {text!r}, expected one of {', '.join(ProductStatus.__members__)}"
        )

def _parse_timestamp(text: str) -> datetime:
    try:
        timestamp = pd.Timestamp(text)
    except ValueError:
        raise ValueError(f"not a valid timestamp: {text!r}")
    if pd.isna(timestamp):
        raise ValueError(f"not a valid timestamp: {text!r}")
    return timestamp.to_pydatetime()

_PARSERS = {
    ProductField.ID: _parse_int,
    ProductField.RATING: _parse_int,
    ProductField.QUANTITY_IN_STOCK: _parse_int,
    ProductField.PRICE: _parse_decimal,
    ProductField.WEIGHT: _parse_decimal,
    ProductField.STATUS: _parse_status,
    ProductField.DATE_ADDED: _parse_timestamp,
}

def parse_product_row(row: Mapping[str, Any], columns: Dict[ProductField, str]) -> Product:
    """Build a Product from one CSV row.

    Blank cells become None so the validator can report missing required
    fields. Cells that cannot be converted to the field's type are all
    collected and raised together.

    Args:
        row: Mapping of column header to raw cell value
        columns: Field to header mapping from resolve_columns

    Returns:
        Product built from the row

    Raises:
        RecordParseError: If one or more cells have the wrong type
    """
    values: Dict[str, Any] = {}
    errors: List[Violation] = []

    for field, column in columns.items():
        text = normalize_cell(row.get(column))
        if text is None:
            continue
        parser = _PARSERS.get(field)
        if parser is None:
            values[field.attribute] = text
            continue
        try:
            values[field.attribute] = parser(text)
        except ValueError as e:
            errors.append(Violation(field=field, message=str(e)))

    if errors:
        raise RecordParseError(errors)
    return Product(**values)

def product_to_dict(product: Product) -> Dict[str, Any]:
    """Return a JSON-ready mapping keyed by reported field names."""
    data: Dict[str, Any] = {}
    for field in ProductField:
        value = getattr(product, field.attribute)
        if isinstance(value, Decimal):
            value = str(value)
        elif isinstance(value, ProductStatus):
            value = value.value
        elif isinstance(value, datetime):
            value = value.isoformat()
        data[field.value] = value
    return data

def missing_required_fields(columns: Dict[ProductField, str]) -> List[ProductField]:
    """Return required fields that have no matching column."""
    return [field for field in REQUIRED_FIELDS if field not in columns]

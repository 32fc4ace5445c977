"""Field-level validation rules for catalog products."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Optional, Set, Sized, Tuple
import math

from ..models import Product, ProductField, ProductStatus

@dataclass(frozen=True)
class Violation:
    field: ProductField
    message: str

NOT_NULL = 'must not be null'

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 100
KEYWORDS_MAX_LENGTH = 200
DESCRIPTION_MIN_LENGTH = 50
DIMENSIONS_MAX_LENGTH = 50
RATING_MIN = 1
RATING_MAX = 10
QUANTITY_MIN = 0
PRICE_MIN = Decimal('1.00')
PRICE_MAX = Decimal('9999.00')
PRICE_FRACTION_DIGITS = 2
WEIGHT_MIN = Decimal('0.00')

Check = Callable[[Product], Optional[str]]

def _is_finite(value) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)

def _size_between(value: Sized, minimum: int, maximum: int) -> Optional[str]:
    if minimum <= len(value) <= maximum:
        return None
    return f'size must be between {minimum} and {maximum}'

def check_title(product: Product) -> Optional[str]:
    if product.title is None:
        return NOT_NULL
    return _size_between(product.title, TITLE_MIN_LENGTH, TITLE_MAX_LENGTH)

def check_keywords(product: Product) -> Optional[str]:
    if product.keywords is None:
        return None
    return _size_between(product.keywords, 0, KEYWORDS_MAX_LENGTH)

def check_description(product: Product) -> Optional[str]:
    if product.description is None:
        return None
    if len(product.description) < DESCRIPTION_MIN_LENGTH:
        return f'size must be greater than or equal to {DESCRIPTION_MIN_LENGTH}'
    return None

def check_rating(product: Product) -> Optional[str]:
    if product.rating is None:
        return None
    if RATING_MIN <= product.rating <= RATING_MAX:
        return None
    return f'must be between {RATING_MIN} and {RATING_MAX}'

def check_quantity_in_stock(product: Product) -> Optional[str]:
    # A missing quantity is left to storage, only negative stock is rejected here
    if product.quantity_in_stock is None:
        return None
    if product.quantity_in_stock < QUANTITY_MIN:
        return f'must be greater than or equal to {QUANTITY_MIN}'
    return None

def check_dimensions(product: Product) -> Optional[str]:
    if product.dimensions is None:
        return None
    return _size_between(product.dimensions, 0, DIMENSIONS_MAX_LENGTH)

def check_price(product: Product) -> Optional[str]:
    if product.price is None:
        return NOT_NULL
    price = product.price
    if not isinstance(price, Decimal):
        price = Decimal(str(price))
    if not (_is_finite(price) and PRICE_MIN <= price <= PRICE_MAX):
        return f'must be between {PRICE_MIN} and {PRICE_MAX}'
    if -price.as_tuple().exponent > PRICE_FRACTION_DIGITS:
        return f'must have at most {PRICE_FRACTION_DIGITS} fractional digits'
    return None

def check_status(product: Product) -> Optional[str]:
    status = product.status
    if status is None:
        return NOT_NULL
    if isinstance(status, ProductStatus) or status in ProductStatus.__members__:
        return None
    return f"must be one of {', '.join(ProductStatus.__members__)}"

def check_weight(product: Product) -> Optional[str]:
    if product.weight is None:
        return None
    if _is_finite(product.weight) and product.weight >= WEIGHT_MIN:
        return None
    return f'must be greater than or equal to {WEIGHT_MIN}'

def check_date_added(product: Product) -> Optional[str]:
    if product.date_added is None:
        return NOT_NULL
    return None

RULES: Tuple[Tuple[ProductField, Check], ...] = (
    (ProductField.TITLE, check_title),
    (ProductField.KEYWORDS, check_keywords),
    (ProductField.DESCRIPTION, check_description),
    (ProductField.RATING, check_rating),
    (ProductField.QUANTITY_IN_STOCK, check_quantity_in_stock),
    (ProductField.DIMENSIONS, check_dimensions),
    (ProductField.PRICE, check_price),
    (ProductField.STATUS, check_status),
    (ProductField.WEIGHT, check_weight),
    (ProductField.DATE_ADDED, check_date_added),
)

def validate_product(product: Product) -> Set[Violation]:
    """Check a product against every field rule.

    All rules run regardless of earlier failures, so the returned set
    holds one violation for each field that breaks its rule. An empty
    set means the product is valid.

    Args:
        product: Candidate record to check

    Returns:
        Set of violations, empty when the product is valid
    """
    violations = set()
    for field, check in RULES:
        message = check(product)
        if message is not None:
            violations.add(Violation(field=field, message=message))
    return violations

def is_valid(product: Product) -> bool:
    """Return True when the product has no violations."""
    return not validate_product(product)

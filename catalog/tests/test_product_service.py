"""Tests for the product save façade."""

from decimal import Decimal
from unittest.mock import Mock

import pytest
from sqlalchemy.exc import IntegrityError

from ..db.repository import ProductRepository
from ..processors.validator import validate_product
from ..services import ProductService
from .conftest import create_product_sample

@pytest.fixture
def repository():
    """Repository double that echoes the saved product."""
    repository = Mock(spec=ProductRepository)
    repository.save.side_effect = lambda product: product
    return repository

def test_save_returns_repository_result(repository):
    """A valid product is saved and comes back unchanged."""
    product = create_product_sample(id=1, title='NES', price=Decimal('1.00'))
    assert validate_product(product) == set()

    saved = ProductService(repository).save(product)

    assert saved == product
    repository.save.assert_called_once_with(product)

def test_save_returns_exactly_what_repository_returns(repository):
    stored = create_product_sample(id=42, title='Stored Title')
    repository.save.side_effect = None
    repository.save.return_value = stored

    result = ProductService(repository).save(create_product_sample())

    assert result is stored

def test_save_does_not_validate(repository):
    """Invalid products are still forwarded; validation is the caller's job."""
    product = create_product_sample(title='AB', price=None)

    ProductService(repository).save(product)

    repository.save.assert_called_once_with(product)

def test_one_repository_call_per_save(repository):
    service = ProductService(repository)
    for _ in range(3):
        service.save(create_product_sample())
    assert repository.save.call_count == 3

def test_repository_errors_propagate(repository):
    error = RuntimeError('storage unavailable')
    repository.save.side_effect = error

    with pytest.raises(RuntimeError) as exc_info:
        ProductService(repository).save(create_product_sample())

    assert exc_info.value is error

def test_save_assigns_id_through_memory_repository(memory_repository):
    product = create_product_sample(title='NES')

    saved = ProductService(memory_repository).save(product)

    assert saved.id == 1
    assert product.id is None
    assert memory_repository.get(1) == saved

def test_sql_constraint_errors_reach_the_caller(sql_repository):
    """A missing stock quantity passes validation but storage rejects it."""
    product = create_product_sample(quantity_in_stock=None)
    assert validate_product(product) == set()

    with pytest.raises(IntegrityError):
        ProductService(sql_repository).save(product)

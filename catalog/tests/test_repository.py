"""Tests for the product storage backends."""

from datetime import datetime
from decimal import Decimal

import pytest

from ..db.models import ProductRecord
from ..models import ProductStatus
from .conftest import create_product_sample

# SQLite does not keep timezone information
STORED_AT = datetime(2024, 5, 1, 12, 0)

def test_memory_repository_assigns_sequential_ids(memory_repository):
    first = memory_repository.save(create_product_sample(title='First'))
    second = memory_repository.save(create_product_sample(title='Second'))

    assert (first.id, second.id) == (1, 2)
    assert len(memory_repository) == 2
    assert memory_repository.all() == [first, second]

def test_memory_repository_replaces_by_id(memory_repository):
    saved = memory_repository.save(create_product_sample(title='First'))
    updated = create_product_sample(id=saved.id, title='Renamed')

    assert memory_repository.save(updated) is updated
    assert memory_repository.get(saved.id) == updated
    assert len(memory_repository) == 1

def test_memory_repository_missing_id(memory_repository):
    assert memory_repository.get(99) is None

def test_sql_repository_insert_and_get(sql_repository):
    product = create_product_sample(
        title='Super Mario Bros',
        keywords='platformer',
        description='D' * 60,
        rating=9,
        quantity_in_stock=12,
        dimensions='10x20x2',
        price=Decimal('59.99'),
        status=ProductStatus.PREORDER,
        weight=Decimal('0.25'),
        date_added=STORED_AT
    )

    saved = sql_repository.save(product)

    assert saved.id is not None
    assert product.id is None
    assert sql_repository.get(saved.id) == saved

def test_sql_repository_returns_input_with_id(sql_repository, now):
    product = create_product_sample(date_added=now)

    saved = sql_repository.save(product)

    assert saved == create_product_sample(id=saved.id, date_added=now)

def test_sql_repository_updates_existing_row(sql_repository, session_manager):
    saved = sql_repository.save(create_product_sample(date_added=STORED_AT))
    updated = create_product_sample(
        id=saved.id,
        title='New Title',
        status=ProductStatus.OUT_OF_STOCK,
        date_added=STORED_AT
    )

    assert sql_repository.save(updated) == updated
    assert sql_repository.get(saved.id) == updated
    with session_manager.session_scope() as session:
        assert session.query(ProductRecord).count() == 1

def test_sql_repository_missing_id(sql_repository):
    assert sql_repository.get(12345) is None

def test_float_weight_is_stored_as_decimal(sql_repository):
    saved = sql_repository.save(create_product_sample(weight=0.5, date_added=STORED_AT))
    assert sql_repository.get(saved.id).weight == Decimal('0.50')

def test_sql_repository_returns_amounts_as_stored(sql_repository):
    product = create_product_sample(
        price=Decimal('1.005'),
        weight=Decimal('0.004'),
        date_added=STORED_AT
    )

    saved = sql_repository.save(product)

    assert saved.price == Decimal('1.01')
    assert saved.weight == Decimal('0.00')
    assert sql_repository.get(saved.id) == saved

def test_session_scopes_can_nest(session_manager, sql_repository):
    with session_manager.session_scope() as outer:
        outer.add(ProductRecord(
            title='Outer',
            quantityInStock=0,
            price=Decimal('1.00'),
            status=ProductStatus.IN_STOCK,
            dateAdded=STORED_AT
        ))
        assert sql_repository.get(1) is None

    assert sql_repository.get(1).title == 'Outer'

def test_session_scope_rolls_back_on_error(session_manager):
    with pytest.raises(RuntimeError):
        with session_manager.session_scope() as session:
            session.add(ProductRecord(
                title='Lost',
                quantityInStock=0,
                price=Decimal('1.00'),
                status=ProductStatus.IN_STOCK,
                dateAdded=STORED_AT
            ))
            session.flush()
            raise RuntimeError('abort')

    with session_manager.session_scope() as session:
        assert session.query(ProductRecord).count() == 0

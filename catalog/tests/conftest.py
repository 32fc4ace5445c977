"""Shared test fixtures and utilities."""

import csv
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Dict, List

import pytest

from ..db.repository import InMemoryProductRepository, SqlProductRepository
from ..db.session import SessionManager
from ..models import Product, ProductStatus

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

def create_product_sample(**overrides) -> Product:
    """Build a product that passes every rule, with fields replaced as given."""
    fields = dict(
        id=None,
        title='Valid Title',
        keywords=None,
        description=None,
        rating=None,
        quantity_in_stock=0,
        dimensions=None,
        price=Decimal('1.00'),
        status=ProductStatus.IN_STOCK,
        weight=None,
        date_added=NOW
    )
    fields.update(overrides)
    return Product(**fields)

CSV_HEADER = [
    'title',
    'keywords',
    'description',
    'rating',
    'quantityInStock',
    'dimensions',
    'price',
    'status',
    'weight',
    'dateAdded'
]

def csv_row(**overrides) -> Dict[str, str]:
    """CSV row for a valid product, with cells replaced as given."""
    row = {
        'title': 'Valid Title',
        'keywords': '',
        'description': '',
        'rating': '',
        'quantityInStock': '0',
        'dimensions': '',
        'price': '1.00',
        'status': 'IN_STOCK',
        'weight': '',
        'dateAdded': '2024-05-01T12:00:00'
    }
    row.update(overrides)
    return row

def write_csv(path: Path, rows: List[Dict[str, str]], header: List[str] = None) -> Path:
    """Write rows to a CSV file and return its path."""
    header = header or CSV_HEADER
    with open(path, 'w', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=header)
        writer.writeheader()
        for row in rows:
            writer.writerow({key: row.get(key, '') for key in header})
    return path

@pytest.fixture
def now():
    return NOW

@pytest.fixture
def session_manager():
    """Session manager on a fresh in-memory SQLite database."""
    manager = SessionManager('sqlite:///:memory:')
    manager.create_tables()
    yield manager
    manager.engine.dispose()

@pytest.fixture
def sql_repository(session_manager):
    return SqlProductRepository(session_manager)

@pytest.fixture
def memory_repository():
    return InMemoryProductRepository()

ENV_KEYS = ['DATABASE_URL', 'BATCH_SIZE', 'ERROR_LIMIT', 'LOG_LEVEL', 'LOG_DIR', 'OUTPUT_FORMAT', 'DRY_RUN']

@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Clear catalog settings and run from an empty directory."""
    for key in ENV_KEYS:
        # setenv first so values loaded by load_dotenv are undone after the test
        monkeypatch.setenv(key, '')
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return monkeypatch

"""Tests for the catalog command line interface."""

import json
import logging

import click
import pytest
from click.testing import CliRunner
from sqlalchemy import create_engine, inspect

from ..cli.base import BaseCommand, command_error_handler
from ..cli.config import Config
from ..cli.main import cli
from ..db.models import ProductRecord
from ..db.session import SessionManager
from .conftest import csv_row, write_csv

@pytest.fixture(autouse=True)
def restore_logging():
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)

@pytest.fixture
def runner(clean_env):
    return CliRunner()

@pytest.fixture
def database_url(clean_env, tmp_path):
    url = f"sqlite:///{tmp_path / 'catalog.db'}"
    clean_env.setenv('DATABASE_URL', url)
    return url

def count_products(database_url):
    manager = SessionManager(database_url)
    try:
        with manager.session_scope() as session:
            return session.query(ProductRecord).count()
    finally:
        manager.engine.dispose()

def test_validate_clean_file(runner, tmp_path):
    path = write_csv(tmp_path / 'products.csv', [csv_row(title='NES'), csv_row()])

    result = runner.invoke(cli, ['validate', str(path)])

    assert result.exit_code == 0, result.output
    assert 'Valid Rows: 2' in result.output
    assert 'Rows with Errors: 0' in result.output

def test_validate_reports_violations(runner, tmp_path):
    path = write_csv(tmp_path / 'products.csv', [csv_row(title='AB')])

    result = runner.invoke(cli, ['validate', str(path)])

    assert result.exit_code != 0
    assert 'Row 1, Field: title - size must be between 3 and 100' in result.output

def test_validate_writes_results_file(runner, tmp_path):
    path = write_csv(tmp_path / 'products.csv', [csv_row(), csv_row(price='0.99')])
    output = tmp_path / 'results.json'

    result = runner.invoke(cli, ['validate', str(path), '--output', str(output)])

    assert result.exit_code != 0
    results = json.loads(output.read_text())
    assert results['is_valid'] is False
    assert results['summary']['errors'] == [
        {'row': 2, 'field': 'price', 'message': 'must be between 1.00 and 9999.00', 'severity': 'CRITICAL'}
    ]

def test_validate_json_output(runner, tmp_path):
    runner_env = {'OUTPUT_FORMAT': 'json'}
    path = write_csv(tmp_path / 'products.csv', [csv_row()])

    result = runner.invoke(cli, ['validate', str(path)], env=runner_env)

    assert result.exit_code == 0, result.output
    assert '"is_valid": true' in result.output

def test_import_saves_valid_rows(runner, tmp_path, database_url):
    path = write_csv(tmp_path / 'products.csv', [
        csv_row(title='NES'),
        csv_row(title='AB'),
        csv_row(title='SNES'),
    ])

    result = runner.invoke(cli, ['import', str(path)])

    # One row is invalid so the command fails, but the valid rows are stored
    assert result.exit_code != 0
    assert 'Saved: 2' in result.output
    assert count_products(database_url) == 2

def test_import_all_or_nothing(runner, tmp_path, database_url):
    path = write_csv(tmp_path / 'products.csv', [csv_row(title='NES'), csv_row(title='AB')])

    result = runner.invoke(cli, ['import', str(path), '--all-or-nothing'])

    assert result.exit_code != 0
    assert count_products(database_url) == 0

def test_import_dry_run(runner, tmp_path, database_url):
    path = write_csv(tmp_path / 'products.csv', [csv_row()])

    result = runner.invoke(cli, ['import', str(path), '--dry-run', '--batch-size', '10'])

    assert result.exit_code == 0, result.output
    engine = create_engine(database_url)
    try:
        assert inspect(engine).get_table_names() == []
    finally:
        engine.dispose()

def test_import_requires_database(runner, tmp_path):
    path = write_csv(tmp_path / 'products.csv', [csv_row()])

    result = runner.invoke(cli, ['import', str(path)])

    assert result.exit_code != 0
    assert 'DATABASE_URL' in result.output

def test_test_connection(runner, database_url):
    result = runner.invoke(cli, ['--debug', 'test-connection'])

    assert result.exit_code == 0, result.output
    assert 'Successfully connected to the database!' in result.output

def test_import_results_list_saved_products(runner, tmp_path, database_url):
    path = write_csv(tmp_path / 'products.csv', [csv_row(title='NES', price='49.90')])
    output = tmp_path / 'results.json'

    result = runner.invoke(cli, ['import', str(path), '--output', str(output)])

    assert result.exit_code == 0, result.output
    results = json.loads(output.read_text())
    assert results['saved_ids'] == [1]
    assert results['saved_products'][0]['id'] == 1
    assert results['saved_products'][0]['title'] == 'NES'
    assert results['saved_products'][0]['price'] == '49.90'

class FailingCommand(BaseCommand):
    @command_error_handler
    def execute(self) -> None:
        raise RuntimeError('connection refused')

def test_command_errors_are_summarized(caplog):
    command = FailingCommand(Config())

    with caplog.at_level(logging.INFO):
        with pytest.raises(click.Abort):
            command.execute()

    assert command.error_tracker.total == 1
    assert 'Error Summary:' in caplog.text
    assert 'COMMAND_EXECUTION_ERROR (1 occurrences):' in caplog.text
    assert 'connection refused' in caplog.text

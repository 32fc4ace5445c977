"""
Core CLI implementation for the catalog package.
"""

import click
from pathlib import Path

from .config import Config
from .logging import setup_logging, get_logger
from ..commands import ImportProductsCommand, TestConnectionCommand, ValidateProductsCommand

def _load_config(require_database: bool) -> Config:
    try:
        return Config.from_env(require_database=require_database)
    except ValueError as e:
        click.secho(f"Error initializing configuration: {e}", fg='red', err=True)
        raise click.Abort()

@click.group()
@click.option('--debug', is_flag=True, help='Enable detailed debug output')
@click.pass_context
def cli(ctx, debug: bool):
    """Catalog product validation CLI"""
    # Store debug flag in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug

    config = _load_config(require_database=False)
    setup_logging(debug=debug, log_dir=config.log_dir, level=config.log_level)

    logger = get_logger('cli')
    if debug:
        logger.debug("Debug mode enabled")

@cli.command()
@click.argument('file', type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
@click.option('--output', type=click.Path(file_okay=True, dir_okay=False, path_type=Path), help='Save validation results to file')
def validate(file: Path, output: Path | None):
    """Validate a product CSV file without saving anything."""
    config = _load_config(require_database=False)
    command = ValidateProductsCommand(config, file, output)
    command.execute()

@cli.command('import')
@click.argument('file', type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
@click.option('--output', type=click.Path(file_okay=True, dir_okay=False, path_type=Path), help='Save import results to file')
@click.option('--batch-size', type=int, default=None, help='Number of rows to process per batch')
@click.option('--dry-run', is_flag=True, help='Validate every row but save nothing')
@click.option('--all-or-nothing', is_flag=True, help='Save nothing unless every row is valid')
def import_products(file: Path, output: Path | None, batch_size: int | None, dry_run: bool, all_or_nothing: bool):
    """Validate a product CSV file and save the valid rows."""
    config = _load_config(require_database=True)
    if batch_size is not None:
        config.batch_size = batch_size
    if dry_run:
        config.dry_run = True
    command = ImportProductsCommand(config, file, output, all_or_nothing=all_or_nothing)
    command.execute()

@cli.command()
def test_connection():
    """Test database connectivity"""
    config = _load_config(require_database=True)
    command = TestConnectionCommand(config)
    command.execute()

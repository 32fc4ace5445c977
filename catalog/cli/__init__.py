"""
CLI module for the catalog package.
Provides command-line interface functionality and utilities.
The click group itself lives in ``catalog.cli.main``.
"""

from .base import BaseCommand, FileInputCommand, command_error_handler
from .config import Config
from .logging import setup_logging, get_logger

__all__ = [
    'BaseCommand',
    'FileInputCommand',
    'command_error_handler',
    'Config',
    'setup_logging',
    'get_logger'
]

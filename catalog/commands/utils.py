"""
Utility commands for the catalog CLI.
Provides helper commands for system operations and diagnostics.
"""

import click
from sqlalchemy import text

from ..cli.base import BaseCommand, command_error_handler
from ..cli.config import Config

class TestConnectionCommand(BaseCommand):
    """Command to test database connectivity."""

    def __init__(self, config: Config):
        super().__init__(config)

    @command_error_handler
    def execute(self) -> None:
        """Execute the connection test."""
        self.logger.info("Testing database connection...")

        with self.session_manager.session_scope() as session:
            session.execute(text("SELECT 1")).scalar()

        click.secho(
            "Successfully connected to the database!",
            fg='green'
        )

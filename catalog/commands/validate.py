"""Product file validation command."""

import click
import json
from pathlib import Path
from typing import Any, Dict, Optional

from ..cli.base import FileInputCommand, command_error_handler
from ..cli.config import Config
from ..processors.product_import import ProductImportProcessor

class ValidateProductsCommand(FileInputCommand):
    """Command to validate product CSV files without saving them."""

    def __init__(self, config: Config, input_file: Path, output_file: Optional[Path] = None):
        super().__init__(config, input_file, output_file)

    def build_processor(self) -> ProductImportProcessor:
        return ProductImportProcessor(
            batch_size=self.config.batch_size,
            error_limit=self.config.error_limit,
            debug=self.debug
        )

    @command_error_handler
    def execute(self) -> None:
        """Execute the validation command."""
        if not self.validate():
            raise click.Abort()

        self.logger.info(f"Validating product file: {self.input_file}...")
        results = self.build_processor().process_file(self.input_file)

        self._display_summary(results)

        if self.output_file:
            self._save_results(results)

        if not results['is_valid']:
            raise click.Abort()

    def _display_summary(self, results: Dict[str, Any]) -> None:
        """Display results summary to console."""
        summary = results['summary']
        stats = summary['stats']

        if self.config.output_format == 'json':
            click.echo(json.dumps(results, indent=2))
            return

        click.echo("\nProduct Validation Summary:")
        click.echo(f"Total Rows: {stats['total_rows']}")
        click.echo(f"Valid Rows: {stats['valid_rows']}")
        click.echo(f"Rows with Errors: {stats['rows_with_errors']}")
        if stats['saved'] or stats['failed_saves']:
            click.echo(f"Saved: {stats['saved']}")
            click.echo(f"Failed Saves: {stats['failed_saves']}")

        if summary['errors']:
            click.echo("\nIssues Found:")
            for error in summary['errors']:
                color = 'red' if error['severity'] == 'CRITICAL' else 'yellow'
                click.secho(
                    f"[{error['severity']}] Row {error['row']}, "
                    f"Field: {error['field']} - {error['message']}",
                    fg=color
                )

    def _save_results(self, results: Dict[str, Any]) -> None:
        """Save results to file."""
        with open(self.output_file, 'w') as f:
            json.dump(results, f, indent=2)
        click.echo(f"\nDetailed results saved to {self.output_file}")

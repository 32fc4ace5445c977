"""Product import command."""

from pathlib import Path
from typing import Optional

from ..cli.config import Config
from ..db.repository import SqlProductRepository
from ..processors.product_import import ProductImportProcessor
from ..services import ProductService
from .validate import ValidateProductsCommand

class ImportProductsCommand(ValidateProductsCommand):
    """Validate product rows and save the valid ones to the database."""

    def __init__(
        self,
        config: Config,
        input_file: Path,
        output_file: Optional[Path] = None,
        all_or_nothing: bool = False
    ):
        """Initialize command.

        Args:
            config: Application configuration
            input_file: Path to input CSV file
            output_file: Optional path to save results
            all_or_nothing: Save nothing unless every row is valid
        """
        super().__init__(config, input_file, output_file)
        self.all_or_nothing = all_or_nothing

    def build_processor(self) -> ProductImportProcessor:
        # A dry run leaves the target database untouched, schema included
        repository = SqlProductRepository(self.session_manager, create_schema=not self.config.dry_run)
        self.logger.info(f"Batch size: {self.config.batch_size}")
        if self.config.dry_run:
            self.logger.info("Dry run: no products will be saved")
        return ProductImportProcessor(
            service=ProductService(repository),
            batch_size=self.config.batch_size,
            error_limit=self.config.error_limit,
            dry_run=self.config.dry_run,
            all_or_nothing=self.all_or_nothing,
            debug=self.debug
        )

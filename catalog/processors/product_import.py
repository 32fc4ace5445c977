"""Product import processor for catalog CSV files."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
import pandas as pd

from ..models import Product, ProductField
from ..services import ProductService
from ..utils.csv_normalization import normalize_dataframe_columns
from ..utils.records import (
    RecordParseError,
    missing_required_fields,
    parse_product_row,
    product_to_dict,
    resolve_columns,
)
from .base import BaseProcessor
from .error_tracker import ErrorTracker
from .validator import validate_product

class ProductImportProcessor(BaseProcessor):
    """Validate product rows from a CSV file and save the valid ones."""

    def __init__(
        self,
        service: Optional[ProductService] = None,
        batch_size: int = 100,
        error_limit: int = 1000,
        dry_run: bool = False,
        all_or_nothing: bool = False,
        debug: bool = False
    ):
        """Initialize the processor.

        Args:
            service: Save façade; rows are only validated when None
            batch_size: Number of rows to process per batch
            error_limit: Maximum number of errors before stopping
            dry_run: Validate every row but save nothing
            all_or_nothing: Save only if every row in the file is valid
            debug: Enable debug logging
        """
        super().__init__(batch_size, error_limit, debug)
        self.service = service
        self.dry_run = dry_run
        self.all_or_nothing = all_or_nothing
        self.error_tracker = ErrorTracker()
        self.errors: List[Dict[str, Any]] = []
        self.saved_ids: List[int] = []
        self.saved_products: List[Dict[str, Any]] = []
        self.columns: Dict[ProductField, str] = {}
        self._pending: List[Tuple[int, Product]] = []

    @property
    def saves_enabled(self) -> bool:
        return self.service is not None and not self.dry_run

    def _record_error(
        self,
        row_number: int,
        field: str,
        message: str,
        error_type: Optional[str] = None,
        severity: str = 'CRITICAL'
    ) -> None:
        self.errors.append({
            'row': row_number,
            'field': str(field),
            'message': message,
            'severity': severity
        })
        self.error_tracker.add_error(error_type or str(field), message, {'row': row_number})

    def validate_data(self, df: pd.DataFrame) -> Tuple[List[str], List[str]]:
        """Check that the file has a column for every required field.

        Args:
            df: DataFrame to validate

        Returns:
            Tuple of (critical_issues, warnings)
        """
        critical_issues = []
        warnings = []

        self.columns = resolve_columns(df.columns)
        missing = missing_required_fields(self.columns)
        if missing:
            msg = f"Missing required columns: {', '.join(str(field) for field in missing)}"
            critical_issues.append(msg)
            self._record_error(0, 'columns', msg, error_type='layout')

        known = set(self.columns.values())
        unknown = [column for column in df.columns if column not in known]
        if unknown:
            msg = f"Ignoring unknown columns: {', '.join(unknown)}"
            warnings.append(msg)
            self._record_error(0, 'columns', msg, error_type='layout', severity='WARNING')

        return critical_issues, warnings

    def _check_row(self, row_number: int, row: Dict[str, Any]) -> Optional[Product]:
        """Parse and validate one row, recording every problem found.

        Returns:
            The product when the row is valid, None otherwise
        """
        try:
            product = parse_product_row(row, self.columns)
        except RecordParseError as e:
            for violation in e.violations:
                self._record_error(row_number, violation.field, violation.message, error_type='parse')
            self.stats.parse_errors += len(e.violations)
            self.stats.rows_with_errors += 1
            self.stats.total_errors += 1
            return None

        violations = validate_product(product)
        if violations:
            if self.debug:
                self.logger.debug(f"Row {row_number} has {len(violations)} violations")
            for violation in sorted(violations, key=lambda v: (v.field.value, v.message)):
                self._record_error(row_number, violation.field, violation.message)
            self.stats.violations += len(violations)
            self.stats.rows_with_errors += 1
            self.stats.total_errors += 1
            return None

        self.stats.valid_rows += 1
        return product

    def _save(self, row_number: int, product: Product) -> None:
        if not self.saves_enabled:
            return
        try:
            saved = self.service.save(product)
        except Exception as e:
            self.logger.error(f"Failed to save row {row_number}: {e}")
            self._record_error(row_number, 'product', str(e), error_type='persistence')
            self.stats.failed_saves += 1
            self.stats.total_errors += 1
            return
        self.stats.saved += 1
        self.saved_ids.append(saved.id)
        self.saved_products.append(product_to_dict(saved))
        if self.debug:
            self.logger.debug(f"Saved row {row_number} as product {saved.id}")

    def _process_batch(self, batch_df: pd.DataFrame) -> None:
        """Process a batch of product rows.

        Args:
            batch_df: DataFrame containing batch of rows to process
        """
        if self.debug:
            self.logger.debug(f"Processing batch of {len(batch_df)} rows")

        for idx, row in batch_df.iterrows():
            row_number = int(idx) + 1
            self.stats.total_rows += 1
            product = self._check_row(row_number, row.to_dict())
            if product is None:
                continue
            if self.all_or_nothing:
                self._pending.append((row_number, product))
            else:
                self._save(row_number, product)

    def process(self, data: pd.DataFrame) -> bool:
        """Process all rows, then save held rows in all-or-nothing mode."""
        accepted = super().process(data)
        if accepted and self.all_or_nothing and self.saves_enabled:
            if self.stats.rows_with_errors or self.stats.failed_batches:
                self.logger.warning(
                    f"Not saving {len(self._pending)} valid rows because "
                    f"{self.stats.rows_with_errors} rows failed validation"
                )
            else:
                for row_number, product in self._pending:
                    self._save(row_number, product)
        self._pending.clear()
        return accepted

    def process_file(self, file_path: Path) -> Dict[str, Any]:
        """Process a CSV file.

        Args:
            file_path: Path to the CSV file

        Returns:
            Dict containing results with structure:
            {
                'is_valid': bool,
                'summary': {
                    'stats': Dict,
                    'errors': List[Dict],
                    'error_counts': Dict
                },
                'saved_ids': List[int],
                'saved_products': List[Dict]
            }
        """
        if self.debug:
            self.logger.debug(f"Reading CSV file: {file_path}")

        try:
            df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        except Exception as e:
            msg = f"Failed to read CSV file: {e}"
            self.logger.error(msg)
            self._record_error(0, 'file', msg, error_type='file')
            self.stats.total_errors += 1
            return self._results(False)

        df = normalize_dataframe_columns(df)
        if self.debug:
            self.logger.debug(f"Read {len(df)} rows from {file_path}")

        accepted = self.process(df)
        self.error_tracker.log_summary(self.logger)
        return self._results(accepted)

    def _results(self, accepted: bool) -> Dict[str, Any]:
        is_valid = (
            accepted
            and self.stats.rows_with_errors == 0
            and self.stats.failed_batches == 0
            and self.stats.failed_saves == 0
        )
        return {
            'is_valid': is_valid,
            'summary': {
                'stats': self.get_stats(),
                'errors': self.errors,
                'error_counts': self.error_tracker.get_summary()['counts']
            },
            'saved_ids': list(self.saved_ids),
            'saved_products': list(self.saved_products)
        }

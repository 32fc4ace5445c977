"""Base processor for CSV product files."""
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple
import logging
import time
import pandas as pd

@dataclass
class ProcessingStats:
    """Statistics for processing operations."""
    total_rows: int = 0
    valid_rows: int = 0
    rows_with_errors: int = 0
    parse_errors: int = 0
    violations: int = 0
    saved: int = 0
    failed_saves: int = 0
    successful_batches: int = 0
    failed_batches: int = 0
    total_errors: int = 0
    processing_time: float = 0.0
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary format."""
        result = {}
        for key, value in asdict(self).items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
            elif isinstance(value, float):
                result[key] = round(value, 3)
            else:
                result[key] = value
        return result

class BaseProcessor(ABC):
    """Abstract base class for CSV processors."""

    def __init__(
        self,
        batch_size: int = 100,
        error_limit: int = 1000,
        debug: bool = False
    ):
        """Initialize processor configuration.

        Args:
            batch_size: Number of rows to process in each batch
            error_limit: Maximum number of errors before stopping
            debug: Enable debug logging
        """
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self.batch_size = batch_size
        self.error_limit = error_limit
        self.debug = debug
        self.logger = logging.getLogger(self.__class__.__name__)
        self.stats = ProcessingStats()

        if self.debug:
            self.logger.debug(f"Initialized {self.__class__.__name__} with batch_size={batch_size}")

    @abstractmethod
    def validate_data(self, df: pd.DataFrame) -> Tuple[List[str], List[str]]:
        """Check the file layout before any row is processed.

        Args:
            df: DataFrame to validate

        Returns:
            Tuple of (critical_issues, warnings)
        """

    @abstractmethod
    def _process_batch(self, batch_df: pd.DataFrame) -> None:
        """Process a single batch of rows.

        Args:
            batch_df: DataFrame containing the batch data
        """

    def process(self, data: pd.DataFrame) -> bool:
        """Process the data in batches.

        Args:
            data: DataFrame to process

        Returns:
            False if the file layout was rejected, True otherwise
        """
        start_time = time.time()
        self.stats.started_at = datetime.now(timezone.utc)
        if self.debug:
            self.logger.debug(f"Starting processing of {len(data)} rows")

        critical_issues, warnings = self.validate_data(data)

        if warnings:
            self.logger.warning("Layout warnings:")
            for warning in warnings:
                self.logger.warning(f"  - {warning}")

        if critical_issues:
            self.logger.error("File layout rejected:")
            for issue in critical_issues:
                self.logger.error(f"  - {issue}")
            self.stats.total_errors += len(critical_issues)
            self.stats.completed_at = datetime.now(timezone.utc)
            return False

        total_rows = len(data)
        total_batches = (total_rows + self.batch_size - 1) // self.batch_size

        for batch_num, start_idx in enumerate(range(0, total_rows, self.batch_size), 1):
            if self.debug:
                self.logger.debug(f"Starting batch {batch_num}/{total_batches}")

            batch_df = data.iloc[start_idx:start_idx + self.batch_size]

            try:
                self._process_batch(batch_df)
                self.stats.successful_batches += 1
            except Exception as e:
                self.logger.error(f"Error in batch {batch_num} (starting at row {start_idx + 1}): {e}")
                if self.debug:
                    self.logger.debug("Batch failure details", exc_info=True)
                self.stats.failed_batches += 1
                self.stats.total_errors += 1
                continue

            if self.stats.total_errors >= self.error_limit:
                self.logger.error(f"Stopping: Error limit ({self.error_limit}) reached")
                break

        self.stats.processing_time = time.time() - start_time
        self.stats.completed_at = datetime.now(timezone.utc)
        if self.debug:
            self.logger.debug(f"Processing finished in {self.stats.processing_time:.3f}s")
        return True

    def get_stats(self) -> Dict[str, Any]:
        """Get processing statistics."""
        return self.stats.to_dict()

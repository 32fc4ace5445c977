"""Error tracking and aggregation for product processing."""

from collections import defaultdict
from typing import Any, Dict, List, Optional
import logging

class ErrorTracker:
    """Count errors per type and keep a few samples of each."""

    def __init__(self, max_samples: int = 3):
        """Initialize error tracker.

        Args:
            max_samples: Maximum number of samples to store per error type
        """
        self.error_counts: Dict[str, int] = defaultdict(int)
        self.error_samples: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
        self.max_samples = max_samples

    def add_error(self, error_type: str, message: str, context: Optional[Dict] = None) -> None:
        """Record one error occurrence.

        Args:
            error_type: Field name for violations, or 'parse' / 'persistence'
            message: Error message
            context: Optional context data for the error, such as the row number
        """
        error_type = str(error_type)
        self.error_counts[error_type] += 1
        if len(self.error_samples[error_type]) < self.max_samples:
            self.error_samples[error_type].append({
                'message': message,
                'context': context or {}
            })

    @property
    def total(self) -> int:
        """Total number of recorded errors."""
        return sum(self.error_counts.values())

    def get_summary(self) -> Dict:
        """Get error summary.

        Returns:
            Dict containing error counts and samples
        """
        return {
            'counts': dict(self.error_counts),
            'samples': dict(self.error_samples)
        }

    def log_summary(self, logger: logging.Logger) -> None:
        """Log error summary.

        Args:
            logger: Logger to use for output
        """
        if not self.error_counts:
            return

        logger.warning("Error Summary:")
        for error_type in sorted(self.error_counts):
            logger.warning(f"{error_type} ({self.error_counts[error_type]} occurrences):")
            for i, sample in enumerate(self.error_samples[error_type], 1):
                context = ', '.join(f"{key}={value}" for key, value in sample['context'].items())
                logger.warning(f"  Sample {i}: {sample['message']}" + (f" [{context}]" if context else ''))

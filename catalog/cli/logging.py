"""
Logging configuration for the catalog CLI.
Provides consistent logging setup across all commands.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FILE_NAME = 'catalog.log'
CATALOG_HANDLER_FLAG = '_catalog_handler'

class DebugFormatter(logging.Formatter):
    """Console formatter with timestamp and logger name."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with timestamp and source."""
        message = f"[{record.created:.3f}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        if sys.stderr.isatty():
            cyan = '\033[0;36m'
            reset = '\033[0m'
            return f"{cyan}{message}{reset}"
        return message

def setup_logging(debug: bool = False, log_dir: Optional[Path] = None, level: str = 'INFO') -> None:
    """Setup logging configuration.

    Args:
        debug: Enable debug logging, overrides level
        log_dir: Also write a log file into this directory
        level: Log level name used when debug is off
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO))

    # Replace handlers from an earlier call, leave other handlers alone
    for handler in root_logger.handlers[:]:
        if getattr(handler, CATALOG_HANDLER_FLAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(DebugFormatter())
    setattr(console_handler, CATALOG_HANDLER_FLAG, True)
    root_logger.addHandler(console_handler)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME)
        file_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
        setattr(file_handler, CATALOG_HANDLER_FLAG, True)
        root_logger.addHandler(file_handler)

    # Always keep SQLAlchemy logging at WARNING level
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.pool').setLevel(logging.WARNING)

def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger: Configured logger instance
    """
    return logging.getLogger(name)

"""
Configuration management for the catalog CLI.
Handles loading and validating configuration from environment variables and files.
"""

import os
from dataclasses import dataclass
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

OUTPUT_FORMATS = ['text', 'json']

@dataclass
class Config:
    """Configuration settings for the catalog CLI."""

    # Database settings
    database_url: Optional[str] = None

    # Processing settings
    batch_size: int = 100
    error_limit: int = 1000

    # Logging settings
    log_level: str = 'INFO'
    log_dir: Optional[Path] = None

    # Output settings
    output_format: str = 'text'  # text, json

    # Runtime settings
    dry_run: bool = False

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None, require_database: bool = True) -> 'Config':
        """Create configuration from environment variables.

        Args:
            env_file: Optional path to .env file
            require_database: Fail when DATABASE_URL is not set

        Returns:
            Config: Configuration instance

        Raises:
            ValueError: If required environment variables are missing or malformed
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        database_url = os.getenv('DATABASE_URL')
        if require_database and not database_url:
            raise ValueError("DATABASE_URL environment variable is required")

        try:
            batch_size = int(os.getenv('BATCH_SIZE', '100'))
            error_limit = int(os.getenv('ERROR_LIMIT', '1000'))
        except ValueError as e:
            raise ValueError(f"Invalid numeric setting: {e}")

        return cls(
            database_url=database_url or None,
            batch_size=batch_size,
            error_limit=error_limit,
            log_level=os.getenv('LOG_LEVEL', 'INFO').upper(),
            log_dir=Path(os.getenv('LOG_DIR')) if os.getenv('LOG_DIR') else None,
            output_format=os.getenv('OUTPUT_FORMAT', 'text').lower(),
            dry_run=os.getenv('DRY_RUN', 'false').lower() == 'true'
        )

    def validate(self) -> bool:
        """Validate configuration settings.

        Returns:
            bool: True if configuration is valid

        Raises:
            ValueError: If a setting is out of range
        """
        if self.log_dir and not self.log_dir.exists():
            try:
                self.log_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ValueError(f"Failed to create log directory: {e}")

        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if self.error_limit <= 0:
            raise ValueError("error_limit must be positive")

        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"output_format must be one of: {', '.join(OUTPUT_FORMATS)}")

        return True

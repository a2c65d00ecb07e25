"""Environment configuration interface for prose-lint.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def base_dir() -> Path:
        """Get the directory glob patterns are resolved against.

        Returns:
            Base directory, defaults to the current directory
        """
        return Path(os.getenv("PROSE_LINT_BASE_DIR", "."))

    @staticmethod
    def max_concurrency() -> int:
        """Get the number of files processed at the same time.

        Returns:
            Concurrency limit, defaults to 16
        """
        return int(os.getenv("PROSE_LINT_MAX_CONCURRENCY", "16"))

    @staticmethod
    def output_format() -> str:
        """Get the default output format (console or json).

        Returns:
            Output format, defaults to 'console'
        """
        return os.getenv("PROSE_LINT_FORMAT", "console")

    @staticmethod
    def log_level() -> str:
        """Get the logging level.

        Returns:
            Log level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", "INFO").upper()


# Singleton instance for convenient access
env = Environment()

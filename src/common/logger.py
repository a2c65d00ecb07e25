"""Logging utilities with rich output for the prose-lint CLI.

Log records and status messages go to standard error so that lint records
on standard output stay machine-readable.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Linting 3 files...")
    logger.error("Failed to read file", exc_info=True)
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install as install_rich_traceback

# Shared console for diagnostics; lint records are printed elsewhere
console = Console(stderr=True)


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    return RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        tracebacks_show_locals=True,
        markup=True,
    )


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses environment variable LOG_LEVEL or defaults to INFO.
        show_time: Show timestamp in log output (default: False for clean CLI)
        show_path: Show file path in log output (default: False for clean CLI)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()

    logger.setLevel(level)

    rich_handler = _rich_handler(show_time=show_time, show_path=show_path)
    rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    logger.addHandler(rich_handler)

    # Propagate for pytest caplog; setup_logging's root handler skips these
    logger.propagate = True

    return logger


class _UnhandledFilter(logging.Filter):
    """Drop records that a get_logger() handler has already printed."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not logging.getLogger(record.name).handlers


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Setup logging configuration for the entire application.

    This should be called once at the application entry point (CLI).

    Args:
        level: Default logging level for all modules
        log_file: Optional file path to also log to a file
    """
    level = os.getenv("LOG_LEVEL", level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    rich_handler = _rich_handler()
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    rich_handler.addFilter(_UnhandledFilter())
    root_logger.addHandler(rich_handler)

    # Uncaught exceptions get the same rich traceback as logged ones
    install_rich_traceback(console=console, show_locals=True)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


def success(message: str) -> None:
    """Print a success message with a green checkmark.

    Example:
        >>> success("No suggestions")
        ✓ No suggestions
    """
    console.print(f"[green]✓[/green] {message}", soft_wrap=True)


def error(message: str) -> None:
    """Print an error message with a red X icon.

    Example:
        >>> error("Failed to read notes.md")
        ✗ Failed to read notes.md
    """
    console.print(f"[red]✗[/red] {message}", soft_wrap=True)

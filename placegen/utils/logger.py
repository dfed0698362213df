"""Logging utilities for placegen."""

import logging
import sys
from pathlib import Path
from typing import Optional


# Global logger instance
_logger: Optional[logging.Logger] = None


def setup_logger(verbose: bool = False, log_file: Optional[str] = 'placegen.log') -> logging.Logger:
    """Set up and configure the application logger.

    Args:
        verbose: Enable verbose (DEBUG) logging
        log_file: Path to log file, or None to log to the console only

    Returns:
        Configured logger instance
    """
    global _logger

    logger = logging.getLogger('placegen')
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Clear any existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    simple_formatter = logging.Formatter(
        '%(levelname)s: %(message)s'
    )

    # File handler - always detailed
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_formatter)
            logger.addHandler(file_handler)

        except OSError as e:
            print(f"Warning: file logging disabled ({e})", file=sys.stderr)

    # Console handler - only for errors and warnings unless verbose
    console_handler = logging.StreamHandler(sys.stderr)

    if verbose:
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(detailed_formatter)
    else:
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(simple_formatter)

    logger.addHandler(console_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Get the application logger instance.

    Returns:
        The 'placegen' logger; handlers are only attached by setup_logger
    """
    global _logger

    if _logger is None:
        _logger = logging.getLogger('placegen')

    return _logger


class ProgressLogger:
    """Logger for progress tracking."""

    def __init__(self, total: int, description: str = "Processing"):
        """Initialize progress logger.

        Args:
            total: Total number of items to process
            description: Description of the operation
        """
        self.total = total
        self.current = 0
        self.description = description
        self.logger = get_logger()

        self.logger.info(f"Starting {description}: {total} items")

    def update(self, increment: int = 1) -> None:
        """Update progress.

        Args:
            increment: Number of items processed
        """
        self.current += increment

        if self.current % max(1, self.total // 10) == 0 or self.current == self.total:
            percent = (self.current / self.total) * 100
            self.logger.info(f"{self.description}: {self.current}/{self.total} ({percent:.1f}%)")

    def complete(self) -> None:
        """Mark progress as complete."""
        self.logger.info(f"{self.description} completed: {self.current}/{self.total} items")


class ErrorCollector:
    """Collect and manage errors during batch operations."""

    def __init__(self):
        self.errors = []
        self.logger = get_logger()

    def add_error(self, item: str, error: Exception) -> None:
        """Add an error to the collection.

        Args:
            item: Item that caused the error
            error: The exception that occurred
        """
        self.errors.append({
            'item': item,
            'error': str(error),
            'type': type(error).__name__
        })
        self.logger.warning(f"Error generating {item}: {error}")
        self.logger.debug("Traceback:", exc_info=error)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def get_error_count(self) -> int:
        return len(self.errors)

    def get_errors(self) -> list:
        """Get all collected errors.

        Returns:
            List of error dictionaries
        """
        return self.errors.copy()

    def log_summary(self) -> None:
        """Log a summary of all errors, grouped by type."""
        if not self.errors:
            return

        self.logger.error(f"Total errors encountered: {len(self.errors)}")

        error_types = {}
        for error in self.errors:
            error_types.setdefault(error['type'], []).append(error)

        for error_type, errors in error_types.items():
            self.logger.error(f"  {error_type}: {len(errors)} occurrences")

            # Log first few examples
            for i, error in enumerate(errors[:3]):
                self.logger.error(f"    Example {i+1}: {error['item']} - {error['error']}")

            if len(errors) > 3:
                self.logger.error(f"    ... and {len(errors) - 3} more")

    def clear(self) -> None:
        """Clear all collected errors."""
        self.errors.clear()

"""
Logging helpers for the Meteologix client.

Provides an opt-in logger setup for applications and a timing context used
around outbound requests.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logger(
    name: str = "meteologix",
    log_file: Optional[str] = None,
    log_level: str = "INFO"
) -> logging.Logger:
    """
    Set up the package logger with a console and an optional file handler.

    Args:
        name: Logger name
        log_file: Path to log file. If None, only console logging is configured
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console_formatter = logging.Formatter(
        fmt="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logger.level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        detailed_formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


class LoggerContext:
    """Context manager for timing and logging a single operation."""

    def __init__(
        self,
        logger: logging.Logger,
        operation: str,
        level: int = logging.DEBUG
    ):
        """
        Initialize logger context.

        Args:
            logger: Logger instance
            operation: Name of the operation being logged
            level: Level used for the start and completion messages
        """
        self.logger = logger
        self.operation = operation
        self.level = level
        self.start_time: Optional[datetime] = None

    def __enter__(self):
        """Enter context and log start."""
        self.start_time = datetime.now()
        self.logger.log(self.level, f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context and log completion or failure."""
        duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is not None:
            self.logger.log(self.level, f"Failed {self.operation} after {duration:.2f}s: {exc_val}")
            return False

        self.logger.log(self.level, f"Completed {self.operation} in {duration:.2f}s")
        return True

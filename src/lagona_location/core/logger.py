"""
Logging configuration for the LAGONA location utilities.

Provides console and file logging, operation timing, and a per-hub adapter
that tags audit messages with the hub they concern.
"""

import logging
import os
from pathlib import Path
from typing import Any, MutableMapping, Optional, Tuple
from datetime import datetime

DEFAULT_LOG_FILE = "logs/lagona_location.log"


def resolve_log_file(configured: Optional[str] = None) -> str:
    """
    Pick the log file path.

    The LOG_FILE environment variable wins over the configured path, which
    wins over the default.

    Args:
        configured: Path from the ``logging.file`` configuration key

    Returns:
        Log file path
    """
    return os.getenv("LOG_FILE") or configured or DEFAULT_LOG_FILE


def setup_logger(
    name: str = "lagona_location",
    log_file: Optional[str] = None,
    log_level: str = "INFO"
) -> logging.Logger:
    """
    Set up application logger with console and file handlers.

    Args:
        name: Logger name
        log_file: Path to log file. If None, resolved by resolve_log_file()
        log_level: Console logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    log_file = log_file or resolve_log_file()

    # Ensure log directory exists
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    level = getattr(logging, log_level.upper(), logging.INFO)

    # The logger passes everything; handlers filter
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    # Create formatters
    detailed_formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_formatter = logging.Formatter(
        fmt="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Console handler at the configured level
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # File handler keeps debug detail such as hubs without bounds
    file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(detailed_formatter)
    logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


class HubLoggerAdapter(logging.LoggerAdapter):
    """Prefix messages with the business hub being processed."""

    def __init__(self, logger: logging.Logger, hub_id: str, hub_name: str = ""):
        super().__init__(logger, {"hub_id": hub_id, "hub_name": hub_name})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        name = self.extra["hub_name"] or "unnamed hub"
        return f"[{name} ({self.extra['hub_id']})] {msg}", kwargs


class LoggerContext:
    """Context manager for logging specific operations."""

    def __init__(self, logger: logging.Logger, operation: str):
        """
        Initialize logger context.

        Args:
            logger: Logger instance
            operation: Name of the operation being logged
        """
        self.logger = logger
        self.operation = operation
        self.start_time = None
        # Set inside the block to report how many items the operation handled
        self.count: Optional[int] = None

    def __enter__(self):
        """Enter context and log start."""
        self.start_time = datetime.now()
        self.logger.info(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context and log completion or error. Exceptions propagate."""
        duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is not None:
            self.logger.error(
                f"Failed {self.operation} after {duration:.2f}s: {exc_val}",
                exc_info=True
            )
            return False

        handled = f" ({self.count} items)" if self.count is not None else ""
        self.logger.info(f"Completed {self.operation}{handled} in {duration:.2f}s")
        return False

"""
Core utilities for the LAGONA location utilities.

Provides configuration management, logging, and timestamp handling.
"""

from .config import Config
from .logger import setup_logger, resolve_log_file, HubLoggerAdapter, LoggerContext
from . import constants
from .date_utils import DateUtils

__all__ = [
    "Config",
    "setup_logger",
    "resolve_log_file",
    "HubLoggerAdapter",
    "LoggerContext",
    "constants",
    "DateUtils",
]

# utils/logger.py
# This file is part of Galileo-Parse - A Dynamic Fault Tree Model Parser
#
# Logging utility for model parsing with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for model parsing."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class GalileoLogger:
    """Centralized logger for model parsing with structured output."""

    def __init__(self, name: str = "galileo", level: LogLevel = LogLevel.INFO):
        """Initialize the Galileo logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(GalileoFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for model parsing events
    def model_loaded(self, source: str, top_event: str, entity_count: int):
        """Log a successfully parsed model."""
        self.info(f"✅ Parsed {source}: top event '{top_event}', {entity_count} entities")

    def parse_failure(self, source: str, message: str):
        """Log a model that failed to parse."""
        self.error(f"❌ {source}: {message}")


class GalileoFormatter(logging.Formatter):
    """Custom formatter for model parsing with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[GalileoLogger] = None


def get_logger(name: str = "galileo") -> GalileoLogger:
    """Get or create the global Galileo logger instance.

    Args:
        name: Logger name (default: "galileo")

    Returns:
        GalileoLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = GalileoLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)

"""
Logging configuration for analysis and conversion runs.

This module provides structured (JSON lines) logging for the events emitted
by the risk analysis and SOAP conversion pipelines: scores, risk levels,
operation counts, warnings and failures.
"""

import json
import logging
from logging.handlers import TimedRotatingFileHandler
from typing import Any

ROOT_LOGGER_NAME = "reanimator"


class AnalysisEventFormatter(logging.Formatter):
    """Custom formatter for analysis and conversion event logs."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log records with structured data."""
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "event"):
            log_entry["event"] = record.event

        # Analysis fields
        for field in ["files", "patterns", "score", "risk_level"]:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        # Conversion fields
        for field in ["service", "operation_count", "endpoint_count", "warning_count"]:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        if hasattr(record, "error"):
            log_entry["error"] = record.error

        return json.dumps(log_entry)


def configure_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    enable_console: bool = True,
) -> logging.Logger:
    """
    Configure the ``reanimator`` logger hierarchy.

    Args:
        log_file: Path to a log file (optional, rotated hourly)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        enable_console: Whether to also log to the console

    Returns:
        The configured root ``reanimator`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper()))
    logger.propagate = False

    logger.handlers.clear()

    formatter = AnalysisEventFormatter()

    if log_file:
        file_handler = TimedRotatingFileHandler(
            log_file,
            when='H',
            interval=1,
            backupCount=168,  # 7 days of hourly files
            encoding='utf-8',
            utc=False
        )
        file_handler.suffix = "%Y%m%d_%H%M%S.log"
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger

"""Core utilities: exception hierarchy and structured logging."""

from .exceptions import (
    ConversionError,
    InvalidInputError,
    ParseError,
    ReanimatorError,
    ValidationError,
)
from .logging_config import AnalysisEventFormatter, configure_logging

__all__ = [
    # Logging
    "configure_logging",
    "AnalysisEventFormatter",
    # Exceptions
    "ReanimatorError",
    "ValidationError",
    "InvalidInputError",
    "ParseError",
    "ConversionError",
]

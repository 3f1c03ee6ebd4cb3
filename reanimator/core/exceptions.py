"""Custom exception hierarchy for Reanimator.

Detection over source text never raises; these exceptions cover the
request boundary and the WSDL conversion path, where malformed input
has to be reported to the caller instead of silently producing a
partial result.
"""


class ReanimatorError(Exception):
    """Base exception for all Reanimator errors.

    All custom exceptions inherit from this class so callers can catch
    every Reanimator-specific error with a single except clause.
    """
    pass


# =============================================================================
# Validation Errors
# =============================================================================

class ValidationError(ReanimatorError):
    """Base exception for input validation errors."""
    pass


class InvalidInputError(ValidationError):
    """A required top-level field (source code, WSDL text) is missing or invalid."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


# =============================================================================
# Conversion Errors
# =============================================================================

class ParseError(ReanimatorError):
    """The WSDL document is not well-formed XML."""

    def __init__(self, message: str, reason: str | None = None):
        super().__init__(message)
        self.reason = reason if reason is not None else message


class ConversionError(ReanimatorError):
    """SOAP to REST conversion failed; wraps the underlying parse failure."""
    pass

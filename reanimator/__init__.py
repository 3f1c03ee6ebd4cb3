"""Reanimator: legacy code risk analysis and SOAP to REST conversion."""

from .analysis import analyze, analyze_legacy_code
from .soap import convert_soap_to_rest

__version__ = "0.1.0"

__all__ = ["analyze", "analyze_legacy_code", "convert_soap_to_rest", "__version__"]

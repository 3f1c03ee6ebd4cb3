"""Constants and configuration values for Reanimator.

This module centralizes the thresholds used by the detection, scoring
and conversion pipelines, plus the environment-driven server settings.
"""

import os

# =============================================================================
# Pattern Detection
# =============================================================================

# Snippets attached to pattern locations are trimmed to this many characters
SNIPPET_MAX_LENGTH = 100

# Function-like blocks longer than this (characters) count as god functions
GOD_FUNCTION_THRESHOLD = 500

# Class bodies longer than this (characters) trigger the God Class rule
GOD_CLASS_THRESHOLD = 2000


# =============================================================================
# Risk Scoring
# =============================================================================

# Upper bound on the penalty a single pattern can contribute
MAX_PATTERN_PENALTY = 40

# Number of findings surfaced in the report summary
MAX_TOP_FINDINGS = 3

# Distinct pattern count above which a strategy note is added
STRATEGY_PATTERN_THRESHOLD = 20

# Risk band lower bounds (inclusive)
LOW_RISK_MIN_SCORE = 80
MEDIUM_RISK_MIN_SCORE = 50
HIGH_RISK_MIN_SCORE = 20


# =============================================================================
# Chamber Routing
# =============================================================================

# Distinct UI patterns needed for a high-confidence ghost-ui route
UI_ROUTE_HIGH_CONFIDENCE = 3

# Distinct legacy JavaScript patterns needed for a high-confidence reanimator route
JS_ROUTE_HIGH_CONFIDENCE = 5


# =============================================================================
# SOAP Conversion
# =============================================================================

# Operation count above which the service is flagged as too large
LARGE_SERVICE_OPERATION_THRESHOLD = 20

# Complex type count above which a domain model refactor is suggested
COMPLEX_MODEL_TYPE_THRESHOLD = 10

# Operation count above which migration phases get longer durations
MIGRATION_SCALE_OPERATION_THRESHOLD = 10

OPENAPI_VERSION = "3.0.0"
DEFAULT_SERVICE_NAME = "ConvertedService"


# =============================================================================
# Server
# =============================================================================

MCP_PORT = int(os.environ.get("MCP_PORT", "3000"))
LOG_LEVEL = os.environ.get("REANIMATOR_LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("REANIMATOR_LOG_FILE")

# Auth strategy applied by the server tool when the caller does not pass one
DEFAULT_AUTH_STRATEGY = os.environ.get("REANIMATOR_AUTH_STRATEGY", "none")

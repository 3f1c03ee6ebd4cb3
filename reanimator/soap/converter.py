"""SOAP to REST conversion pipeline: parse, synthesize, assemble."""

from __future__ import annotations

import logging
from typing import Any

from ..constants import (
    COMPLEX_MODEL_TYPE_THRESHOLD,
    LARGE_SERVICE_OPERATION_THRESHOLD,
    MIGRATION_SCALE_OPERATION_THRESHOLD,
)
from ..core.exceptions import ConversionError, ParseError
from .models import ConversionOptions, ConversionPhase, ConversionResult, WsdlOperation
from .openapi import generate_openapi_spec
from .parser import extract_complex_types, extract_service_name, parse_wsdl
from .stubs import generate_code_stubs
from .transformer import transform_to_rest_endpoints

logger = logging.getLogger("reanimator.soap")


def _coerce_options(options: ConversionOptions | dict[str, Any] | None) -> ConversionOptions:
    if options is None:
        return ConversionOptions()
    if isinstance(options, ConversionOptions):
        return options
    return ConversionOptions.model_validate(options)


def convert_soap_to_rest(
    wsdl_content: str,
    options: ConversionOptions | dict[str, Any] | None = None,
) -> ConversionResult:
    """Convert a WSDL document into REST endpoints and an OpenAPI document.

    Args:
        wsdl_content: Raw WSDL text.
        options: Conversion options; dicts may use snake_case or camelCase
            keys. Defaults to bearer auth, examples on, no stubs.

    Returns:
        The conversion result. Soft problems (no operations, very large
        services, many complex types) are reported in ``warnings`` and
        ``cross_chamber_suggestions`` instead of failing the conversion.

    Raises:
        ConversionError: The WSDL is not well-formed XML. The original
            ``ParseError`` is chained as ``__cause__``.
    """
    opts = _coerce_options(options)
    warnings: list[str] = []
    suggestions: list[str] = []

    try:
        operations = parse_wsdl(wsdl_content)
    except ParseError as e:
        logger.error(
            f"SOAP to REST conversion failed: {e.reason}",
            extra={"event": "conversion_failed", "error": e.reason},
        )
        raise ConversionError(f"SOAP to REST conversion failed: {e}") from e

    if not operations:
        warnings.append("No operations found in WSDL document. Verify WSDL structure.")

    if len(operations) > LARGE_SERVICE_OPERATION_THRESHOLD:
        warnings.append(
            f"Large service detected ({len(operations)} operations). "
            "Consider splitting into multiple microservices."
        )

    service_name = opts.service_name or extract_service_name(wsdl_content)

    complex_types = extract_complex_types(wsdl_content)
    if complex_types:
        warnings.append(
            f"{len(complex_types)} complex types detected. Review generated schemas for accuracy."
        )

    endpoints = transform_to_rest_endpoints(operations, include_examples=opts.include_examples)
    open_api_spec = generate_openapi_spec(endpoints, service_name, opts, complex_types)

    lowered = wsdl_content.lower()
    if "html" in lowered or "ui" in lowered:
        suggestions.append(
            "UI patterns detected in service. Consider using Ghost UI Converter "
            "for frontend modernization."
        )
    if any(_has_legacy_naming(op) for op in operations):
        suggestions.append(
            "Legacy naming detected. Use Legacy Reanimator to analyze backend "
            "implementation for additional modernization opportunities."
        )
    if len(complex_types) > COMPLEX_MODEL_TYPE_THRESHOLD:
        suggestions.append(
            "Complex data model detected. Consider domain-driven design refactoring "
            "for better maintainability."
        )

    code_stubs = (
        generate_code_stubs(endpoints, [op.name for op in operations], opts.target_framework)
        if opts.generate_stubs
        else None
    )

    for warning in warnings:
        logger.warning(warning)
    logger.info(
        f"Converted {service_name}: {len(operations)} operations -> {len(endpoints)} endpoints",
        extra={
            "event": "conversion_complete",
            "service": service_name,
            "operation_count": len(operations),
            "endpoint_count": len(endpoints),
            "warning_count": len(warnings),
        },
    )

    return ConversionResult(
        open_api_spec=open_api_spec,
        endpoints=endpoints,
        complex_types=complex_types,
        migration_plan=generate_migration_plan(len(operations)),
        code_stubs=code_stubs,
        warnings=warnings,
        cross_chamber_suggestions=suggestions,
    )


def _has_legacy_naming(operation: WsdlOperation) -> bool:
    lowered = operation.name.lower()
    return "legacy" in lowered or "old" in lowered


def generate_migration_plan(operation_count: int) -> list[ConversionPhase]:
    """Four-phase strangler fig plan; durations grow with the operation count."""
    large = operation_count > MIGRATION_SCALE_OPERATION_THRESHOLD

    return [
        ConversionPhase(
            phase=1,
            name="Mirror SOAP via REST Façade",
            duration="3-4 weeks" if large else "2-3 weeks",
            activities=[
                "Implement REST API endpoints alongside existing SOAP service",
                "Create façade layer that translates REST calls to SOAP internally",
                "Deploy to staging environment with feature flags",
                "Establish monitoring and observability for both APIs",
            ],
            deliverables=[
                "REST API with 100% feature parity to SOAP",
                "OpenAPI 3.0 specification and documentation",
                "Monitoring dashboard with comparative metrics",
                "Feature flag configuration for gradual rollout",
            ],
            risks=[
                "Performance overhead from translation layer",
                "Potential data mapping inconsistencies",
                "Increased infrastructure costs during parallel operation",
            ],
        ),
        ConversionPhase(
            phase=2,
            name="Contract Testing & Consumer Validation",
            duration="2-3 weeks",
            activities=[
                "Implement contract tests using OpenAPI specification",
                "Validate REST API behavior matches SOAP semantics",
                "Conduct load testing and performance benchmarking",
                "Engage with internal consumers for early feedback",
            ],
            deliverables=[
                "Comprehensive contract test suite (target: 95%+ coverage)",
                "Performance benchmarks (REST vs SOAP comparison)",
                "Consumer validation reports",
                "Updated API documentation with migration guides",
            ],
            risks=[
                "Semantic differences between SOAP and REST",
                "Performance degradation under load",
                "Consumer integration issues",
            ],
        ),
        ConversionPhase(
            phase=3,
            name="Gradual Consumer Migration",
            duration="8-12 weeks" if large else "4-6 weeks",
            activities=[
                "Migrate internal consumers to REST API incrementally",
                "Implement traffic shadowing to compare SOAP vs REST",
                "Monitor error rates and performance metrics",
                "Provide migration support and troubleshooting",
            ],
            deliverables=[
                "Consumer migration tracker (target: 95%+ migrated)",
                "Traffic analysis reports",
                "Zero critical incidents during migration",
                "Client SDK libraries for major languages",
            ],
            risks=[
                "Consumer resistance to change",
                "Unexpected edge cases in production",
                "Rollback complexity if issues arise",
            ],
        ),
        ConversionPhase(
            phase=4,
            name="SOAP Deprecation & Backend Refactoring",
            duration="3-4 weeks",
            activities=[
                "Announce SOAP deprecation timeline (6-month notice)",
                "Migrate remaining consumers with dedicated support",
                "Remove SOAP façade layer and refactor backend",
                "Decommission SOAP infrastructure",
            ],
            deliverables=[
                "100% consumer migration completed",
                "SOAP services decommissioned",
                "Refactored backend without translation layer",
                "Infrastructure cost savings report (target: 30-40% reduction)",
            ],
            risks=[
                "Forgotten consumers causing production issues",
                "Legacy documentation still referencing SOAP",
                "Compliance/audit requirements for API changes",
            ],
        ),
    ]

"""Assemble an OpenAPI 3.0 document from synthesized REST endpoints.

The document is built fresh on every call and is not validated against
the OpenAPI meta-schema.
"""

from __future__ import annotations

import copy
from collections.abc import Sequence
from typing import Any

from ..constants import OPENAPI_VERSION
from .models import ConversionOptions, RestEndpoint, WsdlComplexType, WsdlTypeProperty

SERVERS: list[dict[str, str]] = [
    {"url": "https://api.example.com/v1", "description": "Production server"},
    {"url": "https://staging-api.example.com/v1", "description": "Staging server"},
    {"url": "http://localhost:3000/api", "description": "Development server"},
]


def get_security_scheme(auth_strategy: str) -> dict[str, Any]:
    if auth_strategy == "bearer":
        return {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
            "description": "JWT Bearer token authentication",
        }
    if auth_strategy == "apikey":
        return {
            "type": "apiKey",
            "in": "header",
            "name": "X-API-Key",
            "description": "API key for authentication",
        }
    if auth_strategy == "oauth2":
        return {
            "type": "oauth2",
            "description": "OAuth 2.0 authentication",
            "flows": {
                "authorizationCode": {
                    "authorizationUrl": "https://example.com/oauth/authorize",
                    "tokenUrl": "https://example.com/oauth/token",
                    "scopes": {
                        "read": "Read access to resources",
                        "write": "Write access to resources",
                        "admin": "Administrative access",
                    },
                }
            },
        }
    return {}


def standard_error_responses() -> dict[str, Any]:
    """Reusable 400/404/500 response templates for ``components.responses``."""

    def error(code: str, message: str, details: bool = False) -> dict[str, Any]:
        properties: dict[str, Any] = {
            "error": {"type": "string", "example": code},
            "message": {"type": "string", "example": message},
        }
        if details:
            properties["details"] = {"type": "array", "items": {"type": "string"}}
        return {"type": "object", "properties": properties}

    return {
        "BadRequest": {
            "description": "Bad request - Invalid input parameters",
            "content": {
                "application/json": {
                    "schema": error("INVALID_INPUT", "The provided input is invalid", details=True)
                }
            },
        },
        "NotFound": {
            "description": "Resource not found",
            "content": {
                "application/json": {
                    "schema": error("NOT_FOUND", "The requested resource was not found")
                }
            },
        },
        "InternalError": {
            "description": "Internal server error",
            "content": {
                "application/json": {
                    "schema": error("INTERNAL_ERROR", "An unexpected error occurred")
                }
            },
        },
    }


def business_fault_response() -> dict[str, Any]:
    """422 template for operations that declare a SOAP fault."""
    return {
        "description": "Business logic error",
        "content": {
            "application/json": {
                "schema": {
                    "type": "object",
                    "properties": {
                        "faultCode": {"type": "string", "example": "BUSINESS_RULE_VIOLATION"},
                        "faultString": {"type": "string"},
                    },
                }
            }
        },
    }


def _property_schema(prop: WsdlTypeProperty) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": prop.type}
    if prop.format:
        schema["format"] = prop.format
    if prop.description:
        schema["description"] = prop.description
    if prop.is_array:
        return {"type": "array", "items": schema}
    return schema


def complex_type_schema(complex_type: WsdlComplexType) -> dict[str, Any]:
    schema: dict[str, Any] = {
        "type": "object",
        "properties": {
            name: _property_schema(prop) for name, prop in complex_type.properties.items()
        },
    }
    required = [name for name, prop in complex_type.properties.items() if prop.required]
    if required:
        schema["required"] = required
    if complex_type.documentation:
        schema["description"] = complex_type.documentation
    return schema


def _path_operation(endpoint: RestEndpoint, auth_strategy: str) -> dict[str, Any]:
    operation: dict[str, Any] = {
        "operationId": endpoint.operation_id,
        "summary": endpoint.summary,
    }
    if endpoint.description:
        operation["description"] = endpoint.description
    operation["tags"] = list(endpoint.tags)
    operation["parameters"] = [
        p.model_dump(by_alias=True, exclude_none=True) for p in endpoint.parameters
    ]
    if endpoint.request_body is not None:
        operation["requestBody"] = copy.deepcopy(endpoint.request_body)
    operation["responses"] = copy.deepcopy(endpoint.responses)
    if auth_strategy != "none":
        operation["security"] = [{auth_strategy: []}]
    return operation


def generate_openapi_spec(
    endpoints: Sequence[RestEndpoint],
    service_name: str,
    options: ConversionOptions,
    complex_types: Sequence[WsdlComplexType] = (),
) -> dict[str, Any]:
    """Build the OpenAPI document.

    Endpoints are grouped by path and keyed by lower-case method. When two
    operations map to the same path and method, the later one wins.
    """
    auth = options.auth_strategy

    paths: dict[str, dict[str, Any]] = {}
    for endpoint in endpoints:
        paths.setdefault(endpoint.path, {})[endpoint.method.lower()] = _path_operation(
            endpoint, auth
        )

    schemas = {ct.name: complex_type_schema(ct) for ct in complex_types}

    # dict.fromkeys keeps first-seen order
    tag_names = list(dict.fromkeys(tag for e in endpoints for tag in e.tags))

    spec: dict[str, Any] = {
        "openapi": OPENAPI_VERSION,
        "info": {
            "title": service_name,
            "version": "1.0.0",
            "description": (
                "REST API converted from SOAP service. This specification follows "
                "OpenAPI 3.0 standards and includes comprehensive request/response "
                "schemas, error handling, and example payloads."
            ),
            "contact": {
                "name": "API Support Team",
                "email": "api-support@example.com",
            },
        },
        "servers": [dict(s) for s in SERVERS],
        "paths": paths,
    }

    if tag_names:
        spec["tags"] = [
            {"name": tag, "description": f"Operations related to {tag}"} for tag in tag_names
        ]

    components: dict[str, Any] = {}
    if schemas:
        components["schemas"] = schemas
    if auth != "none":
        components["securitySchemes"] = {auth: get_security_scheme(auth)}
    components["responses"] = standard_error_responses()
    if any("422" in e.responses for e in endpoints):
        components["responses"]["BusinessFault"] = business_fault_response()
    spec["components"] = components

    return spec

"""Synthesize REST endpoints from WSDL operations.

Each operation maps to exactly one endpoint. The HTTP method and path come
from ``ROUTING_RULES``, an ordered decision table over the operation name:
rules are tried top to bottom and the first match wins. Request and
response bodies are built from the operation's message parts with
name- and type-based inference for schema types and example values.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from .models import HttpMethod, RestEndpoint, RestParameter, WsdlOperation, WsdlPart

logger = logging.getLogger("reanimator.soap")

_VERB_PREFIX_RE = re.compile(
    r"^(get|create|add|insert|update|modify|edit|replace|delete|remove|list|find|"
    r"search|query|transfer|move|send|close|cancel|register|new|patch|set|change)",
    re.IGNORECASE,
)
_NOUN_SUFFIX_RE = re.compile(r"(request|response|operation|service)$", re.IGNORECASE)

# Field names that get their own PATCH sub-resource, checked in order
PATCH_FIELDS: tuple[str, ...] = ("status", "password", "email", "name")


def error_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "error": {"type": "string"},
            "message": {"type": "string"},
        },
    }


# ---------------------------------------------------------------------------
# Naming helpers
# ---------------------------------------------------------------------------


def to_kebab_case(value: str) -> str:
    value = re.sub(r"([a-z])([A-Z])", r"\1-\2", value)
    return re.sub(r"[\s_]+", "-", value).lower()


def to_camel_case(value: str) -> str:
    """Lower-case the first character (``UserId`` -> ``userId``)."""
    return value[:1].lower() + value[1:]


def extract_resource_name(operation_name: str) -> str:
    """Infer the resource noun of an operation (``GetUserById`` -> ``user``)."""
    resource = _VERB_PREFIX_RE.sub("", operation_name)
    resource = _NOUN_SUFFIX_RE.sub("", resource)
    words = re.sub(r"([A-Z])", r" \1", resource).split()
    return to_kebab_case(words[0]) if words else "resource"


def extract_field_name(operation_name: str) -> str | None:
    lowered = operation_name.lower()
    return next((f for f in PATCH_FIELDS if f in lowered), None)


def pluralize(word: str) -> str:
    if word.endswith(("s", "x", "ch", "sh")):
        return word + "es"
    if word.endswith("y") and (len(word) < 2 or word[-2] not in "aeiou"):
        return word[:-1] + "ies"
    return word + "s"


# ---------------------------------------------------------------------------
# Decision table
# ---------------------------------------------------------------------------


def _id_parameter(resource: str) -> RestParameter:
    return RestParameter(
        name="id",
        location="path",
        required=True,
        param_schema={"type": "string"},
        description=f"{resource} identifier",
    )


def _pagination_parameters() -> list[RestParameter]:
    return [
        RestParameter(
            name="limit",
            location="query",
            required=False,
            param_schema={"type": "integer", "format": "int32"},
            description="Maximum number of results to return",
        ),
        RestParameter(
            name="offset",
            location="query",
            required=False,
            param_schema={"type": "integer", "format": "int32"},
            description="Number of results to skip",
        ),
    ]


@dataclass(frozen=True)
class Route:
    """The method, path and parameters chosen for one operation."""

    method: HttpMethod
    path: str
    parameters: list[RestParameter]


@dataclass(frozen=True)
class RoutingRule:
    """One row of the decision table.

    Attributes:
        name: Short label used in logs and tests.
        matches: Predicate over the original operation name.
        build: Produces the route for an operation name that matched.
    """

    name: str
    matches: Callable[[str], bool]
    build: Callable[[str], Route]


def _starts_with(*prefixes: str) -> Callable[[str], bool]:
    pattern = re.compile(rf"^({'|'.join(prefixes)})")
    return lambda name: bool(pattern.match(name.lower()))


def _is_single_get(name: str) -> bool:
    lowered = name.lower()
    return (
        lowered.startswith("get")
        and name[3:4].isupper()
        and "list" not in lowered
        and "all" not in lowered
    )


def _is_partial_update(name: str) -> bool:
    return _starts_with("patch", "set", "change")(name) or "status" in name.lower()


def _item_route(method: HttpMethod) -> Callable[[str], Route]:
    def build(name: str) -> Route:
        resource = extract_resource_name(name)
        return Route(method, f"/{pluralize(resource)}/{{id}}", [_id_parameter(resource)])

    return build


def _collection_route(method: HttpMethod, paginate: bool = False) -> Callable[[str], Route]:
    def build(name: str) -> Route:
        resource = extract_resource_name(name)
        parameters = _pagination_parameters() if paginate else []
        return Route(method, f"/{pluralize(resource)}", parameters)

    return build


def _field_route(name: str) -> Route:
    resource = extract_resource_name(name)
    path = f"/{pluralize(resource)}/{{id}}"
    field = extract_field_name(name)
    if field:
        path = f"{path}/{field}"
    return Route("PATCH", path, [_id_parameter(resource)])


def _operation_route(name: str) -> Route:
    return Route("POST", f"/operations/{to_kebab_case(name)}", [])


ROUTING_RULES: tuple[RoutingRule, ...] = (
    RoutingRule("get-single", _is_single_get, _item_route("GET")),
    RoutingRule(
        "get-collection",
        _starts_with("list", "get", "find", "search", "query"),
        _collection_route("GET", paginate=True),
    ),
    RoutingRule(
        "create",
        _starts_with("create", "add", "insert", "register", "new"),
        _collection_route("POST"),
    ),
    RoutingRule(
        "replace",
        _starts_with("update", "modify", "edit", "replace"),
        _item_route("PUT"),
    ),
    RoutingRule("partial-update", _is_partial_update, _field_route),
    RoutingRule(
        "delete",
        _starts_with("delete", "remove", "close", "cancel"),
        _item_route("DELETE"),
    ),
    RoutingRule(
        "action",
        _starts_with("transfer", "move", "send"),
        _collection_route("POST"),
    ),
    RoutingRule("fallback", lambda name: True, _operation_route),
)


def match_routing_rule(operation_name: str) -> RoutingRule:
    """Return the first rule in ``ROUTING_RULES`` matching the name."""
    return next(rule for rule in ROUTING_RULES if rule.matches(operation_name))


def determine_route(operation_name: str) -> Route:
    return match_routing_rule(operation_name).build(operation_name)


# ---------------------------------------------------------------------------
# Schemas and examples
# ---------------------------------------------------------------------------


def map_wsdl_type(wsdl_type: str) -> str:
    """Infer a JSON schema type from a (cleaned) WSDL part type."""
    lowered = wsdl_type.lower()
    if "string" in lowered:
        return "string"
    if "int" in lowered or "long" in lowered or "short" in lowered:
        return "integer"
    if "decimal" in lowered or "float" in lowered or "double" in lowered:
        return "number"
    if "bool" in lowered:
        return "boolean"
    if "date" in lowered or "time" in lowered:
        return "string"
    if "array" in lowered or "list" in lowered:
        return "array"
    return "object"


# Checked in order against the lower-cased part name
EXAMPLES_BY_NAME: tuple[tuple[tuple[str, ...], Any], ...] = (
    (("id",), "123e4567-e89b-12d3-a456-426614174000"),
    (("email",), "user@example.com"),
    (("name",), "John Doe"),
    (("amount", "balance"), 1000.50),
    (("currency",), "USD"),
    (("status",), "active"),
    (("date", "time"), "2025-01-15T10:30:00Z"),
    (("count", "number"), 42),
)

# Checked in order against the lower-cased part type
EXAMPLES_BY_TYPE: tuple[tuple[tuple[str, ...], Any], ...] = (
    (("bool",), True),
    (("int", "long"), 123),
    (("decimal", "float"), 123.45),
    (("array",), []),
)


def generate_example_value(part_type: str, part_name: str) -> Any:
    lowered_name = part_name.lower()
    for needles, value in EXAMPLES_BY_NAME:
        if any(n in lowered_name for n in needles):
            return value

    lowered_type = part_type.lower()
    for needles, value in EXAMPLES_BY_TYPE:
        if any(n in lowered_type for n in needles):
            return list(value) if isinstance(value, list) else value

    return "example value"


def _property_schema(part: WsdlPart, suffix: str) -> dict[str, Any]:
    schema: dict[str, Any] = {
        "type": map_wsdl_type(part.type),
        "description": f"{part.name} {suffix}",
    }
    if schema["type"] == "array":
        schema["items"] = {"type": "object"}
    return schema


def create_request_body(operation: WsdlOperation, include_examples: bool = True) -> dict[str, Any]:
    """JSON request body built from the input message parts.

    Every part is required unless its name contains "optional".
    """
    properties: dict[str, Any] = {}
    required: list[str] = []
    for part in operation.input.parts:
        prop = to_camel_case(part.name)
        properties[prop] = _property_schema(part, "parameter")
        if "optional" not in part.name.lower():
            required.append(prop)

    schema: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required

    media: dict[str, Any] = {"schema": schema}
    if include_examples:
        media["examples"] = {
            "default": {
                "summary": "Example request",
                "value": {
                    to_camel_case(p.name): generate_example_value(p.type, p.name)
                    for p in operation.input.parts
                },
            }
        }

    return {"required": True, "content": {"application/json": media}}


def _json_response(description: str, schema: dict[str, Any]) -> dict[str, Any]:
    return {"description": description, "content": {"application/json": {"schema": schema}}}


def create_responses(
    operation: WsdlOperation, resource: str, include_examples: bool = True
) -> dict[str, dict[str, Any]]:
    """Success response from the output parts plus the standard error responses.

    A 422 business fault response is added when the operation declares a
    SOAP fault.
    """
    success_schema = {
        "type": "object",
        "properties": {
            to_camel_case(p.name): _property_schema(p, "value") for p in operation.output.parts
        },
    }
    success = _json_response("Successful operation", success_schema)
    if include_examples:
        success["content"]["application/json"]["examples"] = {
            "success": {
                "summary": "Successful response",
                "value": {
                    to_camel_case(p.name): generate_example_value(p.type, p.name)
                    for p in operation.output.parts
                },
            }
        }

    responses = {
        "200": success,
        "400": _json_response(
            "Bad request - Invalid input parameters",
            {
                "type": "object",
                "properties": {
                    "error": {"type": "string"},
                    "message": {"type": "string"},
                    "details": {"type": "array", "items": {"type": "string"}},
                },
            },
        ),
        "404": _json_response(f"{resource} not found", error_schema()),
        "500": _json_response("Internal server error", error_schema()),
    }

    if operation.fault is not None:
        responses["422"] = _json_response(
            "Business logic error",
            {
                "type": "object",
                "properties": {
                    "faultCode": {"type": "string"},
                    "faultString": {"type": "string"},
                },
            },
        )

    return responses


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

_SUMMARY_ACTIONS: dict[str, str] = {
    "GET": "Retrieve",
    "POST": "Create",
    "PUT": "Update",
    "PATCH": "Modify",
    "DELETE": "Delete",
}


def generate_summary(operation_name: str, method: str) -> str:
    return f"{_SUMMARY_ACTIONS[method]} {extract_resource_name(operation_name)}"


def transform_operation(operation: WsdlOperation, include_examples: bool = True) -> RestEndpoint:
    route = determine_route(operation.name)
    resource = extract_resource_name(operation.name)

    return RestEndpoint(
        method=route.method,
        path=route.path,
        operation_id=to_camel_case(operation.name),
        summary=operation.documentation or generate_summary(operation.name, route.method),
        description=(
            f"Converted from SOAP operation: {operation.name}"
            if operation.documentation
            else None
        ),
        parameters=route.parameters,
        request_body=(
            create_request_body(operation, include_examples)
            if route.method not in ("GET", "DELETE")
            else None
        ),
        responses=create_responses(operation, resource, include_examples),
        tags=[resource],
    )


def transform_to_rest_endpoints(
    operations: Sequence[WsdlOperation], include_examples: bool = True
) -> list[RestEndpoint]:
    """Map operations to endpoints one to one, preserving order."""
    endpoints = [transform_operation(op, include_examples) for op in operations]
    for op, endpoint in zip(operations, endpoints):
        logger.debug(f"{op.name} -> {endpoint.method} {endpoint.path}")
    return endpoints

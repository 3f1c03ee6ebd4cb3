"""Pydantic models for WSDL parsing and SOAP to REST conversion.

WSDL records mirror the simplified structure extracted by the parser;
REST records describe the synthesized endpoints. Assembled OpenAPI
documents are kept as plain dicts since they are emitted as-is.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]
AuthStrategy = Literal["none", "bearer", "apikey", "oauth2"]
TargetFramework = Literal["express", "nextjs", "fastapi"]


class SoapModel(BaseModel):
    """Base for conversion records: immutable, camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


# ---------------------------------------------------------------------------
# WSDL
# ---------------------------------------------------------------------------


class WsdlPart(SoapModel):
    """A message part; ``type`` falls back to the element name when untyped."""

    name: str
    type: str
    element: str | None = None
    is_array: bool = False


class WsdlMessage(SoapModel):
    name: str
    parts: list[WsdlPart] = Field(default_factory=list)


class WsdlOperation(SoapModel):
    """A named request/response pair from a WSDL port type.

    Attributes:
        name: Operation name as written in the port type.
        input: Resolved input message (synthetic and empty when unresolved).
        output: Resolved output message (synthetic and empty when unresolved).
        fault: Fault message, only when the operation declares one.
        documentation: Text of the operation's documentation element.
        soap_action: SOAP action from the binding, when present.
    """

    name: str
    input: WsdlMessage
    output: WsdlMessage
    fault: WsdlMessage | None = None
    documentation: str | None = None
    soap_action: str | None = None


class WsdlTypeProperty(SoapModel):
    type: str
    required: bool = True
    is_array: bool = False
    format: str | None = None
    description: str | None = None


class WsdlComplexType(SoapModel):
    name: str
    properties: dict[str, WsdlTypeProperty] = Field(default_factory=dict)
    is_array: bool = False
    documentation: str | None = None


class WsdlService(SoapModel):
    name: str
    port_types: list[str] = Field(default_factory=list)
    bindings: list[str] = Field(default_factory=list)
    endpoints: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# REST
# ---------------------------------------------------------------------------


class RestParameter(SoapModel):
    name: str
    location: Literal["path", "query", "header"] = Field(alias="in")
    required: bool
    param_schema: dict[str, Any] = Field(alias="schema")
    description: str | None = None


class RestEndpoint(SoapModel):
    """One REST endpoint synthesized from one WSDL operation."""

    method: HttpMethod
    path: str
    operation_id: str
    summary: str
    description: str | None = None
    parameters: list[RestParameter] = Field(default_factory=list)
    request_body: dict[str, Any] | None = None
    responses: dict[str, dict[str, Any]] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------


class ConversionOptions(SoapModel):
    """Options for ``convert_soap_to_rest``.

    Attributes:
        generate_stubs: Emit handler stubs for ``target_framework``.
        target_framework: Framework the stubs are written for.
        auth_strategy: Security scheme attached to every operation.
        service_name: Overrides the service name found in the WSDL.
        include_examples: Attach example payloads to bodies and responses.
    """

    generate_stubs: bool = False
    target_framework: TargetFramework = "nextjs"
    auth_strategy: AuthStrategy = "bearer"
    service_name: str | None = None
    include_examples: bool = True


class ConversionPhase(SoapModel):
    phase: int
    name: str
    duration: str
    activities: list[str] = Field(default_factory=list)
    deliverables: list[str] = Field(default_factory=list)
    risks: list[str] = Field(default_factory=list)


class ConversionResult(SoapModel):
    """Aggregate result of one conversion invocation."""

    open_api_spec: dict[str, Any]
    endpoints: list[RestEndpoint] = Field(default_factory=list)
    complex_types: list[WsdlComplexType] = Field(default_factory=list)
    migration_plan: list[ConversionPhase] = Field(default_factory=list)
    code_stubs: list[str] | None = None
    warnings: list[str] = Field(default_factory=list)
    cross_chamber_suggestions: list[str] = Field(default_factory=list)

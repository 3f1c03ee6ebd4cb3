"""WSDL parsing: operations, messages, complex types and service info.

Operations are extracted structurally in two passes over the parsed tree:
messages are collected into a lookup first, then every port type
operation resolves its input, output and fault against it. Unresolved
references fall back to synthetic empty messages instead of failing.

Complex types, service names, SOAP actions and port type names are pulled
from the raw text with regular expressions, independently of the tree.
The two passes are not cross-checked and may disagree.
"""

from __future__ import annotations

import logging
import re

from ..constants import DEFAULT_SERVICE_NAME
from .models import (
    WsdlComplexType,
    WsdlMessage,
    WsdlOperation,
    WsdlPart,
    WsdlService,
    WsdlTypeProperty,
)
from .xml_tree import XmlNode, parse_xml

logger = logging.getLogger("reanimator.soap")

_QNAME_PREFIX_RE = re.compile(r"^[\w.-]+:")
_TYPE_PREFIX_RE = re.compile(r"^(xsd:|xs:|tns:|ns\d+:)")

_SCHEMA_RE = re.compile(
    r"<(?P<p>xsd|xs):schema[^>]*>(?P<body>[\s\S]*?)</(?P=p):schema>", re.IGNORECASE
)
_COMPLEX_TYPE_RE = re.compile(
    r'<(?P<p>xsd|xs):complexType[^>]*\sname="(?P<name>[^"]+)"[^>]*>'
    r"(?P<body>[\s\S]*?)</(?P=p):complexType>",
    re.IGNORECASE,
)
_ELEMENT_RE = re.compile(r"<(?:xsd|xs):element\b[^>]*/>", re.IGNORECASE)
_DOCUMENTATION_RE = re.compile(
    r"<(?P<p>xsd|xs):documentation[^>]*>(?P<text>[\s\S]*?)</(?P=p):documentation>",
    re.IGNORECASE,
)

XSD_TO_JSON_TYPES: dict[str, str] = {
    "string": "string",
    "int": "integer",
    "integer": "integer",
    "long": "integer",
    "short": "integer",
    "decimal": "number",
    "float": "number",
    "double": "number",
    "boolean": "boolean",
    "bool": "boolean",
    "date": "string",
    "datetime": "string",
    "time": "string",
}

XSD_FORMATS: dict[str, str] = {
    "int": "int32",
    "long": "int64",
    "float": "float",
    "double": "double",
    "date": "date",
    "datetime": "date-time",
}


def _attr(text: str, name: str) -> str | None:
    match = re.search(rf'\s{name}="([^"]*)"', text)
    return match.group(1) if match else None


def clean_message_name(name: str | None) -> str:
    """Strip the namespace prefix from a message QName."""
    if not name:
        return ""
    return _QNAME_PREFIX_RE.sub("", name)


def clean_type_name(type_name: str) -> str:
    """Strip XSD and target namespace prefixes from a type name."""
    return _TYPE_PREFIX_RE.sub("", type_name)


def is_array_type(type_name: str) -> bool:
    lowered = type_name.lower()
    return "array" in lowered or "list" in lowered


def map_xsd_type(xsd_type: str) -> str:
    """Map an XSD type name onto a JSON schema type (unknown types are objects)."""
    return XSD_TO_JSON_TYPES.get(clean_type_name(xsd_type).lower(), "object")


# ---------------------------------------------------------------------------
# Structural pass
# ---------------------------------------------------------------------------


def parse_wsdl(wsdl_content: str) -> list[WsdlOperation]:
    """Extract the operations of every port type in a WSDL document.

    Args:
        wsdl_content: Raw WSDL/XML text.

    Returns:
        Operations in document order. Empty when the document has no port
        types; callers decide whether that deserves a warning.

    Raises:
        ParseError: The document is not well-formed XML.
    """
    root = parse_xml(wsdl_content)
    return extract_operations(root, wsdl_content)


def _definitions(root: XmlNode) -> XmlNode:
    if root.tag == "definitions":
        return root
    nested = root.find("definitions")
    return nested if nested is not None else root


def extract_messages(definitions: XmlNode) -> dict[str, WsdlMessage]:
    """Collect message definitions keyed by their unprefixed name."""
    messages: dict[str, WsdlMessage] = {}

    for msg in definitions.find_all("message"):
        name = msg.get("name")
        if not name:
            continue

        parts: list[WsdlPart] = []
        for part in msg.find_all("part"):
            part_name = part.get("name")
            element = part.get("element")
            part_type = part.get("type") or element
            if not part_name or not part_type:
                continue
            parts.append(
                WsdlPart(
                    name=part_name,
                    type=clean_type_name(part_type),
                    element=clean_type_name(element) if element else None,
                    is_array=is_array_type(part_type),
                )
            )

        messages[clean_message_name(name)] = WsdlMessage(name=name, parts=parts)

    return messages


def _resolve_message(
    ref_node: XmlNode | None,
    messages: dict[str, WsdlMessage],
    fallback_name: str,
) -> WsdlMessage:
    ref = ref_node.get("message") if ref_node is not None else None
    resolved = messages.get(clean_message_name(ref))
    if resolved is not None:
        return resolved
    return WsdlMessage(name=ref or fallback_name, parts=[])


def extract_operations(root: XmlNode, raw_content: str) -> list[WsdlOperation]:
    definitions = _definitions(root)
    messages = extract_messages(definitions)

    port_types = definitions.find_all("portType")
    if not port_types:
        logger.debug("No portType elements found in WSDL")
        return []

    operations: list[WsdlOperation] = []
    for port_type in port_types:
        for op in port_type.find_all("operation"):
            name = op.get("name")
            if not name:
                continue

            fault_node = op.find("fault")
            operations.append(
                WsdlOperation(
                    name=name,
                    input=_resolve_message(op.find("input"), messages, f"{name}Request"),
                    output=_resolve_message(op.find("output"), messages, f"{name}Response"),
                    fault=(
                        _resolve_message(fault_node, messages, f"{name}Fault")
                        if fault_node is not None
                        else None
                    ),
                    documentation=_extract_documentation(op),
                    soap_action=extract_soap_action(raw_content, name),
                )
            )

    logger.debug(f"Parsed {len(operations)} operations from {len(port_types)} port types")
    return operations


def _extract_documentation(op: XmlNode) -> str | None:
    doc = op.find("documentation")
    if doc is None or not doc.text:
        return None
    return doc.text


def extract_soap_action(wsdl_content: str, operation_name: str) -> str | None:
    """Find the SOAP action a binding declares for an operation."""
    pattern = re.compile(
        rf'<(?:\w+:)?operation[^>]*name="{re.escape(operation_name)}"[^>]*>\s*'
        r'<\w+:operation[^>]*soapAction="([^"]+)"',
        re.IGNORECASE,
    )
    match = pattern.search(wsdl_content)
    return match.group(1) if match else None


# ---------------------------------------------------------------------------
# Text pass
# ---------------------------------------------------------------------------


def extract_complex_types(wsdl_content: str) -> list[WsdlComplexType]:
    """Extract ``complexType`` definitions from inline XSD schemas.

    Only self-closing ``element`` declarations with both a name and a type
    become properties. ``minOccurs="0"`` marks a property optional and
    ``maxOccurs="unbounded"`` marks it as an array.
    """
    types: list[WsdlComplexType] = []

    for schema in _SCHEMA_RE.finditer(wsdl_content):
        for complex_type in _COMPLEX_TYPE_RE.finditer(schema.group("body")):
            body = complex_type.group("body")
            properties: dict[str, WsdlTypeProperty] = {}

            for element in _ELEMENT_RE.finditer(body):
                tag = element.group(0)
                elem_name = _attr(tag, "name")
                elem_type = _attr(tag, "type")
                if not elem_name or not elem_type:
                    continue

                min_occurs = _attr(tag, "minOccurs")
                max_occurs = _attr(tag, "maxOccurs")
                properties[elem_name] = WsdlTypeProperty(
                    type=map_xsd_type(elem_type),
                    required=min_occurs != "0" if min_occurs is not None else True,
                    is_array=max_occurs == "unbounded",
                    format=XSD_FORMATS.get(clean_type_name(elem_type).lower()),
                )

            doc = _DOCUMENTATION_RE.search(body)
            types.append(
                WsdlComplexType(
                    name=complex_type.group("name"),
                    properties=properties,
                    is_array=False,
                    documentation=doc.group("text").strip() if doc else None,
                )
            )

    return types


def _names(wsdl_content: str, local_name: str) -> list[str]:
    pattern = re.compile(rf'<(?:\w+:)?{local_name}\b[^>]*\sname="([^"]+)"', re.IGNORECASE)
    return pattern.findall(wsdl_content)


def extract_service_info(wsdl_content: str) -> WsdlService:
    """Service name plus port type and binding names, from the raw text."""
    services = _names(wsdl_content, "service")
    return WsdlService(
        name=services[0] if services else DEFAULT_SERVICE_NAME,
        port_types=_names(wsdl_content, "portType"),
        bindings=_names(wsdl_content, "binding"),
        endpoints=re.findall(r'<\w+:address[^>]*\slocation="([^"]+)"', wsdl_content),
    )


def extract_service_name(wsdl_content: str) -> str:
    return extract_service_info(wsdl_content).name

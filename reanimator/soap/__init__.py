"""SOAP/WSDL to REST/OpenAPI conversion.

Quick start::

    from reanimator.soap import convert_soap_to_rest

    result = convert_soap_to_rest(wsdl_text, {"auth_strategy": "apikey"})
    print(result.open_api_spec["paths"].keys())
"""

from .converter import convert_soap_to_rest, generate_migration_plan
from .models import (
    ConversionOptions,
    ConversionPhase,
    ConversionResult,
    RestEndpoint,
    RestParameter,
    WsdlComplexType,
    WsdlMessage,
    WsdlOperation,
    WsdlPart,
    WsdlService,
    WsdlTypeProperty,
)
from .openapi import generate_openapi_spec
from .parser import (
    extract_complex_types,
    extract_service_info,
    extract_service_name,
    parse_wsdl,
)
from .stubs import generate_code_stubs
from .transformer import determine_route, transform_operation, transform_to_rest_endpoints
from .xml_tree import XmlNode, parse_xml

__all__ = [
    "convert_soap_to_rest",
    "generate_migration_plan",
    "generate_openapi_spec",
    "generate_code_stubs",
    "parse_wsdl",
    "parse_xml",
    "extract_complex_types",
    "extract_service_info",
    "extract_service_name",
    "determine_route",
    "transform_operation",
    "transform_to_rest_endpoints",
    "XmlNode",
    "ConversionOptions",
    "ConversionPhase",
    "ConversionResult",
    "RestEndpoint",
    "RestParameter",
    "WsdlComplexType",
    "WsdlMessage",
    "WsdlOperation",
    "WsdlPart",
    "WsdlService",
    "WsdlTypeProperty",
]

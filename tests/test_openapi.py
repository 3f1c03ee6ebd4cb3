"""Tests for OpenAPI document assembly."""

import pytest

from reanimator.soap.models import ConversionOptions
from reanimator.soap.openapi import (
    complex_type_schema,
    generate_openapi_spec,
    get_security_scheme,
)
from reanimator.soap.parser import extract_complex_types, parse_wsdl
from reanimator.soap.transformer import transform_to_rest_endpoints


@pytest.fixture
def user_endpoints(user_service_wsdl):
    return transform_to_rest_endpoints(parse_wsdl(user_service_wsdl))


class TestSecuritySchemes:
    """Scheme definitions per auth strategy."""

    def test_bearer(self):
        scheme = get_security_scheme("bearer")
        assert scheme["type"] == "http"
        assert scheme["scheme"] == "bearer"
        assert scheme["bearerFormat"] == "JWT"

    def test_apikey(self):
        scheme = get_security_scheme("apikey")
        assert scheme == {
            "type": "apiKey",
            "in": "header",
            "name": "X-API-Key",
            "description": "API key for authentication",
        }

    def test_oauth2(self):
        flows = get_security_scheme("oauth2")["flows"]
        assert set(flows["authorizationCode"]["scopes"]) == {"read", "write", "admin"}

    def test_none(self):
        assert get_security_scheme("none") == {}


class TestGenerateOpenApiSpec:
    """Document structure."""

    def test_header(self, user_endpoints):
        spec = generate_openapi_spec(user_endpoints, "UserService", ConversionOptions())
        assert spec["openapi"] == "3.0.0"
        assert spec["info"]["title"] == "UserService"
        assert spec["info"]["version"] == "1.0.0"
        assert len(spec["servers"]) == 3

    def test_paths_grouped_by_path_and_method(self, user_endpoints):
        spec = generate_openapi_spec(user_endpoints, "UserService", ConversionOptions())
        assert set(spec["paths"]) == {"/users/{id}", "/users"}
        get_user = spec["paths"]["/users/{id}"]["get"]
        assert get_user["operationId"] == "getUser"
        assert get_user["parameters"][0]["in"] == "path"
        assert "requestBody" not in get_user
        assert "requestBody" in spec["paths"]["/users"]["post"]

    def test_security_attached_for_bearer(self, user_endpoints):
        spec = generate_openapi_spec(user_endpoints, "UserService", ConversionOptions())
        assert spec["components"]["securitySchemes"]["bearer"]["scheme"] == "bearer"
        assert spec["paths"]["/users"]["post"]["security"] == [{"bearer": []}]

    def test_no_security_for_none(self, user_endpoints):
        spec = generate_openapi_spec(
            user_endpoints, "UserService", ConversionOptions(auth_strategy="none")
        )
        assert "securitySchemes" not in spec["components"]
        assert "security" not in spec["paths"]["/users"]["post"]

    def test_tags_deduplicated(self, user_endpoints):
        spec = generate_openapi_spec(user_endpoints, "UserService", ConversionOptions())
        assert spec["tags"] == [{"name": "user", "description": "Operations related to user"}]

    def test_empty_service(self):
        spec = generate_openapi_spec([], "Empty", ConversionOptions(auth_strategy="none"))
        assert spec["paths"] == {}
        assert "tags" not in spec
        assert set(spec["components"]) == {"responses"}
        assert set(spec["components"]["responses"]) == {"BadRequest", "NotFound", "InternalError"}

    def test_business_fault_component(self, fault_wsdl):
        endpoints = transform_to_rest_endpoints(parse_wsdl(fault_wsdl))
        spec = generate_openapi_spec(endpoints, "AccountService", ConversionOptions())
        assert "BusinessFault" in spec["components"]["responses"]

    def test_later_endpoint_wins_on_collision(self):
        from reanimator.soap.models import WsdlMessage, WsdlOperation

        def op(name):
            return WsdlOperation(
                name=name,
                input=WsdlMessage(name="in", parts=[]),
                output=WsdlMessage(name="out", parts=[]),
            )

        endpoints = transform_to_rest_endpoints([op("DeleteUser"), op("RemoveUser")])
        spec = generate_openapi_spec(endpoints, "S", ConversionOptions())
        assert spec["paths"]["/users/{id}"]["delete"]["operationId"] == "removeUser"

    def test_complex_type_schemas(self, user_service_wsdl, user_endpoints):
        types = extract_complex_types(user_service_wsdl)
        spec = generate_openapi_spec(user_endpoints, "UserService", ConversionOptions(), types)
        user = spec["components"]["schemas"]["User"]
        assert user["type"] == "object"
        assert user["description"] == "A registered account"
        assert user["required"] == ["id", "username", "roles"]
        assert user["properties"]["age"] == {"type": "integer", "format": "int32"}
        assert user["properties"]["roles"] == {"type": "array", "items": {"type": "string"}}

    def test_documents_are_independent(self, user_endpoints):
        first = generate_openapi_spec(user_endpoints, "A", ConversionOptions())
        first["components"]["responses"]["BadRequest"]["description"] = "changed"
        second = generate_openapi_spec(user_endpoints, "A", ConversionOptions())
        assert second["components"]["responses"]["BadRequest"]["description"] != "changed"


class TestComplexTypeSchema:
    """Schema conversion for a single complex type."""

    def test_without_required_or_documentation(self):
        from reanimator.soap.models import WsdlComplexType, WsdlTypeProperty

        ct = WsdlComplexType(
            name="Note",
            properties={"text": WsdlTypeProperty(type="string", required=False)},
        )
        assert complex_type_schema(ct) == {
            "type": "object",
            "properties": {"text": {"type": "string"}},
        }

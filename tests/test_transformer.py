"""Tests for REST endpoint synthesis."""

import pytest

from reanimator.soap.models import WsdlMessage, WsdlOperation, WsdlPart
from reanimator.soap.parser import parse_wsdl
from reanimator.soap.transformer import (
    ROUTING_RULES,
    create_request_body,
    create_responses,
    determine_route,
    extract_field_name,
    extract_resource_name,
    generate_example_value,
    generate_summary,
    map_wsdl_type,
    match_routing_rule,
    pluralize,
    to_camel_case,
    to_kebab_case,
    transform_operation,
    transform_to_rest_endpoints,
)


def make_operation(name, inputs=(), outputs=(), fault=False, documentation=None):
    """Build an operation from (name, type) pairs."""
    return WsdlOperation(
        name=name,
        input=WsdlMessage(
            name=f"{name}Request", parts=[WsdlPart(name=n, type=t) for n, t in inputs]
        ),
        output=WsdlMessage(
            name=f"{name}Response", parts=[WsdlPart(name=n, type=t) for n, t in outputs]
        ),
        fault=WsdlMessage(name=f"{name}Fault", parts=[]) if fault else None,
        documentation=documentation,
    )


class TestNaming:
    """Case conversion, resource names and pluralization."""

    def test_kebab_case(self):
        assert to_kebab_case("ProcessPayment") == "process-payment"
        assert to_kebab_case("bulk_import items") == "bulk-import-items"

    def test_camel_case(self):
        assert to_camel_case("UserId") == "userId"
        assert to_camel_case("") == ""

    @pytest.mark.parametrize(
        "operation,resource",
        [
            ("GetUser", "user"),
            ("GetUserById", "user"),
            ("CreateOrderRequest", "order"),
            ("DeleteAccount", "account"),
            ("SendMessage", "message"),
            ("Get", "resource"),
        ],
    )
    def test_extract_resource_name(self, operation, resource):
        assert extract_resource_name(operation) == resource

    def test_extract_field_name(self):
        assert extract_field_name("SetUserStatus") == "status"
        assert extract_field_name("ChangePassword") == "password"
        assert extract_field_name("PatchAccount") is None

    @pytest.mark.parametrize(
        "word,plural",
        [
            ("user", "users"),
            ("box", "boxes"),
            ("batch", "batches"),
            ("category", "categories"),
            ("day", "days"),
            ("y", "ies"),
        ],
    )
    def test_pluralize(self, word, plural):
        assert pluralize(word) == plural


class TestRouting:
    """The ordered decision table."""

    def test_get_user(self):
        route = determine_route("GetUser")
        assert route.method == "GET"
        assert route.path == "/users/{id}"
        assert [p.name for p in route.parameters] == ["id"]
        assert route.parameters[0].location == "path"

    def test_create_user(self):
        route = determine_route("CreateUser")
        assert route.method == "POST"
        assert route.path == "/users"
        assert route.parameters == []

    def test_list_operations_are_paginated(self):
        route = determine_route("FindCustomer")
        assert route.method == "GET"
        assert route.path == "/customers"
        assert [p.name for p in route.parameters] == ["limit", "offset"]

    def test_get_all_is_a_collection(self):
        assert match_routing_rule("GetAllOrders").name == "get-collection"

    def test_lowercase_get_is_not_single(self):
        assert match_routing_rule("getuser").name == "get-collection"

    def test_update_is_put(self):
        route = determine_route("UpdateUser")
        assert (route.method, route.path) == ("PUT", "/users/{id}")

    def test_update_wins_over_status(self):
        """Rule order decides: update comes before the status sub-resource rule."""
        assert determine_route("UpdateOrderStatus").method == "PUT"

    def test_status_sub_resource(self):
        route = determine_route("SetOrderStatus")
        assert (route.method, route.path) == ("PATCH", "/orders/{id}/status")

    def test_partial_update_without_field(self):
        route = determine_route("PatchAccount")
        assert (route.method, route.path) == ("PATCH", "/accounts/{id}")

    def test_delete_family(self):
        assert determine_route("DeleteUser").method == "DELETE"
        assert determine_route("CancelOrder").path == "/orders/{id}"

    def test_action(self):
        route = determine_route("SendMessage")
        assert (route.method, route.path) == ("POST", "/messages")

    def test_fallback(self):
        route = determine_route("ProcessPayment")
        assert (route.method, route.path) == ("POST", "/operations/process-payment")
        assert match_routing_rule("ProcessPayment").name == "fallback"

    def test_table_ends_with_catch_all(self):
        assert ROUTING_RULES[-1].matches("anything at all")


class TestSchemasAndExamples:
    """Type inference and example values."""

    @pytest.mark.parametrize(
        "wsdl_type,json_type",
        [
            ("string", "string"),
            ("int", "integer"),
            ("long", "integer"),
            ("decimal", "number"),
            ("boolean", "boolean"),
            ("dateTime", "string"),
            ("ArrayOfUser", "array"),
            ("User", "object"),
        ],
    )
    def test_map_wsdl_type(self, wsdl_type, json_type):
        assert map_wsdl_type(wsdl_type) == json_type

    def test_examples_by_name_take_precedence(self):
        assert generate_example_value("int", "userId") == "123e4567-e89b-12d3-a456-426614174000"
        assert generate_example_value("string", "email") == "user@example.com"
        assert generate_example_value("string", "username") == "John Doe"
        assert generate_example_value("decimal", "balance") == 1000.50

    def test_examples_by_type(self):
        assert generate_example_value("boolean", "flag") is True
        assert generate_example_value("int", "quantity") == 123
        assert generate_example_value("ArrayOfThing", "things") == []
        assert generate_example_value("Thing", "thing") == "example value"

    def test_request_body(self):
        op = make_operation("CreateUser", inputs=[("Username", "string"), ("optionalNote", "string")])
        body = create_request_body(op)
        media = body["content"]["application/json"]
        assert body["required"] is True
        assert list(media["schema"]["properties"]) == ["username", "optionalNote"]
        assert media["schema"]["required"] == ["username"]
        assert media["examples"]["default"]["value"] == {
            "username": "John Doe",
            "optionalNote": "example value",
        }

    def test_request_body_without_parts_omits_required(self):
        body = create_request_body(make_operation("Ping"))
        assert "required" not in body["content"]["application/json"]["schema"]

    def test_request_body_without_examples(self):
        body = create_request_body(make_operation("CreateUser", inputs=[("name", "string")]), False)
        assert "examples" not in body["content"]["application/json"]

    def test_array_property_has_items(self):
        body = create_request_body(make_operation("AddTags", inputs=[("tags", "ArrayOfString")]))
        prop = body["content"]["application/json"]["schema"]["properties"]["tags"]
        # "string" is checked before "array"
        assert prop["type"] == "string"

        body = create_request_body(make_operation("AddItems", inputs=[("items", "ItemList")]))
        prop = body["content"]["application/json"]["schema"]["properties"]["items"]
        assert prop == {"type": "array", "description": "items parameter", "items": {"type": "object"}}

    def test_responses(self):
        responses = create_responses(make_operation("GetUser", outputs=[("user", "User")]), "user")
        assert list(responses) == ["200", "400", "404", "500"]
        assert responses["404"]["description"] == "user not found"
        success = responses["200"]["content"]["application/json"]
        assert success["schema"]["properties"]["user"]["type"] == "object"
        assert success["examples"]["success"]["value"] == {"user": "example value"}

    def test_fault_adds_422(self):
        responses = create_responses(make_operation("CloseAccount", fault=True), "account")
        assert "422" in responses
        assert responses["422"]["description"] == "Business logic error"


class TestTransformOperation:
    """Whole-endpoint synthesis."""

    def test_get_user_from_wsdl(self, user_service_wsdl):
        get_user = parse_wsdl(user_service_wsdl)[0]
        endpoint = transform_operation(get_user)

        assert endpoint.method == "GET"
        assert endpoint.path == "/users/{id}"
        assert endpoint.operation_id == "getUser"
        assert endpoint.summary == "Fetch a single account"
        assert endpoint.description == "Converted from SOAP operation: GetUser"
        assert endpoint.request_body is None
        assert endpoint.tags == ["user"]

    def test_create_user_from_wsdl(self, user_service_wsdl):
        create_user = parse_wsdl(user_service_wsdl)[1]
        endpoint = transform_operation(create_user)

        assert endpoint.method == "POST"
        assert endpoint.path == "/users"
        assert endpoint.summary == "Create user"
        assert endpoint.description is None
        schema = endpoint.request_body["content"]["application/json"]["schema"]
        assert "username" in schema["properties"]
        assert "username" in schema["required"]

    def test_delete_has_no_body(self):
        endpoint = transform_operation(make_operation("DeleteUser", inputs=[("userId", "string")]))
        assert endpoint.request_body is None

    def test_generate_summary(self):
        assert generate_summary("SetOrderStatus", "PATCH") == "Modify order"

    def test_one_endpoint_per_operation(self, user_service_wsdl):
        operations = parse_wsdl(user_service_wsdl)
        endpoints = transform_to_rest_endpoints(operations)
        assert [e.operation_id for e in endpoints] == ["getUser", "createUser"]

    def test_parameters_serialize_with_openapi_names(self):
        endpoint = transform_operation(make_operation("GetUser"))
        param = endpoint.parameters[0].model_dump(by_alias=True, exclude_none=True)
        assert param["in"] == "path"
        assert param["schema"] == {"type": "string"}

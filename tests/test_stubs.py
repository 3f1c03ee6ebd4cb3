"""Tests for handler stub generation."""

import ast

import pytest

from reanimator.soap.parser import parse_wsdl
from reanimator.soap.stubs import generate_code_stubs
from reanimator.soap.transformer import transform_to_rest_endpoints


@pytest.fixture
def user_stub_inputs(user_service_wsdl):
    operations = parse_wsdl(user_service_wsdl)
    return transform_to_rest_endpoints(operations), [op.name for op in operations]


class TestGenerateCodeStubs:
    """One stub per endpoint, per framework."""

    def test_express(self, user_stub_inputs):
        get_stub, create_stub = generate_code_stubs(*user_stub_inputs, "express")
        assert get_stub.startswith("// Fetch a single account\n")
        assert "router.get('/users/:id', async (req, res, next) => {" in get_stub
        assert "router.post('/users'" in create_stub
        assert "soapFacade.call('CreateUser'" in create_stub

    def test_nextjs(self, user_stub_inputs):
        get_stub, create_stub = generate_code_stubs(*user_stub_inputs, "nextjs")
        assert get_stub.startswith("// app/api/users/[id]/route.ts")
        assert "export async function GET(request: Request, { params }" in get_stub
        assert "soapFacade.call('GetUser', params)" in get_stub
        assert "export async function POST(request: Request)" in create_stub
        assert "soapFacade.call('CreateUser', await request.json())" in create_stub

    def test_fastapi(self, user_stub_inputs):
        get_stub, create_stub = generate_code_stubs(*user_stub_inputs, "fastapi")
        assert get_stub.startswith('@router.get("/users/{id}"')
        assert "async def get_user(id: str):" in get_stub
        assert 'soap_facade.call("GetUser", {"id": id})' in get_stub
        assert "async def create_user(payload: dict):" in create_stub
        assert 'soap_facade.call("CreateUser", {**payload})' in create_stub

    def test_empty(self):
        assert generate_code_stubs([], [], "express") == []


class TestStubSummaries:
    """Operation documentation is embedded safely in generated code."""

    @pytest.fixture
    def quoted_stub_inputs(self, user_service_wsdl):
        wsdl = user_service_wsdl.replace(
            "Fetch a single account", 'Returns the "active"\n            user'
        )
        operations = parse_wsdl(wsdl)
        return transform_to_rest_endpoints(operations), [op.name for op in operations]

    def test_fastapi_summary_is_valid_python(self, quoted_stub_inputs):
        get_stub, _ = generate_code_stubs(*quoted_stub_inputs, "fastapi")

        tree = ast.parse(get_stub)
        decorator = tree.body[0].decorator_list[0]
        summary = next(k.value.value for k in decorator.keywords if k.arg == "summary")
        assert summary == 'Returns the "active" user'

    def test_express_comment_stays_on_one_line(self, quoted_stub_inputs):
        get_stub, _ = generate_code_stubs(*quoted_stub_inputs, "express")
        first, second = get_stub.splitlines()[:2]
        assert first == '// Returns the "active" user'
        assert second.startswith("router.get('/users/:id'")

    def test_nextjs_comment_stays_on_one_line(self, quoted_stub_inputs):
        get_stub, _ = generate_code_stubs(*quoted_stub_inputs, "nextjs")
        first, second = get_stub.splitlines()[:2]
        assert first == '// app/api/users/[id]/route.ts - Returns the "active" user'
        assert second.startswith("export async function GET(")

"""Handler stubs for synthesized endpoints.

Each stub is a self-contained source snippet for the chosen framework that
forwards to the original SOAP operation through a façade call, ready to be
pasted into a project and filled in.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from .models import RestEndpoint, TargetFramework
from .transformer import to_kebab_case

_PATH_PARAM_RE = re.compile(r"\{(\w+)\}")


def _one_line(text: str) -> str:
    return " ".join(text.split())


def _express_stub(endpoint: RestEndpoint, soap_operation: str) -> str:
    path = _PATH_PARAM_RE.sub(r":\1", endpoint.path)
    return (
        f"// {_one_line(endpoint.summary)}\n"
        f"router.{endpoint.method.lower()}('{path}', async (req, res, next) => {{\n"
        f"  try {{\n"
        f"    const result = await soapFacade.call('{soap_operation}', {{ ...req.params, ...req.query, ...req.body }});\n"
        f"    res.json(result);\n"
        f"  }} catch (err) {{\n"
        f"    next(err);\n"
        f"  }}\n"
        f"}});\n"
    )


def _nextjs_stub(endpoint: RestEndpoint, soap_operation: str) -> str:
    route_dir = _PATH_PARAM_RE.sub(r"[\1]", endpoint.path)
    has_params = bool(_PATH_PARAM_RE.search(endpoint.path))
    reads_body = endpoint.request_body is not None
    signature = (
        "request: Request, { params }: { params: Record<string, string> }"
        if has_params
        else "request: Request"
    )
    if has_params and reads_body:
        payload = "{ ...params, ...(await request.json()) }"
    elif reads_body:
        payload = "await request.json()"
    elif has_params:
        payload = "params"
    else:
        payload = "Object.fromEntries(new URL(request.url).searchParams)"
    return (
        f"// app/api{route_dir}/route.ts - {_one_line(endpoint.summary)}\n"
        f"export async function {endpoint.method}({signature}) {{\n"
        f"  const result = await soapFacade.call('{soap_operation}', {payload});\n"
        f"  return Response.json(result);\n"
        f"}}\n"
    )


def _fastapi_stub(endpoint: RestEndpoint, soap_operation: str) -> str:
    func_name = to_kebab_case(endpoint.operation_id).replace("-", "_")
    path_params = _PATH_PARAM_RE.findall(endpoint.path)
    args = [f"{p}: str" for p in path_params]
    fields = [f'"{p}": {p}' for p in path_params]
    if endpoint.request_body is not None:
        args.append("payload: dict")
        fields.insert(0, "**payload")
    payload = "{" + ", ".join(fields) + "}"
    summary = repr(_one_line(endpoint.summary))
    return (
        f'@router.{endpoint.method.lower()}("{endpoint.path}", summary={summary})\n'
        f"async def {func_name}({', '.join(args)}):\n"
        f'    return await soap_facade.call("{soap_operation}", {payload})\n'
    )


_GENERATORS = {
    "express": _express_stub,
    "nextjs": _nextjs_stub,
    "fastapi": _fastapi_stub,
}


def generate_code_stubs(
    endpoints: Sequence[RestEndpoint],
    soap_operations: Sequence[str],
    framework: TargetFramework,
) -> list[str]:
    """One stub per endpoint, paired positionally with its SOAP operation name."""
    generate = _GENERATORS[framework]
    return [generate(e, op) for e, op in zip(endpoints, soap_operations)]

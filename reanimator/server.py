import json
import logging
import sys
from typing import Annotated, Any

from fastmcp import FastMCP
from pydantic import Field
from pydantic import ValidationError as PydanticValidationError

from .analysis import analyze_legacy_code as run_analysis
from .constants import DEFAULT_AUTH_STRATEGY, LOG_FILE, LOG_LEVEL, MCP_PORT
from .core import ConversionError, InvalidInputError, configure_logging
from .soap import ConversionOptions
from .soap import convert_soap_to_rest as run_conversion

# Configure logging to stderr to avoid interfering with JSON-RPC on stdout
logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] %(name)s %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger("reanimator.server")

mcp: FastMCP = FastMCP("reanimator-mcp")


def _error(message: str) -> str:
    return json.dumps({"error": message})


def _require(value: str | None, field: str) -> str:
    if not value:
        raise InvalidInputError(f"Missing required field: {field}", field=field)
    return value


def run_analysis_request(
    code: str | None,
    path: str | None = None,
    file_type: str | None = None,
) -> str:
    """Analyze one artifact and return the report as a JSON string."""
    try:
        report = run_analysis(
            [
                {
                    "path": path or "uploaded-file",
                    "content": _require(code, "code"),
                    "type": file_type or "text",
                }
            ]
        )
    except InvalidInputError as e:
        return _error(str(e))

    return report.model_dump_json(by_alias=True)


def run_conversion_request(wsdl: str | None, **options: Any) -> str:
    """Convert a WSDL document and return the result as a JSON string.

    Options left as ``None`` fall back to the ``ConversionOptions``
    defaults, except the auth strategy which defaults to
    ``REANIMATOR_AUTH_STRATEGY``.
    """
    provided = {k: v for k, v in options.items() if v is not None}
    provided.setdefault("auth_strategy", DEFAULT_AUTH_STRATEGY)

    try:
        content = _require(wsdl, "wsdl")
        conversion_options = ConversionOptions.model_validate(provided)
        result = run_conversion(content, conversion_options)
    except InvalidInputError as e:
        return _error(str(e))
    except PydanticValidationError as e:
        logger.error(f"Invalid conversion options: {e}")
        return _error(f"Invalid conversion options: {e.errors()[0]['msg']}")
    except ConversionError as e:
        return _error(str(e))

    return result.model_dump_json(by_alias=True)


@mcp.tool
async def analyze_legacy_code(
    code: Annotated[
        str | None,
        Field(description="Source code or markup of the legacy artifact to analyze"),
    ] = None,
    path: Annotated[
        str | None,
        Field(
            description="Path or file name of the artifact (e.g., 'app/index.php'). Defaults to 'uploaded-file'"
        ),
    ] = None,
    file_type: Annotated[
        str | None,
        Field(description="Artifact type such as 'javascript', 'html' or 'php'. Defaults to 'text'"),
    ] = None,
) -> str:
    """Scan legacy source code for anti-patterns and produce a risk report.

    USE THIS TOOL WHEN:
    - You want a modernization risk score (0-100) for a legacy file
    - You need to know which legacy patterns (jQuery, SOAP, eval, var, ...) a file uses
    - You want to know which conversion chamber should handle the code

    DO NOT USE THIS TOOL FOR:
    - Converting a WSDL document to REST (use convert_soap_to_rest instead)

    Returns the report as JSON with camelCase keys: overallScore, riskBand,
    topFindings, patternsDetected, recommendations, resurrectionRoutes,
    migrationPhases, analyzedFiles, totalLines and complexityMetrics."""
    logger.info(f"Analyzing {path or 'uploaded-file'}")
    return run_analysis_request(code, path, file_type)


@mcp.tool
async def convert_soap_to_rest(
    wsdl: Annotated[
        str | None,
        Field(description="Full WSDL document (XML text) of the SOAP service to convert"),
    ] = None,
    auth_strategy: Annotated[
        str | None,
        Field(description="Security scheme for the REST API: 'none', 'bearer', 'apikey' or 'oauth2'"),
    ] = None,
    target_framework: Annotated[
        str | None,
        Field(description="Framework for generated handler stubs: 'express', 'nextjs' or 'fastapi'"),
    ] = None,
    generate_stubs: Annotated[
        bool | None,
        Field(description="Generate handler code stubs for every endpoint"),
    ] = None,
    service_name: Annotated[
        str | None,
        Field(description="Override the service name found in the WSDL"),
    ] = None,
    include_examples: Annotated[
        bool | None,
        Field(description="Attach example payloads to request bodies and responses"),
    ] = None,
) -> str:
    """Convert a SOAP/WSDL service description into REST endpoints and OpenAPI 3.0.

    USE THIS TOOL WHEN:
    - You have a WSDL document and want an equivalent REST API design
    - You need an OpenAPI specification for a SOAP service
    - You want a phased plan for migrating consumers off SOAP

    DO NOT USE THIS TOOL FOR:
    - Scoring arbitrary legacy code (use analyze_legacy_code instead)

    Returns JSON with openApiSpec, endpoints, complexTypes, migrationPlan,
    codeStubs, warnings and crossChamberSuggestions. Malformed XML yields
    {"error": "..."} instead."""
    logger.info(f"Converting WSDL ({len(wsdl or '')} characters)")
    return run_conversion_request(
        wsdl,
        auth_strategy=auth_strategy,
        target_framework=target_framework,
        generate_stubs=generate_stubs,
        service_name=service_name,
        include_examples=include_examples,
    )


def main() -> None:
    """Run the MCP server with HTTP streaming transport."""
    from . import __version__

    if LOG_FILE:
        configure_logging(log_file=LOG_FILE, log_level=LOG_LEVEL)

    print(f"Reanimator MCP Server v{__version__} (HTTP Streaming)", file=sys.stderr)
    print("=" * 50, file=sys.stderr)
    print(f"Default auth strategy for conversions: {DEFAULT_AUTH_STRATEGY}", file=sys.stderr)
    print(f"Starting HTTP streaming server on port {MCP_PORT}...", file=sys.stderr)
    print(f"HTTP endpoint will be available at: http://localhost:{MCP_PORT}/mcp", file=sys.stderr)

    try:
        import asyncio

        asyncio.run(mcp.run_http_async(transport="streamable-http", host="0.0.0.0", port=MCP_PORT))
    except KeyboardInterrupt:
        print("\nShutting down...", file=sys.stderr)
        sys.exit(0)
    except Exception as e:
        logger.exception(f"MCP server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

"""FastAPI application exposing one JSON-RPC / MCP endpoint per Fakturownia resource family."""

from __future__ import annotations

import json
import logging
import time
import uuid
from typing import Any, Dict, Mapping, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from fakturownia_mcp.config import FakturowniaConfig, default_config
from fakturownia_mcp.credentials import Credentials, resolve_credentials
from fakturownia_mcp.errors import FakturowniaError, UnsupportedMethodError
from fakturownia_mcp.fakturownia_api import FakturowniaApiClient
from fakturownia_mcp.mcp import ENDPOINTS, EndpointDefinition
from fakturownia_mcp.metrics import default_metrics
from fakturownia_mcp.tools import NOT_HANDLED

logger = logging.getLogger(__name__)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in ("endpoint", "tool", "request_id", "error"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload)


def configure_logging(config: FakturowniaConfig) -> None:
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    if config.log_format.lower() == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logging.basicConfig(level=level, handlers=[handler])
    else:
        logging.basicConfig(level=level)


configure_logging(default_config)

HEALTH_STATUS = {"status": "ok"}
APP_VERSION = default_config.server_version
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Content-Type": "application/json",
}

# Metric keys are limited to routes and tools the server defines.
TRACKED_PATHS = frozenset([*ENDPOINTS, "health", "metrics"])
UNKNOWN_TOOL = "unknown"

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
INVALID_PARAMS = -32602
SERVER_ERROR = -32000

app = FastAPI(
    title="Fakturownia MCP Server",
    description="MCP tool endpoints for the Fakturownia.pl invoicing API.",
    version=APP_VERSION,
)


@app.middleware("http")
async def add_request_context(request: Request, call_next):
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    start = time.time()
    path = request.url.path.strip("/")
    default_metrics.incr_request(path if path in TRACKED_PATHS else None)
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    default_metrics.record_duration(request_id, duration_ms)
    response.headers["X-Request-ID"] = request_id
    for header, value in CORS_HEADERS.items():
        response.headers[header] = value
    return response


def _metric_tool_name(endpoint: str, tool_name: str) -> str:
    definition = ENDPOINTS.get(endpoint)
    if definition is not None and tool_name in definition.tool_names:
        return tool_name
    return UNKNOWN_TOOL


def _log_tool_result(
    endpoint: str, tool_name: str, error: Optional[str] = None, request_id: Optional[str] = None
) -> None:
    metric_name = _metric_tool_name(endpoint, tool_name)
    if error:
        logger.warning(
            "endpoint=%s tool=%s outcome=error error=%s request_id=%s",
            endpoint,
            tool_name,
            error,
            request_id,
            extra={"endpoint": endpoint, "tool": tool_name, "request_id": request_id, "error": error},
        )
        default_metrics.record_tool(metric_name, success=False)
    else:
        logger.info(
            "endpoint=%s tool=%s outcome=success request_id=%s",
            endpoint,
            tool_name,
            request_id,
            extra={"endpoint": endpoint, "tool": tool_name, "request_id": request_id},
        )
        default_metrics.record_tool(metric_name, success=True)


def create_api_client(credentials: Credentials) -> FakturowniaApiClient:
    """Build the REST client for one request."""
    return FakturowniaApiClient(credentials, config=default_config)


async def execute_tool(
    endpoint: EndpointDefinition,
    name: str,
    arguments: Mapping[str, Any],
    config: FakturowniaConfig,
) -> Any:
    """
    Resolve credentials, call the endpoint's handler once, and return its result.

    Credentials are checked before any client is built, so a missing domain or
    token never reaches the network.
    """
    credentials = resolve_credentials(config, arguments)
    client = create_api_client(credentials)
    try:
        result = await endpoint.handler(name, arguments, client)
    finally:
        await client.aclose()
    if result is NOT_HANDLED:
        raise UnsupportedMethodError(f"{endpoint.label} method not supported: {name}")
    return result


def _server_info(endpoint: EndpointDefinition) -> Dict[str, Any]:
    info: Dict[str, Any] = {
        "name": endpoint.title,
        "version": APP_VERSION,
        "status": "running",
        "description": endpoint.description,
    }
    if endpoint.legacy_calls:
        info["endpoints"] = {
            "mcp": f"{endpoint.path} (POST with MCP protocol)",
            "direct": f"{endpoint.path} (POST with direct API calls)",
        }
    info["supportedMethods"] = endpoint.tool_names
    return info


async def handle_rpc(endpoint: EndpointDefinition, request: Request) -> Response:
    """Serve one JSON-RPC POST for ``endpoint``."""
    request_id = getattr(request.state, "request_id", None)
    start_time = time.time()
    config = default_config

    def _respond(
        payload: Dict[str, Any],
        *,
        status_code: int = 200,
        outcome: str,
        method_label: Optional[str],
        tool_label: Optional[str] = None,
        error_code: Optional[int] = None,
    ) -> JSONResponse:
        duration_ms = (time.time() - start_time) * 1000
        logger.debug(
            "mcp endpoint=%s outcome=%s method=%s tool=%s id=%s status=%s duration_ms=%.2f error_code=%s",
            endpoint.slug,
            outcome,
            method_label,
            tool_label,
            payload.get("id"),
            status_code,
            duration_ms,
            error_code,
            extra={"endpoint": endpoint.slug, "request_id": request_id, "tool": tool_label, "error": error_code},
        )
        return JSONResponse(status_code=status_code, content=payload)

    try:
        raw_body = await request.body()
        body = json.loads(raw_body) if raw_body.strip() else {}
    except ValueError:
        payload = _jsonrpc_error_payload(None, PARSE_ERROR, "Parse error")
        return _respond(
            payload,
            status_code=endpoint.parse_error_status,
            outcome="error",
            method_label=None,
            error_code=PARSE_ERROR,
        )

    if not isinstance(body, dict):
        payload = _jsonrpc_error_payload(None, INVALID_REQUEST, "Invalid request")
        return _respond(
            payload,
            status_code=endpoint.parse_error_status,
            outcome="error",
            method_label=None,
            error_code=INVALID_REQUEST,
        )

    method = body.get("method")
    rpc_id = body.get("id")
    raw_params = body.get("params")

    if endpoint.supports_initialize and method == "initialize":
        result = {
            "protocolVersion": config.protocol_version,
            "capabilities": {"tools": {}},
            "serverInfo": {"name": endpoint.title, "version": APP_VERSION},
        }
        return _respond(_jsonrpc_success_payload(rpc_id, result), outcome="success", method_label=method)

    if endpoint.supports_initialize and method in ("notifications/initialized", "initialized"):
        # Notifications should not return a JSON-RPC response body.
        logger.debug(
            "mcp initialized notification received endpoint=%s request_id=%s",
            endpoint.slug,
            request_id,
            extra={"endpoint": endpoint.slug, "request_id": request_id},
        )
        return Response(status_code=204)

    if method == "tools/list":
        result = {"tools": endpoint.list_tools()}
        return _respond(_jsonrpc_success_payload(rpc_id, result), outcome="success", method_label=method)

    if method == "tools/call":
        params = raw_params if raw_params is not None else {}
        tool_name = params.get("name") if isinstance(params, dict) else None
        arguments = params.get("arguments") if isinstance(params, dict) else None
        if arguments is None:
            arguments = {}
        if not isinstance(tool_name, str) or not tool_name.strip() or not isinstance(arguments, dict):
            payload = _jsonrpc_error_payload(rpc_id, INVALID_PARAMS, "Invalid params")
            return _respond(
                payload,
                outcome="error",
                method_label=method,
                tool_label=tool_name if isinstance(tool_name, str) else None,
                error_code=INVALID_PARAMS,
            )
        try:
            result = await execute_tool(endpoint, tool_name, arguments, config)
        except Exception as exc:  # noqa: BLE001
            if not isinstance(exc, FakturowniaError):
                logger.exception("Unexpected error calling tool %s", tool_name)
            _log_tool_result(endpoint.slug, tool_name, error=str(exc), request_id=request_id)
            payload = _jsonrpc_error_payload(rpc_id, SERVER_ERROR, str(exc))
            return _respond(
                payload,
                outcome="error",
                method_label=method,
                tool_label=tool_name,
                error_code=SERVER_ERROR,
            )
        _log_tool_result(endpoint.slug, tool_name, request_id=request_id)
        return _respond(
            _jsonrpc_success_payload(rpc_id, _wrap_tool_result(result)),
            outcome="success",
            method_label=method,
            tool_label=tool_name,
        )

    if not endpoint.legacy_calls:
        return _respond(
            {"error": f"Only tools/call method is supported for {endpoint.resource} endpoint"},
            status_code=400,
            outcome="error",
            method_label=method if isinstance(method, str) else None,
        )

    # Direct calls: the JSON-RPC method is the tool name and params are its arguments.
    if not isinstance(method, str) or not method:
        payload = _jsonrpc_error_payload(rpc_id, INVALID_REQUEST, "Invalid request")
        return _respond(payload, outcome="error", method_label=None, error_code=INVALID_REQUEST)
    if raw_params is not None and not isinstance(raw_params, dict):
        payload = _jsonrpc_error_payload(rpc_id, INVALID_PARAMS, "Invalid params")
        return _respond(payload, outcome="error", method_label=method, error_code=INVALID_PARAMS)
    try:
        result = await execute_tool(endpoint, method, raw_params or {}, config)
    except Exception as exc:  # noqa: BLE001
        if not isinstance(exc, FakturowniaError):
            logger.exception("Unexpected error calling method %s", method)
        _log_tool_result(endpoint.slug, method, error=str(exc), request_id=request_id)
        payload = _jsonrpc_error_payload(rpc_id, SERVER_ERROR, str(exc))
        return _respond(payload, outcome="error", method_label=method, tool_label=method, error_code=SERVER_ERROR)
    _log_tool_result(endpoint.slug, method, request_id=request_id)
    return _respond(
        _jsonrpc_success_payload(rpc_id, result),
        outcome="success",
        method_label=method,
        tool_label=method,
    )


def _register_endpoint(endpoint: EndpointDefinition) -> None:
    async def preflight() -> Response:
        return Response(status_code=200)

    async def server_info() -> JSONResponse:
        return JSONResponse(content=_server_info(endpoint))

    async def rpc(request: Request) -> Response:
        return await handle_rpc(endpoint, request)

    app.add_api_route(
        endpoint.path, preflight, methods=["OPTIONS"], name=f"{endpoint.slug}_preflight", include_in_schema=False
    )
    app.add_api_route(endpoint.path, server_info, methods=["GET"], name=f"{endpoint.slug}_info")
    app.add_api_route(endpoint.path, rpc, methods=["POST"], name=f"{endpoint.slug}_rpc")


for _endpoint in ENDPOINTS.values():
    _register_endpoint(_endpoint)


@app.get("/health")
async def health() -> JSONResponse:
    """Lightweight health endpoint for monitoring."""
    return JSONResponse(content=HEALTH_STATUS)


@app.get("/metrics")
async def metrics() -> JSONResponse:
    """Return in-process metrics snapshot."""
    return JSONResponse(content=default_metrics.snapshot())


# Run with: uvicorn fakturownia_mcp.server:app --reload


def _jsonrpc_success_payload(rpc_id: Any, result: Any) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "result": result}


def _jsonrpc_error_payload(rpc_id: Any, code: int, message: str) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "error": {"code": code, "message": message}}


def _wrap_tool_result(result: Any) -> Dict[str, Any]:
    """Embed the result as a single MCP text block holding pretty-printed JSON."""
    return {"content": [{"type": "text", "text": json.dumps(result, indent=2, ensure_ascii=False)}]}

"""MCP request dispatch shared by the stdio and HTTP transports.

Handles one JSON-RPC message (single request or batch):
- initialize: protocol handshake
- tools/list: TOOL_DEFINITIONS
- tools/call: dispatch to the tool handlers
- ping: liveness
Notifications (requests without an id) produce no response.
"""

import logging
from typing import Any

from pydantic import ValidationError

from .. import __version__
from ..engine.handlers import TOOL_HANDLERS, HandlerContext
from ..models import JSONRPCRequest
from .jsonrpc import (
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    SERVER_ERROR,
    jsonrpc_error,
    jsonrpc_response,
    tool_content,
)
from .tool_defs import TOOL_DEFINITIONS

logger = logging.getLogger(__name__)


async def handle_message(body: Any, ctx: HandlerContext) -> dict | list | None:
    """Handle a decoded JSON-RPC message.

    Returns:
        A response dict, a list of responses for a batch, or None when
        nothing needs to be sent back (notifications only)
    """
    if isinstance(body, list):
        if not body:
            return jsonrpc_error(None, INVALID_REQUEST, "Invalid request: empty batch")
        responses = []
        for req in body:
            resp = await handle_request(req, ctx)
            if resp:  # Skip notifications (no id)
                responses.append(resp)
        return responses or None

    return await handle_request(body, ctx)


async def handle_request(body: Any, ctx: HandlerContext) -> dict | None:
    """Handle a single JSON-RPC request."""
    if not isinstance(body, dict):
        return jsonrpc_error(None, INVALID_REQUEST, "Invalid request")

    if body.get("id") is None:  # Notification - no response
        logger.debug(f"Notification received: {body.get('method')}")
        return None

    try:
        request = JSONRPCRequest.model_validate({**body, "params": body.get("params") or {}})
    except ValidationError:
        return jsonrpc_error(body.get("id"), INVALID_REQUEST, "Invalid request")

    method = request.method
    id = request.id
    params = request.params

    if method == "initialize":
        return jsonrpc_response(
            id,
            {
                "protocolVersion": ctx.settings.protocol_version,
                "serverInfo": {"name": ctx.settings.server_name, "version": __version__},
                "capabilities": {"tools": {}},
            },
        )
    elif method == "tools/list":
        return jsonrpc_response(id, {"tools": TOOL_DEFINITIONS})
    elif method == "tools/call":
        return await _handle_call_tool(id, params, ctx)
    elif method == "ping":
        return jsonrpc_response(id, {})
    else:
        return jsonrpc_error(id, METHOD_NOT_FOUND, f"Method not found: {method}")


async def _handle_call_tool(id: Any, params: dict, ctx: HandlerContext) -> dict:
    """Handle MCP tools/call request."""
    tool_name = params.get("name")
    arguments = params.get("arguments") or {}

    handler = TOOL_HANDLERS.get(tool_name) if isinstance(tool_name, str) else None
    if handler is None:
        return jsonrpc_error(id, INVALID_PARAMS, f"Unknown tool: {tool_name}")
    if not isinstance(arguments, dict):
        return jsonrpc_error(id, INVALID_PARAMS, "Invalid params: 'arguments' must be an object")

    try:
        result = await handler(arguments, ctx)
    except Exception as e:
        logger.error(f"Tool {tool_name} failed: {e}", exc_info=True)
        return jsonrpc_error(id, SERVER_ERROR, f"Tool {tool_name} failed: {e}")

    return jsonrpc_response(id, tool_content(result.data, is_error=result.is_error))

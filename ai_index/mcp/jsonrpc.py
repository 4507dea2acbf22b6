"""JSON-RPC 2.0 helpers for the MCP transports.

This module provides utility functions for creating JSON-RPC 2.0
responses and errors, and for wrapping tool output as MCP content.

See: https://www.jsonrpc.org/specification
"""

import json
from typing import Any

# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
SERVER_ERROR = -32000  # Base for application-specific errors


def jsonrpc_response(id: Any, result: Any) -> dict:
    """Create a JSON-RPC 2.0 success response.

    Args:
        id: Request ID (must match the request)
        result: The result payload

    Returns:
        JSON-RPC 2.0 response dict
    """
    return {"jsonrpc": "2.0", "id": id, "result": result}


def jsonrpc_error(id: Any, code: int, message: str) -> dict:
    """Create a JSON-RPC 2.0 error response.

    Args:
        id: Request ID (can be None for parse errors)
        code: Error code (negative integer)
        message: Human-readable error message

    Returns:
        JSON-RPC 2.0 error response dict
    """
    return {"jsonrpc": "2.0", "id": id, "error": {"code": code, "message": message}}


def tool_content(data: dict, is_error: bool = False) -> dict:
    """Wrap a tool payload as an MCP ``tools/call`` result.

    The payload is returned as pretty-printed JSON text; tool-level errors
    set ``isError`` instead of producing a JSON-RPC error.
    """
    result: dict[str, Any] = {
        "content": [{"type": "text", "text": json.dumps(data, indent=2, default=str)}]
    }
    if is_error:
        result["isError"] = True
    return result

"""MCP (Model Context Protocol) transport module.

This module contains components for serving the index tools over MCP:
- Tool definitions for tools/list
- JSON-RPC 2.0 helpers
- Request dispatch shared by the transports
- stdio transport (import from .stdio directly)
"""

from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    SERVER_ERROR,
    jsonrpc_error,
    jsonrpc_response,
    tool_content,
)
from .tool_defs import TOOL_DEFINITIONS, get_tool_definition
from .transport import handle_message, handle_request

__all__ = [
    # Tool definitions
    "TOOL_DEFINITIONS",
    "get_tool_definition",
    # JSON-RPC helpers
    "jsonrpc_response",
    "jsonrpc_error",
    "tool_content",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "SERVER_ERROR",
    # Dispatch
    "handle_message",
    "handle_request",
]

"""Tool handlers for the index engine.

This package contains the MCP tool handlers:
- index: get_file_index, read_section, verify_index

Each handler is a standalone async function that takes:
- params: dict[str, Any] - Tool parameters from MCP call
- ctx: HandlerContext - Shared context (settings)

And returns:
- ToolResult with data, input_tokens, output_tokens
"""

from ...models import ToolName
from .base import HandlerContext, HandlerFunc, count_tokens
from .index import (
    handle_get_file_index,
    handle_read_section,
    handle_verify_index,
)

# Tool name -> handler, used by the MCP transport
TOOL_HANDLERS: dict[str, HandlerFunc] = {
    ToolName.GET_FILE_INDEX: handle_get_file_index,
    ToolName.READ_SECTION: handle_read_section,
    ToolName.VERIFY_INDEX: handle_verify_index,
}

__all__ = [
    # Base
    "HandlerContext",
    "HandlerFunc",
    "count_tokens",
    # Index handlers
    "handle_get_file_index",
    "handle_read_section",
    "handle_verify_index",
    "TOOL_HANDLERS",
]

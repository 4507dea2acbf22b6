"""MCP Tool Definitions for AI-Index.

This module contains all tool definitions returned by the tools/list method.
Each tool definition includes the schema for its input parameters.

Tools:
    - get_file_index: Section map of a file (call before reading large files)
    - read_section: Read one section by name
    - verify_index: Check whether a file's embedded index is up to date
"""

from ..models import ToolName

TOOL_DEFINITIONS: list[dict] = [
    {
        "name": ToolName.GET_FILE_INDEX.value,
        "description": (
            "Get section index of a file. Returns list of sections with line numbers. "
            "Use before reading large files to find relevant sections."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "file_path": {
                    "type": "string",
                    "description": "Path to the file to index",
                },
            },
            "required": ["file_path"],
        },
    },
    {
        "name": ToolName.READ_SECTION.value,
        "description": (
            "Read a specific section of a file by name. "
            "More efficient than reading the entire file."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "file_path": {
                    "type": "string",
                    "description": "Path to the file",
                },
                "section_name": {
                    "type": "string",
                    "description": "Name of the section to read",
                },
            },
            "required": ["file_path", "section_name"],
        },
    },
    {
        "name": ToolName.VERIFY_INDEX.value,
        "description": (
            "Check whether the index embedded in a file still matches its region markers. "
            "Reports missing sections, out-of-range lines and line drift. Does not modify the file."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "file_path": {
                    "type": "string",
                    "description": "Path to the file to verify",
                },
            },
            "required": ["file_path"],
        },
    },
]


def get_tool_definition(name: str) -> dict | None:
    """Look up a tool definition by name."""
    for tool in TOOL_DEFINITIONS:
        if tool["name"] == name:
            return tool
    return None

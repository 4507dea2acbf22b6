"""Request models (Pydantic *Params classes) for MCP tools."""

from typing import Any

from pydantic import BaseModel, Field

# ============ CORE REQUEST MODELS ============


class JSONRPCRequest(BaseModel):
    """A single JSON-RPC 2.0 request or notification."""

    jsonrpc: str = Field(default="2.0", description="Protocol version")
    id: int | str | None = Field(default=None, description="Request ID (None for notifications)")
    method: str = Field(..., description="Method name")
    params: dict[str, Any] = Field(default_factory=dict, description="Method parameters")


# ============ TOOL PARAMS ============


class GetFileIndexParams(BaseModel):
    """Parameters for get_file_index tool."""

    file_path: str = Field(..., min_length=1, description="Path to the file to index")


class ReadSectionParams(BaseModel):
    """Parameters for read_section tool."""

    file_path: str = Field(..., min_length=1, description="Path to the file")
    section_name: str = Field(..., min_length=1, description="Name of the section to read")


class VerifyIndexParams(BaseModel):
    """Parameters for verify_index tool."""

    file_path: str = Field(..., min_length=1, description="Path to the file to verify")

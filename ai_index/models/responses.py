"""Response models shared by the MCP handlers and the HTTP server."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ToolResult(BaseModel):
    """Result of executing one tool handler."""

    data: dict[str, Any] = Field(default_factory=dict, description="Tool result payload")
    input_tokens: int = Field(default=0, ge=0, description="Estimated input tokens")
    output_tokens: int = Field(default=0, ge=0, description="Estimated output tokens")

    @property
    def is_error(self) -> bool:
        return "error" in self.data


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Package version")
    timestamp: datetime = Field(..., description="Server time (UTC)")

"""Pydantic models for AI-Index request/response schemas.

This module re-exports all models for convenience.
Import from submodules directly for cleaner imports:

    from ai_index.models.enums import ToolName, SectionSource
    from ai_index.models.documents import FileIndexResult
"""

# ============ DOCUMENT MODELS ============
from .documents import (
    FileIndexResult,
    ReadSectionResult,
    SectionInfo,
    SectionNotFoundResult,
)

# ============ ENUMS ============
from .enums import (
    BlockStyle,
    IndexAction,
    IssueKind,
    OutcomeStatus,
    SectionSource,
    ToolName,
)

# ============ MAINTENANCE MODELS ============
from .maintenance import (
    BatchSummary,
    GenerateResult,
    RemoveResult,
    VerifyIssue,
    VerifyResult,
)

# ============ REQUEST MODELS ============
from .requests import (
    GetFileIndexParams,
    JSONRPCRequest,
    ReadSectionParams,
    VerifyIndexParams,
)

# ============ RESPONSE MODELS ============
from .responses import HealthResponse, ToolResult

__all__ = [
    # Enums
    "ToolName",
    "SectionSource",
    "BlockStyle",
    "IssueKind",
    "OutcomeStatus",
    "IndexAction",
    # Documents
    "SectionInfo",
    "FileIndexResult",
    "ReadSectionResult",
    "SectionNotFoundResult",
    # Maintenance
    "GenerateResult",
    "VerifyIssue",
    "VerifyResult",
    "RemoveResult",
    "BatchSummary",
    # Requests
    "JSONRPCRequest",
    "GetFileIndexParams",
    "ReadSectionParams",
    "VerifyIndexParams",
    # Responses
    "ToolResult",
    "HealthResponse",
]

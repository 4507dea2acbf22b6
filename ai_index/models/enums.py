"""Enumeration types for AI-Index."""

from enum import StrEnum


class ToolName(StrEnum):
    """Tools exposed to agents over MCP."""

    GET_FILE_INDEX = "get_file_index"
    READ_SECTION = "read_section"
    VERIFY_INDEX = "verify_index"


class SectionSource(StrEnum):
    """Which strategy produced a section (diagnostics only)."""

    COMPANION = "companion"  # Human-authored companion document
    EXPLICIT = "explicit"  # Region / SECTION: markers in the file
    AUTO = "auto"  # Auto-detect patterns
    FALLBACK = "fallback"  # Single "main" section


class BlockStyle(StrEnum):
    """Comment syntax used for the embedded index block."""

    JSDOC = "jsdoc"  # /** ... */
    HASH = "hash"  # # ... / # @end-ai-index


class IssueKind(StrEnum):
    """Kinds of problems the verifier reports."""

    NO_INDEX = "no-index"
    OUT_OF_RANGE = "out-of-range"
    MISSING_FROM_INDEX = "missing-from-index"
    LINE_DRIFT = "line-drift"


class OutcomeStatus(StrEnum):
    """Per-file outcome, aggregated into batch counters."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


class IndexAction(StrEnum):
    """What generate did to the file."""

    ADDED = "added"
    UPDATED = "updated"

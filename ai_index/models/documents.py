"""Section index models returned to agents (get_file_index, read_section)."""

from datetime import datetime

from pydantic import BaseModel, Field

from .enums import SectionSource


class SectionInfo(BaseModel):
    """One named line range of a file."""

    name: str = Field(..., description="Section name (segments separated by '/')")
    start: int = Field(..., ge=1, description="First line (1-indexed)")
    end: int = Field(..., ge=1, description="Last line (1-indexed, inclusive)")
    size: int = Field(..., ge=1, description="Number of lines")
    description: str = Field(default="", description="What the section contains")
    source: SectionSource = Field(..., description="Strategy that produced the section")


class FileIndexResult(BaseModel):
    """Result of get_file_index tool."""

    file: str = Field(..., description="File name")
    path: str = Field(..., description="File path as requested")
    language: str = Field(..., description="Language profile key, or 'unknown'")
    total_lines: int = Field(..., ge=0, description="Number of lines in the file")
    sections: list[SectionInfo] = Field(default_factory=list, description="Sections in order")
    generated_at: datetime | None = Field(default=None, description="When the index was computed")
    companion_path: str | None = Field(
        default=None, description="Companion document the sections came from"
    )
    description: str | None = Field(default=None, description="Companion file description")
    notes: str | None = Field(default=None, description="Companion free-text notes")


class ReadSectionResult(BaseModel):
    """Result of read_section tool."""

    section: str = Field(..., description="Section name")
    start: int = Field(..., ge=1, description="First line returned")
    end: int = Field(..., ge=1, description="Last line returned")
    content: str = Field(..., description="Section text")
    token_count: int = Field(default=0, ge=0, description="Estimated tokens in content")


class SectionNotFoundResult(BaseModel):
    """Error payload of read_section when the section name is unknown."""

    error: str = Field(..., description="Human-readable error")
    available_sections: list[str] = Field(
        default_factory=list, description="Section names the file does have"
    )

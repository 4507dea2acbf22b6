"""Results of the index maintenance commands (generate, verify, remove)."""

from pydantic import BaseModel, Field

from .enums import IndexAction, IssueKind, OutcomeStatus


class GenerateResult(BaseModel):
    """Result of generating or updating the embedded index of one file."""

    path: str = Field(..., description="File path")
    status: OutcomeStatus = Field(..., description="Per-file outcome")
    action: IndexAction | None = Field(default=None, description="'added' or 'updated'")
    reason: str | None = Field(default=None, description="Why the file was skipped or failed")
    sections: int = Field(default=0, ge=0, description="Number of sections written")
    total_lines: int = Field(default=0, ge=0, description="Line count of the written file")


class VerifyIssue(BaseModel):
    """One problem found while verifying a stored index."""

    kind: IssueKind = Field(..., description="Issue kind")
    section: str | None = Field(default=None, description="Section concerned, if any")
    message: str = Field(..., description="Human-readable description")
    stored_start: int | None = Field(default=None, description="Start line in the stored index")
    actual_start: int | None = Field(default=None, description="Start line found in the file")


class VerifyResult(BaseModel):
    """Result of verifying the embedded index of one file."""

    path: str = Field(..., description="File path")
    status: OutcomeStatus = Field(..., description="Per-file outcome")
    valid: bool = Field(..., description="True when no issues were found")
    issues: list[VerifyIssue] = Field(default_factory=list, description="Problems found")
    reason: str | None = Field(default=None, description="Why the file could not be verified")


class RemoveResult(BaseModel):
    """Result of removing the embedded index of one file."""

    path: str = Field(..., description="File path")
    status: OutcomeStatus = Field(..., description="Per-file outcome")
    removed: bool = Field(default=False, description="Whether a block was removed")
    reason: str | None = Field(default=None, description="Why nothing was removed")


class BatchSummary(BaseModel):
    """Aggregated outcomes of a multi-file run."""

    success: int = Field(default=0, ge=0)
    skipped: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0)

    def record(self, status: OutcomeStatus) -> None:
        if status == OutcomeStatus.SUCCESS:
            self.success += 1
        elif status == OutcomeStatus.SKIPPED:
            self.skipped += 1
        else:
            self.failed += 1

    @property
    def has_failures(self) -> bool:
        return self.failed > 0

"""Exceptions raised inside the engine.

None of these are fatal: the operations layer converts each one into a
structured result (skipped/failed with a reason) so that one bad file
never aborts a batch.
"""


class AIIndexError(Exception):
    """Base class for engine errors."""

    reason = "error"


class UnsupportedLanguageError(AIIndexError):
    """The file extension has no language profile."""

    reason = "unsupported"

    def __init__(self, file_path: str):
        super().__init__(f"Unsupported file type: {file_path}")
        self.file_path = file_path


class FileReadError(AIIndexError):
    """The file does not exist or could not be read as text."""

    def __init__(self, file_path: str, reason: str, detail: str = ""):
        message = f"Cannot read {file_path}: {reason}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.file_path = file_path
        self.reason = reason


class NoIndexPresentError(AIIndexError):
    """The file carries no embedded index block."""

    reason = "no-index"

    def __init__(self, file_path: str):
        super().__init__(f"No index found in {file_path}")
        self.file_path = file_path


class PathOutsideWorkspaceError(AIIndexError):
    """A request path resolves outside the workspace root."""

    reason = "outside-workspace"

    def __init__(self, file_path: str, workspace_root: str):
        super().__init__(f"Path {file_path} is outside the workspace root {workspace_root}")
        self.file_path = file_path
        self.workspace_root = workspace_root


class SectionNotFoundError(AIIndexError):
    """A read request named a section the index does not contain."""

    reason = "section-not-found"

    def __init__(self, section_name: str, available_sections: list[str]):
        super().__init__(f'Section "{section_name}" not found')
        self.section_name = section_name
        self.available_sections = available_sections

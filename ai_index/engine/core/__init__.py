"""Engine core module.

This module contains core utilities and data structures for the index engine:
- Section and file index data structures
- Language profile registry
- Engine exceptions
- Token estimation
"""

from .document import FileIndex, Section, split_lines, unique_names
from .errors import (
    AIIndexError,
    FileReadError,
    NoIndexPresentError,
    PathOutsideWorkspaceError,
    SectionNotFoundError,
    UnsupportedLanguageError,
)
from .profiles import (
    LANGUAGE_PROFILES,
    UNKNOWN_LANGUAGE,
    AutoPattern,
    LanguageProfile,
    language_name,
    require_profile,
    resolve_profile,
)
from .tokens import count_tokens

__all__ = [
    # Document structures
    "Section",
    "FileIndex",
    "split_lines",
    "unique_names",
    # Errors
    "AIIndexError",
    "UnsupportedLanguageError",
    "FileReadError",
    "NoIndexPresentError",
    "PathOutsideWorkspaceError",
    "SectionNotFoundError",
    # Language profiles
    "AutoPattern",
    "LanguageProfile",
    "LANGUAGE_PROFILES",
    "UNKNOWN_LANGUAGE",
    "resolve_profile",
    "require_profile",
    "language_name",
    # Token utilities
    "count_tokens",
]

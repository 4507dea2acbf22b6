"""Section scanning strategies.

This package contains the strategies that turn file text into sections,
in the order the resolver tries them:
- companion: human-authored companion document (absolute precedence)
- explicit: region / SECTION: markers
- auto: pattern heuristics
- constants: fallback section and default descriptions
"""

from .auto import scan_auto
from .companion import (
    CompanionDocument,
    companion_candidates,
    locate_companion,
    parse_companion,
    parse_companion_text,
    parse_line_range,
)
from .constants import FALLBACK_DESCRIPTION, FALLBACK_SECTION_NAME, SECTION_DESCRIPTIONS
from .explicit import scan_explicit

__all__ = [
    # Scanners
    "scan_explicit",
    "scan_auto",
    # Companion documents
    "CompanionDocument",
    "companion_candidates",
    "locate_companion",
    "parse_companion",
    "parse_companion_text",
    "parse_line_range",
    # Constants
    "FALLBACK_SECTION_NAME",
    "FALLBACK_DESCRIPTION",
    "SECTION_DESCRIPTIONS",
]

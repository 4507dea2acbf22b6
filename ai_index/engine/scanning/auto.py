"""Auto-detection scanner.

Heuristic fallback for files without explicit markers: each line is tested
against the profile's patterns and consecutive matches of the same section
name are grouped into one section.
"""

import logging

from ...models.enums import SectionSource
from ..core.document import Section
from ..core.profiles import LanguageProfile

logger = logging.getLogger(__name__)


def _detect(line: str, profile: LanguageProfile) -> str | None:
    """Return the section name of the first pattern matching the line.

    Patterns are tried in list order; declared priorities are not used to
    reorder them.
    """
    for rule in profile.auto_patterns:
        if rule.pattern.search(line):
            return rule.section
    return None


def scan_auto(lines: list[str], profile: LanguageProfile | None) -> list[Section]:
    """Group lines into sections using the profile's auto-detect patterns.

    A section stays open across non-matching lines and lines matching the
    same section name; it closes on the line before a match for a different
    name, or at the last line of the file.

    Args:
        lines: File lines (see split_lines)
        profile: Language profile, or None for unsupported files

    Returns:
        Sections in document order; empty when no line matches
    """
    if profile is None or not profile.auto_patterns:
        return []

    sections: list[Section] = []
    current: str | None = None
    start = 0

    for line_num, raw in enumerate(lines, start=1):
        name = _detect(raw.rstrip("\r"), profile)
        if name is None or name == current:
            continue
        if current is not None:
            sections.append(Section(current, start, line_num - 1, source=SectionSource.AUTO))
        current = name
        start = line_num

    if current is not None:
        sections.append(Section(current, start, len(lines), source=SectionSource.AUTO))

    logger.debug(f"Auto-detected {len(sections)} section(s) for profile '{profile.name}'")
    return sections

"""Explicit region scanner.

Finds author-placed markers (``//#region name — desc`` / ``//#endregion``,
``# region: name`` / ``# endregion``, ``// === SECTION: name ===``) and turns
them into ordered sections.
"""

import re

from ...models.enums import SectionSource
from ..core.document import Section
from ..core.profiles import LanguageProfile


def _search(pattern: re.Pattern | None, line: str) -> re.Match | None:
    return pattern.search(line) if pattern is not None else None


def scan_explicit(lines: list[str], profile: LanguageProfile | None) -> list[Section]:
    """Scan lines for explicit region and SECTION: markers.

    A start marker seen while a section is open closes that section on the
    line before (no nesting). An end marker closes the open section on its
    own line. A section still open at end of input runs to the last line.

    Args:
        lines: File lines (see split_lines)
        profile: Language profile, or None for unsupported files

    Returns:
        Sections in document order; empty when the file has no markers
    """
    if profile is None or not profile.has_explicit_markers:
        return []

    sections: list[Section] = []
    open_name: str | None = None
    open_desc = ""
    open_start = 0

    def close(end: int) -> None:
        sections.append(
            Section(
                name=open_name,
                start=open_start,
                end=end,
                description=open_desc,
                source=SectionSource.EXPLICIT,
            )
        )

    for line_num, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r")

        match = _search(profile.explicit_start, line)
        if match:
            if open_name is not None:
                close(line_num - 1)
            open_name = match.group(1).strip()
            open_desc = (match.group(2) or "").strip()
            open_start = line_num
            continue

        if _search(profile.explicit_end, line):
            if open_name is not None:
                close(line_num)
                open_name = None
                open_desc = ""
            continue

        match = _search(profile.section_marker, line)
        if match:
            if open_name is not None:
                close(line_num - 1)
            open_name = match.group(1).strip()
            open_desc = ""
            open_start = line_num

    if open_name is not None:
        close(len(lines))

    return sections

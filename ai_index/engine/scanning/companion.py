"""Companion metadata parser.

A companion document is a human-authored Markdown file next to a source
file (``store.ts.ai.md``, ``.ai/store.ts.md`` or ``.ai/store.md``):

    # store.ts
    Zustand store for projects.

    ## Sections
    | Section   | Lines  | Description      |
    | --------- | ------ | ---------------- |
    | imports   | 1-12   | Dependencies     |
    | store     | 13–140 | The store itself |

    ## Notes
    Selectors are memoized.

When it yields sections they replace the scanners' output entirely.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from ...models.enums import SectionSource
from ..core.document import Section

logger = logging.getLogger(__name__)

_SECTIONS_HEADING = re.compile(r"^##\s+sections?\s*$", re.IGNORECASE)
_NOTES_HEADING = re.compile(r"^##\s+notes\s*$", re.IGNORECASE)
_LINE_RANGE = re.compile(r"^(\d+)\s*(?:[-–]\s*(\d+))?$")
_SEPARATOR_CELL = re.compile(r"^:?-+:?$")
_HEADER_LABELS = frozenset({"section", "sections", "name"})


@dataclass(frozen=True)
class CompanionDocument:
    """Parsed companion document.

    Attributes:
        path: Where the document was read from
        description: Text between the title and the first ``##`` heading
        sections: Sections from the ``## Sections`` table, ordered by start
        notes: Free text under ``## Notes``
    """

    path: str
    description: str = ""
    sections: tuple[Section, ...] = field(default_factory=tuple)
    notes: str = ""


def companion_candidates(file_path: str | Path) -> list[Path]:
    """Companion locations for a file, in lookup order."""
    path = Path(file_path)
    directory = path.parent
    return [
        directory / f"{path.name}.ai.md",
        directory / ".ai" / f"{path.name}.md",
        directory / ".ai" / f"{path.stem}.md",
    ]


def locate_companion(file_path: str | Path) -> Path | None:
    """Return the first existing, readable companion for a file."""
    for candidate in companion_candidates(file_path):
        if candidate.is_file():
            try:
                with candidate.open("r", encoding="utf-8"):
                    return candidate
            except OSError as e:
                logger.debug(f"Companion {candidate} not readable: {e}")
    return None


def parse_line_range(value: str) -> tuple[int, int] | None:
    """Parse ``"N"``, ``"N-M"`` or ``"N–M"`` into (start, end)."""
    match = _LINE_RANGE.match(value.strip())
    if not match:
        return None
    start = int(match.group(1))
    end = int(match.group(2)) if match.group(2) else start
    return start, end


def _table_cells(line: str) -> list[str] | None:
    stripped = line.strip()
    if not stripped.startswith("|"):
        return None
    return [cell.strip() for cell in stripped.strip("|").split("|")]


def _parse_row(cells: list[str]) -> Section | None:
    if len(cells) < 2:
        return None
    name = cells[0]
    if not name or name.lower() in _HEADER_LABELS or _SEPARATOR_CELL.match(name):
        return None
    line_range = parse_line_range(cells[1])
    if line_range is None:
        return None
    start, end = line_range
    if start < 1 or end < start:
        return None
    description = cells[2] if len(cells) > 2 else ""
    return Section(name, start, end, description, SectionSource.COMPANION)


def parse_companion_text(text: str, path: str = "") -> CompanionDocument | None:
    """Extract description, section table and notes from companion Markdown.

    Returns None when the text has no usable content.
    """
    description_lines: list[str] = []
    notes_lines: list[str] = []
    rows: list[Section] = []

    block = None  # None (before title), "description", "sections", "notes", "other"
    for line in text.splitlines():
        if line.startswith("## "):
            if _SECTIONS_HEADING.match(line):
                block = "sections"
            elif _NOTES_HEADING.match(line):
                block = "notes"
            else:
                block = "other"
            continue
        if line.startswith("# ") and block is None:
            block = "description"
            continue

        if block == "description":
            description_lines.append(line)
        elif block == "notes":
            notes_lines.append(line)
        elif block == "sections":
            cells = _table_cells(line)
            if cells is not None:
                section = _parse_row(cells)
                if section is not None:
                    rows.append(section)

    # First row wins on duplicate names
    seen: set[str] = set()
    sections: list[Section] = []
    for section in rows:
        if section.name not in seen:
            seen.add(section.name)
            sections.append(section)
    sections.sort(key=lambda s: s.start)

    description = "\n".join(description_lines).strip()
    notes = "\n".join(notes_lines).strip()
    if not sections and not description and not notes:
        return None

    return CompanionDocument(
        path=path,
        description=description,
        sections=tuple(sections),
        notes=notes,
    )


def parse_companion(path: str | Path) -> CompanionDocument | None:
    """Read and parse a companion document; None if unreadable or empty."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read companion {path}: {e}")
        return None
    return parse_companion_text(text, str(path))

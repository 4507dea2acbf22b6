"""Document data structures for the section index engine.

This module contains the core data structures for representing the
sections of one file and the resolved index built from them.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime

from ...models.enums import SectionSource
from .errors import SectionNotFoundError


@dataclass(frozen=True)
class Section:
    """A named line range inside a file.

    Attributes:
        name: Hierarchical identifier ("types/state"), unique within an index
        start: Starting line number (1-indexed)
        end: Ending line number (1-indexed, inclusive)
        description: Optional free text shown in the index table
        source: Which strategy produced the section
    """

    name: str
    start: int
    end: int
    description: str = ""
    source: SectionSource = SectionSource.EXPLICIT

    @property
    def size(self) -> int:
        return self.end - self.start + 1

    def shifted(self, threshold: int, delta: int) -> "Section":
        """Move every line number at or after ``threshold`` by ``delta``."""
        start = self.start + delta if self.start >= threshold else self.start
        end = self.end + delta if self.end >= threshold else self.end
        return replace(self, start=start, end=end)


@dataclass(frozen=True)
class FileIndex:
    """Resolved section map of one file.

    Recomputed from file content on every request; never cached.

    Attributes:
        file_path: Path of the indexed file
        language: Registry key of the language profile, or "unknown"
        total_lines: Number of lines in the file
        sections: Sections in document order
        generated_at: When the index was computed
        companion_path: Companion document the sections came from, if any
        description: Companion description of the file
        notes: Companion free-text notes
    """

    file_path: str
    language: str
    total_lines: int
    sections: tuple[Section, ...] = field(default_factory=tuple)
    generated_at: datetime | None = None
    companion_path: str | None = None
    description: str = ""
    notes: str = ""

    @property
    def section_names(self) -> list[str]:
        return [section.name for section in self.sections]

    @property
    def source(self) -> SectionSource | None:
        return self.sections[0].source if self.sections else None

    def find(self, name: str) -> Section | None:
        for section in self.sections:
            if section.name == name:
                return section
        return None

    def get(self, name: str) -> Section:
        """Like find, but raise SectionNotFoundError listing the known names."""
        section = self.find(name)
        if section is None:
            raise SectionNotFoundError(name, self.section_names)
        return section


def split_lines(content: str) -> list[str]:
    """Split file content into lines.

    A single trailing newline does not produce an extra empty line, and an
    empty file counts as one empty line. ``\r\n`` endings are accepted.
    """
    lines = [line.removesuffix("\r") for line in content.split("\n")]
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def unique_names(sections: list[Section]) -> list[Section]:
    """Suffix repeated section names ("classes", "classes-2", ...).

    Auto-detection and authors can both reuse a name further down a file;
    names must stay unique within one index so they can be addressed.
    """
    taken = {section.name for section in sections}
    seen: dict[str, int] = {}
    result: list[Section] = []
    for section in sections:
        count = seen.get(section.name, 0) + 1
        seen[section.name] = count
        if count == 1:
            result.append(section)
            continue
        candidate = f"{section.name}-{count}"
        while candidate in taken:
            count += 1
            candidate = f"{section.name}-{count}"
        seen[section.name] = count
        taken.add(candidate)
        result.append(replace(section, name=candidate))
    return result

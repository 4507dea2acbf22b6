"""Embedded index block codec.

Serializes a section list into a comment block stored at the top of the
file, parses an existing block back, and splices blocks in and out of
file content.

The canonical (jsdoc) block, readable by every tool that understands the
AI-Index format:

    /**
     * @ai-index
     * @generated 2026-01-01T00:00:00.000Z
     * @total-lines 120
     *
     * | Section              | Line | End  | Size | Description          |
     * | -------------------- | ---- | ---- | ---- | -------------------- |
     * | imports              |    1 |    3 |    3 | External dependencies |
     */

Languages without ``/* */`` comments (Python, YAML) use the hash style:
the same lines prefixed with ``#`` and closed by ``# @end-ai-index``.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime

from ..models.enums import BlockStyle
from .core.document import Section

MARKER = "@ai-index"
HASH_END_MARKER = "@end-ai-index"

# Minimum width of the name and description columns
MIN_COLUMN_WIDTH = 20
# Width of the right-aligned Line / End / Size columns
NUMBER_COLUMN_WIDTH = 4

_JSDOC_BLOCK = re.compile(r"/\*\*\s*\n\s*\*\s*@ai-index.*?\*/", re.DOTALL)
_HASH_BLOCK = re.compile(
    r"^#[ \t]*@ai-index[ \t]*\r?\n(?:#.*\n)*?#[ \t]*@end-ai-index[ \t]*(?=\r?$)",
    re.MULTILINE,
)
_SHEBANG = re.compile(r"^#!.*\n")
_LEADING_NEWLINES = re.compile(r"^(?:\r?\n)+")
_GENERATED = re.compile(r"@generated\s+(\S+)")
_TOTAL_LINES = re.compile(r"@total-lines\s+(\d+)")
_SEPARATOR_CELL = re.compile(r"^:?-+:?$")
_HEADER_LABEL = "Section"
_CELL_DELIMITER = re.compile(r"(?<!\\)\|")


@dataclass(frozen=True)
class BlockRow:
    """One table row of a stored index."""

    name: str
    start: int
    end: int
    size: int
    description: str = ""


@dataclass(frozen=True)
class ParsedBlock:
    """An index block found in file content.

    Attributes:
        raw: Exact block text
        style: Comment style of the block
        start: Character offset of the block in the content
        end: Character offset just past the block
        start_line: First line of the block (1-indexed)
        end_line: Last line of the block (1-indexed, inclusive)
        sections: Rows keyed by section name (last occurrence wins)
        generated_at: Raw @generated value, if present
        total_lines: @total-lines value, if present
    """

    raw: str
    style: BlockStyle
    start: int
    end: int
    start_line: int
    end_line: int
    sections: dict[str, BlockRow] = field(default_factory=dict)
    generated_at: str | None = None
    total_lines: int | None = None

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    moment = moment.astimezone(UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def detect_newline(content: str) -> str:
    """Line ending used by the content: ``\\r\\n`` if its first line has one."""
    first = content.find("\n")
    return "\r\n" if first > 0 and content[first - 1] == "\r" else "\n"


def _cell(text: str, style: BlockStyle) -> str:
    # Cells are always followed by " |", so an escaped pipe is never a delimiter
    text = text.replace("|", r"\|")
    if style == BlockStyle.JSDOC:
        text = text.replace("*/", r"*\/")
    return text


def _uncell(text: str, style: BlockStyle) -> str:
    if style == BlockStyle.JSDOC:
        text = text.replace(r"*\/", "*/")
    return text.replace(r"\|", "|")


def serialize_block(
    sections: Sequence[Section],
    total_lines: int,
    style: BlockStyle = BlockStyle.JSDOC,
    generated_at: datetime | None = None,
    newline: str = "\n",
) -> str:
    """Render sections as an embedded index block.

    Column widths are recomputed on every call: name and description are
    padded to the widest entry (at least MIN_COLUMN_WIDTH), numbers are
    right-aligned. Pipes in cells are written as ``\\|`` and, in jsdoc
    blocks, ``*/`` as ``*\\/`` so a cell can never end the comment.
    """
    stamp = format_timestamp(generated_at or datetime.now(UTC))
    names = [_cell(s.name, style) for s in sections]
    descriptions = [_cell(s.description or "", style) for s in sections]
    name_width = max([MIN_COLUMN_WIDTH, *(len(n) for n in names)])
    desc_width = max([MIN_COLUMN_WIDTH, *(len(d) for d in descriptions)])
    dashes = "-" * NUMBER_COLUMN_WIDTH

    rows = [
        f"| {_HEADER_LABEL.ljust(name_width)} | Line | End  | Size | {'Description'.ljust(desc_width)} |",
        f"| {'-' * name_width} | {dashes} | {dashes} | {dashes} | {'-' * desc_width} |",
    ]
    for section, name, desc in zip(sections, names, descriptions):
        rows.append(
            f"| {name.ljust(name_width)} "
            f"| {section.start:>{NUMBER_COLUMN_WIDTH}} "
            f"| {section.end:>{NUMBER_COLUMN_WIDTH}} "
            f"| {section.size:>{NUMBER_COLUMN_WIDTH}} "
            f"| {desc.ljust(desc_width)} |"
        )

    body = [MARKER, f"@generated {stamp}", f"@total-lines {total_lines}", "", *rows]

    if style == BlockStyle.HASH:
        lines = [f"# {line}" if line else "#" for line in body]
        lines.append(f"# {HASH_END_MARKER}")
        return newline.join(lines)

    lines = [f" * {line}" if line else " *" for line in body]
    return newline.join(["/**", *lines, " */"])


def block_height(section_count: int, style: BlockStyle = BlockStyle.JSDOC) -> int:
    """Number of lines a serialized block with ``section_count`` rows occupies."""
    # marker, generated, total-lines, blank, table header, separator
    header = 6
    framing = 1 if style == BlockStyle.HASH else 2
    return header + section_count + framing


def _parse_rows(raw: str, style: BlockStyle) -> dict[str, BlockRow]:
    sections: dict[str, BlockRow] = {}
    for line in raw.splitlines():
        text = line.strip().lstrip("*#").strip()
        if not text.startswith("|"):
            continue
        cells = [_uncell(cell.strip(), style) for cell in _CELL_DELIMITER.split(text.strip("|"))]
        if len(cells) < 3:
            continue
        name = cells[0]
        if not name or name == _HEADER_LABEL or _SEPARATOR_CELL.match(name):
            continue
        if not (cells[1].isdigit() and cells[2].isdigit()):
            continue
        start, end = int(cells[1]), int(cells[2])
        size = int(cells[3]) if len(cells) > 3 and cells[3].isdigit() else end - start + 1
        description = cells[4] if len(cells) > 4 else ""
        sections[name] = BlockRow(name, start, end, size, description)
    return sections


def parse_block(content: str) -> ParsedBlock | None:
    """Locate and parse the first index block in file content.

    Returns None when the content has no block.
    """
    candidates = [
        (match, style)
        for match, style in (
            (_JSDOC_BLOCK.search(content), BlockStyle.JSDOC),
            (_HASH_BLOCK.search(content), BlockStyle.HASH),
        )
        if match is not None
    ]
    if not candidates:
        return None
    match, style = min(candidates, key=lambda item: item[0].start())

    raw = match.group(0)
    start_line = content.count("\n", 0, match.start()) + 1
    generated = _GENERATED.search(raw)
    total = _TOTAL_LINES.search(raw)

    return ParsedBlock(
        raw=raw,
        style=style,
        start=match.start(),
        end=match.end(),
        start_line=start_line,
        end_line=start_line + raw.count("\n"),
        sections=_parse_rows(raw, style),
        generated_at=generated.group(1) if generated else None,
        total_lines=int(total.group(1)) if total else None,
    )


def insertion_line(content: str) -> int:
    """Line at which a new block is inserted: after a ``#!`` line if present."""
    return 2 if _SHEBANG.match(content) else 1


def insert_block(
    content: str,
    block: str,
    existing: ParsedBlock | None = None,
    newline: str = "\n",
) -> str:
    """Insert a block, or replace ``existing`` at its exact offset.

    A new block goes at the top of the file (after a shebang line, kept
    verbatim) followed by one blank line, using ``newline`` as line ending.
    """
    if existing is not None:
        return content[: existing.start] + block + content[existing.end :]

    shebang = _SHEBANG.match(content)
    if shebang:
        head = shebang.group(0)
        return head + block + newline * 2 + content[len(head) :]
    return block + newline * 2 + content


def remove_block(content: str, existing: ParsedBlock) -> str:
    """Splice out a block and the blank lines right after it."""
    tail = _LEADING_NEWLINES.sub("", content[existing.end :], count=1)
    return content[: existing.start] + tail

"""File-level operations of the index engine.

Each operation works on one file path and returns a structured result:
- resolve_index / get_file_index: compute the section map (read-only)
- read_section: return the text of one named section (read-only)
- generate_index: embed or refresh the index block
- verify_index: compare the stored block against the file's markers
- remove_index: strip the index block

Engine exceptions never escape generate/verify/remove: they become
skipped/failed results so that one bad file never aborts a batch.
"""

import logging
from dataclasses import replace
from datetime import UTC, datetime
from pathlib import Path

from ..config import settings
from ..models import (
    FileIndexResult,
    GenerateResult,
    IndexAction,
    IssueKind,
    OutcomeStatus,
    ReadSectionResult,
    RemoveResult,
    SectionInfo,
    SectionNotFoundResult,
    SectionSource,
    VerifyIssue,
    VerifyResult,
)
from .core.document import FileIndex, Section, split_lines, unique_names
from .core.errors import (
    AIIndexError,
    FileReadError,
    NoIndexPresentError,
    SectionNotFoundError,
    UnsupportedLanguageError,
)
from .core.profiles import LanguageProfile, language_name, require_profile, resolve_profile
from .core.tokens import count_tokens
from .index_block import (
    block_height,
    insert_block,
    detect_newline,
    insertion_line,
    parse_block,
    remove_block,
    serialize_block,
)
from .scanning import (
    FALLBACK_DESCRIPTION,
    FALLBACK_SECTION_NAME,
    SECTION_DESCRIPTIONS,
    CompanionDocument,
    locate_companion,
    parse_companion,
    scan_auto,
    scan_explicit,
)

logger = logging.getLogger(__name__)


# ============ FILE I/O ============


def load_file(file_path: str | Path) -> str:
    """Read a file as UTF-8 text, keeping its line endings.

    Raises:
        FileReadError: reason "not-found", "not-a-file" or "not-readable"
    """
    path = Path(file_path)
    if not path.exists():
        raise FileReadError(str(file_path), "not-found")
    if not path.is_file():
        raise FileReadError(str(file_path), "not-a-file")
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(str(file_path), "not-readable", str(e)) from e


def _write_file(file_path: str | Path, content: str) -> None:
    # newline="" keeps the file's own line endings untouched
    with open(file_path, "w", encoding="utf-8", newline="") as handle:
        handle.write(content)


# ============ SECTION RESOLUTION ============


def _with_default_descriptions(sections: list[Section]) -> list[Section]:
    return [
        section
        if section.description
        else replace(section, description=SECTION_DESCRIPTIONS.get(section.name, ""))
        for section in sections
    ]


def fallback_section(total_lines: int) -> Section:
    """The single section covering a file where nothing else was found."""
    return Section(
        name=FALLBACK_SECTION_NAME,
        start=1,
        end=max(total_lines, 1),
        description=FALLBACK_DESCRIPTION,
        source=SectionSource.FALLBACK,
    )


def detect_sections(
    lines: list[str],
    file_path: str | Path,
    profile: LanguageProfile | None,
) -> tuple[list[Section], CompanionDocument | None]:
    """Run companion → explicit → auto, stopping at the first that yields sections.

    Does not apply the fallback section; see resolve_index.

    Returns:
        Tuple of (sections, companion document if one was found)
    """
    companion = None
    companion_path = locate_companion(file_path)
    if companion_path is not None:
        companion = parse_companion(companion_path)

    if companion is not None and companion.sections:
        sections = list(companion.sections)
    else:
        sections = scan_explicit(lines, profile)
        if not sections:
            sections = scan_auto(lines, profile)

    return unique_names(_with_default_descriptions(sections)), companion


def resolve_index(file_path: str | Path, content: str | None = None) -> FileIndex:
    """Compute the section map of a file.

    Never returns an empty section list: a file where no strategy finds
    anything gets one "main" section spanning all lines.

    Raises:
        FileReadError: if ``content`` is not given and the file can't be read
    """
    if content is None:
        content = load_file(file_path)
    lines = split_lines(content)
    profile = resolve_profile(file_path)

    sections, companion = detect_sections(lines, file_path, profile)
    if not sections:
        sections = [fallback_section(len(lines))]

    return FileIndex(
        file_path=str(file_path),
        language=language_name(profile),
        total_lines=len(lines),
        sections=tuple(sections),
        generated_at=datetime.now(UTC),
        companion_path=companion.path if companion is not None and companion.sections else None,
        description=companion.description if companion is not None else "",
        notes=companion.notes if companion is not None else "",
    )


def _section_info(section: Section) -> SectionInfo:
    return SectionInfo(
        name=section.name,
        start=section.start,
        end=section.end,
        size=section.size,
        description=section.description,
        source=section.source,
    )


def get_file_index(file_path: str | Path) -> FileIndexResult:
    """Agent-facing section map of a file.

    Raises:
        FileReadError: if the file can't be read
    """
    index = resolve_index(file_path)
    return FileIndexResult(
        file=Path(file_path).name,
        path=str(file_path),
        language=index.language,
        total_lines=index.total_lines,
        sections=[_section_info(section) for section in index.sections],
        generated_at=index.generated_at,
        companion_path=index.companion_path,
        description=index.description or None,
        notes=index.notes or None,
    )


def read_section(
    file_path: str | Path, section_name: str
) -> ReadSectionResult | SectionNotFoundResult:
    """Return the text of one section, or the names that do exist.

    Raises:
        FileReadError: if the file can't be read
    """
    content = load_file(file_path)
    lines = split_lines(content)
    index = resolve_index(file_path, content)

    try:
        section = index.get(section_name)
    except SectionNotFoundError as e:
        return SectionNotFoundResult(error=str(e), available_sections=e.available_sections)

    text = "\n".join(lines[section.start - 1 : section.end])
    return ReadSectionResult(
        section=section.name,
        start=section.start,
        end=section.end,
        content=text,
        token_count=count_tokens(text),
    )


# ============ INDEX MAINTENANCE ============


def generate_index(
    file_path: str | Path,
    min_lines: int | None = None,
    write: bool = True,
) -> GenerateResult:
    """Embed (or refresh) the index block of a file.

    Section line numbers are shifted to where the content lands once the
    block is written, so a freshly generated index verifies cleanly.

    Args:
        file_path: File to index
        min_lines: Skip files shorter than this (defaults to settings.min_lines)
        write: Write the new content back to the file

    Returns:
        GenerateResult; skipped for unreadable/unsupported/short files
    """
    path = str(file_path)
    threshold = settings.min_lines if min_lines is None else min_lines

    try:
        content = load_file(file_path)
        lines = split_lines(content)
        total_lines = len(lines)

        if threshold and total_lines < threshold:
            return GenerateResult(
                path=path,
                status=OutcomeStatus.SKIPPED,
                reason="below-threshold",
                total_lines=total_lines,
            )

        profile = require_profile(file_path)
        if profile.block_style is None:
            return GenerateResult(
                path=path, status=OutcomeStatus.SKIPPED, reason="no-comment-syntax"
            )

        existing = parse_block(content)
        newline = detect_newline(content)
        sections, _ = detect_sections(lines, file_path, profile)

        height = block_height(max(len(sections), 1), profile.block_style)
        if existing is not None:
            shift_from = existing.end_line + 1
            delta = height - existing.line_count
        else:
            shift_from = insertion_line(content)
            delta = height + 1  # block plus one blank separator line
        # Companion ranges are authored against the file as it is on disk
        sections = [
            section
            if section.source == SectionSource.COMPANION
            else section.shifted(shift_from, delta)
            for section in sections
        ]

        generated_at = datetime.now(UTC)
        draft_block = serialize_block(
            sections or [fallback_section(1)], 0, profile.block_style, newline=newline
        )
        new_total = len(split_lines(insert_block(content, draft_block, existing, newline)))
        if not sections:
            sections = [fallback_section(new_total)]

        block = serialize_block(sections, new_total, profile.block_style, generated_at, newline)
        new_content = insert_block(content, block, existing, newline)

        if write:
            _write_file(file_path, new_content)

    except (FileReadError, UnsupportedLanguageError) as e:
        logger.info(f"Skipping {path}: {e}")
        return GenerateResult(path=path, status=OutcomeStatus.SKIPPED, reason=e.reason)
    except (AIIndexError, OSError) as e:
        logger.error(f"Failed to index {path}: {e}")
        return GenerateResult(path=path, status=OutcomeStatus.FAILED, reason=str(e))

    action = IndexAction.UPDATED if existing is not None else IndexAction.ADDED
    logger.info(f"{action.capitalize()} index in {path} ({len(sections)} sections, {new_total} lines)")
    return GenerateResult(
        path=path,
        status=OutcomeStatus.SUCCESS,
        action=action,
        sections=len(sections),
        total_lines=new_total,
    )


def verify_index(file_path: str | Path, tolerance: int | None = None) -> VerifyResult:
    """Check a stored index block against the file's current content.

    Only explicit markers are re-scanned: they are the ground truth when
    present. Auto-detected and companion indexes are checked for range only.

    Args:
        file_path: File to verify
        tolerance: Allowed start-line drift (defaults to settings.drift_tolerance)
    """
    path = str(file_path)
    tolerance = settings.drift_tolerance if tolerance is None else tolerance

    try:
        content = load_file(file_path)
    except FileReadError as e:
        logger.warning(f"Skipping {path}: {e}")
        return VerifyResult(path=path, status=OutcomeStatus.SKIPPED, valid=False, reason=e.reason)

    stored = parse_block(content)
    if stored is None:
        issue = VerifyIssue(kind=IssueKind.NO_INDEX, message="No index found")
        return VerifyResult(
            path=path,
            status=OutcomeStatus.FAILED,
            valid=False,
            issues=[issue],
            reason=IssueKind.NO_INDEX.value,
        )

    lines = split_lines(content)
    total_lines = len(lines)
    issues: list[VerifyIssue] = []

    for row in stored.sections.values():
        if row.start > total_lines or row.end > total_lines:
            issues.append(
                VerifyIssue(
                    kind=IssueKind.OUT_OF_RANGE,
                    section=row.name,
                    message=f'Section "{row.name}": line numbers exceed file length ({total_lines})',
                    stored_start=row.start,
                )
            )

    actual_sections = unique_names(scan_explicit(lines, resolve_profile(file_path)))
    for actual in actual_sections:
        row = stored.sections.get(actual.name)
        if row is None:
            issues.append(
                VerifyIssue(
                    kind=IssueKind.MISSING_FROM_INDEX,
                    section=actual.name,
                    message=f'Section "{actual.name}" in code but not in index',
                    actual_start=actual.start,
                )
            )
        elif abs(row.start - actual.start) > tolerance:
            issues.append(
                VerifyIssue(
                    kind=IssueKind.LINE_DRIFT,
                    section=actual.name,
                    message=(
                        f'Section "{actual.name}": index says line {row.start}, '
                        f"actual is {actual.start}"
                    ),
                    stored_start=row.start,
                    actual_start=actual.start,
                )
            )

    valid = not issues
    if not valid:
        logger.info(f"{path}: {len(issues)} index issue(s)")
    return VerifyResult(
        path=path,
        status=OutcomeStatus.SUCCESS if valid else OutcomeStatus.FAILED,
        valid=valid,
        issues=issues,
    )


def remove_index(file_path: str | Path, write: bool = True) -> RemoveResult:
    """Strip the index block (and the blank lines after it) from a file."""
    path = str(file_path)
    try:
        content = load_file(file_path)
        existing = parse_block(content)
        if existing is None:
            raise NoIndexPresentError(path)
        if write:
            _write_file(file_path, remove_block(content, existing))
    except (FileReadError, NoIndexPresentError) as e:
        logger.info(f"Skipping {path}: {e}")
        return RemoveResult(path=path, status=OutcomeStatus.SKIPPED, reason=e.reason)
    except OSError as e:
        logger.error(f"Failed to remove index from {path}: {e}")
        return RemoveResult(path=path, status=OutcomeStatus.FAILED, reason=str(e))

    logger.info(f"Removed index from {path}")
    return RemoveResult(path=path, status=OutcomeStatus.SUCCESS, removed=True)

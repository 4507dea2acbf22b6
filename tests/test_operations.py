"""Tests for the file-level operations: resolve, read, generate, verify, remove."""

from pathlib import Path

import pytest

from ai_index.engine.core.document import Section
from ai_index.engine.core.errors import FileReadError
from ai_index.engine.index_block import parse_block, serialize_block
from ai_index.engine.operations import (
    generate_index,
    get_file_index,
    read_section,
    remove_index,
    resolve_index,
    verify_index,
)
from ai_index.models import (
    IndexAction,
    IssueKind,
    OutcomeStatus,
    ReadSectionResult,
    SectionNotFoundResult,
    SectionSource,
)

from samples import REGION_TS, STORE_TS, write


def _spans(index):
    return [(s.name, s.start, s.end) for s in index.sections]


# ============ RESOLVE ============


def test_region_file_has_one_explicit_section(region_ts: Path):
    index = resolve_index(region_ts)
    assert index.total_lines == 10
    assert _spans(index) == [("imports", 1, 3)]
    assert index.source == SectionSource.EXPLICIT
    assert index.language == "ts"


def test_no_markers_no_matches_falls_back_to_main(plain_ts: Path):
    index = resolve_index(plain_ts)
    assert _spans(index) == [("main", 1, 3)]
    assert index.sections[0].description == "Main content"
    assert index.source == SectionSource.FALLBACK


def test_unknown_language_falls_back_to_main(tmp_path: Path):
    path = write(tmp_path, "notes.txt", "one\ntwo\n")
    index = resolve_index(path)
    assert index.language == "unknown"
    assert _spans(index) == [("main", 1, 2)]


def test_empty_file(tmp_path: Path):
    index = resolve_index(write(tmp_path, "empty.ts", ""))
    assert index.total_lines == 1
    assert _spans(index) == [("main", 1, 1)]


def test_auto_sections_get_default_descriptions(auto_py: Path):
    index = resolve_index(auto_py)
    assert _spans(index) == [("imports", 1, 4), ("classes", 5, 8), ("tests", 9, 10)]
    assert index.sections[0].description == "External dependencies"
    assert index.source == SectionSource.AUTO


def test_sections_are_ordered_and_disjoint(store_ts: Path):
    sections = resolve_index(store_ts).sections
    assert [s.name for s in sections] == ["imports", "store", "selectors"]
    for section in sections:
        assert section.start <= section.end
    for before, after in zip(sections, sections[1:]):
        assert before.end < after.start


def test_companion_overrides_markers(store_ts: Path, tmp_path: Path):
    write(
        tmp_path,
        "store.ts.ai.md",
        "# store.ts\nProject store.\n\n## Sections\n"
        "| Section | Lines | Description |\n|---|---|---|\n"
        "| everything | 1-16 | Whole file |\n\n## Notes\nKeep it small.\n",
    )
    index = resolve_index(store_ts)
    assert _spans(index) == [("everything", 1, 16)]
    assert index.source == SectionSource.COMPANION
    assert index.companion_path == str(tmp_path / "store.ts.ai.md")
    assert index.description == "Project store."
    assert index.notes == "Keep it small."


def test_missing_file_raises():
    with pytest.raises(FileReadError) as exc_info:
        resolve_index("/nonexistent/file.ts")
    assert exc_info.value.reason == "not-found"


def test_get_file_index_result(store_ts: Path):
    result = get_file_index(store_ts)
    assert result.file == "store.ts"
    assert result.language == "ts"
    assert result.total_lines == 15
    assert result.sections[0].name == "imports"
    assert result.sections[0].description == "External dependencies"
    assert result.sections[1].size == result.sections[1].end - result.sections[1].start + 1


# ============ READ ============


def test_read_section_returns_exact_lines(region_ts: Path):
    result = read_section(region_ts, "imports")
    assert isinstance(result, ReadSectionResult)
    assert result.content == "\n".join(REGION_TS.split("\n")[0:3])
    assert (result.start, result.end) == (1, 3)
    assert result.token_count == len(result.content) // 4


def test_read_unknown_section_lists_available(store_ts: Path):
    result = read_section(store_ts, "nope")
    assert isinstance(result, SectionNotFoundResult)
    assert result.error == 'Section "nope" not found'
    assert result.available_sections == ["imports", "store", "selectors"]


# ============ GENERATE ============


def test_generate_then_verify_is_valid(store_ts: Path):
    result = generate_index(store_ts)
    assert result.status == OutcomeStatus.SUCCESS
    assert result.action == IndexAction.ADDED
    assert result.sections == 3

    content = store_ts.read_text(encoding="utf-8")
    assert content.startswith("#!/usr/bin/env node\n/**\n * @ai-index\n")
    assert content.endswith(STORE_TS[len("#!/usr/bin/env node\n"):])

    block = parse_block(content)
    assert block.total_lines == len(content.rstrip("\n").split("\n")) == result.total_lines
    # Stored start lines point at the markers in the written file
    lines = content.split("\n")
    assert lines[block.sections["store"].start - 1].startswith("//#region store")

    assert verify_index(store_ts).valid


def test_generate_python_uses_hash_block(region_py: Path):
    result = generate_index(region_py)
    assert result.status == OutcomeStatus.SUCCESS

    content = region_py.read_text(encoding="utf-8")
    assert content.startswith("# @ai-index\n")
    assert "# @end-ai-index\n\n# region: setup" in content
    assert verify_index(region_py).valid


def test_regenerate_replaces_block_in_place(store_ts: Path):
    generate_index(store_ts)
    first = store_ts.read_text(encoding="utf-8")
    first_block = parse_block(first)

    result = generate_index(store_ts)
    assert result.action == IndexAction.UPDATED

    second = store_ts.read_text(encoding="utf-8")
    second_block = parse_block(second)
    assert second_block.start == first_block.start
    assert second[: second_block.start] == first[: first_block.start]
    assert second[second_block.end :] == first[first_block.end :]
    assert second_block.sections == first_block.sections


def test_remove_after_generate_restores_file(store_ts: Path):
    generate_index(store_ts)
    result = remove_index(store_ts)
    assert result.status == OutcomeStatus.SUCCESS
    assert result.removed
    assert store_ts.read_text(encoding="utf-8") == STORE_TS


def test_generate_with_pipe_in_name_verifies(tmp_path: Path):
    path = write(tmp_path, "pipes.ts", "//#region a|b\nconst x = 1;\n//#endregion\n")
    assert generate_index(path).status == OutcomeStatus.SUCCESS

    assert "a|b" in parse_block(path.read_text(encoding="utf-8")).sections
    assert verify_index(path).valid
    assert read_section(path, "a|b").content == "//#region a|b\nconst x = 1;\n//#endregion"


def test_generate_with_comment_terminator_in_description(tmp_path: Path):
    original = (
        "//#region glob — matches src/**/*.ts\n"
        "export const pattern = 'src/**/*.ts';\n"
        "//#endregion\n"
        "export const done = true;\n"
    )
    path = write(tmp_path, "glob.ts", original)
    assert generate_index(path).status == OutcomeStatus.SUCCESS

    block = parse_block(path.read_text(encoding="utf-8"))
    assert list(block.sections) == ["glob"]
    assert block.sections["glob"].description == "matches src/**/*.ts"
    assert verify_index(path).valid

    assert remove_index(path).removed
    assert path.read_text(encoding="utf-8") == original


def test_generate_keeps_crlf_line_endings(tmp_path: Path):
    original = STORE_TS.replace("\n", "\r\n")
    path = write(tmp_path, "store.ts", original)
    assert generate_index(path).status == OutcomeStatus.SUCCESS

    content = path.read_bytes().decode("utf-8")
    assert content.startswith("#!/usr/bin/env node\r\n/**\r\n * @ai-index\r\n")
    assert "\n" not in content.replace("\r\n", "")
    assert verify_index(path).valid
    assert read_section(path, "imports").content.startswith("//#region imports")

    assert remove_index(path).removed
    assert path.read_bytes().decode("utf-8") == original


def test_generate_skips(tmp_path: Path):
    unsupported = generate_index(write(tmp_path, "notes.txt", "hello\n"))
    assert (unsupported.status, unsupported.reason) == (OutcomeStatus.SKIPPED, "unsupported")

    json_file = generate_index(write(tmp_path, "data.json", '{"a": 1}\n'))
    assert (json_file.status, json_file.reason) == (OutcomeStatus.SKIPPED, "no-comment-syntax")

    missing = generate_index(tmp_path / "missing.ts")
    assert (missing.status, missing.reason) == (OutcomeStatus.SKIPPED, "not-found")


def test_generate_min_lines_threshold(region_ts: Path):
    result = generate_index(region_ts, min_lines=200)
    assert (result.status, result.reason) == (OutcomeStatus.SKIPPED, "below-threshold")
    assert region_ts.read_text(encoding="utf-8") == REGION_TS


def test_generate_fallback_covers_written_file(plain_ts: Path):
    result = generate_index(plain_ts)
    assert result.status == OutcomeStatus.SUCCESS
    block = parse_block(plain_ts.read_text(encoding="utf-8"))
    assert block.sections["main"].start == 1
    assert block.sections["main"].end == result.total_lines


def test_generate_dry_run_leaves_file(region_ts: Path):
    result = generate_index(region_ts, write=False)
    assert result.status == OutcomeStatus.SUCCESS
    assert region_ts.read_text(encoding="utf-8") == REGION_TS


# ============ VERIFY ============


def _file_with_stored_start(tmp_path: Path, stored_start: int) -> Path:
    # 9-line block, then 20 filler lines: the region marker sits on line 30
    block = serialize_block([Section("imports", stored_start, stored_start + 2)], 32)
    body = ["// filler"] * 20 + ["//#region imports", "import a from 'a';", "//#endregion"]
    return write(tmp_path, "drift.ts", block + "\n" + "\n".join(body) + "\n")


def test_verify_tolerates_small_drift(tmp_path: Path):
    assert verify_index(_file_with_stored_start(tmp_path, 25), tolerance=5).valid


def test_verify_reports_drift_beyond_tolerance(tmp_path: Path):
    result = verify_index(_file_with_stored_start(tmp_path, 24), tolerance=5)
    assert not result.valid
    assert result.status == OutcomeStatus.FAILED
    assert [issue.kind for issue in result.issues] == [IssueKind.LINE_DRIFT]
    assert (result.issues[0].stored_start, result.issues[0].actual_start) == (24, 30)


def test_verify_without_index(region_ts: Path):
    result = verify_index(region_ts)
    assert not result.valid
    assert [issue.kind for issue in result.issues] == [IssueKind.NO_INDEX]


def test_verify_out_of_range_and_missing(tmp_path: Path):
    block = serialize_block([Section("old", 1, 500)], 500)
    path = write(tmp_path, "a.ts", block + "\n//#region fresh\nx\n//#endregion\n")
    kinds = {issue.kind for issue in verify_index(path).issues}
    assert kinds == {IssueKind.OUT_OF_RANGE, IssueKind.MISSING_FROM_INDEX}


def test_verify_missing_file(tmp_path: Path):
    result = verify_index(tmp_path / "missing.ts")
    assert result.status == OutcomeStatus.SKIPPED
    assert result.reason == "not-found"


# ============ REMOVE ============


def test_remove_without_index_is_skipped(region_ts: Path):
    result = remove_index(region_ts)
    assert result.status == OutcomeStatus.SKIPPED
    assert result.reason == "no-index"
    assert not result.removed

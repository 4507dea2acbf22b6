"""Tests for companion document lookup and parsing."""

from pathlib import Path

from ai_index.engine.scanning import (
    companion_candidates,
    locate_companion,
    parse_companion,
    parse_companion_text,
    parse_line_range,
)
from ai_index.models import SectionSource

COMPANION_MD = """# store.ts
Zustand store for projects.

## Sections
| Section   | Lines  | Description      |
| --------- | ------ | ---------------- |
| store     | 13–140 | The store itself |
| imports   | 1-12   | Dependencies     |
| broken    | 20-10  | End before start |
| imports   | 50-60  | Duplicate name   |
| header    | 5      | Single line      |

## Notes
Selectors are memoized.
"""


def test_parse_line_range():
    assert parse_line_range("1-12") == (1, 12)
    assert parse_line_range("13–140") == (13, 140)
    assert parse_line_range(" 7 ") == (7, 7)
    assert parse_line_range("a-b") is None
    assert parse_line_range("") is None


def test_parse_companion_text():
    doc = parse_companion_text(COMPANION_MD, "store.ts.ai.md")

    assert doc.path == "store.ts.ai.md"
    assert doc.description == "Zustand store for projects."
    assert doc.notes == "Selectors are memoized."
    # Sorted by start; bad range dropped; first row wins on duplicate names
    assert [(s.name, s.start, s.end) for s in doc.sections] == [
        ("imports", 1, 12),
        ("header", 5, 5),
        ("store", 13, 140),
    ]
    assert doc.sections[0].description == "Dependencies"
    assert all(s.source == SectionSource.COMPANION for s in doc.sections)


def test_parse_companion_text_without_content():
    assert parse_companion_text("") is None
    assert parse_companion_text("## Other\nnothing useful\n") is None


def test_parse_companion_text_description_only():
    doc = parse_companion_text("# util.py\nSmall helpers.\n")
    assert doc.description == "Small helpers."
    assert doc.sections == ()


def test_companion_candidates_order(tmp_path: Path):
    source = tmp_path / "store.ts"
    assert companion_candidates(source) == [
        tmp_path / "store.ts.ai.md",
        tmp_path / ".ai" / "store.ts.md",
        tmp_path / ".ai" / "store.md",
    ]


def test_locate_companion_prefers_sibling(tmp_path: Path):
    source = tmp_path / "store.ts"
    source.write_text("x\n", encoding="utf-8")
    assert locate_companion(source) is None

    (tmp_path / ".ai").mkdir()
    stem_doc = tmp_path / ".ai" / "store.md"
    stem_doc.write_text(COMPANION_MD, encoding="utf-8")
    assert locate_companion(source) == stem_doc

    sibling = tmp_path / "store.ts.ai.md"
    sibling.write_text(COMPANION_MD, encoding="utf-8")
    assert locate_companion(source) == sibling


def test_parse_companion_missing_file(tmp_path: Path):
    assert parse_companion(tmp_path / "missing.ai.md") is None

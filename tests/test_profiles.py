"""Tests for the language profile registry."""

import pytest

from ai_index.engine.core.errors import UnsupportedLanguageError
from ai_index.engine.core.profiles import (
    LANGUAGE_PROFILES,
    UNKNOWN_LANGUAGE,
    language_name,
    require_profile,
    resolve_profile,
)
from ai_index.models import BlockStyle


@pytest.mark.parametrize(
    "path, expected",
    [
        ("src/store.ts", "ts"),
        ("App.TSX", "ts"),
        ("bin/cli.mjs", "ts"),
        ("main.py", "python"),
        ("stubs.pyi", "python"),
        ("lib.rs", "rust"),
        ("server.go", "go"),
        ("Program.cs", "csharp"),
        ("Main.java", "java"),
        ("Main.kt", "java"),
        ("deploy.yml", "yaml"),
        ("graph.json", "json"),
    ],
)
def test_resolve_profile_by_extension(path, expected):
    assert resolve_profile(path).name == expected


def test_unknown_extension():
    assert resolve_profile("README.md") is None
    assert resolve_profile("Makefile") is None
    assert language_name(None) == UNKNOWN_LANGUAGE


def test_require_profile_raises_for_unsupported():
    with pytest.raises(UnsupportedLanguageError) as exc_info:
        require_profile("notes.txt")
    assert exc_info.value.reason == "unsupported"


def test_extensions_are_not_shared():
    seen = set()
    for profile in LANGUAGE_PROFILES:
        for ext in profile.extensions:
            assert ext not in seen
            seen.add(ext)


def test_block_styles():
    assert resolve_profile("a.ts").block_style == BlockStyle.JSDOC
    assert resolve_profile("a.py").block_style == BlockStyle.HASH
    assert resolve_profile("a.yaml").block_style == BlockStyle.HASH
    assert resolve_profile("a.json").block_style is None


def test_region_marker_captures_name_and_description():
    profile = resolve_profile("a.ts")
    match = profile.explicit_start.search("//#region store — The project store")
    assert match.group(1) == "store"
    assert match.group(2) == "The project store"

    match = profile.explicit_start.search("//#region imports")
    assert match.group(1) == "imports"
    assert match.group(2) is None


def test_region_name_ends_at_first_dash():
    profile = resolve_profile("a.ts")
    match = profile.explicit_start.search("//#region api-client")
    assert match.group(1) == "api"
    assert match.group(2) == "client"

    match = profile.explicit_start.search("//#region api_client - HTTP client")
    assert match.group(1) == "api_client"
    assert match.group(2) == "HTTP client"

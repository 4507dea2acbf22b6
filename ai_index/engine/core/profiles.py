"""Language profile registry.

Maps file extensions to the syntax rules the scanners need:
- explicit region start/end markers (capturing name and description)
- an optional SECTION: marker that opens a section without an end marker
- auto-detect patterns, tested in list order
- the comment style used to embed the index block

The table is data, not code: adding a language means adding one
LanguageProfile to LANGUAGE_PROFILES.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path

from ...models.enums import BlockStyle
from .errors import UnsupportedLanguageError

# Default priority for auto patterns declared without one
DEFAULT_PRIORITY = 5

# Shared tail of every region start marker: "name" or "name — description".
# The name ends at the first dash, so "api-client" reads as name "api" with
# description "client"; multi-word names use "_" or "/".
_NAME_AND_DESC = r"(.+?)(?:\s*[—\-]\s*(.+))?$"


@dataclass(frozen=True)
class AutoPattern:
    """One auto-detect rule.

    Attributes:
        pattern: Compiled regex tested against a single line
        section: Section name assigned to matching lines
        priority: Advisory only; list order decides which rule wins on a line
    """

    pattern: re.Pattern
    section: str
    priority: int = DEFAULT_PRIORITY


@dataclass(frozen=True)
class LanguageProfile:
    """Syntax rules for one family of file extensions."""

    name: str
    extensions: tuple[str, ...]
    explicit_start: re.Pattern | None
    explicit_end: re.Pattern | None
    section_marker: re.Pattern | None = None
    auto_patterns: tuple[AutoPattern, ...] = field(default_factory=tuple)
    block_style: BlockStyle | None = BlockStyle.JSDOC

    @property
    def has_explicit_markers(self) -> bool:
        return self.explicit_start is not None or self.section_marker is not None


def _auto(pattern: str, section: str, priority: int = DEFAULT_PRIORITY) -> AutoPattern:
    return AutoPattern(re.compile(pattern), section, priority)


_SLASH_SECTION_MARKER = re.compile(r"//\s*(?:={3,}\s*)?SECTION:\s*(.+?)(?:\s*={3,})?\s*$", re.IGNORECASE)
_ANCHORED_SLASH_SECTION_MARKER = re.compile(
    r"^//\s*(?:={3,}\s*)?SECTION:\s*(.+?)(?:\s*={3,})?\s*$", re.IGNORECASE
)
_HASH_SECTION_MARKER = re.compile(r"^#\s*(?:={3,}\s*)?SECTION:\s*(.+?)(?:\s*={3,})?\s*$", re.IGNORECASE)


LANGUAGE_PROFILES: tuple[LanguageProfile, ...] = (
    # TypeScript / JavaScript
    LanguageProfile(
        name="ts",
        extensions=(".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs"),
        explicit_start=re.compile(r"^//#region\s+" + _NAME_AND_DESC),
        explicit_end=re.compile(r"^//#endregion"),
        section_marker=_SLASH_SECTION_MARKER,
        auto_patterns=(
            _auto(r"^import\s+", "imports", 1),
            _auto(r"^export\s+type\s+", "types", 2),
            _auto(r"^(?:export\s+)?interface\s+\w+State", "types/state", 3),
            _auto(r"^(?:export\s+)?interface\s+\w+Actions", "types/actions", 3),
            _auto(r"^(?:export\s+)?interface\s+", "types", 2),
            _auto(r"^(?:export\s+)?type\s+", "types", 2),
            _auto(r"^const\s+initial\w*\s*[=:]", "state/initial", 4),
            _auto(r"^export\s+const\s+use\w+Store\s*=", "store", 5),
            _auto(r"create<.*>\(\s*\(?", "store", 5),
            _auto(r"^export\s+const\s+select\w+", "selectors", 8),
            _auto(r"^export\s+function\s+use\w+", "hooks", 9),
        ),
    ),
    # Python
    LanguageProfile(
        name="python",
        extensions=(".py", ".pyw", ".pyi"),
        explicit_start=re.compile(r"^#\s*region\s*[:\s]*" + _NAME_AND_DESC),
        explicit_end=re.compile(r"^#\s*endregion"),
        section_marker=_HASH_SECTION_MARKER,
        auto_patterns=(
            _auto(r"^(?:from|import)\s+", "imports", 1),
            _auto(r"^class\s+\w+\s*\(", "classes", 3),
            _auto(r"^class\s+\w+Model\s*\(", "models", 2),
            _auto(r"^@dataclass", "dataclasses", 2),
            _auto(r"^@app\.(get|post|put|delete|patch)", "routes", 4),
            _auto(r"^@router\.(get|post|put|delete|patch)", "routes", 4),
            _auto(r"^def\s+test_", "tests", 5),
            _auto(r"^async\s+def\s+", "async", 3),
        ),
        block_style=BlockStyle.HASH,
    ),
    # Rust
    LanguageProfile(
        name="rust",
        extensions=(".rs",),
        explicit_start=re.compile(r"^//\s*region:\s*" + _NAME_AND_DESC),
        explicit_end=re.compile(r"^//\s*endregion"),
        section_marker=_ANCHORED_SLASH_SECTION_MARKER,
        auto_patterns=(
            _auto(r"^use\s+", "imports", 1),
            _auto(r"^mod\s+", "modules", 2),
            _auto(r"^pub\s+struct\s+", "structs", 3),
            _auto(r"^pub\s+enum\s+", "enums", 3),
            _auto(r"^impl\s+", "impl", 4),
            _auto(r"^pub\s+fn\s+", "functions", 5),
            _auto(r"^#\[test\]", "tests", 6),
        ),
    ),
    # Go
    LanguageProfile(
        name="go",
        extensions=(".go",),
        explicit_start=re.compile(r"^//\s*region:\s*" + _NAME_AND_DESC),
        explicit_end=re.compile(r"^//\s*endregion"),
        section_marker=_ANCHORED_SLASH_SECTION_MARKER,
        auto_patterns=(
            _auto(r"^import\s*\(", "imports", 1),
            _auto(r"^type\s+\w+\s+struct\s*\{", "types", 2),
            _auto(r"^type\s+\w+\s+interface\s*\{", "interfaces", 2),
            _auto(r"^func\s+\(\w+\s+\*?\w+\)", "methods", 3),
            _auto(r"^func\s+\w+", "functions", 4),
            _auto(r"^func\s+Test\w+", "tests", 5),
        ),
    ),
    # C#
    LanguageProfile(
        name="csharp",
        extensions=(".cs",),
        explicit_start=re.compile(r"^\s*#region\s+" + _NAME_AND_DESC),
        explicit_end=re.compile(r"^\s*#endregion"),
        section_marker=_SLASH_SECTION_MARKER,
        auto_patterns=(
            _auto(r"^using\s+", "imports", 1),
            _auto(r"^namespace\s+", "namespace", 2),
            _auto(r"^public\s+class\s+", "classes", 3),
            _auto(r"^public\s+interface\s+", "interfaces", 3),
            _auto(r"^public\s+enum\s+", "enums", 3),
            _auto(r"^\[Test\]", "tests", 5),
        ),
    ),
    # Java / Kotlin / Scala
    LanguageProfile(
        name="java",
        extensions=(".java", ".kt", ".scala"),
        explicit_start=re.compile(r"^//\s*region\s*" + _NAME_AND_DESC),
        explicit_end=re.compile(r"^//\s*endregion"),
        section_marker=_SLASH_SECTION_MARKER,
        auto_patterns=(
            _auto(r"^import\s+", "imports", 1),
            _auto(r"^package\s+", "package", 0),
            _auto(r"^public\s+class\s+", "classes", 2),
            _auto(r"^public\s+interface\s+", "interfaces", 2),
            _auto(r"^public\s+enum\s+", "enums", 2),
            _auto(r"^@Test", "tests", 5),
        ),
    ),
    # YAML
    LanguageProfile(
        name="yaml",
        extensions=(".yaml", ".yml"),
        explicit_start=re.compile(r"^#\s*region:\s*" + _NAME_AND_DESC),
        explicit_end=re.compile(r"^#\s*endregion"),
        section_marker=_HASH_SECTION_MARKER,
        block_style=BlockStyle.HASH,
    ),
    # JSON: no comments, so no region markers and no embedded block
    LanguageProfile(
        name="json",
        extensions=(".json", ".json5", ".jsonc"),
        explicit_start=None,
        explicit_end=None,
        section_marker=re.compile(r'"__section__(\w+)__"'),
        auto_patterns=(
            _auto(r'"nodes"\s*:\s*\{', "nodes"),
            _auto(r'"edges"\s*:\s*\{', "edges"),
            _auto(r'"config"\s*:\s*\{', "config"),
        ),
        block_style=None,
    ),
)

UNKNOWN_LANGUAGE = "unknown"


def resolve_profile(file_path: str | Path) -> LanguageProfile | None:
    """Return the profile for a file's extension, or None if unsupported.

    Lookup is case-insensitive on the extension; the first matching
    profile wins.
    """
    ext = Path(file_path).suffix.lower()
    for profile in LANGUAGE_PROFILES:
        if ext in profile.extensions:
            return profile
    return None


def language_name(profile: LanguageProfile | None) -> str:
    return profile.name if profile else UNKNOWN_LANGUAGE


def require_profile(file_path: str | Path) -> LanguageProfile:
    """Like resolve_profile, but raise for unsupported extensions.

    Raises:
        UnsupportedLanguageError: if no profile handles the extension
    """
    profile = resolve_profile(file_path)
    if profile is None:
        raise UnsupportedLanguageError(str(file_path))
    return profile

"""Command-line interface for AI-Index.

Usage:
    ai-index src/store.ts                 Add or update the index block
    ai-index "src/**/*.py" --min-lines 200
    ai-index src/lib.rs --verify          Check the stored index
    ai-index src/lib.rs --remove          Strip the index block
"""

import argparse
import glob
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from . import __version__
from .config import configure_logging
from .engine.operations import generate_index, remove_index, verify_index
from .models import (
    BatchSummary,
    GenerateResult,
    OutcomeStatus,
    RemoveResult,
    VerifyResult,
)

logger = logging.getLogger(__name__)

_GLOB_CHARS = frozenset("*?[")

_STATUS_MARKS = {
    OutcomeStatus.SUCCESS: "✓",
    OutcomeStatus.SKIPPED: "-",
    OutcomeStatus.FAILED: "✗",
}


def expand_patterns(patterns: Iterable[str]) -> tuple[list[Path], list[str]]:
    """Expand file arguments into a de-duplicated list of files.

    Glob patterns are expanded recursively (``**`` is supported); plain
    paths are taken as-is. Directories are ignored.

    Returns:
        Tuple of (files in argument order, patterns that matched nothing)
    """
    files: list[Path] = []
    seen: set[Path] = set()
    missing: list[str] = []

    for pattern in patterns:
        if _GLOB_CHARS.intersection(pattern):
            matches = sorted(glob.glob(pattern, recursive=True))
        else:
            matches = [pattern] if Path(pattern).exists() else []
        if not matches:
            missing.append(pattern)
            continue
        for match in matches:
            path = Path(match)
            if not path.is_file():
                continue
            key = path.resolve()
            if key not in seen:
                seen.add(key)
                files.append(path)

    return files, missing


def _status_line(path: str, status: OutcomeStatus, text: str) -> str:
    return f"   {_STATUS_MARKS[status]} {path}: {text}"


def format_generate(result: GenerateResult) -> str:
    if result.status == OutcomeStatus.SUCCESS:
        text = f"{result.action} index ({result.sections} sections, {result.total_lines} lines)"
    elif result.status == OutcomeStatus.SKIPPED:
        text = f"skipped ({result.reason})"
    else:
        text = f"failed ({result.reason})"
    return _status_line(result.path, result.status, text)


def format_verify(result: VerifyResult) -> str:
    if result.valid:
        return _status_line(result.path, result.status, "index valid")
    if result.status == OutcomeStatus.SKIPPED:
        return _status_line(result.path, result.status, f"skipped ({result.reason})")

    lines = [_status_line(result.path, result.status, f"{len(result.issues)} issue(s)")]
    lines.extend(f"      - {issue.message}" for issue in result.issues)
    return "\n".join(lines)


def format_remove(result: RemoveResult) -> str:
    if result.removed:
        text = "index removed"
    elif result.status == OutcomeStatus.SKIPPED:
        text = f"skipped ({result.reason})"
    else:
        text = f"failed ({result.reason})"
    return _status_line(result.path, result.status, text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ai-index",
        description="AI-Index - add a section index to source files so agents read only what they need",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Region markers:
  TypeScript/JS:  //#region name - Description   ...  //#endregion
  Python:         # region: name - Description   ...  # endregion
  Rust/Go:        // region: name - Description  ...  // endregion
  C#:             #region name - Description     ...  #endregion

Examples:
  ai-index src/stores/projectStore.ts
  ai-index "src/**/*.py" --min-lines 200
  ai-index src/lib.rs --verify
        """,
    )
    parser.add_argument("patterns", nargs="*", metavar="FILE", help="Files or glob patterns")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--verify", action="store_true", help="Check that the stored index is up to date")
    mode.add_argument("--remove", action="store_true", help="Remove the index block")
    parser.add_argument(
        "--reindex", action="store_true", help="Update an existing index (same as the default)"
    )
    parser.add_argument(
        "--min-lines", type=int, default=None, metavar="N", help="Only index files with N+ lines"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else "WARNING")

    if not args.patterns:
        print("Error: No file pattern specified", file=sys.stderr)
        return 1
    if args.min_lines is not None and args.min_lines < 0:
        print("Error: --min-lines must be >= 0", file=sys.stderr)
        return 1

    print("\nAI-Index\n")

    files, missing = expand_patterns(args.patterns)
    for pattern in missing:
        print(f"   ! File not found: {pattern}")

    if not files:
        print("   No files matched the pattern(s)")
        return 0

    print(f"   Processing {len(files)} file(s)...\n")

    summary = BatchSummary()
    for path in files:
        try:
            if args.verify:
                result = verify_index(path)
                print(format_verify(result))
            elif args.remove:
                result = remove_index(path)
                print(format_remove(result))
            else:
                result = generate_index(path, min_lines=args.min_lines)
                print(format_generate(result))
            summary.record(result.status)
        except Exception as e:
            logger.error(f"Unexpected error processing {path}: {e}", exc_info=True)
            print(_status_line(str(path), OutcomeStatus.FAILED, str(e)))
            summary.record(OutcomeStatus.FAILED)

    print(
        f"\n   Done: {summary.success} success, {summary.skipped} skipped, "
        f"{summary.failed} failed\n"
    )
    return 1 if summary.has_failures else 0


if __name__ == "__main__":
    sys.exit(main())

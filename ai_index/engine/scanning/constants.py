"""Constants shared by the section scanners.

- Fallback section used when no strategy finds anything
- Default descriptions for well-known section names
"""

FALLBACK_SECTION_NAME = "main"
FALLBACK_DESCRIPTION = "Main content"

# ---------------------------------------------------------------------------
# Default descriptions, applied to any section that has none of its own.
# Keys are the section names produced by the auto-detect patterns plus a few
# names authors commonly give their regions.
# ---------------------------------------------------------------------------
SECTION_DESCRIPTIONS: dict[str, str] = {
    # Common
    "imports": "External dependencies",
    "types": "Type definitions",
    "config": "Configuration",
    "main": FALLBACK_DESCRIPTION,
    "tests": "Unit tests",
    # TypeScript/JavaScript
    "types/state": "State interface",
    "types/actions": "Action interfaces",
    "state/initial": "Initial state",
    "store": "State store",
    "selectors": "State selectors",
    "hooks": "React hooks",
    "debug": "Debug utilities",
    # Python
    "classes": "Class definitions",
    "models": "Data models",
    "dataclasses": "Dataclass definitions",
    "routes": "API routes",
    "async": "Async functions",
    # Rust
    "modules": "Module declarations",
    "structs": "Struct definitions",
    "enums": "Enum definitions",
    "impl": "Implementations",
    "functions": "Function definitions",
    # Go
    "interfaces": "Interface definitions",
    "methods": "Method definitions",
    # C#/Java
    "namespace": "Namespace declaration",
    "package": "Package declaration",
    # JSON
    "nodes": "Graph nodes",
    "edges": "Graph edges",
}

"""Base infrastructure for tool handlers.

This module provides the common types and utilities used by all handler modules.
Each handler receives a HandlerContext with shared state and returns a ToolResult.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Coroutine

from ..core.tokens import count_tokens

if TYPE_CHECKING:
    from ...config import Settings
    from ...models import ToolResult


@dataclass
class HandlerContext:
    """Context object passed to all handlers.

    Contains the configuration handlers need to operate. Handlers never
    keep state between calls: every request recomputes the index from disk.
    """

    settings: "Settings"

    def resolve_path(self, file_path: str) -> Path:
        """Resolve a requested path inside the configured workspace root."""
        return self.settings.resolve_path(file_path)


# Type alias for handler functions
HandlerFunc = Callable[
    [dict[str, Any], HandlerContext],
    Coroutine[Any, Any, "ToolResult"],
]

__all__ = ["HandlerContext", "HandlerFunc", "count_tokens"]

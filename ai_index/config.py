"""Configuration settings for AI-Index.

Loads from environment variables (prefixed ``AI_INDEX_``) and an optional
``.env`` file, with defaults suitable for local use.
"""

import logging
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .engine.core.errors import PathOutsideWorkspaceError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="AI_INDEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App info
    debug: bool = False
    log_level: str = "INFO"

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 8765
    cors_allowed_origins: str = ""

    # Server requests may only read files under this directory
    workspace_root: Path = Field(default_factory=Path.cwd)

    # Verifier: max allowed |stored.start - actual.start| before flagging drift
    drift_tolerance: int = Field(default=5, ge=0)

    # Generate skips files shorter than this (0 = no threshold)
    min_lines: int = Field(default=0, ge=0)

    # MCP
    server_name: str = "ai-index"
    protocol_version: str = "2024-11-05"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return str(value).strip().upper() or "INFO"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from the comma-separated setting."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]

    def resolve_path(self, file_path: str | Path) -> Path:
        """Resolve a request path inside the workspace root.

        Relative paths are taken from the root; symlinks and ``..`` are
        resolved before the check.

        Raises:
            PathOutsideWorkspaceError: if the path escapes the root
        """
        root = self.workspace_root.expanduser().resolve()
        path = Path(file_path).expanduser()
        if not path.is_absolute():
            path = root / path
        path = path.resolve()
        if not path.is_relative_to(root):
            raise PathOutsideWorkspaceError(str(file_path), str(root))
        return path


def configure_logging(level: str | None = None, stream=None) -> None:
    """Configure root logging once for an entry point.

    The stdio MCP server passes ``sys.stderr`` so that stdout stays a clean
    JSON-RPC channel.
    """
    if level is None:
        level = "DEBUG" if settings.debug else settings.log_level
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
        force=True,
    )


# Global settings instance
settings = Settings()

"""Pytest fixtures for AI-Index tests.

Sample source files are written into ``tmp_path`` so every test works on
its own copy and generate/remove can modify files freely.
"""

from pathlib import Path

import pytest
from samples import AUTO_PY, PLAIN_TS, REGION_PY, REGION_TS, STORE_TS, write

from ai_index.config import Settings
from ai_index.engine.handlers import HandlerContext


@pytest.fixture
def region_ts(tmp_path: Path) -> Path:
    return write(tmp_path, "region.ts", REGION_TS)


@pytest.fixture
def store_ts(tmp_path: Path) -> Path:
    return write(tmp_path, "store.ts", STORE_TS)


@pytest.fixture
def plain_ts(tmp_path: Path) -> Path:
    return write(tmp_path, "plain.ts", PLAIN_TS)


@pytest.fixture
def auto_py(tmp_path: Path) -> Path:
    return write(tmp_path, "loader.py", AUTO_PY)


@pytest.fixture
def region_py(tmp_path: Path) -> Path:
    return write(tmp_path, "events.py", REGION_PY)


@pytest.fixture
def ctx(tmp_path: Path) -> HandlerContext:
    """Handler context resolving relative paths against tmp_path."""
    return HandlerContext(settings=Settings(workspace_root=tmp_path))

"""Index tool handlers for agents.

Handles:
- get_file_index: Section map of a file
- read_section: Text of one named section
- verify_index: Check a stored index block against the file

All three are read-only: the server never modifies files.
"""

import json
import logging
from typing import Any

from pydantic import BaseModel, ValidationError

from ...models import (
    GetFileIndexParams,
    ReadSectionParams,
    ToolResult,
    VerifyIndexParams,
)
from ..core.errors import AIIndexError
from ..operations import get_file_index, read_section, verify_index
from .base import HandlerContext, count_tokens

logger = logging.getLogger(__name__)


def _error(message: str, **extra: Any) -> ToolResult:
    return ToolResult(data={"error": message, **extra}, input_tokens=0, output_tokens=0)


def _invalid_params(tool: str, e: ValidationError) -> ToolResult:
    fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
    return _error(f"{tool}: missing or invalid parameter(s): {', '.join(fields)}")


def _result(model: BaseModel, input_text: str = "") -> ToolResult:
    data = model.model_dump(mode="json")
    return ToolResult(
        data=data,
        input_tokens=count_tokens(input_text),
        output_tokens=count_tokens(json.dumps(data)),
    )


async def handle_get_file_index(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Get the section index of a file.

    Args:
        params: Dict containing:
            - file_path: Path to the file to index

    Returns:
        ToolResult with the FileIndexResult payload
    """
    try:
        request = GetFileIndexParams.model_validate(params)
    except ValidationError as e:
        return _invalid_params("get_file_index", e)

    try:
        result = get_file_index(ctx.resolve_path(request.file_path))
    except AIIndexError as e:
        logger.info(f"get_file_index failed for {request.file_path}: {e}")
        return _error(str(e))

    return _result(result, request.file_path)


async def handle_read_section(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Read a specific section of a file by name.

    Args:
        params: Dict containing:
            - file_path: Path to the file
            - section_name: Name of the section to read

    Returns:
        ToolResult with the section text, or an error listing the
        available section names
    """
    try:
        request = ReadSectionParams.model_validate(params)
    except ValidationError as e:
        return _invalid_params("read_section", e)

    try:
        result = read_section(ctx.resolve_path(request.file_path), request.section_name)
    except AIIndexError as e:
        logger.info(f"read_section failed for {request.file_path}: {e}")
        return _error(str(e))

    return _result(result, f"{request.file_path} {request.section_name}")


async def handle_verify_index(
    params: dict[str, Any],
    ctx: HandlerContext,
) -> ToolResult:
    """Verify the embedded index of a file without modifying it.

    Args:
        params: Dict containing:
            - file_path: Path to the file to verify

    Returns:
        ToolResult with the VerifyResult payload
    """
    try:
        request = VerifyIndexParams.model_validate(params)
    except ValidationError as e:
        return _invalid_params("verify_index", e)

    try:
        path = ctx.resolve_path(request.file_path)
    except AIIndexError as e:
        logger.info(f"verify_index failed for {request.file_path}: {e}")
        return _error(str(e))

    result = verify_index(path, tolerance=ctx.settings.drift_tolerance)
    return _result(result, request.file_path)

"""MCP stdio transport.

Reads newline-delimited JSON-RPC messages from stdin and writes responses
to stdout, one JSON document per line. Logs go to stderr.
"""

import asyncio
import json
import logging
import sys
from typing import TextIO

from ..config import configure_logging, settings
from ..engine.handlers import HandlerContext
from .jsonrpc import PARSE_ERROR, jsonrpc_error
from .transport import handle_message

logger = logging.getLogger(__name__)


async def serve_stdio(
    ctx: HandlerContext | None = None,
    reader: TextIO | None = None,
    writer: TextIO | None = None,
) -> None:
    """Serve MCP requests until the reader reaches end of input."""
    ctx = ctx or HandlerContext(settings=settings)
    reader = reader or sys.stdin
    writer = writer or sys.stdout
    loop = asyncio.get_running_loop()

    logger.info(f"{ctx.settings.server_name} MCP server listening on stdio")
    while True:
        line = await loop.run_in_executor(None, reader.readline)
        if not line:
            break
        line = line.strip()
        if not line:
            continue

        try:
            body = json.loads(line)
        except json.JSONDecodeError:
            response = jsonrpc_error(None, PARSE_ERROR, "Parse error")
        else:
            response = await handle_message(body, ctx)

        if response is not None:
            writer.write(json.dumps(response, default=str) + "\n")
            writer.flush()

    logger.info("stdin closed, MCP server stopping")


def main() -> None:
    """Run the stdio MCP server."""
    configure_logging(stream=sys.stderr)
    asyncio.run(serve_stdio())


if __name__ == "__main__":
    main()

"""FastAPI server for AI-Index.

Serves the read-only index tools over HTTP: a JSON-RPC MCP endpoint and
plain REST endpoints for tools that don't speak MCP.
"""

import json
import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from pathlib import Path

from fastapi import FastAPI, HTTPException, Query, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import configure_logging, settings
from .engine.core.errors import FileReadError, PathOutsideWorkspaceError
from .engine.handlers import HandlerContext
from .engine.operations import get_file_index, read_section, verify_index
from .mcp import PARSE_ERROR, handle_message, jsonrpc_error
from .middleware import SecurityHeadersMiddleware
from .models import (
    FileIndexResult,
    HealthResponse,
    ReadSectionResult,
    SectionNotFoundResult,
    VerifyResult,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    logger.info(f"Starting AI-Index server v{__version__}")

    if not settings.debug and settings.cors_allowed_origins == "*":
        logger.warning(
            "CORS is configured to allow all origins ('*'). "
            "Set AI_INDEX_CORS_ALLOWED_ORIGINS to restrict it."
        )
    logger.info(f"Serving files under {settings.workspace_root}")

    yield
    logger.info("AI-Index server stopped")


app = FastAPI(
    title="AI-Index",
    description="Section locator for source files - read only what you need",
    version=__version__,
    lifespan=lifespan,
)

# Request id and security headers
app.add_middleware(SecurityHeadersMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-Id"],
)


def get_context() -> HandlerContext:
    return HandlerContext(settings=settings)


# ============ EXCEPTION HANDLERS ============


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent response format."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
        },
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with a generic error message."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "An internal server error occurred.",
        },
    )


def _read_error(exc: FileReadError) -> HTTPException:
    status_code = 404 if exc.reason in ("not-found", "not-a-file") else 422
    return HTTPException(status_code=status_code, detail=str(exc))


def _resolve(path: str) -> Path:
    try:
        return settings.resolve_path(path)
    except PathOutsideWorkspaceError as e:
        raise HTTPException(status_code=403, detail=str(e))


# ============ HEALTH ENDPOINTS ============


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Health check endpoint (lightweight liveness check)."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(UTC),
    )


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with API info."""
    return {
        "name": "AI-Index",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
        "mcp": "/mcp",
    }


# ============ MCP ENDPOINT ============


@app.post("/mcp", tags=["MCP"])
async def mcp_endpoint(request: Request):
    """
    MCP endpoint (JSON-RPC 2.0, single request or batch).

    Notifications are acknowledged with 202 and an empty body.
    """
    raw = await request.body()
    try:
        body = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JSONResponse(content=jsonrpc_error(None, PARSE_ERROR, "Parse error"))

    response = await handle_message(body, get_context())
    if response is None:
        return Response(status_code=202)
    return JSONResponse(content=response)


# ============ REST ENDPOINTS ============


@app.get("/v1/index", response_model=FileIndexResult, tags=["Index"])
async def index_endpoint(
    path: str = Query(..., description="File to index"),
) -> FileIndexResult:
    """Section map of a file."""
    try:
        return get_file_index(_resolve(path))
    except FileReadError as e:
        raise _read_error(e)


@app.get("/v1/section", response_model=ReadSectionResult, tags=["Index"])
async def section_endpoint(
    path: str = Query(..., description="File to read from"),
    name: str = Query(..., description="Section name"),
):
    """Text of one named section; 404 lists the available sections."""
    try:
        result = read_section(_resolve(path), name)
    except FileReadError as e:
        raise _read_error(e)

    if isinstance(result, SectionNotFoundResult):
        return JSONResponse(
            status_code=404,
            content={"success": False, **result.model_dump(mode="json")},
        )
    return result


@app.get("/v1/verify", response_model=VerifyResult, tags=["Index"])
async def verify_endpoint(
    path: str = Query(..., description="File to verify"),
) -> VerifyResult:
    """Check the stored index block of a file (read-only)."""
    return verify_index(_resolve(path), tolerance=settings.drift_tolerance)


# ============ MAIN ============


def main():
    """Run the server with uvicorn."""
    import uvicorn

    configure_logging()
    uvicorn.run(
        "ai_index.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()

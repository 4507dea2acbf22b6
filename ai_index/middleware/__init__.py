"""ASGI middleware for the FastAPI application.

This module provides:
- Request id and security headers
"""

from .security_headers import SecurityHeadersMiddleware

__all__ = [
    "SecurityHeadersMiddleware",
]

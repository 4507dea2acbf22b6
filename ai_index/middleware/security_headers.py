"""Request tracing and security headers middleware.

Pure ASGI middleware: tags every HTTP response with a request id and logs
method, path, status and latency at debug level.
"""

import logging
import time
from uuid import uuid4

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = b"x-request-id"


class SecurityHeadersMiddleware:
    """
    Add tracing and security headers to all responses.

    Headers added:
        - X-Request-Id: echoed from the request when present, else a new UUID
        - X-Content-Type-Options: nosniff
        - X-Frame-Options: DENY
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = None
        for name, value in scope.get("headers", []):
            if name == REQUEST_ID_HEADER:
                request_id = value.decode("latin-1")
                break
        request_id = request_id or str(uuid4())
        started = time.perf_counter()

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((REQUEST_ID_HEADER, request_id.encode("latin-1")))
                headers.append((b"x-content-type-options", b"nosniff"))
                headers.append((b"x-frame-options", b"DENY"))
                message = {**message, "headers": headers}

                latency_ms = (time.perf_counter() - started) * 1000
                logger.debug(
                    f"{scope.get('method')} {scope.get('path')} -> {message.get('status')} "
                    f"({latency_ms:.1f}ms, request_id={request_id})"
                )
            await send(message)

        await self.app(scope, receive, send_with_headers)

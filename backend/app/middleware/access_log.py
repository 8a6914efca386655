"""
Bills Demo Backend: Access Log Middleware
=========================================

What:  Logs one line per response and exposes the handling time.
How:   Times the downstream handler, stamps `X-Process-Time-Ms` on the
       response, and logs method, path, status, content type and body size
       (from Content-Length) to the `bills.access` logger.

    GET /api/bills -> 200 application/json 172B in 1.3ms

Probes on /health are timed but not logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("bills.access")

PROCESS_TIME_HEADER = "X-Process-Time-Ms"
QUIET_PATHS = frozenset({"/health"})


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Time each request and log what was served."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
        response.headers[PROCESS_TIME_HEADER] = str(elapsed_ms)

        if request.url.path not in QUIET_PATHS:
            level = logging.WARNING if response.status_code >= 400 else logging.INFO
            logger.log(
                level,
                "%s %s -> %d %s %sB in %.1fms",
                request.method,
                request.url.path,
                response.status_code,
                response.headers.get("content-type", "-"),
                response.headers.get("content-length", "?"),
                elapsed_ms,
            )
        return response

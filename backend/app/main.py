"""
Bills Demo Backend: FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds the app, registers middleware and exception
       handlers, and includes each router exactly once. Nothing is
       registered on a global router.
Who:   uvicorn (`uvicorn app.main:app`) and the `bills-server` entry point.

Application Architecture:
    ┌─────────────────────────────────────────────┐
    │                 FastAPI App                 │
    │                                             │
    │  Middleware:  [AccessLog]                   │
    │                                             │
    │  Routes:  GET /  GET /api/bills  GET /health│
    │                                             │
    │  Exception Handlers:                        │
    │    BillsError → 500 │ Exception → 500       │
    └─────────────────────────────────────────────┘
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.exceptions import BillsError
from app.logging_config import setup_logging
from app.middleware.access_log import AccessLogMiddleware
from app.routes import bills, greeting, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging on startup; log shutdown."""
    setup_logging()
    logger.info("Bills service starting up (version %s)", __version__)
    logger.info("Listening on http://%s:%d", settings.app_host, settings.app_port)

    yield

    logger.info("Bills service shutting down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to JSON error responses.

    Handler hierarchy:
        BillsError (base)    → 500 with the error's message
        Exception (fallback) → 500 with a generic message

    Stack traces and error context are logged, never returned.
    """

    @app.exception_handler(BillsError)
    async def handle_bills_error(request: Request, exc: BillsError):
        logger.error("%s %s: %s | Context: %s", request.method, request.url.path, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "path": request.url.path,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("%s %s: unexpected error: %s", request.method, request.url.path, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "path": request.url.path,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: A fresh, fully configured FastAPI instance. Tests build their
    own instances so routes added in one test never leak into another.
    """
    app = FastAPI(
        title="Bills Demo API",
        description="Greeting endpoint and a fixed JSON list of bills.",
        version=__version__,
        lifespan=lifespan,
    )

    # Times and logs every request
    app.add_middleware(AccessLogMiddleware)

    register_exception_handlers(app)

    app.include_router(greeting.router)
    app.include_router(bills.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Entry point for `bills-server`: serve the app with uvicorn."""
    setup_logging()
    uvicorn.run(app, host=settings.app_host, port=settings.app_port, log_config=None)


if __name__ == "__main__":
    run()

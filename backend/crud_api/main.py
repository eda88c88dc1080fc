"""
crud-api Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, exception
       handling and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn crud_api.main:app) or the `crud-api` script.

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  Middleware:  [Request ID] → [Logging] → [CORS]      │
    │                                                      │
    │  Routes:      /books  /wines  /  /reset  /health     │
    │                                                      │
    │  Exception Handlers (all text/plain):                │
    │     StoreError → 500   PayloadError → 400            │
    │     anything else → 500 generic message              │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, create missing tables (DB_CREATE_TABLES)
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from crud_api import __version__
from crud_api.config import settings
from crud_api.database import create_tables, dispose_engine
from crud_api.exceptions import CrudApiError, PayloadError, StoreError
from crud_api.middleware.logging import RequestLoggingMiddleware
from crud_api.middleware.request_id import RequestIDMiddleware, request_id_var
from crud_api.routes import books, health, site, wines

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout.
    Called once during app startup before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Runs startup before the yield and shutdown after it."""
    setup_logging()
    logger.info("crud-api %s starting up...", __version__)

    if settings.db_create_tables:
        await create_tables()
        logger.info("Ensured books and wines tables exist")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.port)

    yield

    logger.info("crud-api shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Error bodies are plain text: the failure message itself, as the
    clients of this API expect, not a JSON envelope.

    Handler hierarchy:
        StoreError        → 500, message (includes RecordNotFoundError)
        PayloadError      → 400, message
        CrudApiError      → 500, message
        Exception         → 500, generic message (traceback logged)
    """

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        """A store operation failed; the client gets the failure message."""
        rid = request_id_var.get("")
        logger.error("[%s] Store error: %s | Context: %s", rid, exc.message, exc.context)
        return PlainTextResponse(exc.message, status_code=500)

    @app.exception_handler(PayloadError)
    async def handle_payload_error(request: Request, exc: PayloadError):
        rid = request_id_var.get("")
        logger.warning("[%s] Unparseable request body: %s", rid, exc.message)
        return PlainTextResponse(exc.message, status_code=400)

    @app.exception_handler(CrudApiError)
    async def handle_app_error(request: Request, exc: CrudApiError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s", rid, exc.message)
        return PlainTextResponse(exc.message, status_code=500)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for unexpected errors.

        The traceback is logged server-side only.
        """
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return PlainTextResponse("Internal Server Error", status_code=500)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="crud-api",
        description="RESTful API over books and wines, with a reset endpoint that reloads seed data.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS → route

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(books.router)
    app.include_router(wines.router)
    app.include_router(site.router)
    app.include_router(health.router)

    return app


# uvicorn expects `crud_api.main:app` to be importable
app = create_app()


def run() -> None:
    """Entry point for the `crud-api` console script."""
    import uvicorn

    uvicorn.run(
        "crud_api.main:app",
        host=settings.backend_host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()

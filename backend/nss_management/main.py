"""
NSS Management Backend: FastAPI Application Factory
=====================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, exception
       handling and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn nss_management.main:app) or run().

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  Middleware Chain:                                   │
    │  ┌──────────┐ ┌─────────────┐ ┌──────────────────┐   │
    │  │  Req ID  │→│  Logging    │→│  CORS            │   │
    │  └──────────┘ └─────────────┘ └──────────────────┘   │
    │                                                      │
    │  Routes:                                             │
    │  /api/volunteers  /api/events  /api/activities       │
    │  GET /            GET /health                        │
    │                                                      │
    │  Exception Handlers:                                 │
    │  Validation→400 │ Duplicate→400 │ NotFound→404 │ DB→500│
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log listen address
    Shutdown: dispose database engine (close all connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from nss_management import __version__
from nss_management.config import settings
from nss_management.database import dispose_engine
from nss_management.exceptions import (
    DatabaseError,
    DuplicateKeyError,
    NotFoundError,
    NSSManagementError,
    ValidationError,
)
from nss_management.middleware.logging import RequestLoggingMiddleware
from nss_management.middleware.request_id import RequestIDMiddleware, request_id_var
from nss_management.routes import health, pages, records

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # These log every request / statement at INFO or DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: logging. Shutdown: release pooled database connections."""
    setup_logging()
    logger.info("NSS Management backend %s starting up", __version__)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("NSS Management backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(error: str, message: str, details=None) -> dict:
    body = {"error": error, "message": message, "request_id": request_id_var.get("")}
    if details:
        body["details"] = details
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        DuplicateKeyError       → 400 duplicate_key
        ValidationError         → 400 validation_error
        RequestValidationError  → 400 validation_error (body not a JSON object)
        NotFoundError           → 404 not_found
        DatabaseError           → 500 server_error (raw store error text)
        NSSManagementError      → 500 server_error
        Exception (fallback)    → 500 internal_server_error

    Every body carries a `message` key; clients only need that one.
    """

    @app.exception_handler(DuplicateKeyError)
    async def handle_duplicate_key(request: Request, exc: DuplicateKeyError):
        logger.warning("[%s] Duplicate key: %s", request_id_var.get(""), exc.message)
        return JSONResponse(
            status_code=400,
            content=_error_body("duplicate_key", exc.message, exc.context),
        )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(
            status_code=400,
            content=_error_body("validation_error", exc.message, exc.context),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        problems = []
        for error in exc.errors():
            loc = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
            problems.append(f"{loc}: {error.get('msg')}" if loc else str(error.get("msg")))
        message = "Invalid request: " + "; ".join(problems)
        logger.warning("[%s] Request validation error: %s", request_id_var.get(""), message)
        return JSONResponse(status_code=400, content=_error_body("validation_error", message))

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=404,
            content=_error_body("not_found", exc.message),
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error("[%s] Database error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=_error_body("server_error", exc.message),
        )

    @app.exception_handler(NSSManagementError)
    async def handle_app_error(request: Request, exc: NSSManagementError):
        logger.error("[%s] Application error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(
            status_code=500,
            content=_error_body("server_error", exc.message),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("[%s] Unexpected error: %s", request_id_var.get(""), str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=_error_body("internal_server_error", str(exc) or "An unexpected error occurred"),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="NSS Management API",
        description="Manage volunteers, events and activities.",
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS
    origins = settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    for router in records.routers:
        app.include_router(router)
    app.include_router(health.router)
    app.include_router(pages.router)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured port."""
    uvicorn.run(
        "nss_management.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


app = create_app()

"""
QuickBite Backend: FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   `create_app()` wires middleware, exception handlers, routes and the
       lifespan; `app` is the module-level instance uvicorn serves
       (`uvicorn quickbite.main:app`).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware: Request ID → Logging → GZip → CORS     │
    │                                                     │
    │  Routes:                                            │
    │   /api/register  /api/login  /api/items             │
    │   /api/orders    /api/user   /health                │
    │                                                     │
    │  Exception Handlers → {"error": message}:           │
    │   Validation→400  Auth→401  NotFound→404            │
    │   Storage→400     Internal→500                      │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → config check → build data store → app.state.datastore
    Shutdown: close the data store
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from quickbite import __version__
from quickbite.config import settings
from quickbite.datastore import create_datastore
from quickbite.exceptions import (
    AuthError,
    InternalError,
    NotFoundError,
    QuickBiteError,
    StorageError,
    ValidationError,
)
from quickbite.middleware.logging import RequestLoggingMiddleware
from quickbite.middleware.request_id import RequestIDMiddleware, request_id_var
from quickbite.routes import auth, health, menu, orders, users

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once, before anything else logs.

    Format: 2024-01-15T12:00:00 [INFO] quickbite.services.auth_service: ...
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers are chatty at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("hpack").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Build the data store on startup and release it on shutdown.

    A store that cannot be built (missing URL or key) is logged and left
    unset. The server still starts: /health reports "unconfigured" and
    API calls answer 500 until the configuration is fixed.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("QuickBite Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))

    app.state.datastore = None
    try:
        app.state.datastore = await create_datastore(settings)
    except Exception as e:
        logger.error("Could not create %s data store: %s", settings.datastore_backend, str(e))

    logger.info("Server ready at http://%s:%d", settings.host, settings.port)
    logger.info("=" * 60)

    yield

    logger.info("QuickBite Backend shutting down...")
    if app.state.datastore is not None:
        await app.state.datastore.close()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to `{"error": message}` responses.

    Handler table:
        ValidationError         → 400
        RequestValidationError  → 400 (FastAPI would answer 422)
        AuthError               → 401
        NotFoundError           → 404
        StorageError            → 400
        InternalError           → 500
        Exception (fallback)    → 500, generic message, traceback logged
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Schema failures (missing body field, wrong type) use the same 400 shape."""
        errors = exc.errors()
        message = "Invalid request body"
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
            message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
        logger.warning("[%s] Request validation failed: %s", request_id_var.get(""), message)
        return _error_response(400, message)

    @app.exception_handler(AuthError)
    async def handle_auth_error(request: Request, exc: AuthError):
        logger.warning("[%s] Authentication failed: %s", request_id_var.get(""), exc.message)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        logger.warning(
            "[%s] Data store error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(InternalError)
    async def handle_internal_error(request: Request, exc: InternalError):
        logger.error(
            "[%s] Internal error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(QuickBiteError)
    async def handle_app_error(request: Request, exc: QuickBiteError):
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return _error_response(500, "Internal server error")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    app = FastAPI(
        title="QuickBite API",
        description=(
            "Food-ordering backend: user registration and login, menu listing, "
            "and order management on a hosted relational data store."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # Request ID → Logging → GZip → CORS → route
    origins = settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers refuse credentials with a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(menu.router)
    app.include_router(orders.router)
    app.include_router(users.router)
    app.include_router(health.router)

    return app


app = create_app()

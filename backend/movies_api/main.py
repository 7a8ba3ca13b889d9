"""
Movies API — FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance that
       owns its own MovieStore.
Who:   uvicorn imports `movies_api.main:app`; tests call create_app() directly.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  CORS → Request ID → Logging           │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────┐ ┌──────────────┐ ┌─────────────────┐  │
    │  │ GET /    │ │ GET /movies  │ │ POST /movies    │  │
    │  └──────────┘ │ GET /movies/ │ │ DELETE /movies/ │  │
    │               │     {id}     │ │     {id}        │  │
    │               └──────────────┘ └─────────────────┘  │
    │                                                     │
    │  Exception Handlers (all render via normalize_error)│
    │  MoviesApiError │ RequestValidationError │ 404/405  │
    │  Exception (fallback → 500 INTERNAL_ERROR)          │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Replace the seed list from SEED_FILE when configured
    Shutdown:
    1. Log shutdown (nothing to release; state is in memory)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from movies_api import __version__
from movies_api.config import settings
from movies_api.exceptions import (
    MoviesApiError,
    ValidationError,
    error_response,
    make_error,
)
from movies_api.middleware.logging import RequestLoggingMiddleware
from movies_api.middleware.request_id import RequestIDMiddleware, request_id_var
from movies_api.routes import movies, root
from movies_api.services.movie_store import MovieStore, load_seed_file

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # movies_api.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: logging, then optional seed file loading.

    A seed file that cannot be read or parsed is logged and the built-in
    seed list stays in place.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("%s %s starting up...", settings.app_name, __version__)

    if settings.seed_file:
        try:
            movies_from_file = await load_seed_file(settings.seed_file)
        except (OSError, ValueError) as e:
            logger.error("Could not load seed file %s: %s", settings.seed_file, e)
            logger.error("Serving the built-in seed list instead.")
        else:
            app.state.movie_store.reset(movies_from_file)

    logger.info("Serving %d movies", len(app.state.movie_store))
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("%s shutting down...", settings.app_name)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler map:
        MoviesApiError          → its own status/code/message/details
        RequestValidationError  → 400 VALIDATION_ERROR (e.g. malformed JSON)
        HTTPException 404/405   → 404 NOT_FOUND "Route not found"
        HTTPException (other)   → its status, HTTP_ERROR
        Exception (fallback)    → 500 INTERNAL_ERROR "Server error"

    Unexpected exceptions raised by routes are caught first by
    RequestIDMiddleware; the Exception handler here only sees faults raised
    outside it. Either way the traceback is logged server-side only.
    """

    @app.exception_handler(MoviesApiError)
    async def handle_app_error(request: Request, exc: MoviesApiError):
        rid = request_id_var.get("")
        logger.warning(
            "[%s] %s %s -> %d %s: %s",
            rid, request.method, request.url.path, exc.status, exc.code, exc.message,
        )
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """The framework rejected the request before our validators ran."""
        rid = request_id_var.get("")
        logger.warning("[%s] Request rejected on %s: %s", rid, request.url.path, exc.errors())
        error = ValidationError(
            message="Invalid request body",
            status=400,
            details={"errors": jsonable_encoder(exc.errors())},
        )
        return error_response(error)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """
        Not-found handler: no route matched the path (404) or the path exists
        without the requested method (405).
        """
        if exc.status_code in (404, 405):
            error = make_error(404, "Route not found", "NOT_FOUND")
        else:
            error = make_error(exc.status_code, str(exc.detail), "HTTP_ERROR")
        return error_response(error)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: the exception text is logged, never returned."""
        rid = request_id_var.get("")
        logger.error(
            "[%s] Unexpected error on %s %s: %s",
            rid,
            request.method,
            request.url.path,
            str(exc),
            exc_info=True,
        )
        return error_response(exc)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[MovieStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Collection to serve. Defaults to a new MovieStore holding the
               built-in seed list. Tests pass their own to control state.
    """
    app = FastAPI(
        title=settings.app_name,
        description="CRUD operations over an in-memory collection of movie records.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.movie_store = store if store is not None else MovieStore()

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: CORS → RequestID → Logging.
    # RequestIDMiddleware turns unexpected exceptions into the 500 envelope,
    # so CORS sits outside it and still decorates that response.
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(root.router)
    app.include_router(movies.router)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(
        "movies_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


app = create_app()

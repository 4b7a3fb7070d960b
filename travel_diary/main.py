"""
Travel Diary Backend — FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (`uvicorn travel_diary.main:app`, or
       `python -m travel_diary`) and by the test suite with its own Settings.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────────┐                  │
    │  │   Req ID     │→│   Logging    │                  │
    │  └──────────────┘ └──────────────┘                  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────┐ ┌────────┐ ┌──────────┐ ┌───────────────┐ │
    │  │  /   │ │ /users │ │/locations│ │/entries       │ │
    │  └──────┘ └────────┘ └──────────┘ │/diaryentries  │ │
    │                                   └───────────────┘ │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐  │
    │  │ NotFound→404 │ Constraint→400 │ Storage→500  │  │
    │  │ RequestValidation→400 │ Exception→500        │  │
    │  └──────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Construct the Database handle and ensure the schema
       (any failure here is fatal: logged at CRITICAL, startup aborts)
    3. Publish the handle on app.state.database

    Shutdown:
    1. Dispose the database engine (close all connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from travel_diary import __version__
from travel_diary.config import Settings, settings
from travel_diary.database import Database
from travel_diary.exceptions import TravelDiaryError
from travel_diary.middleware.logging import RequestLoggingMiddleware
from travel_diary.middleware.request_id import RequestIDMiddleware, request_id_var
from travel_diary.routes import entries, health, home, locations, users

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before the database is opened.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # uvicorn's access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if log_level == "DEBUG" else logging.WARNING
    )
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Acquire the database on startup and release it on shutdown.

    Startup failure policy:
        Opening the file or creating the schema is the only thing that can
        go wrong here, and there is nothing useful the API can do without
        its tables. The error is logged at CRITICAL and re-raised, which
        makes uvicorn abort startup and exit non-zero.
    """
    app_settings: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(app_settings.log_level)
    logger.info("Travel Diary backend %s starting up...", __version__)

    database = Database(
        app_settings.database_url,
        echo=app_settings.sql_echo,
        enforce_foreign_keys=app_settings.sqlite_foreign_keys,
    )
    try:
        await database.init_schema()
    except Exception as e:
        logger.critical("Error connecting to database: %s", str(e))
        await database.dispose()
        raise

    app.state.database = database
    logger.info("Database connected: %s", app_settings.database_url)
    logger.info(
        "Server ready at http://%s:%d",
        app_settings.backend_host,
        app_settings.backend_port,
    )

    yield  # Application runs here

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Travel Diary backend shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(
    status_code: int, message: str, headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def _validation_message(exc: RequestValidationError) -> str:
    """Flattens FastAPI's error list into one line: 'body.10: JSON decode error'."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the centralized error mapping.

    Handler hierarchy:
        TravelDiaryError        → exc.status_code (404 / 400 / 500)
        RequestValidationError  → 400 (body is not valid JSON)
        Exception (fallback)    → 500 with the error text

    Every body is {"message": "<text>"}.
    """

    @app.exception_handler(TravelDiaryError)
    async def handle_travel_diary_error(request: Request, exc: TravelDiaryError):
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        else:
            logger.warning("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        message = _validation_message(exc)
        logger.warning("[%s] Invalid request: %s", rid, message)
        return _error_response(400, message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Backstop for anything a service did not translate.

        Starlette runs this outside the middleware chain, so the request id
        header is set here instead of by RequestIDMiddleware.
        """
        rid = request_id_var.get("") or getattr(request.state, "request_id", "")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        headers = {"X-Request-ID": rid} if rid else None
        return _error_response(500, str(exc), headers=headers)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to run with; defaults to the module singleton.
                      Tests pass one pointing at a temporary database file.

    Returns:
        Fully configured FastAPI instance. The database is not opened until
        the lifespan starts.
    """
    app = FastAPI(
        title="Travel Diary API",
        description="Users, locations and travel diary entries over a single SQLite file.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings or settings

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → route
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(home.router)
    app.include_router(users.router)
    app.include_router(entries.router)
    app.include_router(locations.router)
    app.include_router(health.router)

    return app


# uvicorn expects `travel_diary.main:app` to be importable
app = create_app()

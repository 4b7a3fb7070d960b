"""
Travel Diary Backend — Database Handle & Session Management
============================================================

What:  The `Database` handle (async engine + session factory), the ORM
       declarative base, and the FastAPI session dependency.
How:   One `Database` is constructed per application inside the lifespan
       handler, stored on `app.state.database`, and handed to route
       handlers through `get_db_session`. It is disposed on shutdown.
Who:   Constructed by `travel_diary.main.lifespan`; used by every route via
       `Depends(get_db_session)` and by the health check via `ping()`.

Schema:
    `init_schema()` runs `CREATE TABLE IF NOT EXISTS` for users, locations
    and entries through `Base.metadata.create_all`. SQLAlchemy orders the
    statements so referenced tables are created first. Running it against
    an initialized file changes nothing.

Foreign keys:
    SQLite only enforces FOREIGN KEY clauses on connections that issued
    `PRAGMA foreign_keys=ON`. When enabled, a listener on the engine's
    "connect" event issues it for every pooled connection.
"""

import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers its table on `Base.metadata`, which is what
    `Database.init_schema()` creates.
    """
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def storage_error_text(exc: BaseException) -> str:
    """
    Returns the underlying driver message of a SQLAlchemy error.

    `IntegrityError` and friends wrap the DBAPI exception in `.orig`;
    its text ("NOT NULL constraint failed: users.email") is what clients
    see in the `message` field. SQLAlchemy's own str() appends the SQL
    statement and a documentation link, which we do not return.
    """
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class Database:
    """
    Explicitly constructed storage handle shared by all requests of one app.

    Lifecycle:
        database = Database(url)        # engine created, nothing opened yet
        await database.init_schema()    # first connection, tables ensured
        ...                             # sessions handed out per request
        await database.dispose()        # pooled connections closed
    """

    def __init__(self, url: str, echo: bool = False, enforce_foreign_keys: bool = True):
        self.url = url
        self.engine = create_async_engine(url, echo=echo)

        if enforce_foreign_keys and self.engine.dialect.name == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        # expire_on_commit=False: handlers read generated ids after commit
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def init_schema(self) -> None:
        """
        Creates any missing tables. Errors propagate to the caller (startup
        treats them as fatal).
        """
        # Models register their tables on Base.metadata at import
        from travel_diary.models import entry, location, user  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Schema ready: %s", ", ".join(sorted(Base.metadata.tables)))

    async def ping(self) -> bool:
        """Runs SELECT 1; returns False instead of raising when unreachable."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.warning("Database ping failed: %s", storage_error_text(e))
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Opens a session from the app's `Database` handle
        2. Yields it to the route handler
        3. On success: commits (a no-op when the service already committed)
        4. On error: rolls back and re-raises for the exception handlers
        5. Always: closes the session (the `async with` block)

    Example usage in a route:
        @router.get("/users")
        async def list_users(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise

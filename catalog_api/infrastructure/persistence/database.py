"""
Database configuration for catalog API.

Provides:
- Database initialization (init_database, init_db, close_db)
- Async session factory (get_session_factory)
"""
import logging
from pathlib import Path
from typing import Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from .models import Base

logger = logging.getLogger("catalog-api.infrastructure.persistence.database")

# ==================== Database Configuration ====================

db_url: Optional[str] = None
async_db_url: Optional[str] = None
engine: Optional[AsyncEngine] = None
async_session_maker: Optional[async_sessionmaker] = None


def to_async_url(database_url: str) -> str:
    """
    Convert a plain SQLAlchemy URL to its async driver form.

    ``sqlite:///`` becomes ``sqlite+aiosqlite:///`` and ``postgresql://``
    becomes ``postgresql+asyncpg://``; URLs with a driver are kept.
    """
    if database_url.startswith("sqlite:///"):
        return database_url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return database_url


def configure_sqlite(async_engine: AsyncEngine) -> None:
    """Enable foreign keys and WAL pragmas on every SQLite connection."""

    @event.listens_for(async_engine.sync_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA synchronous=NORMAL")
        cursor.execute("PRAGMA busy_timeout=30000")  # 30 seconds
        cursor.close()


def init_database(database_url: str, echo: bool = False) -> None:
    """
    Initialize database engine and session maker.

    Args:
        database_url: SQLAlchemy database URL
        echo: Log SQL statements
    """
    global db_url, async_db_url, engine, async_session_maker

    db_url = database_url

    # Ensure data directory exists for file-based SQLite
    if db_url.startswith("sqlite:///") and ":memory:" not in db_url:
        db_path = db_url.replace("sqlite:///", "")
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    async_db_url = to_async_url(db_url)

    engine = create_async_engine(
        async_db_url,
        echo=echo,
        future=True,
        pool_pre_ping=True,
    )

    if "sqlite" in async_db_url:
        configure_sqlite(engine)
        logger.info("SQLite foreign keys and WAL pragmas configured")

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    logger.info(f"Database initialized with URL: {db_url}")


def get_session_factory() -> async_sessionmaker:
    """
    Get the configured session factory.

    Raises:
        RuntimeError: If init_database() was not called
    """
    if async_session_maker is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")
    return async_session_maker


async def init_db() -> None:
    """Initialize database (create tables)"""
    if engine is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema initialized")


async def close_db() -> None:
    """Close database connections"""
    if engine is not None:
        await engine.dispose()
        logger.info("Database connections closed")

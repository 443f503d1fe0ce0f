"""
Database connection management.

Provides the async SQLAlchemy engine and session factory for the SQL
key-value backend.

Dependencies: sqlalchemy
System role: Database connection lifecycle management
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    In-memory SQLite URLs get a StaticPool so every session shares the same
    connection (and therefore the same database).

    Args:
        database_url: SQLAlchemy async URL (e.g. postgresql+asyncpg://..., sqlite+aiosqlite://...)
        echo: Echo SQL statements to logs

    Returns:
        AsyncEngine: Configured engine
    """
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        return create_async_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(database_url, echo=echo, pool_pre_ping=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create session factory bound to engine.

    expire_on_commit=False keeps loaded rows readable after the transaction
    block ends.

    Args:
        engine: Async engine

    Returns:
        async_sessionmaker: Session factory
    """
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

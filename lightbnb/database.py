"""
Database connection and session management for PostgreSQL.
Handles async database operations with SQLAlchemy and connection pooling.
"""

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy import text
from lightbnb.config import settings
from typing import Any, AsyncGenerator, Dict, List, Sequence
import logging

logger = logging.getLogger(__name__)

# Create async engine with connection pooling
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_size=settings.pool_size,
    max_overflow=settings.max_overflow,
    pool_pre_ping=True,  # Validate connections before use
    pool_recycle=settings.pool_recycle,
    pool_timeout=settings.pool_timeout,
    connect_args={
        "server_settings": {
            "application_name": settings.app_name,
        }
    }
)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class SessionExecutor:
    """
    Runs raw SQL statements on an async SQLAlchemy session.

    Statements are handed to the driver untouched through ``exec_driver_sql``,
    so asyncpg receives its native ``$1, $2, ...`` placeholders together with
    the positional parameter list.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def execute(self, statement: str, parameters: Sequence[Any]) -> List[Dict[str, Any]]:
        """
        Execute a statement and return every resulting row as a dictionary.

        Args:
            statement: SQL text using positional ``$n`` placeholders
            parameters: Values bound to the placeholders, in order

        Returns:
            List of rows keyed by column name (empty for statements without rows)
        """
        connection = await self.session.connection()
        result = await connection.exec_driver_sql(statement, tuple(parameters))
        if not result.returns_rows:
            return []
        return [dict(row) for row in result.mappings().all()]

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get database session.
    Yields an async database session and ensures it's closed after use.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def check_database_connection() -> bool:
    """
    Test database connectivity.
    Returns True if connection is successful, False otherwise.
    """
    try:
        async with AsyncSessionLocal() as session:
            result = await session.execute(text("SELECT 1"))
            result.scalar()
            logger.info("Database connection successful")
            return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


async def close_db_connection():
    """
    Close database connection.
    This should be called during application shutdown.
    """
    await engine.dispose()
    logger.info("Database connections closed")

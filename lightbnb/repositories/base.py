"""
Base repository class for raw parameterized SQL.
Provides the executor contract and the fetch helpers shared by every repository.
"""

from typing import Any, Dict, List, Optional, Protocol, Sequence
import logging

logger = logging.getLogger(__name__)


class Executor(Protocol):
    """
    Anything able to run a parameterized statement and hand back its rows.

    ``lightbnb.database.SessionExecutor`` is the production implementation.
    """

    async def execute(self, statement: str, parameters: Sequence[Any]) -> List[Dict[str, Any]]:
        ...

    async def commit(self) -> None:
        ...

    async def rollback(self) -> None:
        ...


class BaseRepository:
    """
    Base repository providing statement execution with logging.
    Execution failures are logged and re-raised unchanged to the caller.
    """

    def __init__(self, executor: Executor):
        """
        Initialize repository with a statement executor.

        Args:
            executor: Object running SQL against the database
        """
        self.executor = executor

    async def fetch_all(self, statement: str, parameters: Sequence[Any]) -> List[Dict[str, Any]]:
        """
        Run a query and return all of its rows.

        Args:
            statement: SQL text with ``$n`` placeholders
            parameters: Values bound to the placeholders, in order

        Returns:
            List of rows (possibly empty)

        Raises:
            Exception: If the database operation fails
        """
        try:
            rows = await self.executor.execute(statement, list(parameters))
            logger.debug(f"{self.__class__.__name__} query returned {len(rows)} rows")
            return rows
        except Exception as e:
            logger.error(f"Error querying database: {e}")
            raise

    async def fetch_one(self, statement: str, parameters: Sequence[Any]) -> Optional[Dict[str, Any]]:
        """
        Run a query and return its first row, or None when it matched nothing.
        """
        rows = await self.fetch_all(statement, parameters)
        return rows[0] if rows else None

    async def insert_one(self, statement: str, parameters: Sequence[Any]) -> Dict[str, Any]:
        """
        Run an ``INSERT ... RETURNING *`` statement and commit it.

        Args:
            statement: Insert statement returning the stored row
            parameters: Values bound to the placeholders, in order

        Returns:
            The stored row

        Raises:
            Exception: If the database operation fails
        """
        try:
            rows = await self.executor.execute(statement, list(parameters))
            await self.executor.commit()
            return rows[0]
        except Exception as e:
            await self.executor.rollback()
            logger.error(f"Error inserting row: {e}")
            raise

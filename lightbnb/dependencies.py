"""
FastAPI dependency injection utilities for database access.
Route handlers depend on these to receive repositories bound to a request-scoped session.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from lightbnb.database import SessionExecutor, get_db
from lightbnb.repositories import PropertyRepository, ReservationRepository, UserRepository


async def get_executor(db: AsyncSession = Depends(get_db)) -> SessionExecutor:
    """
    Get a statement executor for the current request.

    Args:
        db: Database session

    Returns:
        SessionExecutor bound to the session
    """
    return SessionExecutor(db)


async def get_user_repository(executor: SessionExecutor = Depends(get_executor)) -> UserRepository:
    return UserRepository(executor)


async def get_reservation_repository(
    executor: SessionExecutor = Depends(get_executor)
) -> ReservationRepository:
    return ReservationRepository(executor)


async def get_property_repository(executor: SessionExecutor = Depends(get_executor)) -> PropertyRepository:
    return PropertyRepository(executor)

"""
Repository layer for data access operations.
Every repository issues parameterized SQL through an injected executor.
"""

from lightbnb.repositories.base import BaseRepository, Executor
from lightbnb.repositories.property import PropertyQuery, PropertyRepository, build_property_query
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "Executor",
    "PropertyQuery",
    "PropertyRepository",
    "ReservationRepository",
    "UserRepository",
    "build_property_query",
]

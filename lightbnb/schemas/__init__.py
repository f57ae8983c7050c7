"""
Pydantic schemas for request validation.
"""

from .user import UserCreate
from .property import PropertyCreate, PropertySearchFilters

__all__ = [
    "UserCreate",
    "PropertyCreate",
    "PropertySearchFilters",
]

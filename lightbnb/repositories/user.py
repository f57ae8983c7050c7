"""
User repository for looking up and registering users.
"""

from lightbnb.repositories.base import BaseRepository, Executor
from lightbnb.schemas.user import UserCreate
from typing import Any, Dict, Mapping, Optional, Union
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):
    """Repository for the ``users`` table."""

    def __init__(self, executor: Executor):
        super().__init__(executor)

    async def get_user_with_email(self, email: str) -> Optional[Dict[str, Any]]:
        """
        Get a single user given their email.

        Args:
            email: Email address to search for

        Returns:
            User row if found, None otherwise
        """
        user = await self.fetch_one("SELECT * FROM users WHERE email LIKE $1", [email])

        # LIKE is case sensitive in PostgreSQL, the comparison here is not
        if user and user["email"].lower() == email.lower():
            logger.debug(f"Retrieved user by email: {email}")
            return user

        logger.debug(f"User with email {email} not found")
        return None

    async def get_user_with_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        """
        Get a single user given their id.

        Args:
            user_id: ID of the user

        Returns:
            User row if found, None otherwise
        """
        user = await self.fetch_one("SELECT * FROM users WHERE id = $1", [user_id])

        if user and user["id"] == user_id:
            logger.debug(f"Retrieved user by id: {user_id}")
            return user

        logger.debug(f"User with id {user_id} not found")
        return None

    async def add_user(self, user: Union[UserCreate, Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Add a new user to the database.

        Args:
            user: Name, email and (already hashed) password of the new user

        Returns:
            The stored user row

        Raises:
            pydantic.ValidationError: If the user data is invalid
            Exception: If database operation fails
        """
        if not isinstance(user, UserCreate):
            user = UserCreate.model_validate(user)

        created_user = await self.insert_one(
            "INSERT INTO users (name, email, password) VALUES ($1, $2, $3) RETURNING *",
            [user.name, user.email, user.password],
        )
        logger.info(f"Created user: {created_user['email']} (ID: {created_user['id']})")
        return created_user

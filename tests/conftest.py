"""
Test configuration and fixtures for the LightBnB data-access layer.
Provides a recording executor in place of the database plus row factories.
"""

import pytest
from typing import Any, Dict, List, Optional, Sequence

from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.property import PropertyRepository


class FakeExecutor:
    """
    Executor double that records every statement and replays canned rows.

    Rows queued with ``queue_rows`` are returned by successive ``execute``
    calls; setting ``error`` makes the next call raise it instead.
    """

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []
        self.responses: List[List[Dict[str, Any]]] = []
        self.error: Optional[Exception] = None
        self.commits = 0
        self.rollbacks = 0

    def queue_rows(self, *rows: Dict[str, Any]) -> None:
        self.responses.append(list(rows))

    async def execute(self, statement: str, parameters: Sequence[Any]) -> List[Dict[str, Any]]:
        self.calls.append({"statement": statement, "parameters": list(parameters)})
        if self.error is not None:
            error, self.error = self.error, None
            raise error
        return self.responses.pop(0) if self.responses else []

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1

    @property
    def last_call(self) -> Dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def executor() -> FakeExecutor:
    """Create a fresh recording executor."""
    return FakeExecutor()


# Repository fixtures
@pytest.fixture
def user_repository(executor: FakeExecutor) -> UserRepository:
    return UserRepository(executor)


@pytest.fixture
def reservation_repository(executor: FakeExecutor) -> ReservationRepository:
    return ReservationRepository(executor)


@pytest.fixture
def property_repository(executor: FakeExecutor) -> PropertyRepository:
    return PropertyRepository(executor)


# Test data factories
class UserFactory:
    """Factory for user rows and payloads."""

    @staticmethod
    def create_user_data(
        name: str = "Devin Sanders",
        email: str = "tristanjacobs@gmail.com",
        password: str = "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u.",
    ) -> dict:
        return {"name": name, "email": email, "password": password}

    @staticmethod
    def create_user_row(id: int = 1, **overrides) -> dict:
        row = {"id": id, **UserFactory.create_user_data()}
        row.update(overrides)
        return row


class PropertyFactory:
    """Factory for property rows and payloads."""

    @staticmethod
    def create_property_data(**overrides) -> dict:
        data = {
            "owner_id": 1,
            "title": "Speed lamp",
            "description": "description",
            "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg?auto=compress&cs=tinysrgb&h=350",
            "cover_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
            "cost_per_night": 93061,
            "street": "536 Namsub Highway",
            "city": "Sotboske",
            "province": "Quebec",
            "post_code": "28142",
            "country": "Canada",
            "parking_spaces": 6,
            "number_of_bathrooms": 4,
            "number_of_bedrooms": 8,
        }
        data.update(overrides)
        return data

    @staticmethod
    def create_property_row(id: int = 1, average_rating: float = 4.2, **overrides) -> dict:
        row = {"id": id, **PropertyFactory.create_property_data(**overrides)}
        row["average_rating"] = average_rating
        return row

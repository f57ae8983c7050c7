"""
Reservation repository for listing a guest's bookings.
"""

from lightbnb.repositories.base import BaseRepository, Executor
from lightbnb.config import settings
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)

GUEST_RESERVATIONS_QUERY = """
    SELECT reservations.id, properties.title, properties.cost_per_night, reservations.start_date,
           AVG(property_reviews.rating) AS average_rating
    FROM reservations
    JOIN properties ON properties.id = reservations.property_id
    JOIN property_reviews ON property_reviews.property_id = properties.id
    WHERE reservations.guest_id = $1
    GROUP BY reservations.id, properties.title, reservations.start_date, properties.cost_per_night
    ORDER BY reservations.start_date ASC
    LIMIT $2
"""


class ReservationRepository(BaseRepository):
    """Repository for the ``reservations`` table."""

    def __init__(self, executor: Executor):
        super().__init__(executor)

    async def get_all_reservations(self, guest_id: int, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Get all reservations made by a single guest, earliest first.

        Each row carries the reserved property's title and nightly cost plus the
        property's average review rating.

        Args:
            guest_id: ID of the guest
            limit: Maximum number of reservations (defaults to the configured result limit)

        Returns:
            List of reservation rows
        """
        if limit is None:
            limit = settings.default_result_limit

        reservations = await self.fetch_all(GUEST_RESERVATIONS_QUERY, [guest_id, limit])
        logger.debug(f"Retrieved {len(reservations)} reservations for guest {guest_id}")
        return reservations

